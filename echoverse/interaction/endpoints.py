# echoverse/interaction/endpoints.py
# How each tool talks to the service: path, body shape, where the result
# lives in the answer, and what the user is told.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Endpoint:
    path: str
    prompt_field: str = "prompt"
    options: Tuple[str, ...] = ()
    defaults: Dict[str, Any] = field(default_factory=dict)
    # None keeps the whole JSON answer
    result_key: Optional[str] = "content"
    # text tools reject anything but a string result
    text_result: bool = True
    # fill `username` from the signed-in session user
    sends_username: bool = False
    failure_title: str = "Error"
    failure_description: str = "Failed to generate content"
    success_title: Optional[str] = None
    success_description: Optional[str] = None

    def build_body(self, prompt: str, options: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(options) - set(self.options)
        if unknown:
            raise TypeError(f"{self.path} does not accept: {', '.join(sorted(unknown))}")
        body = {self.prompt_field: prompt, **self.defaults}
        body.update({k: v for k, v in options.items() if v is not None})
        return body

    def extract(self, data: Any) -> Any:
        if self.result_key is None:
            return data
        result = data[self.result_key]
        if self.text_result and not isinstance(result, str):
            raise TypeError(f"{self.path} answered with {type(result).__name__}, expected text")
        return result


CHAT = Endpoint(
    path="/api/ai/chat",
    prompt_field="message",
    options=("username",),
    result_key="response",
    sends_username=True,
    failure_description="Failed to send message",
)

CONTENT = Endpoint(
    path="/api/ai/generate",
    options=("type", "context", "tone"),
    defaults={"type": "blog"},
)

EDUCATIONAL = Endpoint(
    path="/api/ai/generate-educational",
    options=("type", "subject"),
    defaults={"type": "lesson"},
    failure_description="Failed to generate educational content",
)

MARKETING = Endpoint(
    path="/api/ai/generate-marketing",
    options=("type",),
    defaults={"type": "email"},
    failure_description="Failed to generate marketing content",
)

WEBSITE = Endpoint(
    path="/api/ai/generate-website",
    options=("type",),
    defaults={"type": "business"},
    result_key="code",
    failure_description="Failed to generate website",
    success_title="Success!",
    success_description="Your website has been generated",
)

DEV = Endpoint(
    path="/api/dev/generate",
    options=("type", "language"),
    defaults={"type": "code"},
    result_key="result",
    failure_description="Failed to generate response",
)

ANALYZE = Endpoint(
    path="/api/ai/analyze",
    prompt_field="text",
    options=("analysisType",),
    result_key=None,
    text_result=False,
    failure_description="Failed to analyze text",
)
