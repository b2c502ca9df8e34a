# echoverse/generate/clients/openai_client.py
# Client for the OpenAI Chat Completions API.

from typing import List, Optional, Tuple, Dict, Any
from openai import OpenAI
from ..types import PromptMessage, ModelParams


class OpenAIClient:
    def __init__(self, model: str = "gpt-4o", api_key: Optional[str] = None):
        self.model = model
        self.client = OpenAI(api_key=api_key)

    def generate(self, messages: List[PromptMessage], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        kwargs: Dict[str, Any] = {}
        if params.json_output:
            kwargs["response_format"] = {"type": "json_object"}
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=formatted,
            temperature=params.temperature if params.temperature is not None else 0.7,
            max_tokens=params.max_tokens or 1000,
            **kwargs,
        )
        text = (resp.choices[0].message.content or "").strip()
        meta = {"engine": "openai", "model": self.model}
        return text, meta
