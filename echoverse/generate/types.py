# echoverse/generate/types.py
# Typed dataclasses shared by the generator and the model clients.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class PromptMessage:
    """Single turn sent to a model: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    json_output: bool = False


@dataclass
class Generation:
    """What the generator hands back to a route."""
    text: str
    kind: str
    meta: Dict[str, Any] = field(default_factory=dict)
