# echoverse/interaction/types.py
# Data carried through one submission: the transient request, the
# transcript message, the notification, and the controller states.

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional, Union

Role = Literal["user", "assistant"]
Variant = Literal["default", "destructive"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    """One transcript entry."""
    role: Role
    content: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class GenerationRequest:
    """Lives only for the duration of one submission."""
    path: str
    body: Dict[str, Any]


@dataclass(frozen=True)
class Notification:
    title: str
    description: Optional[str] = None
    variant: Variant = "default"


# ------------------------------------------------------------
# Controller states
# ------------------------------------------------------------
@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Submitting:
    request: GenerationRequest


@dataclass(frozen=True)
class Succeeded:
    result: Any


@dataclass(frozen=True)
class Failed:
    error: str


SubmissionState = Union[Idle, Submitting, Succeeded, Failed]
Outcome = Union[Succeeded, Failed]
