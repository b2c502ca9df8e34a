# Client-side interaction layer: prompt -> one request -> transcript/result + toast.

from .controller import SubmissionController
from .endpoints import Endpoint
from .notifications import NotificationRelay
from .session import Session, User
from .stores import ResultSlot, Transcript
from .types import Failed, GenerationRequest, Idle, Message, Notification, Submitting, Succeeded
from .workspace import Workspace, chat_controller, generator_controller

__all__ = [
    "SubmissionController",
    "Endpoint",
    "NotificationRelay",
    "Session",
    "User",
    "ResultSlot",
    "Transcript",
    "Failed",
    "GenerationRequest",
    "Idle",
    "Message",
    "Notification",
    "Submitting",
    "Succeeded",
    "Workspace",
    "chat_controller",
    "generator_controller",
]
