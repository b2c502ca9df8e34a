# echoverse/interaction/workspace.py
# Every Echoverse tool for one session, sharing a single notification relay.

from __future__ import annotations
from typing import Optional

from . import endpoints
from .controller import SubmissionController
from .notifications import NotificationRelay
from .session import Session
from .stores import ResultSlot, Transcript


def chat_controller(session: Session, relay: NotificationRelay, transcript: Optional[Transcript] = None) -> SubmissionController:
    return SubmissionController(session, endpoints.CHAT, transcript if transcript is not None else Transcript(), relay)


def generator_controller(session: Session, endpoint: endpoints.Endpoint, relay: NotificationRelay) -> SubmissionController:
    return SubmissionController(session, endpoint, ResultSlot(), relay)


class Workspace:
    """The chat widget plus the generator tools (writer, teacher, marketer, builder, dev bot, analyzer)."""

    def __init__(self, session: Session, relay: Optional[NotificationRelay] = None):
        self.session = session
        self.relay = relay or NotificationRelay()
        self.transcript = Transcript()
        self.chat = chat_controller(session, self.relay, self.transcript)
        self.writer = generator_controller(session, endpoints.CONTENT, self.relay)
        self.teacher = generator_controller(session, endpoints.EDUCATIONAL, self.relay)
        self.marketer = generator_controller(session, endpoints.MARKETING, self.relay)
        self.builder = generator_controller(session, endpoints.WEBSITE, self.relay)
        self.dev = generator_controller(session, endpoints.DEV, self.relay)
        self.analyzer = generator_controller(session, endpoints.ANALYZE, self.relay)

    async def aclose(self) -> None:
        await self.session.aclose()
