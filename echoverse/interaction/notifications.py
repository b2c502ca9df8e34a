# echoverse/interaction/notifications.py

from __future__ import annotations
from typing import Callable, List, Optional

from echoverse.logging_utils import get_logger
from .types import Notification, Variant

logger = get_logger(__name__)

Sink = Callable[[Notification], None]


class NotificationRelay:
    """Fire-and-forget toasts. The most recent notification wins."""

    def __init__(self):
        self.current: Optional[Notification] = None
        self.history: List[Notification] = []
        self._sinks: List[Sink] = []

    def subscribe(self, sink: Sink) -> None:
        self._sinks.append(sink)

    def notify(self, title: str, description: Optional[str] = None, variant: Variant = "default") -> Notification:
        note = Notification(title=title, description=description, variant=variant)
        self.current = note
        self.history.append(note)
        logger.info("[%s] %s%s", variant, title, f": {description}" if description else "")
        for sink in self._sinks:
            sink(note)
        return note

    def success(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(title, description)

    def error(self, title: str, description: Optional[str] = None) -> Notification:
        return self.notify(title, description, variant="destructive")
