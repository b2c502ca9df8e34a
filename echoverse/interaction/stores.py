# echoverse/interaction/stores.py
# Where a controller puts what it submits and what comes back.

from __future__ import annotations
from typing import Any, Callable, Iterator, List, Optional, Protocol, Tuple

from .types import Message

Listener = Callable[[int], None]


class Store(Protocol):
    def on_submit(self, prompt: str) -> None: ...

    def on_result(self, result: Any) -> None: ...


class Transcript:
    """Append-only chat log. Listeners get the new length after every append."""

    def __init__(self):
        self._messages: List[Message] = []
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def append(self, message: Message) -> None:
        self._messages.append(message)
        for listener in self._listeners:
            listener(len(self._messages))

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def last(self) -> Optional[Message]:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

    # Store
    def on_submit(self, prompt: str) -> None:
        self.append(Message(role="user", content=prompt))

    def on_result(self, result: Any) -> None:
        self.append(Message(role="assistant", content=str(result)))


class ResultSlot:
    """Holds only the latest generator result."""

    def __init__(self):
        self.content: Any = None
        self.updates = 0

    def on_submit(self, prompt: str) -> None:
        pass

    def on_result(self, result: Any) -> None:
        self.content = result
        self.updates += 1
