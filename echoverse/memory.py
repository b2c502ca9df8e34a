# echoverse/memory.py
# Per-user memory of past interactions, used to personalize prompts.

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class MemoryEntry:
    user: str
    context: str
    data: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _describe(data: Any) -> str:
    if isinstance(data, dict):
        return " ".join(f"{k} {v}" for k, v in data.items())
    return str(data)


class MemoryLayer:
    def __init__(self):
        self._entries: Dict[str, List[MemoryEntry]] = {}
        self._lock = threading.Lock()

    def store(self, user: str, context: str, data: Any) -> MemoryEntry:
        entry = MemoryEntry(user=user, context=context, data=data)
        with self._lock:
            self._entries.setdefault(user, []).append(entry)
        return entry

    def retrieve(self, user: str, context: str) -> List[Any]:
        """Data stored for `user` under `context`, oldest first."""
        return [e.data for e in self._entries.get(user, []) if e.context == context]

    def personalized_context(self, user: str, context: str = "preferences") -> str:
        memories = self.retrieve(user, context)
        if not memories:
            return ""
        return f"Based on your previous interactions, you prefer {', '.join(_describe(m) for m in memories)}."
