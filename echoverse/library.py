# echoverse/library.py
# In-process library of generated content, keyed by integer id.

from __future__ import annotations

import threading
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class SavedContent:
    id: int
    type: str
    prompt: str
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data


class ContentLibrary:
    def __init__(self):
        self._items: Dict[int, SavedContent] = {}
        self._next_id = 1
        # sync route handlers run in the threadpool
        self._lock = threading.Lock()

    def save(self, kind: str, prompt: str, content: str) -> SavedContent:
        with self._lock:
            item = SavedContent(id=self._next_id, type=kind, prompt=prompt, content=content)
            self._items[item.id] = item
            self._next_id += 1
        return item

    def get(self, content_id: int) -> Optional[SavedContent]:
        return self._items.get(content_id)

    def list(self, kind: Optional[str] = None) -> List[SavedContent]:
        """Newest first, optionally filtered by type."""
        items = [i for i in self._items.values() if kind is None or i.type == kind]
        return sorted(items, key=lambda i: i.id, reverse=True)
