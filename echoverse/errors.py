# echoverse/errors.py
"""Exceptions shared by the service and the interaction layer."""

from __future__ import annotations

from typing import Any, Dict, List


class EchoverseError(Exception):
    """Base class for all Echoverse errors."""


class GenerationError(EchoverseError):
    """A model client failed to produce output."""


class ValidationFailed(EchoverseError):
    """The server rejected a payload with a structured error list (HTTP 400)."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__(f"{len(errors)} validation error(s)")

    def field_errors(self) -> Dict[str, List[str]]:
        """Group messages by the field they refer to ("" for model-level errors)."""
        grouped: Dict[str, List[str]] = {}
        for err in self.errors:
            loc = err.get("loc") or err.get("path") or []
            field = str(loc[-1]) if loc else ""
            grouped.setdefault(field, []).append(err.get("msg") or err.get("message", ""))
        return grouped
