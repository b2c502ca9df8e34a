"""Submission controller shared by every Echoverse tool.

One prompt in, one POST out, one result (or one destructive toast) back::

    Idle -> Submitting -> Succeeded | Failed

``Succeeded`` and ``Failed`` accept the next submission just like ``Idle``.
Only one request is in flight per controller; the state flips to
``Submitting`` before the first ``await``, so on a single event loop the
guard and the flag update cannot interleave with another ``submit``.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..logging_utils import get_logger
from .endpoints import Endpoint
from .notifications import NotificationRelay
from .session import Session
from .stores import Store
from .types import Failed, GenerationRequest, Idle, Outcome, Submitting, Succeeded, SubmissionState

logger = get_logger(__name__)


class SubmissionController:
    def __init__(self, session: Session, endpoint: Endpoint, store: Store, relay: NotificationRelay):
        self.session = session
        self.endpoint = endpoint
        self.store = store
        self.relay = relay
        self.state: SubmissionState = Idle()

    @property
    def in_flight(self) -> bool:
        return isinstance(self.state, Submitting)

    async def submit(self, prompt: str, **options: Any) -> Optional[Outcome]:
        """Run one submission. Returns None when the prompt is blank or a request is already in flight."""
        if not prompt or not prompt.strip():
            return None
        if self.in_flight:
            logger.debug("Ignoring submit to %s: request already in flight", self.endpoint.path)
            return None

        user = self.session.user
        if self.endpoint.sends_username and user is not None and user.username:
            options.setdefault("username", user.username)
        request = GenerationRequest(path=self.endpoint.path, body=self.endpoint.build_body(prompt, options))
        self.state = Submitting(request)
        try:
            self.store.on_submit(prompt)
            try:
                data = await self.session.post_json(request.path, request.body)
                result = self.endpoint.extract(data)
            except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
                return self._fail(e)
            self.state = Succeeded(result)
            self.store.on_result(result)
            if self.endpoint.success_title:
                self.relay.success(self.endpoint.success_title, self.endpoint.success_description)
            return self.state
        finally:
            if self.in_flight:
                # cancelled or a store listener raised
                self.state = Idle()

    def _fail(self, error: Exception) -> Failed:
        logger.error("Request to %s failed: %s", self.endpoint.path, error)
        self.state = Failed(error=str(error) or type(error).__name__)
        self.relay.error(self.endpoint.failure_title, self.endpoint.failure_description)
        return self.state
