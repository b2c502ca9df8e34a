"""Client session: the HTTP connection and the signed-in user, passed explicitly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..errors import ValidationFailed
from ..logging_utils import get_logger
from ..settings import settings

logger = get_logger(__name__)

# timeout not given: read settings when the session is built
_UNSET: Any = object()


@dataclass
class User:
    email: str
    username: Optional[str] = None


class Session:
    """Owns one httpx.AsyncClient (cookies included) and the current user."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = _UNSET,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = settings.REQUEST_TIMEOUT if timeout is _UNSET else timeout
        self.transport = transport
        self.user: Optional[User] = None
        self._client: Optional[httpx.AsyncClient] = None
        # email -> username, filled by register()
        self._usernames: Dict[str, str] = {}

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def post_json(self, path: str, body: Dict[str, Any]) -> Any:
        """POST a JSON body and decode the JSON answer. Non-2xx raises httpx.HTTPStatusError."""
        response = await self._get_client().post(path, json=body)
        response.raise_for_status()
        return response.json()

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._get_client().get(path, params=params)
        response.raise_for_status()
        return response.json()

    # -------------------------
    # Accounts
    # -------------------------
    async def _account_call(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._get_client().post(path, json=body)
        if response.status_code == 400:
            raise ValidationFailed(response.json().get("errors", []))
        response.raise_for_status()
        return response.json()

    async def register(self, username: str, email: str, password: str, confirm_password: str) -> Dict[str, Any]:
        data = await self._account_call(
            "/register",
            {"username": username, "email": email, "password": password, "confirmPassword": confirm_password},
        )
        self._usernames[email] = username
        return data

    async def login(self, email: str, password: str, username: Optional[str] = None) -> User:
        """Sign in. The username falls back to the one registered here, then to the email's local part."""
        await self._account_call("/login", {"email": email, "password": password})
        username = username or self._usernames.get(email) or email.split("@", 1)[0]
        self.user = User(email=email, username=username)
        logger.info("Signed in as %s (%s)", username, email)
        return self.user

    def logout(self) -> None:
        self.user = None

    async def aclose(self) -> None:
        self.logout()
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "Session":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
