"""
HTTP client for the login endpoint.
"""
from typing import Any, Optional

import httpx

from app.utils import get_logger


log = get_logger(__name__)


class LoginError(Exception):
    """Login rejected or impossible; ``message`` is safe to show to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthApi:
    """
    Calls ``POST /api/auth/login`` on the admin backend.

    Args:
        base_url: Backend base URL, e.g. "http://localhost:8000"
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests use httpx.MockTransport
            or an ASGI transport)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def login(self, username: str, password: str) -> dict[str, Any]:
        """
        Return the `data` object of a successful login: {token, user, permisos}.

        Raises:
            LoginError: transport failure, non-2xx status, failure envelope
                or a success envelope without data
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    "/api/auth/login", json={"username": username, "password": password}
                )
        except httpx.HTTPError as exc:
            log.warning("Login request failed: %s", exc)
            raise LoginError("Unable to reach the server") from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success or not isinstance(body, dict) or body.get("success") is False:
            message = body.get("error") if isinstance(body, dict) else None
            raise LoginError(message or f"HTTP {response.status_code}", status_code=response.status_code)

        data = body.get("data")
        if not isinstance(data, dict):
            raise LoginError("Login failed - no data returned", status_code=response.status_code)
        return data
