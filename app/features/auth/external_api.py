"""
Client for the external identity authority.

Every call is logged with its outcome. Failures are never retried: a single
failed call fails the operation that made it.
"""
from typing import Any, Optional

import httpx

from app.core import config
from app.core.errors import UpstreamError
from app.utils import get_logger


log = get_logger(__name__)


def extract_error_message(response: httpx.Response) -> str:
    """
    Best available error message from a failed upstream response.

    Uses the JSON body's `error` (or `message`) field; falls back to a
    generic "HTTP <status>" message when the body can't be parsed.
    """
    try:
        error_data = response.json()
    except ValueError:
        error_data = {"error": f"HTTP {response.status_code}"}

    if isinstance(error_data, dict):
        for key in ("error", "message"):
            value = error_data.get(key)
            if isinstance(value, str) and value:
                return value
            if isinstance(value, dict) and isinstance(value.get("message"), str):
                return value["message"]
    return f"HTTP {response.status_code}: {response.reason_phrase}"


class ExternalAuthClient:
    """
    Thin JSON client over httpx for the identity authority.

    Args:
        base_url: Authority base URL (defaults to EXTERNAL_API_URL)
        timeout: Per-call timeout in seconds (defaults to EXTERNAL_API_TIMEOUT)
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or config.EXTERNAL_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.EXTERNAL_API_TIMEOUT
        self.transport = transport

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        token: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        Call an authority endpoint and return its decoded JSON body.

        Raises:
            UpstreamError: non-2xx status, timeout, transport failure or a
                success response that is not valid JSON
        """
        request_headers = {"Content-Type": "application/json", **(headers or {})}
        if token:
            request_headers["Authorization"] = f"Bearer {token}"

        log.info("External API %s %s", method, endpoint)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{endpoint}",
                    headers=request_headers,
                    json=body if body is not None else None,
                )
        except httpx.TimeoutException as exc:
            log.error("External API %s %s timed out: %s", method, endpoint, exc)
            raise UpstreamError("Identity service timed out") from exc
        except httpx.HTTPError as exc:
            log.error("External API %s %s failed: %s", method, endpoint, exc)
            raise UpstreamError("Identity service unreachable") from exc

        log.info("External API response status for %s: %s", endpoint, response.status_code)

        if not response.is_success:
            message = extract_error_message(response)
            log.warning("External API error on %s: %s", endpoint, message)
            raise UpstreamError(message, upstream_status=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            log.error("External API returned malformed body for %s", endpoint)
            raise UpstreamError("Malformed response from identity service") from exc

        log.info("External API success: %s", endpoint)
        return data

    async def login(self, username: str, password: str) -> Any:
        return await self.request(
            "/api/auth/login",
            method="POST",
            body={"username": username, "password": password},
        )

    async def get_profile(self, token: str) -> Any:
        return await self.request("/api/users/me", token=token)

    async def call(self, endpoint: str, **kwargs: Any) -> Any:
        """Generic passthrough for additional authority endpoints."""
        return await self.request(endpoint, **kwargs)
