"""
Client for the server-side authority access code check.

Codes are never stored or checked locally; the remote function owns the list
of valid codes and their expiry. The wire shape follows a PostgREST RPC call:
``POST <url>`` with ``{"access_code": ..., "user_email": ...}`` answering a bare
JSON boolean.
"""

# Standard library imports
from typing import Protocol

# Third-party imports
import httpx

# Local application imports
from civicconnect.core.errors import RemoteFailure
from civicconnect.core.monitoring.logging import get_logger
from civicconnect.settings import settings

logger = get_logger(__name__)


class AuthorityCodeValidator(Protocol):
    async def validate(self, code: str, email: str) -> bool:
        """Return whether ``code`` is valid for ``email``; raise ``RemoteFailure`` if the check itself fails."""
        ...


class HttpAuthorityCodeValidator:
    def __init__(
        self,
        url: str | None,
        api_key: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def validate(self, code: str, email: str) -> bool:
        if not self.url:
            raise RemoteFailure("Authority code validation is not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(
                    self.url,
                    json={"access_code": code, "user_email": email},
                    headers=self._headers(),
                )
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Authority code check failed: {e}")
            raise RemoteFailure(cause=e) from e
        except ValueError as e:
            logger.error(f"Authority code check returned invalid JSON: {e}")
            raise RemoteFailure(cause=e) from e

        if not isinstance(data, bool):
            logger.error(f"Authority code check returned a non-boolean payload: {data!r}")
            raise RemoteFailure("Unexpected response from authority code check")
        return data


def get_authority_code_validator() -> AuthorityCodeValidator:
    return HttpAuthorityCodeValidator(
        url=settings.AUTHORITY_CODE_RPC_URL,
        api_key=settings.AUTHORITY_CODE_RPC_KEY,
        timeout=settings.AUTHORITY_CODE_RPC_TIMEOUT,
    )
