# ABOUTME: HTTP transport for the Linked API built on httpx.AsyncClient.
# ABOUTME: Every call returns an ApiResponse envelope; HTTP and network failures never raise.

import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from linkedapi.config import DEFAULT_BASE_URL
from linkedapi.errors import LinkedApiErrorType
from linkedapi.models.workflow import ApiResponse, RequestError

logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """Transport contract used by operations and the facade."""

    async def get(self, url: str) -> ApiResponse: ...

    async def post(self, url: str, body: Any = None) -> ApiResponse: ...

    async def delete(self, url: str) -> ApiResponse: ...


class LinkedApiHttpClient:
    """httpx-backed transport with the Linked API auth headers baked in."""

    CLIENT_NAME = "python"

    def __init__(
        self,
        linked_api_token: str,
        identification_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            linked_api_token: Token identifying the Linked API customer.
            identification_token: Token identifying the LinkedIn account.
            base_url: Root URL of the API.
            timeout: Per-request timeout in seconds.
            transport: Optional httpx transport, used by tests to stub the network.
        """
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Content-Type": "application/json",
                "linked-api-token": linked_api_token,
                "identification-token": identification_token,
                "client": self.CLIENT_NAME,
            },
            timeout=timeout,
            transport=transport,
        )

    async def get(self, url: str) -> ApiResponse:
        return await self._request("GET", url)

    async def post(self, url: str, body: Any = None) -> ApiResponse:
        return await self._request("POST", url, body)

    async def delete(self, url: str) -> ApiResponse:
        return await self._request("DELETE", url)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def _request(self, method: str, url: str, body: Any = None) -> ApiResponse:
        """Send one request and translate the outcome into an envelope.

        Args:
            method: HTTP method.
            url: Path relative to the base URL.
            body: Optional JSON body.

        Returns:
            The server's envelope, or a synthesized failure envelope.
        """
        try:
            if body is None:
                response = await self._client.request(method, url)
            else:
                response = await self._client.request(method, url, json=body)
        except httpx.RequestError as e:
            logger.warning(f"Network error on {method} {url}: {e}")
            return _failure(
                LinkedApiErrorType.NETWORK_ERROR,
                str(e) or type(e).__name__,
                {"url": url},
            )

        envelope = _parse_envelope(response)
        if response.is_success:
            if envelope is None:
                return _failure(
                    LinkedApiErrorType.UNKNOWN_ERROR,
                    "Response body is not a valid API envelope",
                    {"status": response.status_code, "url": url},
                )
            return envelope

        if envelope is not None and envelope.error is not None:
            return envelope

        logger.warning(f"HTTP {response.status_code} on {method} {url}")
        return _failure(
            LinkedApiErrorType.HTTP_ERROR,
            f"HTTP {response.status_code} {response.reason_phrase}".strip(),
            {"status": response.status_code, "reason": response.reason_phrase, "url": url},
        )


def _parse_envelope(response: httpx.Response) -> ApiResponse | None:
    """Decode a response body into an envelope, or None if it is not one."""
    try:
        return ApiResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return None


def _failure(error_type: LinkedApiErrorType, message: str, details: Any = None) -> ApiResponse:
    return ApiResponse(
        success=False,
        error=RequestError(type=error_type.value, message=message, details=details),
    )
