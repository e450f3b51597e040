# ============================================================================
# SCOPE: GLOBAL
# Description: Synchronous HTTP transport for the MultiChat API.
# ============================================================================
"""
MultiChat HTTP Client.

Single Responsibility: Execute one HTTP request, enforce the status contract
and unwrap the {success, data} envelope.

Contract:
- 200: Body parsed as the response envelope
- Any other status: RemoteCallError (no retry)
- 200 with a body that is not a JSON object carrying `success`: MalformedResponseError
- Connection errors / timeouts: httpx exceptions propagate unchanged
"""

import logging
from typing import Any

import httpx

from .exceptions import MalformedResponseError, RemoteCallError
from .models import DEFAULT_TIMEOUT, ApiEnvelope

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class MultiChatHttpClient:
    """
    Bearer-authenticated HTTP client for the MultiChat API.

    Keeps one httpx.Client for its lifetime; it is created lazily and
    released by close() or by leaving the context manager.
    """

    def __init__(
        self,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            token: Bearer token for the Authorization header
            timeout: Default request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._token = token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def initialize(self) -> None:
        """Create the underlying httpx client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout, transport=self._transport)

    def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "MultiChatHttpClient":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _ensure_client(self) -> httpx.Client:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self.initialize()
        return self._client  # type: ignore

    def _get_headers(self, with_body: bool = False) -> dict[str, str]:
        """Authorization for every request; JSON negotiation headers for POSTs."""
        headers = {"Authorization": f"Bearer {self._token}"}
        if with_body:
            headers["Accept"] = JSON_CONTENT_TYPE
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    def get(self, url: str, *, operation: str, timeout: float | None = None) -> ApiEnvelope:
        """
        GET `url` and return its response envelope.

        Args:
            url: Absolute endpoint URL
            operation: Short name used in logs and error messages
            timeout: Override for the default timeout

        Raises:
            RemoteCallError: On non-200 status
            MalformedResponseError: On an unparseable 200 body
        """
        client = self._ensure_client()
        logger.debug(f"MultiChat {operation}: GET {url}")
        response = client.get(
            url,
            headers=self._get_headers(),
            timeout=timeout or self._timeout,
        )
        self._check_status(response, operation)
        return self._parse_envelope(response, operation)

    def post(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        operation: str,
        timeout: float | None = None,
    ) -> ApiEnvelope:
        """POST a JSON payload and return the response envelope."""
        response = self._send_post(url, payload, operation=operation, timeout=timeout)
        return self._parse_envelope(response, operation)

    def post_without_result(
        self,
        url: str,
        payload: Any,
        *,
        operation: str,
        timeout: float | None = None,
    ) -> None:
        """POST a JSON payload where only the status code matters."""
        self._send_post(url, payload, operation=operation, timeout=timeout)

    def _send_post(
        self,
        url: str,
        payload: Any,
        *,
        operation: str,
        timeout: float | None,
    ) -> httpx.Response:
        client = self._ensure_client()
        logger.debug(f"MultiChat {operation}: POST {url}")
        response = client.post(
            url,
            headers=self._get_headers(with_body=True),
            json=payload,
            timeout=timeout or self._timeout,
        )
        self._check_status(response, operation)
        return response

    @staticmethod
    def _check_status(response: httpx.Response, operation: str) -> None:
        if response.status_code != 200:
            preview = response.text[:200] if response.text else "No body"
            logger.error(f"MultiChat {operation} failed with status {response.status_code}: {preview}")
            raise RemoteCallError(
                f"{operation} bad response (status {response.status_code})",
                status_code=response.status_code,
            )

    @staticmethod
    def _parse_envelope(response: httpx.Response, operation: str) -> ApiEnvelope:
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"{operation} returned a non-JSON body") from e

        if not isinstance(body, dict) or "success" not in body:
            raise MalformedResponseError(f"{operation} response has no 'success' flag")

        return ApiEnvelope.model_validate(body)
