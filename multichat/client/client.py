"""
MultiChat API Client

Synchronous façade over the MultiChat chat-support API using Bearer Token auth.

Endpoints (relative to {base_url}/api/{version}):
    - GET  /customers/email/{email}/{type} - Look up a reader (BUYER or MANAGER)
    - POST /customers/ - Create a reader
    - GET  /chats/page_unique_code/{code} - Look up the chat of a page
    - POST /chats/ - Create the chat of a page
    - POST /managers/change-active-status - Broadcast manager active status

Every response body is {"success": bool, "data": {...}}. A `success` other
than true, or empty data, means "not found" and yields None.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from multichat.config.settings import Settings, get_settings

from .exceptions import MalformedResponseError
from .http_client import MultiChatHttpClient
from .models import ApiEnvelope, Chat, ChatReader, MultiChatConfig, ReaderType, RemoteRecord

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=RemoteRecord)


class MultiChatClient:
    """
    HTTP client for the MultiChat API.

    Holds configuration and one HTTP connection; it does not remember
    resolved readers or chats (see MultiChatSession for that).

    Example:
        config = MultiChatConfig(token="...", base_url="https://chat.example.com", page_unique_code="PAGE1")
        with MultiChatClient(config) as client:
            customer = client.resolve_reader("a@x.com", "A")
            chat = client.resolve_chat("a@x.com")
    """

    def __init__(
        self,
        config: MultiChatConfig,
        http_client: MultiChatHttpClient | None = None,
    ):
        """
        Initialize MultiChat client.

        Args:
            config: Validated client configuration
            http_client: Optional transport (for testing); built from config otherwise
        """
        self._config = config
        self._http = http_client or MultiChatHttpClient(config.token, timeout=config.timeout)

    @classmethod
    def from_settings(
        cls,
        page_unique_code: str = "",
        settings: Settings | None = None,
    ) -> MultiChatClient:
        """Build a client from MULTICHAT_* environment settings."""
        settings = settings or get_settings()
        return cls(MultiChatConfig.from_settings(settings, page_unique_code=page_unique_code))

    @property
    def config(self) -> MultiChatConfig:
        return self._config

    def __enter__(self) -> MultiChatClient:
        self._http.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _endpoint(self, path: str) -> str:
        # Identifiers are concatenated as-is, without URL encoding
        return f"{self._config.api_root}/{path}"

    # =========================================================================
    # Readers (customers and managers)
    # =========================================================================

    def get_reader(self, email: str, reader_type: ReaderType | str = ReaderType.BUYER) -> ChatReader | None:
        """
        Look up a reader by email and role.

        Args:
            email: Reader email (sent unchecked)
            reader_type: BUYER or MANAGER

        Returns:
            The reader, or None if the API reports it does not exist

        Raises:
            RemoteCallError: On non-200 status
        """
        type_name = ReaderType(reader_type).value
        envelope = self._http.get(
            self._endpoint(f"customers/email/{email}/{type_name}"),
            operation="getChatReader",
        )
        return self._unwrap(envelope, ChatReader, "getChatReader")

    def create_reader(
        self,
        email: str,
        name: str,
        reader_type: ReaderType | str = ReaderType.BUYER,
    ) -> ChatReader | None:
        """
        Create a reader.

        Returns:
            The created reader, or None if the API reports failure

        Raises:
            RemoteCallError: On non-200 status
        """
        payload = {
            "name": name,
            "email": email,
            "type_name": ReaderType(reader_type).value,
        }
        envelope = self._http.post(self._endpoint("customers/"), payload, operation="createChatReader")
        return self._unwrap(envelope, ChatReader, "createChatReader")

    def resolve_reader(
        self,
        email: str,
        name: str,
        reader_type: ReaderType | str = ReaderType.BUYER,
    ) -> ChatReader | None:
        """
        Get-or-create a reader.

        The creation request is only sent when the lookup finds nothing.
        """
        role = ReaderType(reader_type).value
        reader = self.get_reader(email, reader_type)
        if reader is not None:
            logger.info(f"MultiChat {role} reader found: id={reader.id}")
            return reader

        logger.debug(f"No MultiChat {role} reader for {email}, creating")
        reader = self.create_reader(email, name, reader_type)
        if reader is None:
            logger.warning(f"MultiChat {role} reader could not be created")
        else:
            logger.info(f"MultiChat {role} reader created: id={reader.id}")
        return reader

    # =========================================================================
    # Chats
    # =========================================================================

    def get_chat(self, page_unique_code: str | None = None) -> Chat | None:
        """Look up the chat bound to a page-unique code (defaults to the configured one)."""
        code = self._config.page_unique_code if page_unique_code is None else page_unique_code
        envelope = self._http.get(
            self._endpoint(f"chats/page_unique_code/{code}"),
            operation="checkChat",
        )
        return self._unwrap(envelope, Chat, "checkChat")

    def create_chat(self, email: str, page_unique_code: str | None = None) -> Chat | None:
        """Create the chat of a page, owned by the customer with `email`."""
        code = self._config.page_unique_code if page_unique_code is None else page_unique_code
        payload = {
            "page_unique_code": code,
            "email": email,
        }
        envelope = self._http.post(self._endpoint("chats/"), payload, operation="createChat")
        return self._unwrap(envelope, Chat, "createChat")

    def resolve_chat(self, email: str, page_unique_code: str | None = None) -> Chat | None:
        """Get-or-create the chat of a page."""
        chat = self.get_chat(page_unique_code)
        if chat is not None:
            return chat
        logger.info(f"No MultiChat chat for page {page_unique_code or self._config.page_unique_code!r}, creating")
        return self.create_chat(email, page_unique_code)

    # =========================================================================
    # Managers
    # =========================================================================

    def update_managers_active_status(self, data: Any, timeout: float | None = None) -> None:
        """
        Broadcast manager active status.

        Args:
            data: Arbitrary JSON-serializable payload, forwarded as-is
            timeout: Request timeout; defaults to the configured one

        Raises:
            RemoteCallError: On non-200 status
        """
        self._http.post_without_result(
            self._endpoint("managers/change-active-status"),
            data,
            operation="updateManagersActiveStatus",
            timeout=timeout,
        )
        logger.info("MultiChat manager active status updated")

    @staticmethod
    def _unwrap(envelope: ApiEnvelope, model: type[ModelT], operation: str) -> ModelT | None:
        if not envelope.ok or not envelope.data:
            return None
        if not isinstance(envelope.data, dict):
            raise MalformedResponseError(f"{operation} returned non-object data")
        return model.model_validate(envelope.data)
