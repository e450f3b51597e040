# ============================================================================
# SCOPE: GLOBAL
# Description: Configuration and payload models for the MultiChat API.
# ============================================================================
"""
MultiChat Client Models.

Models:
- MultiChatConfig: Validated, immutable client configuration
- ReaderType: Role tag of a chat participant (BUYER / MANAGER)
- RemoteRecord: Base for API records, kept as received
- ChatReader: Customer or manager record returned by the API
- Chat: Chat session bound to a page-unique code
- ApiEnvelope: The {success, data} wrapper every response body uses
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from multichat.config.settings import Settings

DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT = 10
STATUS_UPDATE_TIMEOUT = 60


@dataclass(frozen=True)
class MultiChatConfig:
    """
    Configuration for a MultiChat client.

    Attributes:
        token: Bearer token sent on every request. Required.
        base_url: Root URL of the MultiChat service. Required.
        page_unique_code: Identifier of the embedding page / widget instance.
        version: API version segment used in /api/{version}/...
        timeout: Per-request timeout in seconds.
    """

    token: str
    base_url: str
    page_unique_code: str = ""
    version: str = DEFAULT_API_VERSION
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.token:
            raise ConfigurationError("empty token")
        if not self.base_url:
            raise ConfigurationError("empty base URL")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be a positive number of seconds")

    @property
    def api_root(self) -> str:
        """Prefix shared by every endpoint, e.g. https://host/api/v1"""
        return f"{self.base_url.rstrip('/')}/api/{self.version}"

    def replace(self, **changes: Any) -> MultiChatConfig:
        """Return a copy with the given fields changed (validated again)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        page_unique_code: str = "",
        **overrides: Any,
    ) -> MultiChatConfig:
        """
        Build a configuration from environment settings.

        Args:
            settings: Loaded Settings instance
            page_unique_code: Page-unique code for chat resolution
            **overrides: Explicit values that win over settings (token, base_url, ...)

        Raises:
            ConfigurationError: If token or base URL end up empty
        """
        values: dict[str, Any] = {
            "token": settings.MULTICHAT_TOKEN,
            "base_url": settings.MULTICHAT_BASE_URL,
            "page_unique_code": page_unique_code,
            "version": settings.MULTICHAT_API_VERSION,
            "timeout": settings.MULTICHAT_TIMEOUT,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


class ReaderType(str, Enum):
    """Role of a chat participant on the MultiChat side."""

    BUYER = "BUYER"
    MANAGER = "MANAGER"


class RemoteRecord(BaseModel):
    """
    Record returned by the API, kept exactly as received.

    Fields are typed Any, so values are never coerced or rejected.
    `payload` gives back the received object without keys the API did not
    send.
    """

    model_config = ConfigDict(extra="allow")

    @property
    def payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ChatReader(RemoteRecord):
    """Customer or manager record."""

    id: Any = None
    email: Any = None
    name: Any = None
    type_name: Any = None


class Chat(RemoteRecord):
    """Chat session; `link` is the URL template participants join through."""

    id: Any = None
    link: Any = None
    page_unique_code: Any = None

    @property
    def has_link(self) -> bool:
        return bool(self.link)


class ApiEnvelope(BaseModel):
    """
    Response wrapper: {"success": bool, "data": {...}}.

    `success` is kept as received; only the literal boolean True counts.
    """

    success: Any = None
    data: Any = None

    model_config = ConfigDict(extra="allow")

    @property
    def ok(self) -> bool:
        return self.success is True
