# ============================================================================
# SCOPE: GLOBAL
# Description: MultiChat client module exports.
# ============================================================================
"""
MultiChat Client Module.

Usage (one call):
    from multichat.client import MultiChatConfig, open_chat

    config = MultiChatConfig(token="...", base_url="https://chat.example.com")
    with open_chat(config, "PAGE1", "a@x.com", "A") as session:
        url = session.build_url()

Usage (step by step):
    with MultiChatClient(config) as client:
        session = MultiChatSession(client)
        session.resolve_customer("a@x.com", "A")
        session.resolve_chat("a@x.com")
        url = session.build_url()
"""

from .client import MultiChatClient
from .exceptions import (
    ConfigurationError,
    LinkUnavailableError,
    MalformedResponseError,
    MultiChatError,
    RemoteCallError,
)
from .http_client import MultiChatHttpClient
from .models import (
    DEFAULT_API_VERSION,
    DEFAULT_TIMEOUT,
    STATUS_UPDATE_TIMEOUT,
    ApiEnvelope,
    Chat,
    ChatReader,
    MultiChatConfig,
    ReaderType,
)
from .orchestration import open_chat, update_managers_active_status
from .session import MultiChatSession

__all__ = [
    # Client
    "MultiChatClient",
    "MultiChatHttpClient",
    "MultiChatSession",
    "open_chat",
    "update_managers_active_status",
    # Exceptions
    "MultiChatError",
    "ConfigurationError",
    "RemoteCallError",
    "MalformedResponseError",
    "LinkUnavailableError",
    # Models
    "MultiChatConfig",
    "ReaderType",
    "ChatReader",
    "Chat",
    "ApiEnvelope",
    "DEFAULT_API_VERSION",
    "DEFAULT_TIMEOUT",
    "STATUS_UPDATE_TIMEOUT",
]
