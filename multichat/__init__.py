"""
MultiChat SDK

Client for the MultiChat chat-support API: resolves customers, managers and
the chat of a page, then builds the URL a participant opens to join it.
"""

from multichat.auth import extract_bearer_token
from multichat.client import (
    Chat,
    ChatReader,
    ConfigurationError,
    LinkUnavailableError,
    MalformedResponseError,
    MultiChatClient,
    MultiChatConfig,
    MultiChatError,
    MultiChatSession,
    ReaderType,
    RemoteCallError,
    open_chat,
    update_managers_active_status,
)

__version__ = "0.1.0"

__all__ = [
    "Chat",
    "ChatReader",
    "ConfigurationError",
    "LinkUnavailableError",
    "MalformedResponseError",
    "MultiChatClient",
    "MultiChatConfig",
    "MultiChatError",
    "MultiChatSession",
    "ReaderType",
    "RemoteCallError",
    "extract_bearer_token",
    "open_chat",
    "update_managers_active_status",
]
