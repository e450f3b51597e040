"""
MultiChat session: the readers and chat resolved for one page.

The session is the only writer of its fields. Each resolve_* method either
stores the new value or, if the HTTP call raises, leaves the previous value
untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .client import MultiChatClient
from .exceptions import LinkUnavailableError
from .models import Chat, ChatReader, ReaderType

logger = logging.getLogger(__name__)


@dataclass
class MultiChatSession:
    """
    Resolved participants and chat for one page-unique code.

    Attributes:
        client: Client used for every resolution
        customer: Resolved BUYER reader
        manager: Resolved MANAGER reader opening the link
        attached_manager: Manager attached to the customer's order
        chat: Active chat of the page
    """

    client: MultiChatClient
    customer: ChatReader | None = None
    manager: ChatReader | None = None
    attached_manager: ChatReader | None = None
    chat: Chat | None = None

    def resolve_customer(self, email: str, name: str) -> ChatReader | None:
        self.customer = self.client.resolve_reader(email, name, ReaderType.BUYER)
        return self.customer

    def resolve_manager(self, email: str, name: str) -> ChatReader | None:
        self.manager = self.client.resolve_reader(email, name, ReaderType.MANAGER)
        return self.manager

    def resolve_attached_manager(self, email: str, name: str) -> ChatReader | None:
        self.attached_manager = self.client.resolve_reader(email, name, ReaderType.MANAGER)
        return self.attached_manager

    def resolve_chat(self, email: str) -> Chat | None:
        """Look up the page's chat, creating it for `email` when absent."""
        self.chat = self.client.resolve_chat(email)
        return self.chat

    def close(self) -> None:
        """Release the client's HTTP connection."""
        self.client.close()

    def __enter__(self) -> MultiChatSession:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def build_url(self) -> str:
        """
        Assemble the join URL: {link}/{readerId}/{attachedManagerId}.

        The reader is the manager when one was resolved, otherwise the
        customer. Missing segments collapse because trailing slashes are
        stripped.

        Raises:
            LinkUnavailableError: If no chat with a link has been resolved
        """
        if self.chat is None or not self.chat.has_link:
            raise LinkUnavailableError()

        reader = self.manager if self.manager is not None else self.customer
        reader_id = _segment(reader)
        attached_id = _segment(self.attached_manager)

        url = f"{self.chat.link}/{reader_id}/{attached_id}".rstrip("/")
        logger.debug(f"MultiChat URL assembled for chat {self.chat.id}")
        return url


def _segment(reader: ChatReader | None) -> str:
    if reader is None or reader.id is None:
        return ""
    return str(reader.id)
