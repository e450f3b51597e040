"""
Convenience entry points: one call from configuration to a join-ready session.

There is no rollback: if a step fails after an earlier step created a reader
or chat remotely, those records stay.
"""

from __future__ import annotations

import logging
from typing import Any

from .client import MultiChatClient
from .models import STATUS_UPDATE_TIMEOUT, MultiChatConfig
from .session import MultiChatSession

logger = logging.getLogger(__name__)


def open_chat(
    config: MultiChatConfig,
    page_unique_code: str | None,
    customer_email: str,
    customer_name: str,
    manager_email: str = "",
    manager_name: str = "",
    attached_manager_email: str = "",
    attached_manager_name: str = "",
) -> MultiChatSession:
    """
    Resolve everything needed to build a join URL for a page.

    Order: customer (if an email is given), chat (created with the customer
    email when absent), manager (if given), attached manager (if given).

    The returned session keeps its client open; close it with
    session.close() or use it as a context manager. If a step fails the
    client is closed before the error propagates.

    Args:
        config: Client configuration
        page_unique_code: Page code; None keeps the one in `config`
        customer_email: Customer email; empty skips customer resolution
        customer_name: Customer display name used on creation
        manager_email: Manager opening the link (optional)
        manager_name: Manager display name used on creation
        attached_manager_email: Manager attached to the customer's order (optional)
        attached_manager_name: Attached manager display name used on creation

    Returns:
        Open session ready for build_url()

    Raises:
        RemoteCallError: If any request gets a non-200 status
    """
    if page_unique_code is not None:
        config = config.replace(page_unique_code=page_unique_code)

    client = MultiChatClient(config)
    session = MultiChatSession(client)
    try:
        if customer_email:
            session.resolve_customer(customer_email, customer_name)
        session.resolve_chat(customer_email)
        if manager_email:
            session.resolve_manager(manager_email, manager_name)
        if attached_manager_email:
            session.resolve_attached_manager(attached_manager_email, attached_manager_name)
    except Exception:
        client.close()
        raise

    logger.info(f"MultiChat session ready for page {config.page_unique_code!r}")
    return session


def update_managers_active_status(
    config: MultiChatConfig,
    data: Any,
    timeout: float = STATUS_UPDATE_TIMEOUT,
) -> None:
    """
    Broadcast manager active status with a one-off client.

    Raises:
        RemoteCallError: If the API does not answer 200
    """
    with MultiChatClient(config) as client:
        client.update_managers_active_status(data, timeout=timeout)
