# ============================================================================
# SCOPE: GLOBAL
# Description: Exception types raised by the MultiChat client.
# ============================================================================
"""
MultiChat Client Exceptions.

Transport failures (connection refused, timeouts) are not wrapped: they
surface as the original httpx exceptions.
"""


class MultiChatError(Exception):
    """
    Base exception for MultiChat errors.

    Attributes:
        error_code: Machine-readable error code (e.g., CONFIG_ERROR, REMOTE_ERROR)
        error_message: Human-readable error description
    """

    def __init__(self, error_code: str, error_message: str):
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(f"{error_code}: {error_message}")


class ConfigurationError(MultiChatError):
    """Missing token or base URL, or an invalid timeout."""

    def __init__(self, message: str):
        super().__init__("CONFIG_ERROR", message)


class RemoteCallError(MultiChatError):
    """
    The MultiChat API answered with a non-200 status.

    Attributes:
        status_code: HTTP status returned by the API (None when not applicable)
    """

    def __init__(self, message: str, status_code: int | None = None, error_code: str = "REMOTE_ERROR"):
        self.status_code = status_code
        super().__init__(error_code, message)


class MalformedResponseError(RemoteCallError):
    """A 200 response whose body is not a JSON object with a `success` key."""

    def __init__(self, message: str, status_code: int | None = 200):
        super().__init__(message, status_code=status_code, error_code="MALFORMED_RESPONSE")


class LinkUnavailableError(MultiChatError):
    """URL assembly attempted before a chat with a link was resolved."""

    def __init__(self, message: str = "empty link"):
        super().__init__("LINK_UNAVAILABLE", message)
