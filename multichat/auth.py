"""
Bearer token extraction.

Works on an explicit header mapping handed over by the caller's request layer
(Starlette's request.headers, a WSGI environ, a plain dict...). Nothing here
reads process-wide state.
"""

import re
from collections.abc import Mapping

BEARER_PATTERN = re.compile(r"Bearer\s(\S+)")

# Checked in order, then any case-insensitive "authorization" key (ASGI/Starlette)
AUTHORIZATION_KEYS: tuple[str, ...] = ("Authorization", "HTTP_AUTHORIZATION")


def _authorization_header(headers: Mapping[str, str]) -> str | None:
    for key in AUTHORIZATION_KEYS:
        value = headers.get(key)
        if value is not None:
            return value.strip()

    for key, value in headers.items():
        if isinstance(key, str) and key.lower() == "authorization" and value is not None:
            return value.strip()

    return None


def extract_bearer_token(headers: Mapping[str, str]) -> str | None:
    """
    Extract the token following "Bearer " in the Authorization header.

    Args:
        headers: Request headers or server variables

    Returns:
        Token string, or None if the header is missing or not a Bearer scheme.
    """
    auth_header = _authorization_header(headers)
    if not auth_header:
        return None

    match = BEARER_PATTERN.search(auth_header)
    if match is None:
        return None
    return match.group(1)
