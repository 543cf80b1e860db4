"""Master bearer token authentication."""

import hmac

BEARER_PREFIX = "Bearer "


def extract_bearer_token(header: str | None) -> str | None:
    """Return the trimmed token from an ``Authorization`` header, if any."""
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX) :].strip()


def authenticate(header: str | None, expected: str | None) -> bool:
    """
    Check an ``Authorization`` header against the master token.

    Args:
        header: Raw header value
        expected: Configured master token

    Returns:
        True if the header carries exactly the master token
    """
    if not expected:
        return False

    token = extract_bearer_token(header)
    if token is None:
        return False

    return hmac.compare_digest(token.encode(), expected.encode())
