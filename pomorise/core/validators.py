"""
Input Validators - Checks on free-form user text and request headers.

The action endpoint accepts arbitrary user sentences. They are embedded
into the prompt exactly as typed, so these helpers only decide whether
the text is usable and never rewrite it.
"""
from typing import Any, Optional, Tuple

TEXT_REQUIRED = "Text input is required"


def is_blank(text: Any) -> bool:
    """True for anything that is not a string with visible characters."""
    return not isinstance(text, str) or not text.replace("\x00", "").strip()


def validate_text(text: Any) -> Tuple[bool, str, Optional[str]]:
    """
    Validate the action text.

    Args:
        text: Value of the "text" field from the request body

    Returns:
        Tuple of (is_valid, text, error_message). A valid text is
        returned unchanged.
    """
    if is_blank(text):
        return False, "", TEXT_REQUIRED

    return True, text, None


def parse_bearer_token(header: Optional[str]) -> Optional[str]:
    """
    Extract the token from an "Authorization: Bearer <token>" header.

    Returns:
        The token, or None when the header is missing or malformed
    """
    if not header or not header.startswith("Bearer "):
        return None
    token = header[len("Bearer "):].strip()
    return token or None
