"""Characters that commonly appear in interface text."""

import string

COMMON_TEXT_CHARS = frozenset(
    string.ascii_letters
    + string.digits
    + " .,:;!?-_()[]{}/\\|=+*&%$\"'`~^<>"
)


def is_common_text_char(ch: str) -> bool:
    """True if ``ch`` is a character commonly used in UI text."""
    return ch in COMMON_TEXT_CHARS