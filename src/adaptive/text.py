"""Small text helpers shared by the shell helpers."""

from .debug import debug
from .empty import is_empty_string


def lc(text: str) -> str:
    """Lowercase ``text``."""
    lowered = text.lower()
    debug("lc", f"{text!r} -> {lowered!r}")
    return lowered


def strip_trailing(content: str, chars: str = "\n") -> str:
    """Remove any trailing run of ``chars`` from ``content``."""
    if is_empty_string(chars):
        return content
    return content.rstrip(chars)


def contains(find: str, content: str) -> bool:
    """Check if ``content`` contains ``find``.

    Raises:
        ValueError: If ``find`` is empty
    """
    if is_empty_string(find):
        raise ValueError("contains() did not receive a string to find")

    if is_empty_string(content):
        debug("contains", f"contains({find!r}, '') received empty content so always returns False")
        return False

    return find in content


def starts_with(prefix: str, content: str) -> bool:
    """Check if ``content`` starts with ``prefix``."""
    return content.startswith(prefix)


def ends_with(suffix: str, content: str) -> bool:
    """Check if ``content`` ends with ``suffix``."""
    return content.endswith(suffix)
