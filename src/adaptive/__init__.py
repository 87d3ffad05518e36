"""Interactive shell-bootstrap helpers."""

from .empty import (
    EmptinessOracle,
    ResolvedBinding,
    Shape,
    Verdict,
    is_empty,
    is_empty_string,
    not_empty,
)

__version__ = "0.1.0"

__all__ = [
    "EmptinessOracle",
    "ResolvedBinding",
    "Shape",
    "Verdict",
    "is_empty",
    "is_empty_string",
    "not_empty",
]
