"""Emptiness checks for literal values and for names bound in a scope.

``is_empty`` takes the *name* of a binding rather than its value. The name is
looked up in an explicit scope mapping, or in a snapshot of the calling
frame's locals and globals when no scope is given, and the value found is
tagged with a :class:`Shape`:

* sequences and mappings are empty when they hold no elements or keys,
  whatever those elements contain;
* scalars are empty when their text is ``""`` (``None`` reads as ``""``);
* a name that cannot be resolved is not an error: the argument itself is
  checked as literal text, so ``is_empty("")`` is True and
  ``is_empty("some-word")`` is False.

None of the checks raise. Every decision is reported through the debug sink.
"""

import inspect
import keyword
import logging
from collections import ChainMap
from collections.abc import Iterable, Mapping, Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .debug import debug as trace_debug

logger = logging.getLogger(__name__)

DebugSink = Callable[[str, str], None]


class Shape(Enum):
    """Structural category of a resolved binding."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    UNRESOLVED = "unresolved"


class ResolutionError(LookupError):
    """A name could not be resolved to a live binding."""


@dataclass(frozen=True)
class ResolvedBinding:
    """Outcome of looking a name up in a scope."""

    name: Any
    shape: Shape
    value: Any = None
    size: Optional[int] = None
    reason: str = ""

    @property
    def is_bound(self) -> bool:
        return self.shape is not Shape.UNRESOLVED


@dataclass(frozen=True)
class Verdict:
    """Result of an emptiness check and the shape it was computed under."""

    empty: bool
    shape: Shape


def scalar_text(value: Any) -> str:
    """Read the text of a scalar value without raising.

    ``None`` is unset and reads as ``""``. Objects whose ``str()`` fails fall
    back to ``repr()``, then to ``""``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    for render in (str, repr):
        try:
            return render(value)
        except Exception:
            continue
    return ""


def _container_size(value: Any) -> Optional[int]:
    try:
        return len(value)
    except Exception:
        return None


def shape_of(value: Any) -> Shape:
    """Classify an already-resolved value."""
    if value is None or isinstance(value, (str, bytes, bytearray)):
        return Shape.SCALAR
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, Sized) and isinstance(value, Iterable):
        return Shape.SEQUENCE
    return Shape.SCALAR


def _lookup(name: Any, scope: Mapping) -> Any:
    if not isinstance(name, str) or not name.isidentifier():
        raise ResolutionError(f"{name!r} is not an identifier")
    if keyword.iskeyword(name):
        raise ResolutionError(f"{name!r} is a reserved word")
    try:
        return scope[name]
    except KeyError as e:
        raise ResolutionError(f"{name!r} is not bound") from e


def resolve(name: Any, scope: Mapping) -> ResolvedBinding:
    """Resolve ``name`` in ``scope``; failures produce an UNRESOLVED binding."""
    try:
        value = _lookup(name, scope)
    except Exception as e:
        return ResolvedBinding(name=name, shape=Shape.UNRESOLVED, value=name, reason=str(e))

    shape = shape_of(value)
    size = None
    if shape in (Shape.SEQUENCE, Shape.MAPPING):
        size = _container_size(value)
        if size is None:
            shape = Shape.SCALAR

    return ResolvedBinding(name=name, shape=shape, value=value, size=size)


def caller_scope(depth: int = 1) -> Mapping:
    """Snapshot the locals and globals of a calling frame.

    Args:
        depth: How many frames above the function calling ``caller_scope``
            to look (1 is that function's caller)

    Returns:
        A read-only view where locals shadow globals
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return {}
        return ChainMap(dict(frame.f_locals), frame.f_globals)
    finally:
        del frame


class EmptinessOracle:
    """Decides emptiness for literal text and for named bindings.

    Args:
        debug: Trace sink called as ``debug(tag, message)``. Defaults to
            :func:`adaptive.debug.debug`. Errors raised by the sink are logged
            and never reach the caller.
    """

    def __init__(self, debug: Optional[DebugSink] = None):
        self._debug = debug or trace_debug

    def _trace(self, tag: str, message: str):
        try:
            self._debug(tag, message)
        except Exception:
            logger.debug("Debug sink failed for %s()", tag, exc_info=True)

    def not_empty(self, value: Any = None) -> bool:
        """True when the literal text is not empty. Names are never resolved."""
        text = scalar_text(value)
        if text == "":
            self._trace("not_empty", f"{text!r} was empty, returning False")
            return False
        self._trace("not_empty", f"{text!r} was not empty [{len(text)} chars], returning True")
        return True

    def is_empty_string(self, value: Any = None) -> bool:
        """True when the literal text is empty or unset."""
        text = scalar_text(value)
        if text == "":
            self._trace("is_empty_string", f"{text!r} was empty, returning True")
            return True
        self._trace("is_empty_string", f"{text!r} was NOT empty, returning False")
        return False

    def evaluate(self, name: Any = None, scope: Optional[Mapping] = None) -> Verdict:
        """Resolve ``name`` and decide emptiness under its shape."""
        if scope is None:
            scope = caller_scope()
        binding = resolve(name, scope)

        if binding.shape is Shape.SEQUENCE:
            if binding.size == 0:
                self._trace("is_empty", f"{name!r} is a sequence with no elements, returning True")
                return Verdict(True, binding.shape)
            self._trace(
                "is_empty",
                f"{name!r} is a sequence with {binding.size} elements, returning False",
            )
            return Verdict(False, binding.shape)

        if binding.shape is Shape.MAPPING:
            if binding.size == 0:
                self._trace("is_empty", f"{name!r} is a mapping with no keys, returning True")
                return Verdict(True, binding.shape)
            self._trace("is_empty", f"{name!r} is a mapping with {binding.size} keys, returning False")
            return Verdict(False, binding.shape)

        if binding.shape is Shape.UNRESOLVED:
            self._trace("is_empty", f"{binding.reason}; checking the argument as literal text")

        text = scalar_text(binding.value)
        if text == "":
            self._trace("is_empty", f"{name!r} ({binding.shape.value}) was empty, returning True")
            return Verdict(True, binding.shape)
        self._trace("is_empty", f"{name!r} ({binding.shape.value}) was NOT empty, returning False")
        return Verdict(False, binding.shape)

    def is_empty(self, name: Any = None, scope: Optional[Mapping] = None) -> bool:
        """True when whatever ``name`` refers to is empty."""
        if scope is None:
            scope = caller_scope()
        return self.evaluate(name, scope).empty


_default_oracle = EmptinessOracle()


def not_empty(value: Any = None) -> bool:
    """Return True when ``value`` is non-empty text."""
    return _default_oracle.not_empty(value)


def is_empty_string(value: Any = None) -> bool:
    """Return True when ``value`` is empty text or unset."""
    return _default_oracle.is_empty_string(value)


def is_empty(name: Any = None, scope: Optional[Mapping] = None) -> bool:
    """Return True when the binding called ``name`` is empty.

    Without ``scope`` the name is resolved in the caller's locals and globals.
    Unresolvable names are checked as literal text.
    """
    if scope is None:
        scope = caller_scope()
    return _default_oracle.is_empty(name, scope)


def classify(name: Any, scope: Optional[Mapping] = None) -> ResolvedBinding:
    """Resolve ``name`` in ``scope`` (or the caller's scope) and report its shape."""
    if scope is None:
        scope = caller_scope()
    return resolve(name, scope)


def is_bound(name: Any, scope: Optional[Mapping] = None) -> bool:
    """Check if ``name`` refers to a live binding."""
    if scope is None:
        scope = caller_scope()
    return resolve(name, scope).is_bound


def is_sequence(name: Any, scope: Optional[Mapping] = None) -> bool:
    """Check if ``name`` is bound to an ordered or unordered collection."""
    if scope is None:
        scope = caller_scope()
    return resolve(name, scope).shape is Shape.SEQUENCE


def is_mapping(name: Any, scope: Optional[Mapping] = None) -> bool:
    """Check if ``name`` is bound to a key/value mapping."""
    if scope is None:
        scope = caller_scope()
    return resolve(name, scope).shape is Shape.MAPPING
