"""Value[T] — an optional value container.

A ``Value`` either holds exactly one payload (``Some``) or holds nothing
(``None``). The zero form ``Value()`` is already a well-formed absent value,
so a ``Value`` field needs no explicit initialisation::

    name = some("Jack")
    name.map(str.upper).or_else("anonymous")   # "JACK"
    none().or_else("anonymous")                # "anonymous"

Absence is never silently turned into a default: ``get()`` returns an
``Err(NoValueError())``, ``must_get()`` aborts with :class:`MissingValuePanic`,
and only ``or_else`` / ``or_else_with`` substitute a caller-chosen value.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterator, Protocol, TypeVar, get_args

from optval.errors.value import MissingValuePanic, NoValueError
from optval.observability.logging import Logger, get_logger
from optval.result import Err, Ok, Result

T = TypeVar("T")
R = TypeVar("R")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
V = TypeVar("V")

_log: Logger = get_logger(__name__)


class Renderable(Protocol):
    """Payloads providing their own diagnostic text for ``str(Value)``.

    Any payload with a zero-argument callable ``render`` qualifies; anything
    else, including a ``render`` that needs arguments, falls back to ``str()``.
    """

    def render(self) -> str: ...


def _render(payload: Any) -> str:
    render = getattr(payload, "render", None)
    if callable(render):
        try:
            return str(render())
        except TypeError:
            pass
    return str(payload)


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Value(Generic[T]):
    """Optional value: ``present`` discriminant plus ``payload`` slot.

    The payload of an absent value is always ``None`` so that absent values
    compare equal whatever they were built from.
    """

    present: bool = False
    payload: T | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "present", bool(self.present))
        if not self.present and self.payload is not None:
            object.__setattr__(self, "payload", None)

    # -- query ---------------------------------------------------------------

    def is_some(self) -> bool:
        """Report whether a value is held."""
        return self.present

    def is_none(self) -> bool:
        """Report whether no value is held."""
        return not self.present

    # -- extraction ----------------------------------------------------------

    def get(self) -> Result[T, NoValueError]:
        """Return ``Ok(payload)``, or ``Err(NoValueError())`` when absent."""
        if self.present:
            return Ok(self.payload)  # type: ignore[arg-type]
        return Err(NoValueError())

    def must_get(self) -> T:
        """Return the payload, aborting with :class:`MissingValuePanic` when absent.

        Only for call sites that already know a value is held. Absence here is
        a programming error, not something to recover from.
        """
        if self.present:
            return self.payload  # type: ignore[return-value]
        _log.error("optional.must_get_on_none")
        raise MissingValuePanic()

    def or_else(self, default: T) -> T:
        """Return the payload, or *default* when absent."""
        if self.present:
            return self.payload  # type: ignore[return-value]
        return default

    def or_else_with(self, factory: Callable[[], T]) -> T:
        """Return the payload, or call *factory* (once, now) when absent."""
        if self.present:
            return self.payload  # type: ignore[return-value]
        return factory()

    def to_list(self) -> list[T]:
        """Return ``[payload]``, or ``[]`` when absent."""
        if self.present:
            return [self.payload]  # type: ignore[list-item]
        return []

    # -- transformation ------------------------------------------------------

    def map(self, mapper: Callable[[T], R]) -> "Value[R]":
        """Apply *mapper* to the payload if present, otherwise return ``none()``."""
        if self.present:
            return some(mapper(self.payload))  # type: ignore[arg-type]
        return none()

    # -- protocols -----------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        if self.present:
            yield self.payload  # type: ignore[misc]

    def __str__(self) -> str:
        if self.present:
            return f"Some({_render(self.payload)})"
        return "None"

    def __repr__(self) -> str:
        if self.present:
            return f"Some({self.payload!r})"
        return "None"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        from pydantic_core import core_schema

        args = get_args(source_type)
        item_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()

        def _unwrap(v: Any) -> Any:
            if isinstance(v, Value):
                return v.payload if v.present else None
            return v

        def _wrap(v: Any) -> Value[Any]:
            return none() if v is None else some(v)

        def _serialize(v: Value[Any], nxt: Any) -> Any:
            return nxt(v.payload) if v.present else None

        return core_schema.no_info_before_validator_function(
            _unwrap,
            core_schema.no_info_after_validator_function(
                _wrap, core_schema.nullable_schema(item_schema)
            ),
            serialization=core_schema.wrap_serializer_function_ser_schema(
                _serialize, schema=item_schema
            ),
        )


def some(value: T) -> Value[T]:
    """Create a value that holds *value*."""
    return Value(True, value)


def none() -> Value[Any]:
    """Create a value that holds nothing; same as ``Value()``."""
    return Value()


def from_nullable(value: T | None) -> Value[T]:
    """Lift a conventional ``X | None`` into a ``Value``."""
    return none() if value is None else some(value)


def map2(v1: Value[T1], v2: Value[T2], mapper: Callable[[T1, T2], V]) -> Value[V]:
    """Apply *mapper* only when both *v1* and *v2* hold a value."""
    if v1.present and v2.present:
        return some(mapper(v1.payload, v2.payload))  # type: ignore[arg-type]
    return none()


def unpack(v: Value[Value[T]]) -> Value[T]:
    """Flatten one level of nesting; an absent outer value gives ``none()``."""
    if not v.present:
        return none()
    inner = v.payload
    if not isinstance(inner, Value):
        raise TypeError(f"unpack() expects a Value of Value, got {type(inner).__name__} payload")
    return inner


__all__ = [
    "Renderable",
    "Value",
    "from_nullable",
    "map2",
    "none",
    "some",
    "unpack",
]
