"""JSON-like serialization of :class:`optval.value.Value`.

A present value is written as its bare payload, an absent one as ``null``.
Reading ``null`` gives ``none()``, anything else is validated as the element
type and wrapped with ``some()``. Element validation failures are raised as
the unchanged :class:`pydantic.ValidationError`.

``Value`` fields inside pydantic models, dataclasses or ``TypedDict`` records
follow the same rules through ``Value.__get_pydantic_core_schema__``; these
helpers cover a standalone ``Value``.
"""

from __future__ import annotations

import functools
from typing import Any

from pydantic import TypeAdapter, ValidationError

from optval.config.settings import load_settings
from optval.observability.logging import Logger, get_logger
from optval.value import Value

_log: Logger = get_logger(__name__)


@functools.lru_cache(maxsize=256)
def _adapter(item_type: Any) -> TypeAdapter[Value[Any]]:
    return TypeAdapter(Value[item_type])


def serialize(value: Value[Any], item_type: Any = Any) -> Any:
    """Return JSON-compatible Python data for *value* (``None`` when absent)."""
    return _adapter(item_type).dump_python(value, mode="json")


def deserialize(data: Any, item_type: Any = Any) -> Value[Any]:
    """Build a ``Value[item_type]`` from JSON-compatible Python data."""
    try:
        return _adapter(item_type).validate_python(data)
    except ValidationError as exc:
        _log.debug("optional.deserialize_failed", item_type=repr(item_type), errors=exc.error_count())
        raise


def to_json(value: Value[Any], item_type: Any = Any, indent: int | None = None) -> str:
    """Encode *value* as JSON text; *indent* defaults to ``OPTVAL_JSON_INDENT``."""
    if indent is None:
        indent = load_settings().json_indent
    return _adapter(item_type).dump_json(value, indent=indent).decode()


def from_json(text: str | bytes, item_type: Any = Any) -> Value[Any]:
    """Decode JSON text into a ``Value[item_type]``; ``null`` gives ``none()``."""
    try:
        return _adapter(item_type).validate_json(text)
    except ValidationError as exc:
        _log.debug("optional.deserialize_failed", item_type=repr(item_type), errors=exc.error_count())
        raise


__all__ = ["deserialize", "from_json", "serialize", "to_json"]
