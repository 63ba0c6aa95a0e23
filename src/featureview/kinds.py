"""Mapping from Python value types to the three feature storage kinds.

A feature stores exactly one of three repeated lists. Any integral type maps
to ``Kind.INT64``, any real type to ``Kind.FLOAT`` and any string-like type to
``Kind.BYTES``. Classification goes through the ``numbers`` ABCs, so integer
and float scalars of any width (including third-party ones registered with
``numbers.Integral``/``numbers.Real``) resolve without extra registration.
"""

from __future__ import annotations

import array
import numbers
import operator
from enum import Enum
from functools import partial
from typing import Any, Callable, MutableSequence, Optional

from featureview.config.settings import current_settings
from featureview.errors import UnsupportedValueType


class Kind(Enum):
    INT64 = "int64"
    FLOAT = "float"
    BYTES = "bytes"

    @property
    def field_name(self) -> str:
        """Name of the oneof member holding this kind (e.g. ``int64_list``)."""
        return f"{self.value}_list"


STRING_TYPES = (str, bytes, bytearray, memoryview)

_KIND_NAMES: dict[str, Kind] = {
    **{kind.value: kind for kind in Kind},
    **{kind.field_name: kind for kind in Kind},
}

# array.array typecodes; "u"/"w" hold characters, not byte strings.
_TYPECODE_KINDS: dict[str, Kind] = {
    **{code: Kind.INT64 for code in "bBhHiIlLqQ"},
    "f": Kind.FLOAT,
    "d": Kind.FLOAT,
}

# numpy-style dtype.kind codes.
_DTYPE_KINDS: dict[str, Kind] = {
    "i": Kind.INT64,
    "u": Kind.INT64,
    "f": Kind.FLOAT,
    "S": Kind.BYTES,
    "U": Kind.BYTES,
}

Storage = MutableSequence[Any]


def _kind_of_type(tp: type) -> Optional[Kind]:
    if issubclass(tp, numbers.Integral):
        return Kind.INT64
    if issubclass(tp, numbers.Real):
        return Kind.FLOAT
    if issubclass(tp, STRING_TYPES):
        return Kind.BYTES
    return None


def resolve_kind(spec: Any) -> Kind:
    """Resolve a kind specifier: a ``Kind``, a kind name, or a value type."""
    if isinstance(spec, Kind):
        return spec
    if isinstance(spec, str):
        kind = _KIND_NAMES.get(spec.strip().lower())
        if kind is None:
            raise UnsupportedValueType(
                f"unknown feature kind {spec!r}; expected one of {', '.join(sorted(_KIND_NAMES))}"
            )
        return kind
    if isinstance(spec, type):
        kind = _kind_of_type(spec)
        if kind is None:
            raise UnsupportedValueType(f"no feature kind stores values of type {spec.__name__}")
        return kind
    raise UnsupportedValueType(f"cannot resolve a feature kind from {spec!r}")


def kind_of_value(value: Any) -> Kind:
    kind = _kind_of_type(type(value))
    if kind is None:
        raise UnsupportedValueType(
            f"no feature kind stores values of type {type(value).__name__}"
        )
    return kind


def kind_of_source(source: Any) -> Optional[Kind]:
    """Return the element kind a typed container declares, without iterating it."""
    if isinstance(source, array.array):
        return _TYPECODE_KINDS.get(source.typecode)
    dtype_kind = getattr(getattr(source, "dtype", None), "kind", None)
    if isinstance(dtype_kind, str):
        return _DTYPE_KINDS.get(dtype_kind)
    return None


def new_storage(kind: Kind) -> Storage:
    """Return an empty container with the layout ``kind`` is stored in."""
    if kind is Kind.INT64:
        return array.array("q")
    if kind is Kind.FLOAT:
        typecode = "d" if current_settings().float_storage == "float64" else "f"
        return array.array(typecode)
    return []


def _to_int64(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise UnsupportedValueType(
            f"int64_list values must be integral, got {type(value).__name__}"
        ) from None


def _to_float(value: Any) -> float:
    if not isinstance(value, numbers.Real):
        raise UnsupportedValueType(
            f"float_list values must be real numbers, got {type(value).__name__}"
        )
    return float(value)


def _to_bytes(value: Any, *, encoding: str) -> bytes:
    if isinstance(value, str):
        return value.encode(encoding)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise UnsupportedValueType(
        f"bytes_list values must be str or bytes-like, got {type(value).__name__}"
    )


def converter(kind: Kind) -> Callable[[Any], Any]:
    """Return the elementwise converter for values stored as ``kind``."""
    if kind is Kind.INT64:
        return _to_int64
    if kind is Kind.FLOAT:
        return _to_float
    return partial(_to_bytes, encoding=current_settings().string_encoding)
