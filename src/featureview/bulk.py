"""Bulk append/set/clear of feature values.

Sources may be any iterable of values: lists and tuples, generators and other
iterators, ``array.array`` or numpy-style arrays. The storage kind comes from
an explicit ``kind`` argument, else from the element type the source declares
(``typecode``/``dtype``), else from its first element.

Every value is converted before the target is touched. A bad value anywhere
in the source leaves the record exactly as it was: no new key, no kind switch
and no partial append.
"""

from __future__ import annotations

import array
import itertools
from typing import Any, Iterable, Optional, Union

from featureview.accessors import (
    FeatureContainer,
    FeatureKey,
    get_features,
    normalize_key,
    resolve_target,
)
from featureview.domain.feature import Feature
from featureview.errors import UnsupportedValueType
from featureview.kinds import (
    STRING_TYPES,
    Kind,
    converter,
    kind_of_source,
    kind_of_value,
    new_storage,
    resolve_kind,
)
from featureview.values import mutable_feature_values

_EMPTY = object()


def _convert(source: Iterable[Any], kind: Optional[Any]) -> tuple[Optional[Kind], list]:
    if isinstance(source, STRING_TYPES):
        raise UnsupportedValueType(
            f"expected an iterable of values, got a single {type(source).__name__}; "
            "wrap it in a list"
        )
    if kind is not None:
        resolved = resolve_kind(kind)
        items: Iterable[Any] = source
    else:
        resolved = kind_of_source(source)
        items = source
        if resolved is None:
            iterator = iter(source)
            first = next(iterator, _EMPTY)
            if first is _EMPTY:
                return None, []
            resolved = kind_of_value(first)
            items = itertools.chain((first,), iterator)
    convert = converter(resolved)
    return resolved, [convert(value) for value in items]


def _existing(
    target: Union[Feature, FeatureKey], proto: Optional[FeatureContainer]
) -> Optional[Feature]:
    """Return the addressed feature if it already exists, without creating it."""
    if proto is None or isinstance(target, Feature):
        return resolve_target(target, proto, create=False)
    return get_features(proto).feature.get(normalize_key(target))


def _pack(existing: Optional[Feature], kind: Kind, batch: list) -> Any:
    """Lay the batch out like the storage it will be appended to.

    Packing numeric values into an array up front surfaces int64 overflow
    before the record is modified.
    """
    if kind is Kind.BYTES:
        return batch
    if existing is not None and existing.kind is kind:
        storage = existing.values
    else:
        storage = new_storage(kind)
    return array.array(storage.typecode, batch)


def _commit(feature: Feature, kind: Kind, packed: Any) -> None:
    mutable_feature_values(kind, feature).extend(packed)


def append_feature_values(
    source: Iterable[Any],
    target: Union[Feature, FeatureKey],
    proto: Optional[FeatureContainer] = None,
    *,
    kind: Optional[Any] = None,
) -> None:
    """Append every value of ``source`` to a feature.

    ``target`` is a ``Feature``, or a key in ``proto`` (created when missing).
    Appending values of another kind than the feature holds replaces its
    values. An empty source with no ``kind`` leaves the feature unchanged.
    """
    resolved, batch = _convert(source, kind)
    packed = None
    if resolved is not None:
        packed = _pack(_existing(target, proto), resolved, batch)
    feature = resolve_target(target, proto, create=True)
    if resolved is None:
        return
    _commit(feature, resolved, packed)


def clear_feature_values(kind: Any, feature: Feature) -> None:
    """Empty the ``kind`` list of ``feature``; other kinds are left alone."""
    requested = resolve_kind(kind)
    if feature.kind is requested:
        del feature.values[:]


def set_feature_values(
    source: Iterable[Any],
    target: Union[Feature, FeatureKey],
    proto: Optional[FeatureContainer] = None,
    *,
    kind: Optional[Any] = None,
) -> None:
    """Replace a feature's values with the values of ``source``.

    Without ``kind``, an empty source clears whatever kind the feature holds.
    """
    resolved, batch = _convert(source, kind)
    packed = None
    if resolved is not None:
        packed = _pack(_existing(target, proto), resolved, batch)
    feature = resolve_target(target, proto, create=True)
    if resolved is None:
        if feature.kind is not None:
            clear_feature_values(feature.kind, feature)
        return
    clear_feature_values(resolved, feature)
    _commit(feature, resolved, packed)
