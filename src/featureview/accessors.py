"""Key-based lookup of features and feature lists.

Reads and writes go through distinct entry points: ``get_*`` never creates
anything and raises a ``KeyError`` subclass for a missing key, ``mutable_*``
inserts an empty entry on first touch and never fails on a missing key.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from featureview.domain.feature import Feature
from featureview.domain.record import Example, FeatureList, Features, SequenceExample
from featureview.errors import (
    FeatureListNotFound,
    FeatureNotFound,
    UnsupportedRecordType,
)

logger = logging.getLogger(__name__)

FeatureKey = Union[str, bytes]
FeatureContainer = Union[Features, Example]


def normalize_key(key: FeatureKey) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).decode("utf-8")
    raise TypeError(f"feature key must be str or bytes, got {type(key).__name__}")


def get_features(proto: FeatureContainer) -> Features:
    """Return the feature map of an ``Example`` or of a bare ``Features``."""
    if isinstance(proto, Features):
        return proto
    if isinstance(proto, Example):
        return proto.features
    raise UnsupportedRecordType(
        f"expected Features or Example, got {type(proto).__name__}"
    )


def get_feature(key: FeatureKey, proto: FeatureContainer) -> Feature:
    features = get_features(proto)
    name = normalize_key(key)
    try:
        return features.feature[name]
    except KeyError:
        raise FeatureNotFound(name) from None


def mutable_feature(key: FeatureKey, proto: FeatureContainer) -> Feature:
    features = get_features(proto)
    name = normalize_key(key)
    feature = features.feature.get(name)
    if feature is None:
        feature = features.feature[name] = Feature()
    return feature


def _require_sequence_example(sequence_example: SequenceExample) -> SequenceExample:
    if not isinstance(sequence_example, SequenceExample):
        raise UnsupportedRecordType(
            f"expected SequenceExample, got {type(sequence_example).__name__}"
        )
    return sequence_example


def get_feature_list(key: FeatureKey, sequence_example: SequenceExample) -> FeatureList:
    lists = _require_sequence_example(sequence_example).feature_lists.feature_list
    name = normalize_key(key)
    try:
        return lists[name]
    except KeyError:
        raise FeatureListNotFound(name) from None


def mutable_feature_list(
    key: FeatureKey, sequence_example: SequenceExample
) -> FeatureList:
    lists = _require_sequence_example(sequence_example).feature_lists.feature_list
    name = normalize_key(key)
    feature_list = lists.get(name)
    if feature_list is None:
        feature_list = lists[name] = FeatureList()
        logger.debug("created feature list %r", name)
    return feature_list


def resolve_target(
    target: Union[Feature, FeatureKey],
    proto: Optional[FeatureContainer],
    *,
    create: bool,
) -> Feature:
    """Return the feature addressed by ``target``.

    ``target`` is either a ``Feature`` (with no ``proto``) or a key looked up
    in ``proto``, through ``mutable_feature`` when ``create`` is set and
    ``get_feature`` otherwise.
    """
    if proto is None:
        if isinstance(target, Feature):
            return target
        raise TypeError(
            f"expected a Feature or a key with a record, got {type(target).__name__}"
        )
    if isinstance(target, Feature):
        raise TypeError("pass either a Feature or a key with a record, not both")
    if create:
        return mutable_feature(target, proto)
    return get_feature(target, proto)
