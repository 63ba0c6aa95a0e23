from __future__ import annotations

from typing import Any, Optional

from featureview.accessors import (
    FeatureContainer,
    FeatureKey,
    get_features,
    normalize_key,
)
from featureview.domain.record import SequenceExample
from featureview.errors import UnsupportedRecordType
from featureview.kinds import resolve_kind


def has_feature(
    key: FeatureKey, proto: FeatureContainer, kind: Optional[Any] = None
) -> bool:
    """Return True when ``key`` is present and, if ``kind`` is given, holds that kind."""
    feature = get_features(proto).feature.get(normalize_key(key))
    if feature is None:
        return False
    if kind is None:
        return True
    return feature.kind is resolve_kind(kind)


def has_feature_list(key: FeatureKey, sequence_example: SequenceExample) -> bool:
    if not isinstance(sequence_example, SequenceExample):
        raise UnsupportedRecordType(
            f"expected SequenceExample, got {type(sequence_example).__name__}"
        )
    return normalize_key(key) in sequence_example.feature_lists.feature_list
