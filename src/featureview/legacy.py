"""Deprecated forwarding accessors kept for callers that have not migrated."""

from __future__ import annotations

import warnings
from typing import Any, Optional

from featureview.accessors import FeatureKey, mutable_feature
from featureview.domain.feature import Feature
from featureview.domain.record import Example
from featureview.predicates import has_feature


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"{old}() is deprecated, use {new}() instead",
        DeprecationWarning,
        stacklevel=3,
    )


def example_feature(name: FeatureKey, example: Example) -> Feature:
    """Return the feature ``name`` of ``example``, creating it when missing."""
    _deprecated("example_feature", "mutable_feature")
    return mutable_feature(name, example)


def example_has_feature(
    key: FeatureKey, example: Example, kind: Optional[Any] = None
) -> bool:
    _deprecated("example_has_feature", "has_feature")
    return has_feature(key, example, kind)
