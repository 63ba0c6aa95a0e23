"""Typed views over a feature's active value list.

Reading and writing are deliberately asymmetric. A read of a kind the feature
does not hold is a caller error (``ForeignKindAccess``); a write of another
kind switches the feature to that kind and drops whatever it held before.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from featureview.accessors import FeatureContainer, FeatureKey, resolve_target
from featureview.domain.feature import Feature
from featureview.errors import ForeignKindAccess
from featureview.kinds import Storage, new_storage, resolve_kind


def get_feature_values(
    kind: Any,
    target: Union[Feature, FeatureKey],
    proto: Optional[FeatureContainer] = None,
) -> Storage:
    """Return the values of ``target`` stored as ``kind``.

    A feature with no active kind reads as an empty, detached list. A missing
    key raises ``FeatureNotFound``.
    """
    requested = resolve_kind(kind)
    feature = resolve_target(target, proto, create=False)
    current = feature.kind
    if current is None:
        return new_storage(requested)
    if current is not requested:
        raise ForeignKindAccess(requested, current)
    return feature.values


def mutable_feature_values(
    kind: Any,
    target: Union[Feature, FeatureKey],
    proto: Optional[FeatureContainer] = None,
) -> Storage:
    """Return the ``kind`` list of ``target`` for mutation, creating it if needed.

    When the feature is unset or holds another kind, it is switched to
    ``kind`` with a fresh empty list; the previous list is discarded.
    """
    requested = resolve_kind(kind)
    feature = resolve_target(target, proto, create=True)
    if feature.kind is not requested:
        feature.replace(requested, new_storage(requested))
    return feature.values
