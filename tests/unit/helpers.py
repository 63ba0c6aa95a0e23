from __future__ import annotations

from typing import Any, Iterable

from featureview.accessors import mutable_feature_list
from featureview.bulk import set_feature_values
from featureview.domain.feature import Feature
from featureview.domain.record import Example, Features, SequenceExample


def make_feature(values: Iterable[Any], *, kind: Any = None) -> Feature:
    feature = Feature()
    set_feature_values(values, feature, kind=kind)
    return feature


def make_example(**features: Iterable[Any]) -> Example:
    example = Example()
    for key, values in features.items():
        set_feature_values(values, key, example)
    return example


def make_features(**features: Iterable[Any]) -> Features:
    return make_example(**features).features


def make_sequence_example(
    context: dict[str, Iterable[Any]] | None = None,
    lists: dict[str, list[Iterable[Any]]] | None = None,
) -> SequenceExample:
    se = SequenceExample()
    for key, values in (context or {}).items():
        set_feature_values(values, key, se.context)
    for key, steps in (lists or {}).items():
        feature_list = mutable_feature_list(key, se)
        for step in steps:
            set_feature_values(step, feature_list.add())
    return se
