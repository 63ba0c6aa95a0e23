from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from featureview.domain.feature import Feature


@dataclass
class Features:
    """Key-indexed map of features."""

    feature: dict[str, Feature] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.feature)

    def __contains__(self, key: object) -> bool:
        return key in self.feature

    def keys(self):
        return self.feature.keys()

    def clear(self) -> None:
        self.feature.clear()


@dataclass
class Example:
    features: Features = field(default_factory=Features)

    def clear(self) -> None:
        self.features.clear()


@dataclass
class FeatureList:
    """Ordered features for one key; position is the sequence axis."""

    feature: list[Feature] = field(default_factory=list)

    def add(self) -> Feature:
        """Append a new empty feature and return it for population."""
        item = Feature()
        self.feature.append(item)
        return item

    def __len__(self) -> int:
        return len(self.feature)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.feature)

    def __getitem__(self, idx: int) -> Feature:
        return self.feature[idx]


@dataclass
class FeatureLists:
    feature_list: dict[str, FeatureList] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.feature_list)

    def __contains__(self, key: object) -> bool:
        return key in self.feature_list

    def keys(self):
        return self.feature_list.keys()

    def clear(self) -> None:
        self.feature_list.clear()


@dataclass
class SequenceExample:
    """Context features plus keyed feature lists."""

    context: Features = field(default_factory=Features)
    feature_lists: FeatureLists = field(default_factory=FeatureLists)

    def clear(self) -> None:
        self.context.clear()
        self.feature_lists.clear()
