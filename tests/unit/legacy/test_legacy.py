from __future__ import annotations

import pytest

from featureview.domain.record import Example
from featureview.kinds import Kind
from featureview.legacy import example_feature, example_has_feature
from tests.unit.helpers import make_example


def test_example_feature_forwards_to_mutable_feature():
    example = Example()
    with pytest.warns(DeprecationWarning, match="use mutable_feature"):
        feature = example_feature("tag", example)
    assert example.features.feature["tag"] is feature


def test_example_has_feature_forwards_to_has_feature():
    example = make_example(tag=[1])
    with pytest.warns(DeprecationWarning, match="use has_feature"):
        assert example_has_feature("tag", example)
    with pytest.warns(DeprecationWarning):
        assert not example_has_feature("tag", example, Kind.BYTES)
