from .accessors import (
    get_feature,
    get_feature_list,
    get_features,
    mutable_feature,
    mutable_feature_list,
)
from .bulk import append_feature_values, clear_feature_values, set_feature_values
from .config.settings import (
    FeatureViewSettings,
    configure,
    current_settings,
    load_settings,
)
from .domain.feature import Feature
from .domain.record import (
    Example,
    FeatureList,
    FeatureLists,
    Features,
    SequenceExample,
)
from .errors import (
    FeatureListNotFound,
    FeatureNotFound,
    FeatureViewError,
    ForeignKindAccess,
    UnsupportedRecordType,
    UnsupportedValueType,
)
from .kinds import Kind, resolve_kind
from .predicates import has_feature, has_feature_list
from .utils.logging import configure_logging
from .values import get_feature_values, mutable_feature_values

__all__ = [
    "Example",
    "Feature",
    "FeatureList",
    "FeatureListNotFound",
    "FeatureLists",
    "FeatureNotFound",
    "FeatureViewError",
    "FeatureViewSettings",
    "Features",
    "ForeignKindAccess",
    "Kind",
    "SequenceExample",
    "UnsupportedRecordType",
    "UnsupportedValueType",
    "append_feature_values",
    "clear_feature_values",
    "configure",
    "configure_logging",
    "current_settings",
    "get_feature",
    "get_feature_list",
    "get_feature_values",
    "get_features",
    "has_feature",
    "has_feature_list",
    "load_settings",
    "mutable_feature",
    "mutable_feature_list",
    "mutable_feature_values",
    "resolve_kind",
    "set_feature_values",
]
