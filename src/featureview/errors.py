from __future__ import annotations

from typing import Any


class FeatureViewError(Exception):
    """Base class for errors raised by featureview accessors."""


class FeatureNotFound(FeatureViewError, KeyError):
    """Raised when a read-only lookup targets a feature key that is absent."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"feature {self.key!r} not found"


class FeatureListNotFound(FeatureViewError, KeyError):
    """Raised when a read-only lookup targets a feature list key that is absent."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"feature list {self.key!r} not found"


class ForeignKindAccess(FeatureViewError, TypeError):
    """Raised when reading a feature's values as a kind it does not hold."""

    def __init__(self, requested: Any, actual: Any) -> None:
        self.requested = requested
        self.actual = actual
        super().__init__(
            f"feature holds {actual.field_name}, cannot read it as {requested.field_name}"
        )


class UnsupportedValueType(FeatureViewError, TypeError):
    """Raised when no feature kind fits a value or kind specifier."""


class UnsupportedRecordType(FeatureViewError, TypeError):
    """Raised when an accessor is handed something that is not a feature record."""
