from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from featureview.kinds import Kind, Storage


@dataclass(eq=False)
class Feature:
    """One feature value: at most one of int64_list, float_list or bytes_list.

    The discriminant and the payload live in a single tuple so a kind switch
    replaces both in one assignment.
    """

    _oneof: tuple[Optional[Kind], Optional[Storage]] = field(
        default=(None, None), repr=False
    )

    @property
    def kind(self) -> Optional[Kind]:
        return self._oneof[0]

    @property
    def values(self) -> Optional[Storage]:
        return self._oneof[1]

    def which_oneof(self) -> Optional[str]:
        kind = self.kind
        return kind.field_name if kind is not None else None

    def replace(self, kind: Kind, values: Storage) -> None:
        """Make ``kind`` the active member, holding ``values``."""
        self._oneof = (kind, values)

    def clear(self) -> None:
        self._oneof = (None, None)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        return list(self.values or ()) == list(other.values or ())

    def __repr__(self) -> str:
        if self.kind is None:
            return "Feature()"
        return f"Feature({self.kind.field_name}={list(self.values)!r})"
