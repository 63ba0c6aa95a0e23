from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from featureview.utils.load import load_yaml

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

FloatStorage = Literal["float32", "float64"]


class FeatureViewSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    string_encoding: str = Field(
        default="utf-8",
        description="Codec used to turn str values into bytes feature values.",
    )
    float_storage: FloatStorage = Field(
        default="float32",
        description="float32 (protobuf float) | float64",
    )
    log_level: Optional[str] = Field(default=None, description="DEFAULT LOG LEVEL")

    @field_validator("string_encoding", mode="before")
    @classmethod
    def _normalize_encoding(cls, value):
        if value is None:
            return "utf-8"
        text = str(value).strip()
        if not text:
            return "utf-8"
        try:
            return codecs.lookup(text).name
        except LookupError as exc:
            raise ValueError(f"unknown string_encoding {value!r}") from exc

    @field_validator("float_storage", mode="before")
    @classmethod
    def _normalize_float_storage(cls, value):
        if value is None:
            return "float32"
        name = str(value).strip().lower()
        aliases = {"float": "float32", "single": "float32", "double": "float64"}
        return aliases.get(name, name)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if value is None:
            return None
        if isinstance(value, int):
            value = logging.getLevelName(value)
        name = str(value).strip().upper()
        if not name:
            return None
        if name not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return name


_active = FeatureViewSettings()


def current_settings() -> FeatureViewSettings:
    return _active


def configure(
    settings: Optional[FeatureViewSettings] = None,
    **overrides: Any,
) -> FeatureViewSettings:
    """Install new active settings and return the previous ones.

    Overrides are validated on top of ``settings`` (or the defaults when
    ``settings`` is omitted), so ``configure()`` alone restores the defaults.
    Storage created before the call keeps its layout.
    """
    global _active
    previous = _active
    base = settings if settings is not None else FeatureViewSettings()
    if overrides:
        base = FeatureViewSettings.model_validate({**base.model_dump(), **overrides})
    _active = base
    logger.debug("featureview settings: %s", base.model_dump())
    return previous


def load_settings(path: Union[str, Path]) -> FeatureViewSettings:
    """Read settings from a YAML file.

    The mapping may sit at the top level or under a ``featureview:`` block so
    the settings can live inside a larger project file.
    """
    data = load_yaml(path)
    block = data.get("featureview", data)
    if block is None:
        block = {}
    if not isinstance(block, dict):
        raise TypeError(
            f"'featureview' block in {path} must be a mapping, got {type(block).__name__}"
        )
    return FeatureViewSettings.model_validate(block)
