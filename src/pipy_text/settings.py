"""Formatting defaults."""

import os
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cells import cell_len

JustifyMethod = Literal["default", "left", "center", "right", "full"]
OverflowMethod = Literal["fold", "crop", "ellipsis", "ignore"]

ENV_PREFIX = "PIPY_TEXT_"


class TextSettings(BaseModel):
    """Defaults used when neither a Text nor the caller picks a value."""

    model_config = ConfigDict(frozen=True)

    tab_size: int = Field(default=8, ge=1)
    justify: JustifyMethod | None = None  # None: wrap leaves lines unjustified
    overflow: OverflowMethod = "fold"
    end: str = "\n"
    ellipsis: str = "…"

    @field_validator("ellipsis")
    @classmethod
    def _check_ellipsis_width(cls, value: str) -> str:
        if cell_len(value) != 1:
            raise ValueError("ellipsis must be exactly one cell wide")
        return value


DEFAULT_SETTINGS = TextSettings()


def load_settings(data: Mapping[str, Any]) -> TextSettings:
    """Build settings from a mapping, such as a parsed JSON or TOML section.

    Unknown keys are ignored; missing keys keep their defaults.

    Raises:
        pydantic.ValidationError: If a value is out of range or not allowed
    """
    return TextSettings.model_validate(dict(data))


def settings_from_env(environ: Mapping[str, str] | None = None) -> TextSettings:
    """Build settings from ``PIPY_TEXT_*`` environment variables.

    Reads PIPY_TEXT_TAB_SIZE, PIPY_TEXT_JUSTIFY, PIPY_TEXT_OVERFLOW and
    PIPY_TEXT_ELLIPSIS. Empty variables are treated as unset.
    """
    if environ is None:
        environ = os.environ

    data: dict[str, str] = {}
    for name in ("tab_size", "justify", "overflow", "ellipsis"):
        value = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value:
            data[name] = value

    return load_settings(data)
