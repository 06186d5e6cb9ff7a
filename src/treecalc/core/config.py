"""
Configuration for treecalc.

Configuration is loaded from the [calc] section of treecalc.toml:

    [calc]
    strict = false      # reject trailing input after an expression
    extended = true     # accept binary "-" and "/"
    max_depth = 100     # maximum nesting of "(" and unary "-"
    precision = 6       # significant digits when printing results
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from treecalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "treecalc.toml"


class CalcConfig(BaseModel):
    """Parser and display options."""

    strict: bool = False
    extended: bool = True
    max_depth: int = Field(default=100, ge=1, le=200)
    precision: int = Field(default=6, ge=1, le=17)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def with_overrides(self, **overrides: Any) -> CalcConfig:
        """Return a copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            return self.model_validate({**self.model_dump(), **updates})
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid option: {e}") from e


def load_config(toml_path: Path | None = None) -> CalcConfig:
    """
    Load treecalc configuration from a TOML file.

    Args:
        toml_path: Path to treecalc.toml. Defaults to ./treecalc.toml.

    Returns:
        CalcConfig with values from file or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    path = toml_path if toml_path is not None else Path.cwd() / CONFIG_FILENAME
    if not path.exists():
        return CalcConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("calc", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[calc] in {path} must be a table")

    try:
        config = CalcConfig.model_validate(section)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.debug("Loaded configuration from %s", path)
    return config
