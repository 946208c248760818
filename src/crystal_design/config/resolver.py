"""Configuration resolution with precedence handling.

Precedence: Programmatic > Environment (including an optional .env file) >
Defaults.
"""

import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import ValidationError as PydanticValidationError

from crystal_design.core.exceptions import ConfigurationError

from .schema import CrystalSettings
from .types import ConfigOrigin, ResolvedConfig

ENV_PREFIX = "CRYSTAL_DESIGN_"


def _env_values(env_file: str | Path | None) -> dict[str, Any]:
    """Collect CRYSTAL_DESIGN_* values; real env vars win over the .env file."""
    raw: dict[str, Any] = {}
    if env_file is not None:
        env_path = Path(env_file)
        if not env_path.exists():
            raise ConfigurationError(f"Environment file not found: {env_path}")
        raw.update(
            {k: v for k, v in dotenv_values(env_path).items() if v is not None}
        )
    raw.update(os.environ)

    values: dict[str, Any] = {}
    for field in CrystalSettings.model_fields:
        key = f"{ENV_PREFIX}{field.upper()}"
        if key in raw:
            values[field] = raw[key]
    return values


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    use_env_file: str | Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration from all sources with proper precedence.

    Args:
        programmatic: Overrides with the highest precedence. Unknown keys are
            ignored.
        use_env_file: Optional .env file read in addition to the process
            environment.

    Returns:
        ResolvedConfig with merged values and the origin of each field.

    Raises:
        ConfigurationError: If the merged values fail validation.

    Example:
        config = resolve_config({"use_real_api": True}).to_frozen()
    """
    origin: dict[str, ConfigOrigin] = {}
    merged: dict[str, Any] = {}

    for field, info in CrystalSettings.model_fields.items():
        merged[field] = info.default
        origin[field] = "default"

    for field, value in _env_values(use_env_file).items():
        merged[field] = value
        origin[field] = "env"

    for field, value in (programmatic or {}).items():
        if field in merged:  # Only override known fields
            merged[field] = value
            origin[field] = "programmatic"

    try:
        settings = CrystalSettings(**merged)
    except PydanticValidationError as e:
        bad = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigurationError(f"Invalid configuration for: {bad}. {e}") from e

    return ResolvedConfig(**settings.to_dict(), origin=origin)
