"""Configuration schema and validation using Pydantic.

Validates and coerces values from programmatic overrides and the environment
into typed settings with defaults. Environment variables use the
``CRYSTAL_DESIGN_`` prefix.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEXT_ENDPOINT = "https://text.pollinations.ai"
DEFAULT_TEXT_MODEL = "openai"


class CrystalSettings(BaseSettings):
    """Pydantic settings schema for the generation client."""

    model_config = SettingsConfigDict(
        env_prefix="CRYSTAL_DESIGN_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars for forward compatibility
    )

    text_endpoint: str = Field(
        default=DEFAULT_TEXT_ENDPOINT,
        description="URL of the text-completion endpoint",
        min_length=1,
    )

    model: str = Field(
        default=DEFAULT_TEXT_MODEL,
        description="Default text model identifier",
        min_length=1,
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Per-request timeout enforced by the HTTP client",
        gt=0,
    )

    use_real_api: bool = Field(
        default=False,
        description="Call the real service instead of the offline client",
    )

    referrer: str | None = Field(
        default=None,
        description="Optional referrer sent with each request",
    )

    @field_validator("text_endpoint")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store endpoints without a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"text_endpoint must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of field values, in declaration order."""
        return {name: getattr(self, name) for name in type(self).model_fields}
