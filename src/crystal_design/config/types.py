"""Configuration data types: resolve once, freeze, then inject."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

ConfigOrigin = Literal["programmatic", "env", "default"]
SourceMap = Mapping[str, ConfigOrigin]


class ResolvedConfig(NamedTuple):
    """Configuration after merging all sources, with per-field origins."""

    text_endpoint: str
    model: str
    timeout_seconds: float
    use_real_api: bool
    referrer: str | None

    origin: SourceMap

    def to_frozen(self) -> "FrozenConfig":
        """Drop audit metadata and return the immutable runtime config."""
        return FrozenConfig(
            text_endpoint=self.text_endpoint,
            model=self.model,
            timeout_seconds=self.timeout_seconds,
            use_real_api=self.use_real_api,
            referrer=self.referrer,
        )

    def audit(self) -> str:
        """Report where each value came from; the referrer is redacted."""
        lines = []
        for field in FrozenConfig.__dataclass_fields__:
            origin = self.origin.get(field, "default")
            value = getattr(self, field)
            if field == "referrer" and value is not None:
                value = "<redacted>"
            if origin == "env":
                lines.append(f"{field}: env:CRYSTAL_DESIGN_{field.upper()}={value}")
            else:
                lines.append(f"{field}: {origin}:{value}")
        return "\n".join(lines)


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable configuration injected into the generation client.

    There is no module-level configuration singleton; every client receives
    its own instance.
    """

    text_endpoint: str
    model: str
    timeout_seconds: float
    use_real_api: bool
    referrer: str | None = None
