"""Configuration for the generation client.

Resolve once, freeze, then inject: `resolve_config()` merges programmatic
overrides, the environment and defaults into a `ResolvedConfig`, and
`to_frozen()` yields the immutable `FrozenConfig` handed to a client.
"""

from .resolver import resolve_config
from .schema import CrystalSettings
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [
    "ConfigOrigin",
    "CrystalSettings",
    "FrozenConfig",
    "ResolvedConfig",
    "SourceMap",
    "resolve_config",
]
