"""Generation clients: the external collaborator behind every task."""

from crystal_design.config.types import FrozenConfig

from .base import GenerationClient
from .http import HttpGenerationClient
from .scripted import ScriptedGenerationClient


def create_client(config: FrozenConfig) -> GenerationClient:
    """Return the HTTP client when ``use_real_api`` is set, else an offline one.

    The offline client answers every call with an empty JSON object, which the
    pipeline turns into a fallback record.
    """
    if config.use_real_api:
        return HttpGenerationClient(config)
    return ScriptedGenerationClient(("{}",))


__all__ = [
    "GenerationClient",
    "HttpGenerationClient",
    "ScriptedGenerationClient",
    "create_client",
]
