"""Deterministic offline client for tests, demos and mock-by-default runs."""

from __future__ import annotations

from collections.abc import Iterable

from crystal_design.core.exceptions import TransportError
from crystal_design.core.types import GenerationRequest


class ScriptedGenerationClient:
    """Replays canned replies in order.

    Each script entry is either the raw reply text or an exception instance
    to raise. Once the script is exhausted the last entry repeats, so a
    single-entry script answers every call the same way.
    """

    def __init__(self, responses: Iterable[str | BaseException] = ("{}",)) -> None:
        self._responses: tuple[str | BaseException, ...] = tuple(responses)
        if not self._responses:
            raise ValueError("responses must contain at least one entry")
        self.requests: list[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> str:
        index = min(len(self.requests), len(self._responses) - 1)
        self.requests.append(request)
        reply = self._responses[index]
        if isinstance(reply, BaseException):
            raise reply
        if not isinstance(reply, str):
            raise TransportError(f"Scripted reply must be str, got {type(reply).__name__}")
        return reply
