"""Protocol for generation clients.

The pipeline depends only on this seam. Retry and timeout policy belong to
the client (or the caller), never to the pipeline.
"""

from typing import Protocol, runtime_checkable

from crystal_design.core.types import GenerationRequest


@runtime_checkable
class GenerationClient(Protocol):
    """Sends one request to a text-completion service and returns raw text."""

    async def generate(self, request: GenerationRequest) -> str:
        """Return the service's raw reply.

        Raises:
            TransportError: On network failure, non-success status or timeout.
        """
        ...
