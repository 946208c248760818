"""HTTP generation client for OpenAI-style text-completion endpoints."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from crystal_design.config.types import FrozenConfig
from crystal_design.core.exceptions import TransportError
from crystal_design.core.types import GenerationRequest

log = logging.getLogger(__name__)


class HttpGenerationClient:
    """POSTs chat messages to the configured endpoint and returns the body text.

    The service replies with plain text, so the body is returned untouched.
    Every ``httpx`` failure is mapped to `TransportError`; no retries are
    attempted here.

    Args:
        config: Frozen configuration carrying endpoint, timeout and referrer.
        http_client: Optional preconfigured ``httpx.AsyncClient`` (tests pass
            one built on ``httpx.MockTransport``). When omitted a client is
            created per request.
    """

    def __init__(
        self,
        config: FrozenConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._http_client = http_client

    def build_body(self, request: GenerationRequest) -> dict[str, Any]:
        """Translate a request into the endpoint's JSON body."""
        messages: list[dict[str, str]] = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.user_prompt})
        body: dict[str, Any] = {
            "messages": messages,
            "model": request.model,
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if self.config.referrer:
            body["referrer"] = self.config.referrer
        return body

    async def generate(self, request: GenerationRequest) -> str:
        """Send ``request`` and return the raw response text."""
        body = self.build_body(request)
        log.debug(
            "POST %s model=%s max_tokens=%d",
            self.config.text_endpoint,
            request.model,
            request.max_tokens,
        )
        try:
            if self._http_client is not None:
                response = await self._post(self._http_client, body)
            else:
                async with httpx.AsyncClient(
                    timeout=self.config.timeout_seconds
                ) as client:
                    response = await self._post(client, body)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timed out after {self.config.timeout_seconds}s"
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TransportError(
                f"HTTP error! status: {status}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Network error: {e}") from e
        return response.text

    async def _post(self, client: httpx.AsyncClient, body: dict[str, Any]) -> httpx.Response:
        response = await client.post(
            self.config.text_endpoint,
            json=body,
            timeout=self.config.timeout_seconds,
        )
        response.raise_for_status()
        return response
