"""Run one contract-driven task from prompt compilation to a typed record.

Control flow per invocation::

    Compiling -> AwaitingResponse -> Extracting -> Validating -> Normalizing -> Done
                                     |             |
                                     v             v
                              ExtractionFailed  ValidationFailed -> Done (fallback)
    AwaitingResponse -> TransportFailed -> Failed (TransportError raised)

The only suspension point is the client call. Everything else is
synchronous and pure, and nothing is shared between invocations, so any
number of tasks may run concurrently.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import logging
from typing import Any

from crystal_design.client.base import GenerationClient
from crystal_design.config.types import FrozenConfig
from crystal_design.contracts.fields import Contract
from crystal_design.core.exceptions import TransportError
from crystal_design.core.types import (
    Failure,
    GenerationRequest,
    PipelineState,
    TaskOutcome,
    resolve_language,
)
from crystal_design.i18n import message
from crystal_design.pipeline.extraction import extract_json
from crystal_design.pipeline.fallback import synthesize_fallback
from crystal_design.pipeline.normalization import normalize
from crystal_design.prompts.compiler import compile_prompts
from crystal_design.telemetry import TelemetryContext, TelemetryContextProtocol

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class TaskSpec:
    """Static description of one AI-backed task.

    Attributes:
        name: Task key; also selects the localized service name used in
            transport error messages (``service.<name>``).
        contract: Output contract; must declare a primary narrative field.
        role: Opening of the system prompt.
        task: Opening of the user prompt.
        temperature: Sampling temperature in [0, 1].
        max_tokens: Completion budget.
        model: Model override; ``None`` uses the configured default.
    """

    name: str
    contract: Contract
    role: str
    task: str
    temperature: float = 0.7
    max_tokens: int = 1000
    model: str | None = None

    def __post_init__(self) -> None:
        # Fail at definition time rather than on the first fallback.
        _ = self.contract.primary_path


def transport_failure(
    task_name: str, error: TransportError, language: str | None
) -> TransportError:
    """Wrap a transport error with a localized, task-specific message."""
    try:
        service = message(f"service.{task_name}", language)
    except KeyError:
        service = message("service.default", language)
    detail = str(error) or message("unknown_error", language)
    return TransportError(
        message("transport_failure", language, service=service, detail=detail),
        status_code=error.status_code,
    )


async def run_task(
    spec: TaskSpec,
    context: Mapping[str, object],
    client: GenerationClient,
    *,
    config: FrozenConfig,
    language: str | None = None,
    fallback_overrides: Mapping[str, Any] | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> TaskOutcome:
    """Compile, call the client, and turn the reply into a Contract-shaped record.

    Args:
        spec: The task being run.
        context: Serialized task input for the user prompt.
        client: Generation client; the only awaited collaborator.
        config: Resolved configuration; supplies the default model.
        language: ``"en"`` or ``"zh"``; anything else is treated as English.
        fallback_overrides: Top-level values kept in a fallback record.
        telemetry: Optional telemetry context.

    Returns:
        `TaskOutcome` whose record is either the normalized model output or a
        fallback record carrying a diagnostic.

    Raises:
        TransportError: When the client fails, with a localized message.
    """
    tele = telemetry or TelemetryContext()
    lang = resolve_language(language)
    contract = spec.contract
    states = [PipelineState.COMPILING]

    with tele("task.run", task=spec.name):
        bundle = compile_prompts(
            contract, context=context, role=spec.role, task=spec.task, language=lang
        )
        request = GenerationRequest(
            system_prompt=bundle.system,
            user_prompt=bundle.user,
            model=spec.model or config.model,
            temperature=spec.temperature,
            max_tokens=spec.max_tokens,
        )

        states.append(PipelineState.AWAITING_RESPONSE)
        try:
            with tele("generate"):
                raw = await client.generate(request)
        except TransportError as e:
            log.error("Generation call for task '%s' failed: %s", spec.name, e)
            tele.count("transport_failed", task=spec.name)
            raise transport_failure(spec.name, e, lang) from e

        states.append(PipelineState.EXTRACTING)
        extracted = extract_json(raw)
        if isinstance(extracted, Failure):
            states += [PipelineState.EXTRACTION_FAILED, PipelineState.DONE]
            tele.count("fallback", task=spec.name, reason="extraction")
            return TaskOutcome(
                record=synthesize_fallback(
                    contract,
                    extracted.error,
                    language=lang,
                    overrides=fallback_overrides,
                ),
                states=tuple(states),
                error=extracted.error,
            )

        states.append(PipelineState.VALIDATING)
        validated = contract.validate(extracted.value)
        if isinstance(validated, Failure):
            log.warning(
                "Response for task '%s' failed validation with %d violation(s).",
                spec.name,
                len(validated.error.violations),
            )
            states += [PipelineState.VALIDATION_FAILED, PipelineState.DONE]
            tele.count("fallback", task=spec.name, reason="validation")
            return TaskOutcome(
                record=synthesize_fallback(
                    contract,
                    validated.error,
                    language=lang,
                    overrides=fallback_overrides,
                ),
                states=tuple(states),
                error=validated.error,
            )

        states.append(PipelineState.NORMALIZING)
        record = normalize(contract, validated.value)
        states.append(PipelineState.DONE)
        log.debug("Task '%s' produced a validated record.", spec.name)
        return TaskOutcome(record=record, states=tuple(states))
