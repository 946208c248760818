"""Public entry points for the AI-backed tasks.

Every function validates its input, runs the shared pipeline and returns a
plain ``dict`` shaped exactly like the task's Contract. Malformed model
output never raises; it comes back as a fallback record whose primary field
carries a localized diagnostic. Only transport failures raise, as
`TransportError` with a localized message.

Example:
    ```python
    from crystal_design import resolve_config, suggest_designs

    config = resolve_config({"use_real_api": True}).to_frozen()
    result = await suggest_designs(
        {
            "designCategory": "bracelet",
            "overallDesignStyle": "minimalist",
            "mainStones": "Rose Quartz (Shape: Round)",
            "language": "zh",
        },
        config=config,
    )
    print(result["designConcept"])
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from crystal_design.client import GenerationClient, create_client
from crystal_design.config import FrozenConfig, resolve_config
from crystal_design.contracts.inputs import (
    DesignSuggestionsInput,
    EnergyImageInput,
    InspirationImageInput,
    QuestionnaireInput,
)
from crystal_design.contracts.tasks import (
    DESIGN_SUGGESTIONS,
    ENERGY_IMAGE_ANALYSIS,
    INSPIRATION_ANALYSIS,
    USER_PROFILE,
)
from crystal_design.core.exceptions import TransportError
from crystal_design.core.types import GenerationRequest, TaskOutcome, resolve_language
from crystal_design.pipeline.runner import TaskSpec, run_task, transport_failure
from crystal_design.telemetry import TelemetryContextProtocol

log = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)

DESIGN_SUGGESTIONS_TASK = TaskSpec(
    name="design_suggestions",
    contract=DESIGN_SUGGESTIONS,
    role=(
        "You are an AI-powered design assistant specializing in crystal jewelry "
        "designs. Your goal is to provide detailed, creative, and well-formatted "
        "design suggestions."
    ),
    task=(
        "Analyze the following design preferences and provide a personalized "
        "introduction, a design concept, 1-3 detailed design schemes, accessory "
        "suggestions, photography setting suggestions and concluding remarks."
    ),
    temperature=0.75,
    max_tokens=3000,
)

USER_PROFILE_TASK = TaskSpec(
    name="user_profile",
    contract=USER_PROFILE,
    role=(
        "You are an expert in holistic wellness, crystal healing, astrology, and "
        "numerology, skilled at interpreting detailed questionnaire data. "
        "Create a comprehensive and personalized energy profile."
    ),
    task="Analyze the following user questionnaire data and generate a profile.",
    temperature=0.75,
    max_tokens=3500,
)

INSPIRATION_ANALYSIS_TASK = TaskSpec(
    name="inspiration_analysis",
    contract=INSPIRATION_ANALYSIS,
    role=(
        "You are a sophisticated design assistant specializing in deriving "
        "jewelry design inspiration from images. Analyze the provided image and "
        "extract key aesthetic information."
    ),
    task=(
        "Analyze the following image and provide jewelry design inspiration: "
        "overall theme and mood, key visual elements and shapes, texture and "
        "pattern ideas, potential materials, any narrative or symbolism, and a "
        "color palette of hex codes."
    ),
    temperature=0.7,
    max_tokens=2000,
)

ENERGY_IMAGE_ANALYSIS_TASK = TaskSpec(
    name="energy_image_analysis",
    contract=ENERGY_IMAGE_ANALYSIS,
    role=(
        "You are an expert in spiritual energy analysis, crystal properties, "
        "chakra systems, and image interpretation. Analyze the provided image "
        "based on the specified analysis type."
    ),
    task=(
        "Analyze the following image for energy properties. Fill only the "
        "details relevant to the analysis type, list identified crystals for "
        "crystalIdentification and associated chakras for chakraAssociation."
    ),
    temperature=0.7,
    max_tokens=2500,
)


def _coerce(
    model: type[TModel], value: TModel | Mapping[str, Any]
) -> TModel:
    if isinstance(value, model):
        return value
    return model.model_validate(value)


def _collaborators(
    client: GenerationClient | None, config: FrozenConfig | None
) -> tuple[GenerationClient, FrozenConfig]:
    final_config = config or resolve_config().to_frozen()
    return client or create_client(final_config), final_config


async def _run(
    spec: TaskSpec,
    data: DesignSuggestionsInput
    | QuestionnaireInput
    | InspirationImageInput
    | EnergyImageInput,
    *,
    client: GenerationClient | None,
    config: FrozenConfig | None,
    fallback_overrides: Mapping[str, Any] | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> TaskOutcome:
    final_client, final_config = _collaborators(client, config)
    return await run_task(
        spec,
        data.prompt_context(),
        final_client,
        config=final_config,
        language=data.language,
        fallback_overrides=fallback_overrides,
        telemetry=telemetry,
    )


async def suggest_designs(
    data: DesignSuggestionsInput | Mapping[str, Any],
    *,
    client: GenerationClient | None = None,
    config: FrozenConfig | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> dict[str, Any]:
    """Suggest 1-3 jewelry design schemes for the given preferences.

    Args:
        data: Design preferences, as a model or a camelCase/snake_case mapping.
        client: Generation client; built from ``config`` when omitted.
        config: Frozen configuration; resolved from the environment when omitted.
        telemetry: Optional telemetry context.

    Returns:
        A record shaped like ``DESIGN_SUGGESTIONS``.

    Raises:
        pydantic.ValidationError: If ``data`` is not a valid input record.
        TransportError: If the generation service cannot be reached.
    """
    outcome = await _run(
        DESIGN_SUGGESTIONS_TASK,
        _coerce(DesignSuggestionsInput, data),
        client=client,
        config=config,
        telemetry=telemetry,
    )
    return outcome.record


async def analyze_user_profile(
    data: QuestionnaireInput | Mapping[str, Any],
    *,
    client: GenerationClient | None = None,
    config: FrozenConfig | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> dict[str, Any]:
    """Build an energy profile from questionnaire answers.

    A fallback record keeps the user's name from the input.
    """
    questionnaire = _coerce(QuestionnaireInput, data)
    outcome = await _run(
        USER_PROFILE_TASK,
        questionnaire,
        client=client,
        config=config,
        fallback_overrides={"name": questionnaire.basic_info.name},
        telemetry=telemetry,
    )
    return outcome.record


async def analyze_inspiration_image(
    data: InspirationImageInput | Mapping[str, Any],
    *,
    client: GenerationClient | None = None,
    config: FrozenConfig | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> dict[str, Any]:
    """Derive design recommendations and a color palette from an image."""
    outcome = await _run(
        INSPIRATION_ANALYSIS_TASK,
        _coerce(InspirationImageInput, data),
        client=client,
        config=config,
        telemetry=telemetry,
    )
    return outcome.record


async def analyze_energy_image(
    data: EnergyImageInput | Mapping[str, Any],
    *,
    client: GenerationClient | None = None,
    config: FrozenConfig | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> dict[str, Any]:
    """Run one kind of energy analysis on an image.

    A fallback record reports the analysis type that was requested.
    """
    image = _coerce(EnergyImageInput, data)
    outcome = await _run(
        ENERGY_IMAGE_ANALYSIS_TASK,
        image,
        client=client,
        config=config,
        fallback_overrides={"analysisType": image.analysis_type},
        telemetry=telemetry,
    )
    return outcome.record


async def generate_text(
    prompt: str,
    *,
    system: str = "",
    model: str | None = None,
    temperature: float = 0.7,
    max_tokens: int = 1000,
    language: str | None = None,
    client: GenerationClient | None = None,
    config: FrozenConfig | None = None,
) -> dict[str, str]:
    """Free-form generation with no output contract.

    Returns:
        ``{"content": <raw reply>, "model": <model used>}``.

    Raises:
        ValueError: If the prompt is empty or the sampling values are invalid.
        TransportError: If the generation service cannot be reached.
    """
    final_client, final_config = _collaborators(client, config)
    request = GenerationRequest(
        system_prompt=system,
        user_prompt=prompt,
        model=model or final_config.model,
        temperature=temperature,
        max_tokens=max_tokens,
    )
    try:
        content = await final_client.generate(request)
    except TransportError as e:
        log.error("Text generation failed: %s", e)
        raise transport_failure(
            "text_generation", e, resolve_language(language)
        ) from e
    return {"content": content, "model": request.model}
