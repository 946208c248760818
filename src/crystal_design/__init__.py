"""Structured-output pipeline for AI-assisted crystal jewelry design."""

import importlib.metadata
import logging

from crystal_design.client import (
    GenerationClient,
    HttpGenerationClient,
    ScriptedGenerationClient,
    create_client,
)
from crystal_design.config import FrozenConfig, resolve_config
from crystal_design.contracts import (
    DESIGN_SUGGESTIONS,
    ENERGY_IMAGE_ANALYSIS,
    INSPIRATION_ANALYSIS,
    USER_PROFILE,
    Contract,
    DesignSuggestionsInput,
    EnergyImageInput,
    InspirationImageInput,
    QuestionnaireInput,
)
from crystal_design.core.exceptions import (
    ConfigurationError,
    CrystalDesignError,
    TransportError,
)
from crystal_design.core.types import GenerationRequest, PipelineState, TaskOutcome
from crystal_design.pipeline import TaskSpec, run_task
from crystal_design.tasks import (
    analyze_energy_image,
    analyze_inspiration_image,
    analyze_user_profile,
    generate_text,
    suggest_designs,
)
from crystal_design.telemetry import TelemetryContext, TelemetryReporter

try:
    __version__ = importlib.metadata.version("crystal-design")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Library code never configures handlers; applications do.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Tasks
    "suggest_designs",
    "analyze_user_profile",
    "analyze_inspiration_image",
    "analyze_energy_image",
    "generate_text",
    # Pipeline
    "TaskSpec",
    "TaskOutcome",
    "PipelineState",
    "GenerationRequest",
    "run_task",
    # Contracts and inputs
    "Contract",
    "DESIGN_SUGGESTIONS",
    "USER_PROFILE",
    "INSPIRATION_ANALYSIS",
    "ENERGY_IMAGE_ANALYSIS",
    "DesignSuggestionsInput",
    "QuestionnaireInput",
    "InspirationImageInput",
    "EnergyImageInput",
    # Clients and configuration
    "GenerationClient",
    "HttpGenerationClient",
    "ScriptedGenerationClient",
    "create_client",
    "FrozenConfig",
    "resolve_config",
    # Errors
    "CrystalDesignError",
    "ConfigurationError",
    "TransportError",
    # Telemetry
    "TelemetryContext",
    "TelemetryReporter",
]
