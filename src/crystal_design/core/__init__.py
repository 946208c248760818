"""Core value types and the exception hierarchy."""

from crystal_design.core.exceptions import (
    ConfigurationError,
    ContractDefinitionError,
    CrystalDesignError,
    ExtractionError,
    TransportError,
    ValidationError,
)
from crystal_design.core.types import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Failure,
    GenerationRequest,
    Language,
    PipelineState,
    Result,
    Success,
    TaskOutcome,
    Violation,
    resolve_language,
)

__all__ = [  # noqa: RUF022
    # Exceptions
    "CrystalDesignError",
    "ConfigurationError",
    "ContractDefinitionError",
    "ExtractionError",
    "TransportError",
    "ValidationError",
    # Values
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "Failure",
    "GenerationRequest",
    "Language",
    "PipelineState",
    "Result",
    "Success",
    "TaskOutcome",
    "Violation",
    "resolve_language",
]
