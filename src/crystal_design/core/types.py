"""Core data types that flow through the pipeline.

Each invocation creates these values fresh and discards them once the caller
has consumed the result. All of them are immutable.
"""

from __future__ import annotations

import dataclasses
import enum
import typing

from crystal_design.core.exceptions import CrystalDesignError

# --- Minimal guard helpers ---


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


# --- Result Monad ---
# Data-shape problems travel through the pipeline as values; only transport
# failures are raised.

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A successful result in the pipeline."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TFailure]):
    """A failure in the pipeline, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]

# --- Language handling ---

Language = typing.Literal["en", "zh"]
SUPPORTED_LANGUAGES: tuple[Language, ...] = ("en", "zh")
DEFAULT_LANGUAGE: Language = "en"


def resolve_language(tag: str | None) -> Language:
    """Return a supported language tag, defaulting to English.

    Unrecognized or absent tags resolve to ``"en"``; matching is
    case-insensitive and ignores surrounding whitespace.
    """
    if isinstance(tag, str):
        normalized = tag.strip().lower()
        if normalized == "zh":
            return "zh"
    return DEFAULT_LANGUAGE


# --- Pipeline values ---


@dataclasses.dataclass(frozen=True, slots=True)
class GenerationRequest:
    """One call to the generation service.

    Built fresh per task invocation; nothing is shared between calls.
    """

    system_prompt: str
    user_prompt: str
    model: str
    temperature: float
    max_tokens: int

    def __post_init__(self) -> None:
        """Validate request invariants."""
        _require(
            condition=isinstance(self.system_prompt, str),
            message="must be str",
            field_name="system_prompt",
            exc=TypeError,
        )
        _require(
            condition=isinstance(self.user_prompt, str)
            and self.user_prompt.strip() != "",
            message="must be a non-empty str",
            field_name="user_prompt",
        )
        _require(
            condition=isinstance(self.model, str) and self.model.strip() != "",
            message="must be a non-empty model identifier",
            field_name="model",
        )
        _require(
            condition=isinstance(self.temperature, int | float)
            and not isinstance(self.temperature, bool)
            and 0.0 <= self.temperature <= 1.0,
            message=f"must be numeric within [0.0, 1.0], got {self.temperature!r}",
            field_name="temperature",
        )
        _require(
            condition=isinstance(self.max_tokens, int)
            and not isinstance(self.max_tokens, bool)
            and self.max_tokens > 0,
            message=f"must be a positive int, got {self.max_tokens!r}",
            field_name="max_tokens",
        )

    def to_payload(self) -> dict[str, typing.Any]:
        """Render the outbound shape handed to the generation client."""
        return {
            "system": self.system_prompt,
            "prompt": self.user_prompt,
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class Violation:
    """A single contract violation found during validation."""

    path: str
    expected: str
    found: str

    def render(self) -> str:
        """Human-readable one-line form used in diagnostics."""
        return f"{self.path or '<root>'}: expected {self.expected}, found {self.found}"


class PipelineState(enum.StrEnum):
    """States visited by one pipeline invocation."""

    COMPILING = "compiling"
    AWAITING_RESPONSE = "awaiting_response"
    EXTRACTING = "extracting"
    VALIDATING = "validating"
    NORMALIZING = "normalizing"
    EXTRACTION_FAILED = "extraction_failed"
    VALIDATION_FAILED = "validation_failed"
    TRANSPORT_FAILED = "transport_failed"
    DONE = "done"
    FAILED = "failed"


@dataclasses.dataclass(frozen=True, slots=True)
class TaskOutcome:
    """What one task invocation produced.

    ``record`` always has the Contract's shape. ``error`` is set when the
    record is a locally synthesized fallback.
    """

    record: dict[str, typing.Any]
    states: tuple[PipelineState, ...]
    error: CrystalDesignError | None = None

    @property
    def is_fallback(self) -> bool:
        """True when the record was synthesized instead of parsed."""
        return self.error is not None

    @property
    def failure_state(self) -> PipelineState | None:
        """The failure state that diverted to the fallback, if any."""
        for state in self.states:
            if state in (
                PipelineState.EXTRACTION_FAILED,
                PipelineState.VALIDATION_FAILED,
            ):
                return state
        return None
