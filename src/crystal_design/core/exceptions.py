"""Exception hierarchy for the structured-output pipeline.

Only `TransportError` is meant to reach callers of a task. `ExtractionError`
and `ValidationError` describe data-shape problems; the pipeline carries them
as `Failure` values and turns them into fallback records.
"""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from crystal_design.core.types import Violation


class CrystalDesignError(Exception):
    """Base exception for all crystal_design errors."""


class ConfigurationError(CrystalDesignError):
    """Raised when configuration values are missing or invalid."""


class ContractDefinitionError(CrystalDesignError):
    """Raised when a Contract is declared in an inconsistent way."""


class TransportError(CrystalDesignError):
    """Raised when the generation service cannot be reached or refuses a call.

    Covers network failures, non-success HTTP statuses and timeouts. The
    pipeline never absorbs this error.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExtractionError(CrystalDesignError):
    """No parseable JSON object could be located in a raw response."""

    def __init__(self, raw: str, reason: str = "no JSON object found") -> None:
        super().__init__(f"Could not extract JSON from response: {reason}")
        self.raw = raw
        self.reason = reason


class ValidationError(CrystalDesignError):
    """A parsed response does not match its Contract.

    Carries every violation found, not just the first one.
    """

    def __init__(self, violations: typing.Sequence[Violation]) -> None:
        self.violations: tuple[Violation, ...] = tuple(violations)
        summary = "; ".join(v.render() for v in self.violations[:3])
        more = len(self.violations) - 3
        if more > 0:
            summary = f"{summary}; ... ({more} more)"
        super().__init__(
            f"Response does not match contract ({len(self.violations)} "
            f"violation(s)): {summary}"
        )
