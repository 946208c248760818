"""Fallback records for unusable model output.

When extraction or validation fails the caller still receives a value of the
Contract's shape. Every field holds its empty default except the primary
narrative field, which carries a localized diagnostic.
"""

from __future__ import annotations

from collections.abc import Mapping
import copy
import logging
from typing import Any

from crystal_design.contracts.fields import Contract
from crystal_design.core.exceptions import ExtractionError, ValidationError
from crystal_design.core.types import Language, Violation
from crystal_design.i18n import message
from crystal_design.pipeline.normalization import normalize

log = logging.getLogger(__name__)


def render_violations(
    violations: tuple[Violation, ...], language: Language | str | None = None
) -> str:
    """One localized line per violation."""
    return "\n".join(
        message(
            "violation_line",
            language,
            path=v.path or "<root>",
            expected=v.expected,
            found=v.found,
        )
        for v in violations
    )


def diagnostic_for(
    error: ExtractionError | ValidationError, language: Language | str | None = None
) -> str:
    """Build the diagnostic text written into the primary narrative field."""
    if isinstance(error, ExtractionError):
        return f"{message('unparsable_response', language)}\n\n{error.raw}"
    if isinstance(error, ValidationError):
        details = render_violations(error.violations, language)
        return f"{message('unexpected_structure', language)}\n{details}"
    raise TypeError(
        f"Fallback records are only built for extraction or validation errors, "
        f"got {type(error).__name__}"
    )


def synthesize_fallback(
    contract: Contract,
    error: ExtractionError | ValidationError,
    *,
    language: Language | str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a Contract-conformant record that explains what went wrong.

    Args:
        contract: Task contract; must declare a primary narrative field.
        error: The extraction or validation failure being reported.
        language: Diagnostic language; unknown tags fall back to English.
        overrides: Top-level field values to keep from the caller's input
            (for example the requested analysis type). They are written
            before the diagnostic, so they cannot replace it.

    Raises:
        TypeError: If ``error`` is neither an extraction nor a validation
            error. Transport failures never reach this function.
    """
    diagnostic = diagnostic_for(error, language)
    record = normalize(contract, contract.empty_default())
    for name, value in (overrides or {}).items():
        if name in contract.fields:
            record[name] = copy.deepcopy(value)
        else:
            log.debug("Ignoring fallback override for unknown field %r", name)

    *parents, leaf = contract.primary_path
    target = record
    for part in parents:
        target = target[part]
    # Written after normalization so the raw response stays verbatim.
    target[leaf] = diagnostic
    return record
