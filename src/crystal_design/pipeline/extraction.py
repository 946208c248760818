"""Locate and parse the JSON object inside a raw model reply.

Text-completion services have no native structured-output mode, so replies
arrive as prose around (hopefully) one JSON object, sometimes inside a
markdown fence. Extraction tries, in order:

1. Balanced-brace candidates found by a string- and escape-aware scanner,
   in order of appearance. The first one that parses wins.
2. The span from the first ``{`` to the last ``}``.

The parsed value is returned untyped; the Contract decides whether it is
acceptable.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from crystal_design.core.exceptions import ExtractionError
from crystal_design.core.types import Failure, Result, Success

log = logging.getLogger(__name__)

_PREVIEW_CHARS = 200


def find_json_candidates(text: str) -> list[str]:
    """Return balanced ``{...}`` substrings in order of appearance.

    Braces inside JSON string literals are ignored. An opening brace that is
    never closed is skipped and scanning resumes at the next character.
    """
    candidates: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        if text[i] == "{":
            depth = 0
            in_string = False
            escape_next = False
            j = i
            while j < n:
                char = text[j]
                if escape_next:
                    escape_next = False
                elif char == "\\":
                    escape_next = in_string
                elif char == '"':
                    in_string = not in_string
                elif not in_string:
                    if char == "{":
                        depth += 1
                    elif char == "}":
                        depth -= 1
                        if depth == 0:
                            candidates.append(text[i : j + 1])
                            i = j
                            break
                j += 1
        i += 1

    return candidates


def naive_span(text: str) -> str | None:
    """The substring from the first ``{`` to the last ``}``, inclusive."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def extract_json(raw: str) -> Result[Any, ExtractionError]:
    """Extract the first parseable JSON object from ``raw``.

    Returns:
        `Success` with the parsed value, or `Failure` carrying an
        `ExtractionError` that keeps the original text.
    """
    if not isinstance(raw, str):
        raw = "" if raw is None else str(raw)

    span = naive_span(raw)
    if span is None:
        log.warning("No JSON object delimiters in response: %r", raw[:_PREVIEW_CHARS])
        return Failure(ExtractionError(raw, "no JSON object found"))

    for candidate in find_json_candidates(raw):
        try:
            value = json.loads(candidate)
        except (json.JSONDecodeError, RecursionError):
            continue
        log.debug("Extracted balanced JSON object (%d chars).", len(candidate))
        return Success(value)

    try:
        value = json.loads(span)
    except json.JSONDecodeError as e:
        log.warning(
            "Failed to decode JSON from response (%s): %r", e, raw[:_PREVIEW_CHARS]
        )
        return Failure(ExtractionError(raw, f"invalid JSON: {e.msg}"))
    except RecursionError:
        log.warning("JSON in response is nested too deeply: %r", raw[:_PREVIEW_CHARS])
        return Failure(ExtractionError(raw, "invalid JSON: nesting too deep"))

    log.debug("Extracted JSON via first/last brace span (%d chars).", len(span))
    return Success(value)
