"""Compile a Contract and task input into system and user prompts.

Pure and deterministic: identical inputs give identical prompts. The schema
document from `Contract.describe_json()` is embedded verbatim so the model
sees exactly the shape the validator will enforce.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses

from crystal_design.contracts.fields import Contract
from crystal_design.core.types import Language, _require, resolve_language
from crystal_design.i18n import message

PARAGRAPH_INSTRUCTION = (
    "**Important Formatting Instruction:** In every string field, separate "
    'paragraphs with a literal double newline ("\\n\\n"). For list-like '
    "content inside a string field, put each item on its own line starting "
    'with a hyphen and a space (e.g., "- item").'
)

JSON_INSTRUCTION = (
    "Your response MUST be a single, valid JSON object that strictly adheres "
    "to the following JSON Schema. Do not include any other text outside the "
    "JSON object."
)


@dataclasses.dataclass(frozen=True, slots=True)
class PromptBundle:
    """The system and user prompts for one generation request."""

    system: str
    user: str
    language: Language = "en"

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.system, str) and self.system.strip() != "",
            message="must be a non-empty str",
            field_name="system",
        )
        _require(
            condition=isinstance(self.user, str) and self.user.strip() != "",
            message="must be a non-empty str",
            field_name="user",
        )


def render_context(context: Mapping[str, object]) -> str:
    """Render ``label -> value`` pairs as hyphen-prefixed lines, in order."""
    return "\n".join(f"- {label}: {value}" for label, value in context.items())


def compile_system_prompt(contract: Contract, role: str, language: Language) -> str:
    """Role, language, formatting rules, then the schema document."""
    language_name = message("language_name", language)
    return "\n".join(
        [
            role.strip(),
            f"Please provide your response in {language_name} ({language}).",
            "",
            PARAGRAPH_INSTRUCTION,
            "",
            JSON_INSTRUCTION,
            contract.describe_json(),
        ]
    )


def compile_user_prompt(
    task: str, context: Mapping[str, object], language: Language
) -> str:
    """Task statement followed by the serialized task input."""
    language_name = message("language_name", language)
    parts = [
        f"{task.strip()} Ensure the entire response is a single JSON object "
        f"and all text is in {language_name}.",
    ]
    if context:
        parts.extend(["", "Input:", render_context(context)])
    return "\n".join(parts)


def compile_prompts(
    contract: Contract,
    *,
    context: Mapping[str, object],
    role: str,
    task: str,
    language: str | None = None,
) -> PromptBundle:
    """Build the prompts for one task invocation.

    Args:
        contract: Output contract whose schema document is embedded.
        context: Ordered description of the caller's input.
        role: Who the model should act as; opens the system prompt.
        task: What the model should do; opens the user prompt.
        language: ``"en"`` or ``"zh"``; anything else compiles as English.

    Returns:
        An immutable `PromptBundle`.
    """
    lang = resolve_language(language)
    return PromptBundle(
        system=compile_system_prompt(contract, role, lang),
        user=compile_user_prompt(task, context, lang),
        language=lang,
    )
