"""Prompt compilation for contract-driven tasks."""

from .compiler import PromptBundle, compile_prompts, render_context

__all__ = [
    "PromptBundle",
    "compile_prompts",
    "render_context",
]
