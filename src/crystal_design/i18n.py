"""Localized strings for diagnostics and error messages.

Only the strings produced by the library itself live here; UI string tables
belong to the application.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from crystal_design.core.types import Language, resolve_language

_MESSAGES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en": MappingProxyType(
            {
                "language_name": "English",
                "unparsable_response": (
                    "Sorry, the AI service returned a response that could not be "
                    "parsed. Here is the raw text from the service:"
                ),
                "unexpected_structure": (
                    "Sorry, the AI service returned a data structure that did not "
                    "match expectations. Details:"
                ),
                "violation_line": "- {path}: expected {expected}, found {found}",
                "transport_failure": "Failed to call {service}: {detail}",
                "unknown_error": "An unknown error occurred",
                "service.design_suggestions": "design suggestion service",
                "service.user_profile": "user profile analysis service",
                "service.inspiration_analysis": "inspiration analysis service",
                "service.energy_image_analysis": "energy analysis service",
                "service.text_generation": "text generation service",
                "service.default": "AI service",
            }
        ),
        "zh": MappingProxyType(
            {
                "language_name": "Chinese",
                "unparsable_response": "抱歉，AI返回的数据格式不正确，无法解析。这是AI返回的原始文本：",
                "unexpected_structure": "抱歉，AI返回的数据结构不符合预期。详情：",
                "violation_line": "- {path}：期望 {expected}，实际为 {found}",
                "transport_failure": "调用{service}失败: {detail}",
                "unknown_error": "未知错误",
                "service.design_suggestions": "设计建议服务",
                "service.user_profile": "用户画像分析服务",
                "service.inspiration_analysis": "灵感分析服务",
                "service.energy_image_analysis": "能量分析服务",
                "service.text_generation": "文本生成服务",
                "service.default": "AI服务",
            }
        ),
    }
)


def message(key: str, language: Language | str | None = None, **fields: object) -> str:
    """Look up ``key`` in the table for ``language`` and format it.

    Unknown languages fall back to English; unknown keys raise ``KeyError``.
    """
    table = _MESSAGES[resolve_language(language)]
    template = table[key]
    return template.format(**fields) if fields else template
