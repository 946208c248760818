"""Typed input records for the AI-backed tasks.

Each record validates the caller's input with pydantic and knows how to
present itself to the model through `prompt_context()`, an ordered
``label -> value`` mapping rendered into the user prompt. Field names are
snake_case; the camelCase names used by the web client are accepted as
aliases.
"""

from __future__ import annotations

import json
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

IMAGE_PREVIEW_CHARS = 100

# Prompt placeholders are English regardless of the requested language.
NOT_SPECIFIED = "Not specified"
SKIPPED = "Skipped"

Score = Annotated[float, Field(ge=1, le=5)]
MbtiAnswer = Literal["A", "B"]
AnalysisType = Literal[
    "energyField", "crystalIdentification", "chakraAssociation", "environmentalEnergy"
]


class _InputModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _or_default(value: object) -> str:
    if value is None or value == "":
        return NOT_SPECIFIED
    return str(value)


def _as_json(model: BaseModel | None) -> str:
    if model is None:
        return SKIPPED
    return json.dumps(
        model.model_dump(by_alias=True, exclude_none=True), ensure_ascii=False
    )


# --- Design suggestions ---------------------------------------------------


class CompositionalAesthetics(_InputModel):
    """Arrangement and visual composition of the piece."""

    style: str | None = None
    overall_structure: str | None = None
    beadwork_density: str | None = None
    focal_point: str | None = None


class ColorSystem(_InputModel):
    """Overall palette, harmony and color transitions."""

    main_hue: str | None = None
    color_harmony: str | None = None
    color_progression: str | None = None


class DesignSuggestionsInput(_InputModel):
    """Design preferences collected by the creative workshop form."""

    design_category: str
    overall_design_style: str
    main_stones: str
    compositional_aesthetics: CompositionalAesthetics = Field(
        default_factory=CompositionalAesthetics
    )
    color_system: ColorSystem = Field(default_factory=ColorSystem)
    image_style: str | None = None
    accessories: str | None = None
    photography_settings: str | None = None
    user_intent: str | None = None
    language: str | None = None

    def prompt_context(self) -> dict[str, str]:
        aesthetics = self.compositional_aesthetics
        colors = self.color_system
        context = {
            "Design Category": self.design_category,
            "Overall Design Style": self.overall_design_style,
        }
        if self.image_style:
            context["Artistic Image Style for Preview"] = self.image_style
        context |= {
            "Main Stones": self.main_stones,
            "Arrangement Style": _or_default(aesthetics.style),
            "Overall Structure": _or_default(aesthetics.overall_structure),
            "Beadwork Density": _or_default(aesthetics.beadwork_density),
            "Focal Point": _or_default(aesthetics.focal_point),
            "Main Hue": _or_default(colors.main_hue),
            "Color Harmony": _or_default(colors.color_harmony),
            "Color Progression": _or_default(colors.color_progression),
            "Accessories": _or_default(self.accessories),
            "Photography Settings": _or_default(self.photography_settings),
        }
        if self.user_intent:
            context["User Intent"] = self.user_intent
        return context


# --- Questionnaire --------------------------------------------------------


class BasicInfo(_InputModel):
    name: str
    birth_date: str
    gender: Literal["male", "female", "other", "prefer_not_to_say"]


class MbtiAnswers(_InputModel):
    """Raw answers per MBTI dimension; up to seven per dimension, may be partial."""

    ei_answers: list[MbtiAnswer | None] = Field(default_factory=list, max_length=7)
    sn_answers: list[MbtiAnswer | None] = Field(default_factory=list, max_length=7)
    tf_answers: list[MbtiAnswer | None] = Field(default_factory=list, max_length=7)
    jp_answers: list[MbtiAnswer | None] = Field(default_factory=list, max_length=7)


class ChakraAssessment(_InputModel):
    """Average score (1-5) per chakra."""

    root_chakra_focus: Score
    sacral_chakra_focus: Score
    solar_plexus_chakra_focus: Score
    heart_chakra_focus: Score
    throat_chakra_focus: Score
    third_eye_chakra_focus: Score
    crown_chakra_focus: Score


class LifestylePreferences(_InputModel):
    color_preferences: list[str] = Field(default_factory=list)
    activity_preferences: list[str] = Field(default_factory=list)
    healing_goals: list[str] = Field(default_factory=list)


class CurrentStatus(_InputModel):
    stress_level: Score
    energy_level: Score
    emotional_state: str | None = None


class QuestionnaireInput(_InputModel):
    """The full personalized questionnaire."""

    basic_info: BasicInfo
    lifestyle_preferences: LifestylePreferences
    current_status: CurrentStatus
    mbti_answers: MbtiAnswers | None = None
    calculated_mbti_type: str | None = None
    chakra_assessment: ChakraAssessment | None = None
    language: str | None = None

    def prompt_context(self) -> dict[str, str]:
        info = self.basic_info
        return {
            "Name": _or_default(info.name),
            "Birth Date": _or_default(info.birth_date),
            "Gender": info.gender,
            "MBTI-like Answers": _as_json(self.mbti_answers),
            "Calculated MBTI Type": _or_default(self.calculated_mbti_type),
            "Chakra Assessment": _as_json(self.chakra_assessment),
            "Lifestyle Preferences": _as_json(self.lifestyle_preferences),
            "Current Status": _as_json(self.current_status),
        }


# --- Images ---------------------------------------------------------------


def _image_preview(photo_data_uri: str) -> str:
    return f"{photo_data_uri[:IMAGE_PREVIEW_CHARS]}... (base64 encoded image data)"


class InspirationImageInput(_InputModel):
    """An inspiration photo as a ``data:<mime>;base64,<data>`` URI."""

    photo_data_uri: str = Field(min_length=1)
    language: str | None = None

    def prompt_context(self) -> dict[str, str]:
        return {"Image Data": _image_preview(self.photo_data_uri)}


class EnergyImageInput(_InputModel):
    """A photo to analyze plus the kind of energy analysis wanted."""

    photo_data_uri: str = Field(min_length=1)
    analysis_type: AnalysisType
    language: str | None = None

    def prompt_context(self) -> dict[str, str]:
        return {
            "Image Data": _image_preview(self.photo_data_uri),
            "Analysis Type": self.analysis_type,
        }
