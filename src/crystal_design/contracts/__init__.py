"""Output contracts and typed task inputs."""

from .fields import ArrayOf, Contract, FieldSpec, ObjectField, OptionalScalar, Scalar
from .inputs import (
    BasicInfo,
    ChakraAssessment,
    ColorSystem,
    CompositionalAesthetics,
    CurrentStatus,
    DesignSuggestionsInput,
    EnergyImageInput,
    InspirationImageInput,
    LifestylePreferences,
    MbtiAnswers,
    QuestionnaireInput,
)
from .tasks import (
    ANALYSIS_TYPES,
    DESIGN_SUGGESTIONS,
    ENERGY_IMAGE_ANALYSIS,
    INSPIRATION_ANALYSIS,
    USER_PROFILE,
)

__all__ = [
    "ANALYSIS_TYPES",
    "DESIGN_SUGGESTIONS",
    "ENERGY_IMAGE_ANALYSIS",
    "INSPIRATION_ANALYSIS",
    "USER_PROFILE",
    "ArrayOf",
    "BasicInfo",
    "ChakraAssessment",
    "ColorSystem",
    "CompositionalAesthetics",
    "Contract",
    "CurrentStatus",
    "DesignSuggestionsInput",
    "EnergyImageInput",
    "FieldSpec",
    "InspirationImageInput",
    "LifestylePreferences",
    "MbtiAnswers",
    "ObjectField",
    "OptionalScalar",
    "QuestionnaireInput",
    "Scalar",
]
