"""Unit tests for contract-driven normalization."""

import pytest

from crystal_design.contracts.tasks import (
    DESIGN_SUGGESTIONS,
    ENERGY_IMAGE_ANALYSIS,
    INSPIRATION_ANALYSIS,
)
from crystal_design.pipeline.normalization import normalize
from tests.helpers import NESTED_CONTRACT, SUMMARY_CONTRACT


@pytest.mark.unit
def test_strings_are_trimmed_and_blank_list_entries_dropped():
    record = {"summary": " Hello ", "colorPalette": ["#fff", "", "  ", " #000 "]}

    assert normalize(SUMMARY_CONTRACT, record) == {
        "summary": "Hello",
        "colorPalette": ["#fff", "#000"],
    }


@pytest.mark.unit
def test_absent_fields_get_empty_values():
    assert normalize(SUMMARY_CONTRACT, {}) == {"summary": "", "colorPalette": []}


@pytest.mark.unit
def test_nested_records_and_optional_numbers():
    record = {
        "kind": "beta",
        "report": {"headline": "  Top  "},
        "items": [{"label": " a ", "weight": 0.5}, {"label": "b"}],
    }

    assert normalize(NESTED_CONTRACT, record) == {
        "kind": "beta",
        "report": {"headline": "Top", "notes": ""},
        "items": [{"label": "a", "weight": 0.5}, {"label": "b"}],
        "tags": [],
    }


@pytest.mark.unit
def test_unknown_keys_are_not_copied():
    record = {"summary": "x", "colorPalette": [], "extra": "dropped"}

    assert "extra" not in normalize(SUMMARY_CONTRACT, record)


@pytest.mark.unit
def test_input_is_not_mutated():
    record = {"summary": " x ", "colorPalette": [" a "]}

    normalize(SUMMARY_CONTRACT, record)

    assert record == {"summary": " x ", "colorPalette": [" a "]}


@pytest.mark.unit
def test_design_scheme_optionals_become_empty_strings():
    record = {
        "designConcept": " Concept ",
        "designSchemes": [{"schemeTitle": " One ", "mainStoneDescription": "Quartz"}],
        "accessorySuggestions": "- clasp",
        "photographySettingSuggestions": "soft light\n\n",
    }

    result = normalize(DESIGN_SUGGESTIONS, record)

    assert result["designConcept"] == "Concept"
    assert result["personalizedIntroduction"] == ""
    assert result["concludingRemarks"] == ""
    assert result["photographySettingSuggestions"] == "soft light"
    assert result["designSchemes"] == [
        {
            "schemeTitle": "One",
            "mainStoneDescription": "Quartz",
            "auxiliaryStonesDescription": "",
            "chainOrStructureDescription": "",
            "otherDetails": "",
        }
    ]


@pytest.mark.contract
@pytest.mark.parametrize(
    ("contract", "record"),
    [
        (SUMMARY_CONTRACT, {"summary": "  a\n\nb  ", "colorPalette": ["", " #abc "]}),
        (
            INSPIRATION_ANALYSIS,
            {
                "designRecommendations": {
                    "overallTheme": " Vintage ",
                    "keyElementsAndShapes": [" lines ", ""],
                    "textureAndPatternIdeas": [],
                },
                "colorPalette": ["#111111", " "],
            },
        ),
        (
            ENERGY_IMAGE_ANALYSIS,
            {
                "analysisType": "crystalIdentification",
                "summary": " found two ",
                "identifiedCrystals": [
                    {"name": " Amethyst ", "confidence": 80},
                    {"name": "Citrine", "details": "  warm "},
                ],
            },
        ),
    ],
)
def test_normalize_is_idempotent(contract, record):
    once = normalize(contract, record)

    assert normalize(contract, once) == once
