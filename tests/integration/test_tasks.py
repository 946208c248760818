"""Integration tests for the public task entry points."""

import json

import pydantic
import pytest

from crystal_design import (
    DESIGN_SUGGESTIONS,
    ENERGY_IMAGE_ANALYSIS,
    INSPIRATION_ANALYSIS,
    USER_PROFILE,
    analyze_energy_image,
    analyze_inspiration_image,
    analyze_user_profile,
    generate_text,
    suggest_designs,
)
from crystal_design.client import ScriptedGenerationClient
from crystal_design.contracts.inputs import DesignSuggestionsInput, QuestionnaireInput
from crystal_design.core.exceptions import TransportError
from crystal_design.core.types import Success
from crystal_design.i18n import message

DESIGN_INPUT = {
    "designCategory": "bracelet",
    "overallDesignStyle": "minimalist",
    "mainStones": "Rose Quartz (Shape: Round, Clarity: Transparent)",
    "compositionalAesthetics": {"style": "symmetrical"},
    "colorSystem": {"mainHue": "warm tones"},
    "userIntent": "personal talisman",
}

QUESTIONNAIRE = {
    "basicInfo": {"name": "Lin", "birthDate": "1990-04-12", "gender": "other"},
    "mbtiAnswers": {"eiAnswers": ["A", "B", "A"]},
    "chakraAssessment": {
        "rootChakraFocus": 3,
        "sacralChakraFocus": 2.5,
        "solarPlexusChakraFocus": 4,
        "heartChakraFocus": 5,
        "throatChakraFocus": 1,
        "thirdEyeChakraFocus": 3,
        "crownChakraFocus": 2,
    },
    "lifestylePreferences": {
        "colorPreferences": ["color_red"],
        "activityPreferences": ["activity_meditation"],
        "healingGoals": ["goal_stress_relief"],
    },
    "currentStatus": {"stressLevel": 4, "energyLevel": 2},
}

PHOTO = "data:image/png;base64," + "iVBORw0KGgo" * 40

DESIGN_REPLY = {
    "designConcept": "  Soft light and balance.  ",
    "designSchemes": [
        {"schemeTitle": " Scheme 1: Lunar Glow ", "mainStoneDescription": "Rose quartz"}
    ],
    "accessorySuggestions": "- Silver clasp",
    "photographySettingSuggestions": "- Linen background",
    "extraneous": "dropped",
}


class TestSuggestDesigns:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_valid_reply(self, frozen_config):
        client = ScriptedGenerationClient(
            [f"Here is your design:\n```json\n{json.dumps(DESIGN_REPLY)}\n```"]
        )

        record = await suggest_designs(DESIGN_INPUT, client=client, config=frozen_config)

        assert record["designConcept"] == "Soft light and balance."
        assert record["designSchemes"][0]["schemeTitle"] == "Scheme 1: Lunar Glow"
        assert record["designSchemes"][0]["otherDetails"] == ""
        assert "extraneous" not in record
        request = client.requests[0]
        assert request.temperature == 0.75
        assert request.max_tokens == 3000
        assert "- User Intent: personal talisman" in request.user_prompt
        assert "- Beadwork Density: Not specified" in request.user_prompt

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_too_many_schemes_falls_back(self, frozen_config):
        reply = dict(DESIGN_REPLY, designSchemes=DESIGN_REPLY["designSchemes"] * 4)
        client = ScriptedGenerationClient([json.dumps(reply)])

        record = await suggest_designs(
            DESIGN_INPUT | {"language": "zh"}, client=client, config=frozen_config
        )

        assert record["designConcept"].startswith(message("unexpected_structure", "zh"))
        assert "designSchemes" in record["designConcept"]
        assert isinstance(DESIGN_SUGGESTIONS.validate(record), Success)

    @pytest.mark.integration
    @pytest.mark.asyncio
    @pytest.mark.parametrize("language", ["fr", "EN", ""])
    async def test_unrecognized_language_falls_back_to_english(
        self, frozen_config, language
    ):
        client = ScriptedGenerationClient(["nothing"])

        record = await suggest_designs(
            DESIGN_INPUT | {"language": language}, client=client, config=frozen_config
        )

        assert record["designConcept"].startswith(message("unparsable_response", "en"))
        assert "English (en)" in client.requests[0].system_prompt

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_offline_default_client_yields_fallback(self):
        record = await suggest_designs(DesignSuggestionsInput.model_validate(DESIGN_INPUT))

        assert record["designConcept"].startswith(message("unexpected_structure", "en"))
        assert len(record["designSchemes"]) == 1

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_transport_error_message(self, frozen_config):
        client = ScriptedGenerationClient([TransportError("Network error: refused")])

        with pytest.raises(
            TransportError,
            match="^Failed to call design suggestion service: Network error: refused$",
        ):
            await suggest_designs(DESIGN_INPUT, client=client, config=frozen_config)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_input_is_rejected_before_any_call(self, frozen_config):
        client = ScriptedGenerationClient()

        with pytest.raises(pydantic.ValidationError):
            await suggest_designs({"designCategory": "ring"}, client=client, config=frozen_config)

        assert client.requests == []


class TestAnalyzeUserProfile:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_fallback_keeps_name(self, frozen_config):
        client = ScriptedGenerationClient(["The stars are unclear today."])

        record = await analyze_user_profile(
            QUESTIONNAIRE, client=client, config=frozen_config
        )

        assert record["name"] == "Lin"
        assert "The stars are unclear today." in record["coreEnergyInsights"]
        assert isinstance(USER_PROFILE.validate(record), Success)

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_prompt_serializes_questionnaire(self, frozen_config):
        client = ScriptedGenerationClient(["{}"])

        await analyze_user_profile(QUESTIONNAIRE, client=client, config=frozen_config)

        request = client.requests[0]
        assert request.max_tokens == 3500
        assert "- Name: Lin" in request.user_prompt
        assert "- Calculated MBTI Type: Not specified" in request.user_prompt
        assert '"heartChakraFocus": 5' in request.user_prompt

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_valid_profile_with_recommendations(self, frozen_config):
        reply = {
            "coreEnergyInsights": "Grounded.",
            "inferredZodiac": "Aries",
            "inferredChineseZodiac": "Horse",
            "inferredElement": "Fire",
            "inferredPlanet": "Mars",
            "mbtiLikeType": "Reflective",
            "chakraAnalysis": "Heart-led.",
            "recommendedCrystals": [
                {
                    "name": " Amethyst ",
                    "reasoningDetails": {
                        "personalityFit": "a",
                        "chakraSupport": "b",
                        "goalAlignment": "c",
                        "holisticSynergy": "d",
                    },
                    "matchScore": 92,
                }
            ],
            "crystalCombinations": [
                {"combination": ["Amethyst", " ", "Citrine"], "synergyEffect": "Calm."}
            ],
        }
        client = ScriptedGenerationClient([json.dumps(reply)])

        record = await analyze_user_profile(
            QUESTIONNAIRE, client=client, config=frozen_config
        )

        assert record["name"] == ""
        assert record["recommendedCrystals"][0]["name"] == "Amethyst"
        assert record["recommendedCrystals"][0]["matchScore"] == 92
        assert record["crystalCombinations"][0]["combination"] == ["Amethyst", "Citrine"]

    @pytest.mark.unit
    def test_chakra_scores_are_bounded(self):
        bad = json.loads(json.dumps(QUESTIONNAIRE))
        bad["chakraAssessment"]["rootChakraFocus"] = 6

        with pytest.raises(pydantic.ValidationError):
            QuestionnaireInput.model_validate(bad)


class TestImageAnalyses:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_inspiration_valid_reply(self, frozen_config):
        reply = {
            "designRecommendations": {
                "overallTheme": " Earthy Bohemian ",
                "keyElementsAndShapes": ["Leaf motifs", ""],
                "textureAndPatternIdeas": [" Rough surfaces "],
            },
            "colorPalette": ["#8B5A2B", ""],
        }
        client = ScriptedGenerationClient([json.dumps(reply)])

        record = await analyze_inspiration_image(
            {"photoDataUri": PHOTO}, client=client, config=frozen_config
        )

        assert record == {
            "designRecommendations": {
                "overallTheme": "Earthy Bohemian",
                "keyElementsAndShapes": ["Leaf motifs"],
                "textureAndPatternIdeas": ["Rough surfaces"],
                "potentialMaterials": [],
                "narrativeOrSymbolism": "",
            },
            "colorPalette": ["#8B5A2B"],
        }
        request = client.requests[0]
        assert (request.temperature, request.max_tokens) == (0.7, 2000)
        assert PHOTO not in request.user_prompt

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_inspiration_fallback_uses_nested_primary(self, frozen_config):
        client = ScriptedGenerationClient(["no idea"])

        record = await analyze_inspiration_image(
            {"photoDataUri": PHOTO, "language": "zh"},
            client=client,
            config=frozen_config,
        )

        theme = record["designRecommendations"]["overallTheme"]
        assert theme.startswith(message("unparsable_response", "zh"))
        assert isinstance(INSPIRATION_ANALYSIS.validate(record), Success)

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_energy_fallback_keeps_requested_analysis_type(self, frozen_config):
        client = ScriptedGenerationClient(['{"analysisType": "auraReading"}'])

        record = await analyze_energy_image(
            {"photoDataUri": PHOTO, "analysisType": "chakraAssociation"},
            client=client,
            config=frozen_config,
        )

        assert record["analysisType"] == "chakraAssociation"
        assert "analysisType" in record["summary"]
        assert "auraReading" in record["summary"]
        assert record["associatedChakras"] == []
        assert isinstance(ENERGY_IMAGE_ANALYSIS.validate(record), Success)

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_energy_transport_error_in_chinese(self, frozen_config):
        client = ScriptedGenerationClient([TransportError("timeout")])

        with pytest.raises(TransportError, match="^调用能量分析服务失败: timeout$"):
            await analyze_energy_image(
                {
                    "photoDataUri": PHOTO,
                    "analysisType": "energyField",
                    "language": "zh",
                },
                client=client,
                config=frozen_config,
            )


class TestGenerateText:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_returns_content_and_model(self, frozen_config):
        client = ScriptedGenerationClient(["A poem about quartz."])

        result = await generate_text(
            "Write a poem", system="Be brief.", client=client, config=frozen_config
        )

        assert result == {"content": "A poem about quartz.", "model": "openai"}
        request = client.requests[0]
        assert (request.temperature, request.max_tokens) == (0.7, 1000)
        assert request.system_prompt == "Be brief."

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_model_override(self, frozen_config):
        client = ScriptedGenerationClient(["ok"])

        result = await generate_text(
            "hi", model="mistral", client=client, config=frozen_config
        )

        assert result["model"] == "mistral"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_transport_error_is_localized(self, frozen_config):
        client = ScriptedGenerationClient([TransportError("HTTP error! status: 502")])

        with pytest.raises(TransportError, match="^调用文本生成服务失败"):
            await generate_text(
                "hi", language="zh", client=client, config=frozen_config
            )

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_empty_prompt_is_rejected(self, frozen_config):
        with pytest.raises(ValueError):
            await generate_text(" ", client=ScriptedGenerationClient(), config=frozen_config)
