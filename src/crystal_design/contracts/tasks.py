"""Output contracts for the four AI-backed tasks."""

from .fields import ArrayOf, Contract, ObjectField, OptionalScalar, Scalar

_PARAGRAPHS = " Use \\n\\n for paragraphs."

# --- Design suggestions ---------------------------------------------------

DESIGN_SCHEME = Contract(
    name="DesignScheme",
    fields={
        "schemeTitle": Scalar(
            "string",
            "The title of this design scheme (e.g., \"Scheme 1: Lunar Glow\"). "
            "Concise; it acts as a heading for the scheme.",
        ),
        "mainStoneDescription": Scalar(
            "string",
            "Detailed description of the main stone(s) for this scheme, their "
            "role, and characteristics." + _PARAGRAPHS,
        ),
        "auxiliaryStonesDescription": OptionalScalar(
            "string",
            "Any auxiliary stones for this scheme and their purpose." + _PARAGRAPHS,
        ),
        "chainOrStructureDescription": OptionalScalar(
            "string",
            "Suggestions for the chain or overall structure of the piece."
            + _PARAGRAPHS,
        ),
        "otherDetails": OptionalScalar(
            "string",
            "Any other relevant details or unique features of this scheme."
            + _PARAGRAPHS,
        ),
    },
)

DESIGN_SUGGESTIONS = Contract(
    name="DesignSuggestionsOutput",
    fields={
        "personalizedIntroduction": OptionalScalar(
            "string",
            "A brief, personalized introductory sentence based on the user's "
            "selections." + _PARAGRAPHS,
        ),
        "designConcept": Scalar(
            "string",
            "A paragraph describing the core theme or idea behind the overall "
            "design suggestions, directly usable for display." + _PARAGRAPHS,
        ),
        "designSchemes": ArrayOf(
            ObjectField(DESIGN_SCHEME),
            "An array of 1 to 3 distinct design schemes, each a complete set of "
            "suggestions for a jewelry piece.",
            min_items=1,
            max_items=3,
        ),
        "accessorySuggestions": Scalar(
            "string",
            "General suggestions for accessories that complement the designs "
            "(e.g., metal types, clasp styles). A paragraph or a hyphen-bulleted "
            "list.",
        ),
        "photographySettingSuggestions": Scalar(
            "string",
            "General suggestions for photographing the jewelry (e.g., "
            "background, lighting, angles). A paragraph or a hyphen-bulleted "
            "list.",
        ),
        "concludingRemarks": OptionalScalar(
            "string",
            "A polite concluding sentence or brief paragraph." + _PARAGRAPHS,
        ),
    },
    primary="designConcept",
)

# --- User profile ---------------------------------------------------------

CRYSTAL_REASONING = Contract(
    name="CrystalReasoningDetails",
    fields={
        "personalityFit": Scalar(
            "string",
            "How this crystal aligns with the user's core personality traits and "
            "MBTI-like type." + _PARAGRAPHS,
        ),
        "chakraSupport": Scalar(
            "string",
            "How this crystal supports or balances the user's chakra needs."
            + _PARAGRAPHS,
        ),
        "goalAlignment": Scalar(
            "string",
            "How this crystal helps achieve the user's healing goals." + _PARAGRAPHS,
        ),
        "holisticSynergy": Scalar(
            "string",
            "The overall synergistic benefit of this crystal given the user's "
            "current status and lifestyle preferences." + _PARAGRAPHS,
        ),
    },
)

RECOMMENDED_CRYSTAL = Contract(
    name="RecommendedCrystal",
    fields={
        "name": Scalar("string", "The name of the recommended crystal."),
        "reasoningDetails": ObjectField(
            CRYSTAL_REASONING,
            "Reasoning for the recommendation, broken down by aspect.",
        ),
        "matchScore": OptionalScalar(
            "number",
            "A percentage score (0-100) for how well the crystal matches the "
            "user's profile.",
        ),
    },
)

CRYSTAL_COMBINATION = Contract(
    name="CrystalCombination",
    fields={
        "combination": ArrayOf(
            Scalar("string"),
            "Crystal names that work well together for the user.",
        ),
        "synergyEffect": Scalar(
            "string",
            "The combined energetic effect of this combination for the user."
            + _PARAGRAPHS,
        ),
    },
)

USER_PROFILE = Contract(
    name="UserProfileData",
    fields={
        "name": OptionalScalar("string", "User's name from the input, if provided."),
        "coreEnergyInsights": Scalar(
            "string",
            "A comprehensive interpretation of the user's overall energy "
            "signature: key traits, strengths and areas for growth. This is a "
            "primary display field." + _PARAGRAPHS,
        ),
        "inferredZodiac": Scalar(
            "string", "The user's Western zodiac sign, if inferable from birth date."
        ),
        "inferredChineseZodiac": Scalar(
            "string", "The user's Chinese zodiac sign, if inferable from birth date."
        ),
        "inferredElement": Scalar(
            "string",
            "The user's dominant element (e.g., Fire, Water, Air, Earth).",
        ),
        "inferredPlanet": Scalar(
            "string", "The user's inferred astrological planet(s), if determinable."
        ),
        "mbtiLikeType": Scalar(
            "string",
            "A descriptive personality type derived from the MBTI answers or "
            "calculated type; a specific message if skipped or incomplete."
            + _PARAGRAPHS,
        ),
        "chakraAnalysis": Scalar(
            "string",
            "An analysis of the user's chakra balance with brief balancing "
            "suggestions; a specific message if skipped or incomplete."
            + _PARAGRAPHS,
        ),
        "recommendedCrystals": ArrayOf(
            ObjectField(RECOMMENDED_CRYSTAL),
            "Crystals recommended for the user, with reasoning and match score.",
            optional=True,
        ),
        "crystalCombinations": ArrayOf(
            ObjectField(CRYSTAL_COMBINATION),
            "Suggested combinations of crystals beneficial for the user.",
            optional=True,
        ),
    },
    primary="coreEnergyInsights",
)

# --- Inspiration image analysis -------------------------------------------

DESIGN_RECOMMENDATIONS = Contract(
    name="DesignRecommendationDetails",
    fields={
        "overallTheme": Scalar(
            "string",
            "The overall theme, mood, or artistic style captured from the image "
            "(e.g., 'Romantic Vintage', 'Earthy Bohemian').",
        ),
        "keyElementsAndShapes": ArrayOf(
            Scalar("string"),
            "Key visual elements or dominant shapes that could inspire design "
            "components (e.g., 'Flowing lines', 'Leaf motifs').",
        ),
        "textureAndPatternIdeas": ArrayOf(
            Scalar("string"),
            "Textures or patterns from the image that translate into jewelry "
            "design (e.g., 'Intricate filigree patterns').",
        ),
        "potentialMaterials": ArrayOf(
            Scalar("string"),
            "Materials that complement the image's aesthetic (e.g., 'Brushed "
            "silver', 'Natural wood accents').",
            optional=True,
        ),
        "narrativeOrSymbolism": OptionalScalar(
            "string",
            "Any narrative or symbolism the image evokes." + _PARAGRAPHS,
        ),
    },
)

INSPIRATION_ANALYSIS = Contract(
    name="AnalyzeInspirationImageOutput",
    fields={
        "designRecommendations": ObjectField(
            DESIGN_RECOMMENDATIONS,
            "Structured design recommendations based on the analyzed image.",
        ),
        "colorPalette": ArrayOf(
            Scalar("string"),
            'Dominant hex color codes (e.g., "#RRGGBB") extracted from the image.',
        ),
    },
    primary="designRecommendations.overallTheme",
)

# --- Energy image analysis ------------------------------------------------

ANALYSIS_TYPES: tuple[str, ...] = (
    "energyField",
    "crystalIdentification",
    "chakraAssociation",
    "environmentalEnergy",
)

IDENTIFIED_CRYSTAL = Contract(
    name="IdentifiedCrystal",
    fields={
        "name": Scalar("string", "Name of the identified crystal."),
        "confidence": OptionalScalar(
            "number", "Confidence score (0-100) for the identification."
        ),
        "details": OptionalScalar(
            "string", "Additional details about the crystal in the image."
        ),
    },
)

ENERGY_DETAILS = Contract(
    name="EnergyImageAnalysisDetails",
    fields={
        "energyObservations": OptionalScalar(
            "string",
            "For 'energyField': dominant colors, patterns and perceived "
            "qualities of the energy field." + _PARAGRAPHS,
        ),
        "identificationNotes": OptionalScalar(
            "string",
            "For 'crystalIdentification': general notes about the identification."
            + _PARAGRAPHS,
        ),
        "chakraReasoning": OptionalScalar(
            "string",
            "For 'chakraAssociation': why certain chakras are associated with the "
            "image's energy." + _PARAGRAPHS,
        ),
        "environmentAssessment": OptionalScalar(
            "string",
            "For 'environmentalEnergy': assessment of the environment's energy "
            "and overall feel." + _PARAGRAPHS,
        ),
    },
)

ENERGY_IMAGE_ANALYSIS = Contract(
    name="EnergyImageAnalysisOutput",
    fields={
        "analysisType": Scalar(
            "enum", "The type of analysis that was performed.", ANALYSIS_TYPES
        ),
        "summary": Scalar(
            "string", "A general summary of the analysis findings." + _PARAGRAPHS
        ),
        "details": ObjectField(
            ENERGY_DETAILS,
            "Details structured by analysis type; only the field relevant to "
            "'analysisType' should be populated.",
            optional=True,
        ),
        "identifiedCrystals": ArrayOf(
            ObjectField(IDENTIFIED_CRYSTAL),
            "Crystals identified in the image (for 'crystalIdentification').",
            optional=True,
        ),
        "associatedChakras": ArrayOf(
            Scalar("string"),
            "Chakras associated with the image's energy (for 'chakraAssociation').",
            optional=True,
        ),
        "colorPalette": ArrayOf(
            Scalar("string"),
            "Dominant hex color codes extracted from the image, if relevant.",
            optional=True,
        ),
    },
    primary="summary",
)
