"""
Lookup tables for compiling family preferences into content guidelines.

Religious guidance only applies at the observant and strict levels;
secular and cultural observance fall through to the general rules.
"""

from .types import CulturalElements, GuidelineRule, ModestyLevel, ObservanceLevel


# Religious traditions, keyed by tradition then observance level
RELIGIOUS_GUIDELINES: dict[str, dict[str, GuidelineRule]] = {
    "christian": {
        ObservanceLevel.OBSERVANT.value: GuidelineRule(
            include=["faith themes", "prayer", "kindness", "forgiveness", "helping others", "Christmas", "Easter"],
            exclude=["occult practices", "dark magic"],
            notes="May include gentle faith-based themes and Christian holidays",
        ),
        ObservanceLevel.STRICT.value: GuidelineRule(
            include=["Biblical values", "faith", "prayer", "church community", "Christian holidays"],
            exclude=["magic", "witches", "wizards", "sorcery", "Halloween", "occult", "eastern mysticism", "evolution themes"],
            notes="Focus on faith-based values, avoid all magical/supernatural elements outside Biblical context",
        ),
    },
    "muslim": {
        ObservanceLevel.OBSERVANT.value: GuidelineRule(
            include=["Islamic values", "kindness", "charity", "family respect", "Eid celebrations", "Ramadan themes"],
            exclude=["pork/pig characters", "alcohol references", "immodest dress"],
            notes="Include Islamic celebrations, modest dress, halal-friendly content",
        ),
        ObservanceLevel.STRICT.value: GuidelineRule(
            include=["Islamic teachings", "Prophet stories (respectfully)", "mosque", "prayer", "Quran values", "Eid", "Ramadan"],
            exclude=[
                "magic", "sorcery", "pigs", "dogs as pets inside homes", "alcohol",
                "music instruments", "dancing", "immodest clothing", "cross-gender friendships",
            ],
            notes="Strictly Islamic content, modest dress, gender-appropriate interactions, no music/dance, no magical elements",
        ),
    },
    "jewish": {
        ObservanceLevel.OBSERVANT.value: GuidelineRule(
            include=["Jewish values", "Shabbat", "Jewish holidays", "tikun olam", "family traditions", "Hebrew elements"],
            exclude=["non-kosher food prominently featured", "Christmas as religious"],
            notes="Include Jewish celebrations and values, kosher-friendly content",
        ),
        ObservanceLevel.STRICT.value: GuidelineRule(
            include=["Torah values", "Shabbat observance", "Jewish holidays", "mitzvot", "synagogue", "kosher lifestyle"],
            exclude=["non-kosher animals as food", "Shabbat violations", "mixing meat/dairy", "immodest dress"],
            notes="Orthodox-friendly content, strict Shabbat respect, tzniut (modesty) standards",
        ),
    },
    "hindu": {
        ObservanceLevel.OBSERVANT.value: GuidelineRule(
            include=["Hindu values", "Diwali", "Holi", "dharma", "karma", "respect for elders", "vegetarian-friendly"],
            exclude=["beef/cow as food", "disrespect to deities"],
            notes="Include Hindu festivals and values, vegetarian-friendly, respect for sacred animals",
        ),
        ObservanceLevel.STRICT.value: GuidelineRule(
            include=["Hindu deities (respectfully)", "Sanskrit elements", "puja", "temples", "vegetarian lifestyle", "ahimsa"],
            exclude=["beef", "meat prominently featured", "leather items", "onion/garlic for some"],
            notes="Strictly vegetarian content, respectful deity representation, traditional values",
        ),
    },
    "buddhist": {
        ObservanceLevel.OBSERVANT.value: GuidelineRule(
            include=["Buddhist values", "compassion", "mindfulness", "karma", "nature respect", "meditation"],
            exclude=["violence glorification", "cruelty to animals"],
            notes="Peaceful themes, respect for all living beings, mindfulness elements",
        ),
        ObservanceLevel.STRICT.value: GuidelineRule(
            include=["Buddhist teachings", "temples", "monks", "meditation", "Vesak", "non-violence", "vegetarian"],
            exclude=["killing/hunting", "meat", "alcohol", "violence of any kind"],
            notes="Strictly peaceful, vegetarian, no violence even in conflict resolution",
        ),
    },
    "sikh": {
        ObservanceLevel.OBSERVANT.value: GuidelineRule(
            include=["Sikh values", "seva (service)", "equality", "langar (community meals)", "Gurdwara", "Vaisakhi"],
            exclude=["tobacco", "alcohol", "disrespect to turbans/hair"],
            notes="Include Sikh traditions, equality themes, community service",
        ),
        ObservanceLevel.STRICT.value: GuidelineRule(
            include=["Guru teachings", "five Ks respect", "Gurdwara", "equality", "vegetarian for many", "Punjabi elements"],
            exclude=["tobacco", "alcohol", "halal/kosher meat", "cutting hair themes", "caste references"],
            notes="Strict adherence to Sikh principles, vegetarian-friendly, equality emphasized",
        ),
    },
}

# Traditions accepted by the preferences form ("none" disables the religious rule)
RELIGIOUS_TRADITIONS = [*RELIGIOUS_GUIDELINES.keys(), "none"]


CULTURAL_ELEMENTS: dict[str, CulturalElements] = {
    "east-asian": CulturalElements(
        include=["respect for elders", "education value", "family harmony", "tea culture", "lunar new year"],
        considerations=["hierarchical family relationships", "collective over individual", "indirect communication styles"],
    ),
    "south-asian": CulturalElements(
        include=["extended family", "festivals of color and light", "hospitality", "diverse traditions"],
        considerations=["family honor", "respect for elders", "arranged relationships neutral", "regional diversity"],
    ),
    "middle-eastern": CulturalElements(
        include=["hospitality", "family bonds", "desert and oasis imagery", "geometric art"],
        considerations=["gender interactions", "modesty norms", "religious diversity in region"],
    ),
    "african": CulturalElements(
        include=["community (ubuntu)", "oral traditions", "extended family", "nature connection", "diverse cultures"],
        considerations=["avoid monolithic portrayal", "celebrate diversity", "avoid stereotypes"],
    ),
    "latin-american": CulturalElements(
        include=["extended family", "celebrations", "vibrant culture", "Day of the Dead (respectfully)", "diverse heritage"],
        considerations=["religious traditions vary", "indigenous heritage respect", "regional diversity"],
    ),
    "european": CulturalElements(
        include=["diverse traditions", "fairy tale heritage", "seasonal celebrations"],
        considerations=["religious diversity", "avoid stereotypes", "regional differences"],
    ),
    "indigenous": CulturalElements(
        include=["nature connection", "oral traditions", "community elders", "respect for land"],
        considerations=["avoid appropriation", "authentic representation", "tribal diversity", "consult authentic sources"],
    ),
}


# Food shown in stories
DIETARY_RULES: dict[str, GuidelineRule] = {
    "halal": GuidelineRule(
        exclude=["pork", "pig characters", "bacon", "ham", "alcohol"],
        notes="Food shown should be halal-appropriate",
    ),
    "kosher": GuidelineRule(
        exclude=["pork", "shellfish", "mixing meat and dairy"],
        notes="Food shown should be kosher-appropriate",
    ),
    "vegetarian": GuidelineRule(
        exclude=["meat dishes prominently featured", "hunting for food"],
        notes="Prefer vegetarian food in meal scenes",
    ),
    "vegan": GuidelineRule(
        exclude=["meat", "dairy", "eggs prominently featured"],
        notes="Prefer plant-based food in scenes",
    ),
    "no-pork": GuidelineRule(
        exclude=["pork", "pig characters as food", "bacon", "ham"],
        notes="Food shown should not include pork",
    ),
}


MODESTY_GUIDELINES: dict[str, str] = {
    ModestyLevel.STANDARD.value: "Age-appropriate clothing, casual modern dress acceptable",
    ModestyLevel.MODEST.value: "Conservative clothing, shoulders and knees covered, no tight/revealing clothing",
    ModestyLevel.VERY_MODEST.value: (
        "Very conservative dress, loose fitting clothes, full coverage, "
        "head coverings where culturally appropriate"
    ),
}


TONE_GUIDELINES: dict[str, str] = {
    ObservanceLevel.STRICT.value: "Reverent, respectful, values-focused tone",
    ObservanceLevel.OBSERVANT.value: "Warm, values-aware, culturally respectful tone",
}
DEFAULT_TONE = "Warm, inclusive, universally appropriate tone"


# Fixed exclusion sets for the allow_* switches
MAGIC_TERMS = ["magic", "spells", "witches", "wizards", "sorcery", "enchantments", "magical powers"]
MYTHOLOGY_TERMS = ["mythology", "Greek gods", "Norse gods", "mythical creatures"]
TALKING_ANIMAL_TERMS = ["talking animals", "anthropomorphic animals"]
SUPERNATURAL_TERMS = ["ghosts", "spirits", "supernatural", "paranormal", "angels", "demons"]
CONFLICT_TERMS = ["conflict", "villains", "antagonists", "fighting", "arguments"]
PERIL_TERMS = ["danger", "peril", "scary situations", "getting lost", "storms"]
MUSIC_TERMS = ["musical instruments", "singing performances", "concerts"]
DANCE_TERMS = ["dancing", "dance parties", "ballet"]


# Substrings that make an exclusion relevant to illustrations
IMAGE_SENSITIVE_TERMS = ["pork", "pig", "alcohol", "immodest", "revealing", "dancing", "musical instruments"]


def is_image_sensitive(element: str) -> bool:
    """Whether an excluded element should also be kept out of illustrations."""
    lowered = element.lower()
    return any(term in lowered for term in IMAGE_SENSITIVE_TERMS)


SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
    "ar": "Arabic",
    "hi": "Hindi",
    "ru": "Russian",
    "nl": "Dutch",
    "pl": "Polish",
    "tr": "Turkish",
    "vi": "Vietnamese",
    "th": "Thai",
    "id": "Indonesian",
    "ms": "Malay",
    "fil": "Filipino",
    "he": "Hebrew",
    "uk": "Ukrainian",
    "sv": "Swedish",
    "da": "Danish",
    "no": "Norwegian",
    "fi": "Finnish",
    "el": "Greek",
    "cs": "Czech",
    "ro": "Romanian",
    "hu": "Hungarian",
}
