AMERICAN_VOICES = (
    "heart",
    "bella",
    "nicole",
    "sarah",
    "nova",
    "sky",
    "jessica",
    "river",
    "michael",
    "fenrir",
    "eric",
    "liam",
    "onyx",
    "adam",
)

BRITISH_VOICES = (
    "emma",
    "isabella",
    "alice",
    "lily",
    "george",
    "fable",
    "lewis",
    "daniel",
)

ALL_VOICES = AMERICAN_VOICES + BRITISH_VOICES

LANGUAGES = (
    "american_english",
    "british_english",
    "spanish",
    "french",
    "hindi",
    "italian",
    "japanese",
    "brazilian_portuguese",
    "mandarin_chinese",
)


def is_known_voice(voice: str) -> bool:
    return voice in ALL_VOICES


def is_known_language(language: str) -> bool:
    return language in LANGUAGES
