from .models import GenerateResponse, Language, LanguagesResponse, Voice, VoicesResponse
from .requests import (
    DEFAULT_LANGUAGE,
    DEFAULT_SPEED,
    DEFAULT_VOICE,
    MAX_SPEED,
    MAX_TEXT_LENGTH,
    MIN_SPEED,
    GenerateRequest,
    MultiVoiceRequest,
    SpeechRequest,
    VoiceCloningRequest,
)
from .results import LanguagesResult, LanguageSummary, SpeechResult, ToolResult, VoicesResult, VoiceSummary

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_SPEED",
    "DEFAULT_VOICE",
    "MAX_SPEED",
    "MAX_TEXT_LENGTH",
    "MIN_SPEED",
    "GenerateRequest",
    "MultiVoiceRequest",
    "SpeechRequest",
    "VoiceCloningRequest",
    "GenerateResponse",
    "Language",
    "LanguagesResponse",
    "Voice",
    "VoicesResponse",
    "LanguageSummary",
    "LanguagesResult",
    "SpeechResult",
    "ToolResult",
    "VoiceSummary",
    "VoicesResult",
]
