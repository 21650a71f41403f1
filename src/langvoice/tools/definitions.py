"""Tool names, catalogues and the parameter schemas every adapter builds on."""

from enum import Enum
from typing import Any, Dict, List

from ..catalog import ALL_VOICES, AMERICAN_VOICES, BRITISH_VOICES, LANGUAGES
from ..schemas.requests import DEFAULT_LANGUAGE, DEFAULT_SPEED, DEFAULT_VOICE, MAX_SPEED, MAX_TEXT_LENGTH, MIN_SPEED

__all__ = [
    "ToolName",
    "TOOL_NAMES",
    "AMERICAN_VOICES",
    "BRITISH_VOICES",
    "ALL_VOICES",
    "LANGUAGES",
    "text_property",
    "voice_property",
    "language_property",
    "speed_property",
    "output_file_property",
    "object_parameters",
    "function_schemas",
]


class ToolName(str, Enum):
    TTS = "langvoice_text_to_speech"
    MULTI_VOICE = "langvoice_multi_voice_speech"
    LIST_VOICES = "langvoice_list_voices"
    LIST_LANGUAGES = "langvoice_list_languages"

    def __str__(self) -> str:
        return self.value


TOOL_NAMES = tuple(tool.value for tool in ToolName)

MULTI_VOICE_EXAMPLE = "[heart] Hello! [michael] Hi there!"


def text_property(description: str = f"The text to convert to speech. Maximum {MAX_TEXT_LENGTH} characters.") -> Dict[str, Any]:
    return {"type": "string", "description": description}


def voice_property(description: str = "Voice ID to use for speech generation.") -> Dict[str, Any]:
    return {
        "type": "string",
        "description": description,
        "enum": list(ALL_VOICES),
        "default": DEFAULT_VOICE,
    }


def language_property(description: str = "Language code for the speech.") -> Dict[str, Any]:
    return {
        "type": "string",
        "description": description,
        "enum": list(LANGUAGES),
        "default": DEFAULT_LANGUAGE,
    }


def speed_property(
    description: str = f"Speech speed from {MIN_SPEED} (slow) to {MAX_SPEED} (fast). Default is {DEFAULT_SPEED}.",
) -> Dict[str, Any]:
    return {
        "type": "number",
        "description": description,
        "minimum": MIN_SPEED,
        "maximum": MAX_SPEED,
        "default": DEFAULT_SPEED,
    }


def output_file_property(description: str = "Optional file path to save the audio.") -> Dict[str, Any]:
    return {"type": "string", "description": description}


def object_parameters(properties: Dict[str, Any], required: List[str]) -> Dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


def function_schemas(include_output_file: bool = False) -> List[Dict[str, Any]]:
    """Return fresh ``{name, description, parameters}`` schemas for the four tools."""
    tts_properties = {
        "text": text_property(),
        "voice": voice_property(),
        "language": language_property(),
        "speed": speed_property(),
    }
    multi_voice_properties = {
        "text": text_property(f"Text with voice markers. Example: '{MULTI_VOICE_EXAMPLE}'"),
        "language": language_property("Language code for all voices."),
        "speed": speed_property(f"Speech speed from {MIN_SPEED} to {MAX_SPEED}."),
    }
    if include_output_file:
        tts_properties["output_file"] = output_file_property()
        multi_voice_properties["output_file"] = output_file_property()

    return [
        {
            "name": ToolName.TTS.value,
            "description": (
                "Convert text to natural-sounding speech audio using LangVoice TTS API. "
                "Returns base64-encoded MP3 audio."
            ),
            "parameters": object_parameters(tts_properties, ["text"]),
        },
        {
            "name": ToolName.MULTI_VOICE.value,
            "description": (
                "Generate speech with multiple voices using bracket notation. "
                "Use [voice_name] to switch voices in the text."
            ),
            "parameters": object_parameters(multi_voice_properties, ["text"]),
        },
        {
            "name": ToolName.LIST_VOICES.value,
            "description": "Get a list of all available voices for text-to-speech generation.",
            "parameters": object_parameters({}, []),
        },
        {
            "name": ToolName.LIST_LANGUAGES.value,
            "description": "Get a list of all supported languages for text-to-speech generation.",
            "parameters": object_parameters({}, []),
        },
    ]
