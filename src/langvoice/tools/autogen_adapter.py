"""AutoGen tools for LangVoice TTS.

Provides function definitions plus a name -> handler map for registering with
AutoGen agents. Handlers take the parsed argument dict and return a JSON string.

Example:
    tools = LangVoiceAutoGenTools(api_key="your-api-key", output_file="speech.mp3")
    function_map = tools.get_function_map()
    result = await tools.handle_function_call(
        {"name": "langvoice_text_to_speech", "arguments": {"text": "Hello world!"}}
    )
"""

import copy
import logging
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from ..client import LangVoiceClient
from ..internal.audio import PathLike, audio_preview, save_audio
from ..internal.config import get_config_value
from ..schemas.models import GenerateResponse
from ..schemas.results import ToolResult
from .definitions import ToolName, function_schemas, output_file_property
from .toolkit import ToolCore, error_message, parse_arguments, result_audio

logger = logging.getLogger(__name__)

FunctionHandler = Callable[[Dict[str, Any]], Awaitable[str]]

_DESCRIPTIONS = {
    ToolName.TTS.value: (
        "Convert text to natural-sounding speech audio using LangVoice TTS API. "
        "Returns information about the generated audio including duration and a success status. "
        "The audio is saved to a file if output_file is configured."
    ),
    ToolName.MULTI_VOICE.value: (
        "Generate speech with multiple voices in a single audio file. "
        "Use bracket notation to switch voices: '[heart] Hello! [michael] Hi there!' "
        "All voices will use the same language and speed settings."
    ),
    ToolName.LIST_VOICES.value: (
        "Get a list of all available voices for text-to-speech generation. "
        "Returns voice IDs and names that can be used with the TTS functions."
    ),
    ToolName.LIST_LANGUAGES.value: (
        "Get a list of all supported languages for text-to-speech generation. "
        "Returns language codes and names."
    ),
}


def _build_definitions() -> List[Dict[str, Any]]:
    definitions = []
    for schema in function_schemas(include_output_file=True):
        schema["description"] = _DESCRIPTIONS[schema["name"]]
        if schema["name"] == ToolName.TTS.value:
            schema["parameters"]["properties"]["output_file"] = output_file_property(
                "Optional file path to save the audio. Defaults to output.mp3."
            )
        definitions.append(schema)
    return definitions


_FUNCTION_DEFINITIONS = _build_definitions()


def get_autogen_function_definitions() -> List[Dict[str, Any]]:
    return copy.deepcopy(_FUNCTION_DEFINITIONS)


class LangVoiceAutoGenTools:
    """AutoGen integration: function definitions, function map and direct helpers."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        output_file: Optional[PathLike] = None,
        auto_save: bool = True,
        client: Optional[LangVoiceClient] = None,
    ) -> None:
        self.core = ToolCore(api_key, client=client)
        self.output_file = output_file or get_config_value("default_output_file")
        self.auto_save = auto_save
        self._function_map: Mapping[str, FunctionHandler] = MappingProxyType(
            {
                ToolName.TTS.value: self._text_to_speech_handler,
                ToolName.MULTI_VOICE.value: self._multi_voice_handler,
                ToolName.LIST_VOICES.value: self._list_voices_handler,
                ToolName.LIST_LANGUAGES.value: self._list_languages_handler,
            }
        )

    @property
    def client(self) -> LangVoiceClient:
        return self.core.client

    def get_function_definitions(self) -> List[Dict[str, Any]]:
        return get_autogen_function_definitions()

    def get_function_definition(self, name: str) -> Optional[Dict[str, Any]]:
        for definition in self.get_function_definitions():
            if definition["name"] == name:
                return definition
        return None

    def get_tts_function_def(self) -> Dict[str, Any]:
        return self.get_function_definition(ToolName.TTS.value)

    def get_multi_voice_function_def(self) -> Dict[str, Any]:
        return self.get_function_definition(ToolName.MULTI_VOICE.value)

    def get_function_map(self) -> Mapping[str, FunctionHandler]:
        """Read-only map of function name -> async handler returning a JSON string."""
        return self._function_map

    async def handle_function_call(self, call: Any) -> str:
        """Handle ``{"name": ..., "arguments": ...}`` where arguments may be a JSON string."""
        if isinstance(call, Mapping):
            name, arguments = call.get("name"), call.get("arguments")
        else:
            name, arguments = getattr(call, "name", None), getattr(call, "arguments", None)

        handler = self._function_map.get(str(name))
        if handler is None:
            return ToolResult(success=False, error=f"Unknown function: {name}").to_json()

        try:
            args = parse_arguments(arguments)
        except (TypeError, ValueError) as e:
            return ToolResult(success=False, error=f"Invalid function arguments: {error_message(e)}").to_json()
        return await handler(args)

    async def _speech_handler(self, tool: ToolName, args: Dict[str, Any], label: str) -> str:
        try:
            outcome = await self.core.run(tool, args)
        except Exception as e:
            logger.debug(f"{tool.value} failed: {e}")
            return ToolCore.failure(e).to_json()

        response = outcome.response
        if not self.auto_save:
            return ToolCore.speech_result(response).to_json()

        output_path = args.get("output_file") or self.output_file
        saved = await self.core.persist(response, output_path)
        if saved:
            result = ToolCore.speech_result(
                response,
                audio_base64=None,
                message=f"{label} generated and saved to {saved}",
                output_file=saved,
            )
        else:
            result = ToolCore.speech_result(
                response,
                audio_base64=None,
                message=f"{label} generated (file save not available in this environment)",
                audio_base64_preview=self._preview(response),
            )
        return result.to_json()

    @staticmethod
    def _preview(response: GenerateResponse) -> str:
        return audio_preview(response.to_base64(), int(get_config_value("audio_preview_length")))

    async def _text_to_speech_handler(self, args: Dict[str, Any]) -> str:
        return await self._speech_handler(ToolName.TTS, args, "Speech")

    async def _multi_voice_handler(self, args: Dict[str, Any]) -> str:
        return await self._speech_handler(ToolName.MULTI_VOICE, args, "Multi-voice speech")

    async def _list_voices_handler(self, args: Optional[Dict[str, Any]] = None) -> str:
        return (await self.core.execute(ToolName.LIST_VOICES)).to_json()

    async def _list_languages_handler(self, args: Optional[Dict[str, Any]] = None) -> str:
        return (await self.core.execute(ToolName.LIST_LANGUAGES)).to_json()

    async def _direct(self, tool: ToolName, args: Dict[str, Any]) -> Dict[str, Any]:
        try:
            outcome = await self.core.run(tool, args)
        except Exception as e:
            return ToolCore.failure(e).to_dict()
        result = ToolCore.speech_result(outcome.response).to_dict()
        result["audio_bytes"] = outcome.response.audio_data
        return result

    async def generate_speech(
        self,
        text: str,
        voice: Optional[str] = None,
        language: Optional[str] = None,
        speed: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Generate speech directly (not as a tool call); includes raw ``audio_bytes``."""
        return await self._direct(ToolName.TTS, {"text": text, "voice": voice, "language": language, "speed": speed})

    async def generate_multi_voice(
        self,
        text: str,
        language: Optional[str] = None,
        speed: Optional[float] = None,
    ) -> Dict[str, Any]:
        return await self._direct(ToolName.MULTI_VOICE, {"text": text, "language": language, "speed": speed})

    def save_audio(self, result: Mapping[str, Any], output_path: Optional[PathLike] = None) -> bool:
        audio = result_audio(result)
        if audio is None:
            return False
        return save_audio(audio, output_path or self.output_file) is not None


def create_autogen_tools(
    api_key: Optional[str] = None,
    *,
    output_file: Optional[PathLike] = None,
    auto_save: bool = True,
) -> LangVoiceAutoGenTools:
    return LangVoiceAutoGenTools(api_key, output_file=output_file, auto_save=auto_save)
