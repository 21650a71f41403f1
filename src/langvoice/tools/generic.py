"""Universal toolkit for using LangVoice with any function-calling framework."""

from typing import Any, Dict, List, Mapping, Optional

from ..client import LangVoiceClient
from ..internal.audio import PathLike
from .definitions import ToolName, function_schemas
from .toolkit import ToolArguments, ToolCore, result_audio, save_result_audio


class LangVoiceToolkit:
    """Plain async methods returning ``{"success": ..., ...}`` dicts.

    Example:
        toolkit = LangVoiceToolkit(api_key="your-langvoice-key")
        result = await toolkit.text_to_speech("Hello world!")
        toolkit.save_audio(result, "output.mp3")

        # Dispatch a call coming from any LLM
        result = await toolkit.handle_tool_call("langvoice_text_to_speech", {"text": "Hello"})
    """

    TOOL_TTS = ToolName.TTS.value
    TOOL_MULTI_VOICE = ToolName.MULTI_VOICE.value
    TOOL_LIST_VOICES = ToolName.LIST_VOICES.value
    TOOL_LIST_LANGUAGES = ToolName.LIST_LANGUAGES.value

    def __init__(self, api_key: Optional[str] = None, *, client: Optional[LangVoiceClient] = None) -> None:
        self.core = ToolCore(api_key, client=client)

    @property
    def client(self) -> LangVoiceClient:
        return self.core.client

    async def text_to_speech(
        self,
        text: str,
        voice: Optional[str] = None,
        language: Optional[str] = None,
        speed: Optional[float] = None,
        output_file: Optional[PathLike] = None,
    ) -> Dict[str, Any]:
        args = {"text": text, "voice": voice, "language": language, "speed": speed, "output_file": output_file}
        return await self.handle_tool_call(ToolName.TTS, args)

    async def multi_voice_speech(
        self,
        text: str,
        language: Optional[str] = None,
        speed: Optional[float] = None,
        output_file: Optional[PathLike] = None,
    ) -> Dict[str, Any]:
        args = {"text": text, "language": language, "speed": speed, "output_file": output_file}
        return await self.handle_tool_call(ToolName.MULTI_VOICE, args)

    async def list_voices(self) -> Dict[str, Any]:
        return await self.handle_tool_call(ToolName.LIST_VOICES)

    async def list_languages(self) -> Dict[str, Any]:
        return await self.handle_tool_call(ToolName.LIST_LANGUAGES)

    async def handle_tool_call(self, tool_name: Any, args: ToolArguments = None) -> Dict[str, Any]:
        """Handle a tool call by name; unknown names and malformed arguments produce a failure dict."""
        result = await self.core.execute(tool_name, args)
        return result.to_dict()

    async def handle_tool_call_json(self, tool_name: Any, args: ToolArguments = None) -> str:
        result = await self.core.execute(tool_name, args)
        return result.to_json()

    def get_function_schemas(self) -> List[Dict[str, Any]]:
        return function_schemas()

    def get_openai_tools(self) -> List[Dict[str, Any]]:
        return [{"type": "function", "function": schema} for schema in function_schemas()]

    def save_audio(self, result: Mapping[str, Any], output_path: PathLike) -> bool:
        return save_result_audio(result, output_path)

    def get_audio_bytes(self, result: Mapping[str, Any]) -> Optional[bytes]:
        return result_audio(result)

    def get_audio_bytearray(self, result: Mapping[str, Any]) -> Optional[bytearray]:
        audio = result_audio(result)
        return bytearray(audio) if audio is not None else None


def create_langvoice_toolkit(api_key: Optional[str] = None) -> LangVoiceToolkit:
    return LangVoiceToolkit(api_key)
