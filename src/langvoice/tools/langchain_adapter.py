"""LangChain-compatible tools for LangVoice TTS.

The tools follow LangChain's duck-typed tool surface (``name``, ``description``,
``args_schema``, ``invoke``/``ainvoke``) and return human-readable status
strings for the agent, so they can be used standalone or handed to an agent.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..client import LangVoiceClient
from ..internal.audio import PathLike, audio_preview
from ..internal.config import get_config_value
from ..schemas.models import GenerateResponse
from .definitions import ToolName, function_schemas
from .toolkit import ToolCore, error_message

_SCHEMAS = {schema["name"]: schema for schema in function_schemas()}

SUCCESS_MARK = "✅"
FAILURE_MARK = "❌"


def parse_tool_input(tool_input: Any) -> Dict[str, Any]:
    """A raw string is the text to speak, unless it is a JSON object of arguments."""
    if tool_input is None:
        return {}
    if isinstance(tool_input, str):
        stripped = tool_input.strip()
        if stripped.startswith("{"):
            try:
                parsed = json.loads(stripped)
            except ValueError:
                return {"text": tool_input}
            if isinstance(parsed, dict):
                return parsed
        return {"text": tool_input}
    return dict(tool_input)


def _format_duration(response: GenerateResponse) -> str:
    return f"{response.duration}s" if response.duration is not None else "unknown"


class BaseLangVoiceTool(ABC):
    """Base class for LangVoice tools; usable standalone or with LangChain."""

    name: str
    description: str

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        output_file: Optional[PathLike] = None,
        client: Optional[LangVoiceClient] = None,
        core: Optional[ToolCore] = None,
    ) -> None:
        self.core = core or ToolCore(api_key, client=client)
        self.output_file = output_file

    @property
    def args_schema(self) -> Dict[str, Any]:
        return _SCHEMAS[self.name]["parameters"]

    @abstractmethod
    async def call(self, tool_input: Any = None) -> str:
        """Run the tool; never raises, failures come back as a status string."""

    async def ainvoke(self, tool_input: Any = None, config: Optional[Dict[str, Any]] = None) -> str:
        return await self.call(tool_input)

    def invoke(self, tool_input: Any = None, config: Optional[Dict[str, Any]] = None) -> str:
        """Synchronous entry point; must not be called from a running event loop."""
        return asyncio.run(self.call(tool_input))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class _SpeechTool(BaseLangVoiceTool):
    label = "Speech"
    error_label = "speech"

    async def call(self, tool_input: Any = None) -> str:
        try:
            outcome = await self.core.run(self.name, parse_tool_input(tool_input))
        except Exception as e:
            return f"{FAILURE_MARK} Error generating {self.error_label}: {error_message(e)}"

        response = outcome.response
        if self.output_file:
            saved = await self.core.persist(response, self.output_file)
            if saved:
                return self._saved_message(response, saved)

        preview = audio_preview(response.to_base64(), int(get_config_value("audio_preview_length")))
        return (
            f"{SUCCESS_MARK} {self.label} generated! Duration: {_format_duration(response)}. "
            f"Audio (base64): {preview}"
        )

    def _saved_message(self, response: GenerateResponse, path: str) -> str:
        return f"{SUCCESS_MARK} {self.label} generated and saved to {path}! Duration: {_format_duration(response)}"


class LangVoiceTTSTool(_SpeechTool):
    """Text-to-speech; saves to ``output.mp3`` unless another file is given."""

    name = ToolName.TTS.value
    description = (
        "Convert text to natural-sounding speech audio using LangVoice TTS. "
        "Saves audio to a file and returns confirmation with duration."
    )

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        output_file: Optional[PathLike] = None,
        client: Optional[LangVoiceClient] = None,
        core: Optional[ToolCore] = None,
    ) -> None:
        super().__init__(
            api_key,
            output_file=output_file or get_config_value("default_output_file"),
            client=client,
            core=core,
        )

    def _saved_message(self, response: GenerateResponse, path: str) -> str:
        return f"{super()._saved_message(response, path)}, Characters: {response.characters_processed}"


class LangVoiceMultiVoiceTool(_SpeechTool):
    name = ToolName.MULTI_VOICE.value
    description = (
        "Generate speech with multiple voices using bracket notation. "
        "Use [voice_name] to switch voices. Example: '[heart] Hello! [michael] Hi there!'"
    )
    label = "Multi-voice speech"
    error_label = "multi-voice speech"


class LangVoiceVoicesTool(BaseLangVoiceTool):
    name = ToolName.LIST_VOICES.value
    description = "Get a list of all available voices for text-to-speech generation."

    async def call(self, tool_input: Any = None) -> str:
        try:
            outcome = await self.core.run(self.name)
        except Exception as e:
            return f"{FAILURE_MARK} Error listing voices: {error_message(e)}"
        voice_list = ", ".join(f"{voice.id} ({voice.name})" for voice in outcome.voices)
        return f"Available voices: {voice_list}"


class LangVoiceLanguagesTool(BaseLangVoiceTool):
    name = ToolName.LIST_LANGUAGES.value
    description = "Get a list of all supported languages for text-to-speech generation."

    async def call(self, tool_input: Any = None) -> str:
        try:
            outcome = await self.core.run(self.name)
        except Exception as e:
            return f"{FAILURE_MARK} Error listing languages: {error_message(e)}"
        language_list = ", ".join(f"{language.id} ({language.name})" for language in outcome.languages)
        return f"Supported languages: {language_list}"


class LangVoiceLangChainToolkit:
    """Builds LangVoice tools that share one client.

    Example:
        toolkit = LangVoiceLangChainToolkit(api_key="your-langvoice-key")
        tools = toolkit.get_tools()
    """

    def __init__(self, api_key: Optional[str] = None, *, client: Optional[LangVoiceClient] = None) -> None:
        self.core = ToolCore(api_key, client=client)

    def get_tools(self) -> List[BaseLangVoiceTool]:
        return [
            self.get_tts_tool(),
            self.get_multi_voice_tool(),
            self.get_voices_tool(),
            self.get_languages_tool(),
        ]

    def get_tts_tool(self, output_file: Optional[PathLike] = None) -> LangVoiceTTSTool:
        return LangVoiceTTSTool(output_file=output_file, core=self.core)

    def get_multi_voice_tool(self, output_file: Optional[PathLike] = None) -> LangVoiceMultiVoiceTool:
        return LangVoiceMultiVoiceTool(output_file=output_file, core=self.core)

    def get_voices_tool(self) -> LangVoiceVoicesTool:
        return LangVoiceVoicesTool(core=self.core)

    def get_languages_tool(self) -> LangVoiceLanguagesTool:
        return LangVoiceLanguagesTool(core=self.core)


def get_all_langchain_tools(api_key: Optional[str] = None) -> List[BaseLangVoiceTool]:
    return LangVoiceLangChainToolkit(api_key).get_tools()
