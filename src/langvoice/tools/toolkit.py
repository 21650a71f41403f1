"""Framework-neutral implementation of the four LangVoice tools.

Every adapter (generic, OpenAI, LangChain, AutoGen) delegates to ``ToolCore``
and only decides how the outcome is presented to its framework.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from ..client import LangVoiceClient
from ..exceptions import UnknownToolError
from ..internal.audio import PathLike, decode_audio_base64, save_audio
from ..schemas.models import GenerateResponse, Language, Voice
from ..schemas.results import (
    LanguagesResult,
    LanguageSummary,
    SpeechResult,
    ToolResult,
    VoicesResult,
    VoiceSummary,
)
from .definitions import ToolName


@dataclass(frozen=True)
class ToolOutcome:
    tool: ToolName
    response: Optional[GenerateResponse] = None
    voices: List[Voice] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)


ToolHandler = Callable[[Dict[str, Any]], Awaitable[ToolOutcome]]
ToolArguments = Union[Mapping[str, Any], str, None]


def error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


def parse_arguments(arguments: ToolArguments) -> Dict[str, Any]:
    """Accept a JSON argument string (as LLMs send it) or an already parsed mapping."""
    if arguments is None or arguments == "":
        return {}
    if isinstance(arguments, str):
        parsed = json.loads(arguments)
        if not isinstance(parsed, dict):
            raise ValueError("Tool arguments must be a JSON object")
        return parsed
    return dict(arguments)


class ToolCore:
    """Shared core behind every adapter: the four operations plus name dispatch."""

    def __init__(self, api_key: Optional[str] = None, *, client: Optional[LangVoiceClient] = None) -> None:
        self.logger = logging.getLogger(__name__)
        self.client = client or LangVoiceClient(api_key)
        self._handlers: Mapping[ToolName, ToolHandler] = MappingProxyType(
            {
                ToolName.TTS: self._text_to_speech,
                ToolName.MULTI_VOICE: self._multi_voice_speech,
                ToolName.LIST_VOICES: self._list_voices,
                ToolName.LIST_LANGUAGES: self._list_languages,
            }
        )

    @property
    def handlers(self) -> Mapping[ToolName, ToolHandler]:
        return self._handlers

    @staticmethod
    def resolve(name: Any) -> ToolName:
        try:
            return ToolName(str(name))
        except ValueError:
            raise UnknownToolError(name) from None

    async def run(self, name: Any, args: Optional[Mapping[str, Any]] = None) -> ToolOutcome:
        """Run a tool by name. Raises UnknownToolError or any client error."""
        tool = self.resolve(name)
        self.logger.debug(f"Running tool {tool.value}")
        return await self._handlers[tool](dict(args or {}))

    async def execute(self, name: Any, args: ToolArguments = None) -> ToolResult:
        """Run a tool and always return a result envelope, never raising.

        ``args`` may be a mapping or a JSON object string. Speech audio is also
        written to ``args["output_file"]`` when given.
        """
        try:
            arguments = parse_arguments(args)
        except (TypeError, ValueError) as e:
            self.logger.debug(f"Rejected arguments for {name}: {e}")
            return ToolResult(success=False, error=f"Invalid tool arguments: {error_message(e)}")

        try:
            outcome = await self.run(name, arguments)
        except Exception as e:
            self.logger.debug(f"Tool {name} failed: {e}")
            return self.failure(e)

        if outcome.response is not None:
            result = self.speech_result(outcome.response)
            output_file = arguments.get("output_file")
            if output_file:
                saved = await self.persist(outcome.response, output_file)
                if saved:
                    result.output_file = saved
            return result
        if outcome.tool is ToolName.LIST_VOICES:
            return self.voices_result(outcome.voices)
        return self.languages_result(outcome.languages)

    async def _text_to_speech(self, args: Dict[str, Any]) -> ToolOutcome:
        response = await self.client.generate(
            args.get("text"),
            voice=args.get("voice"),
            language=args.get("language"),
            speed=args.get("speed"),
        )
        return ToolOutcome(ToolName.TTS, response=response)

    async def _multi_voice_speech(self, args: Dict[str, Any]) -> ToolOutcome:
        response = await self.client.generate_multi_voice(
            args.get("text"),
            language=args.get("language"),
            speed=args.get("speed"),
        )
        return ToolOutcome(ToolName.MULTI_VOICE, response=response)

    async def _list_voices(self, args: Dict[str, Any]) -> ToolOutcome:
        return ToolOutcome(ToolName.LIST_VOICES, voices=await self.client.list_voices())

    async def _list_languages(self, args: Dict[str, Any]) -> ToolOutcome:
        return ToolOutcome(ToolName.LIST_LANGUAGES, languages=await self.client.list_languages())

    async def persist(self, response: GenerateResponse, output_path: PathLike) -> Optional[str]:
        """Write audio off the event loop; returns the path or None if it failed."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, save_audio, response.audio_data, output_path)

    @staticmethod
    def speech_result(response: GenerateResponse, **fields: Any) -> SpeechResult:
        values: Dict[str, Any] = {
            "audio_base64": response.to_base64(),
            "duration": response.duration,
            "generation_time": response.generation_time,
            "characters_processed": response.characters_processed,
        }
        values.update(fields)
        return SpeechResult(success=True, **values)

    @staticmethod
    def voices_result(voices: List[Voice]) -> VoicesResult:
        return VoicesResult(
            success=True,
            voices=[VoiceSummary(id=voice.id, name=voice.name) for voice in voices],
            count=len(voices),
        )

    @staticmethod
    def languages_result(languages: List[Language]) -> LanguagesResult:
        return LanguagesResult(
            success=True,
            languages=[LanguageSummary(id=language.id, name=language.name) for language in languages],
            count=len(languages),
        )

    @staticmethod
    def failure(error: BaseException) -> ToolResult:
        return ToolResult(success=False, error=error_message(error))


def result_audio(result: Mapping[str, Any]) -> Optional[bytes]:
    """Decode the audio carried by a successful speech result dict, if any."""
    if not result.get("success"):
        return None
    audio_bytes = result.get("audio_bytes")
    if isinstance(audio_bytes, (bytes, bytearray)):
        return bytes(audio_bytes)
    return decode_audio_base64(result.get("audio_base64"))


def save_result_audio(result: Mapping[str, Any], output_path: PathLike) -> bool:
    """Write the audio of a speech result dict to disk; False if there is none or the write fails."""
    audio = result_audio(result)
    if audio is None:
        return False
    return save_audio(audio, output_path) is not None
