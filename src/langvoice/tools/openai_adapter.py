"""OpenAI function-calling tools for LangVoice.

Usage:
    from openai import OpenAI
    from langvoice.tools import LangVoiceOpenAITools

    openai = OpenAI()
    langvoice = LangVoiceOpenAITools(api_key="your-langvoice-key")

    response = openai.chat.completions.create(
        model="gpt-4o",
        messages=[{"role": "user", "content": "Say hello out loud"}],
        tools=langvoice.get_tools(),
    )
    for tool_call in response.choices[0].message.tool_calls or []:
        result = await langvoice.handle_call(tool_call)
"""

import copy
from typing import Any, Dict, List, Mapping, Optional

from ..client import LangVoiceClient
from ..internal.audio import PathLike
from .definitions import ToolName, function_schemas
from .toolkit import ToolArguments, ToolCore, parse_arguments, result_audio, save_result_audio

__all__ = [
    "LANGVOICE_TTS_TOOL",
    "LANGVOICE_MULTI_VOICE_TOOL",
    "LANGVOICE_LIST_VOICES_TOOL",
    "LANGVOICE_LIST_LANGUAGES_TOOL",
    "LangVoiceOpenAITools",
    "get_openai_tools",
    "handle_openai_tool_call",
    "parse_arguments",
]


def _tool_definition(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "function", "function": schema}


_DEFINITIONS = {schema["name"]: _tool_definition(schema) for schema in function_schemas()}

LANGVOICE_TTS_TOOL = _DEFINITIONS[ToolName.TTS.value]
LANGVOICE_MULTI_VOICE_TOOL = _DEFINITIONS[ToolName.MULTI_VOICE.value]
LANGVOICE_LIST_VOICES_TOOL = _DEFINITIONS[ToolName.LIST_VOICES.value]
LANGVOICE_LIST_LANGUAGES_TOOL = _DEFINITIONS[ToolName.LIST_LANGUAGES.value]


def get_openai_tools() -> List[Dict[str, Any]]:
    """All LangVoice tools in OpenAI ``tools=`` format (deep copies, safe to mutate)."""
    return [
        copy.deepcopy(tool)
        for tool in (
            LANGVOICE_TTS_TOOL,
            LANGVOICE_MULTI_VOICE_TOOL,
            LANGVOICE_LIST_VOICES_TOOL,
            LANGVOICE_LIST_LANGUAGES_TOOL,
        )
    ]


async def handle_openai_tool_call(
    tool_name: Any,
    args: ToolArguments,
    api_key: Optional[str] = None,
    *,
    client: Optional[LangVoiceClient] = None,
) -> str:
    """Run one LangVoice tool call and return the JSON string to send back to the model."""
    try:
        core = ToolCore(api_key, client=client)
    except Exception as e:
        return ToolCore.failure(e).to_json()
    result = await core.execute(tool_name, args)
    return result.to_json()


def _call_parts(tool_call: Any) -> tuple[Any, Any]:
    """Extract (name, arguments) from an SDK tool-call object or its dict form."""
    if isinstance(tool_call, Mapping):
        function = tool_call.get("function") or {}
        return function.get("name"), function.get("arguments")
    function = getattr(tool_call, "function", None)
    return getattr(function, "name", None), getattr(function, "arguments", None)


class LangVoiceOpenAITools:
    """Binds an API key once and handles OpenAI tool calls."""

    def __init__(self, api_key: Optional[str] = None, *, client: Optional[LangVoiceClient] = None) -> None:
        self.core = ToolCore(api_key, client=client)

    @property
    def client(self) -> LangVoiceClient:
        return self.core.client

    def get_tools(self) -> List[Dict[str, Any]]:
        return get_openai_tools()

    async def handle_call(self, tool_call: Any) -> Dict[str, Any]:
        """Handle an OpenAI tool call (``ChatCompletionMessageToolCall`` or dict)."""
        name, arguments = _call_parts(tool_call)
        result = await self.core.execute(name, arguments)
        return result.to_dict()

    async def handle_call_json(self, tool_call: Any) -> str:
        name, arguments = _call_parts(tool_call)
        result = await self.core.execute(name, arguments)
        return result.to_json()

    def save_audio_from_result(self, result: Mapping[str, Any], output_path: PathLike) -> bool:
        return save_result_audio(result, output_path)

    def get_audio_bytes(self, result: Mapping[str, Any]) -> Optional[bytes]:
        return result_audio(result)
