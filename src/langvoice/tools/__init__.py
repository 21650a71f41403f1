"""AI agent tools for the LangVoice SDK.

Supports multiple AI frameworks:
- Generic: LangVoiceToolkit (works with any framework)
- OpenAI: LangVoiceOpenAITools
- LangChain: LangVoiceLangChainToolkit
- AutoGen: LangVoiceAutoGenTools
"""

from .autogen_adapter import LangVoiceAutoGenTools, create_autogen_tools, get_autogen_function_definitions
from .definitions import ALL_VOICES, AMERICAN_VOICES, BRITISH_VOICES, LANGUAGES, TOOL_NAMES, ToolName
from .generic import LangVoiceToolkit, create_langvoice_toolkit
from .langchain_adapter import (
    BaseLangVoiceTool,
    LangVoiceLanguagesTool,
    LangVoiceLangChainToolkit,
    LangVoiceMultiVoiceTool,
    LangVoiceTTSTool,
    LangVoiceVoicesTool,
    get_all_langchain_tools,
)
from .openai_adapter import (
    LANGVOICE_LIST_LANGUAGES_TOOL,
    LANGVOICE_LIST_VOICES_TOOL,
    LANGVOICE_MULTI_VOICE_TOOL,
    LANGVOICE_TTS_TOOL,
    LangVoiceOpenAITools,
    get_openai_tools,
    handle_openai_tool_call,
)
from .toolkit import ToolCore, ToolOutcome

__all__ = [
    "ToolName",
    "TOOL_NAMES",
    "AMERICAN_VOICES",
    "BRITISH_VOICES",
    "ALL_VOICES",
    "LANGUAGES",
    "ToolCore",
    "ToolOutcome",
    "LangVoiceToolkit",
    "create_langvoice_toolkit",
    "LangVoiceOpenAITools",
    "get_openai_tools",
    "handle_openai_tool_call",
    "LANGVOICE_TTS_TOOL",
    "LANGVOICE_MULTI_VOICE_TOOL",
    "LANGVOICE_LIST_VOICES_TOOL",
    "LANGVOICE_LIST_LANGUAGES_TOOL",
    "BaseLangVoiceTool",
    "LangVoiceLangChainToolkit",
    "LangVoiceTTSTool",
    "LangVoiceMultiVoiceTool",
    "LangVoiceVoicesTool",
    "LangVoiceLanguagesTool",
    "get_all_langchain_tools",
    "LangVoiceAutoGenTools",
    "create_autogen_tools",
    "get_autogen_function_definitions",
]
