"""LangVoice Python SDK.

Official client for the LangVoice text-to-speech API, with tool adapters for
OpenAI, LangChain, AutoGen and any other function-calling framework.

Usage:
    from langvoice import LangVoiceClient

    client = LangVoiceClient(api_key="your-api-key")
    response = await client.generate("Hello, world!", voice="heart")
    response.save("output.mp3")
"""

from .__version__ import __version__
from .api import generate_speech, save_speech
from .catalog import ALL_VOICES, AMERICAN_VOICES, BRITISH_VOICES, LANGUAGES
from .client import LangVoiceClient
from .exceptions import (
    APIError,
    AuthenticationError,
    LangVoiceError,
    NetworkError,
    RateLimitError,
    UnknownToolError,
    ValidationError,
    is_authentication_error,
    is_langvoice_error,
    is_rate_limit_error,
)
from .schemas import (
    GenerateRequest,
    GenerateResponse,
    Language,
    LanguagesResponse,
    MultiVoiceRequest,
    Voice,
    VoiceCloningRequest,
    VoicesResponse,
)

__all__ = [
    "__version__",
    "LangVoiceClient",
    "generate_speech",
    "save_speech",
    "Voice",
    "Language",
    "GenerateRequest",
    "MultiVoiceRequest",
    "VoiceCloningRequest",
    "GenerateResponse",
    "VoicesResponse",
    "LanguagesResponse",
    "AMERICAN_VOICES",
    "BRITISH_VOICES",
    "ALL_VOICES",
    "LANGUAGES",
    "LangVoiceError",
    "AuthenticationError",
    "RateLimitError",
    "ValidationError",
    "APIError",
    "NetworkError",
    "UnknownToolError",
    "is_langvoice_error",
    "is_authentication_error",
    "is_rate_limit_error",
]
