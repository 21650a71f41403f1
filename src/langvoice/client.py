"""Async client for the LangVoice text-to-speech API."""

import asyncio
import logging
import re
from typing import Any, Dict, List, Optional

import httpx
import pydantic

from .catalog import ALL_VOICES, AMERICAN_VOICES, BRITISH_VOICES, LANGUAGES
from .exceptions import APIError, AuthenticationError, NetworkError, map_http_error
from .internal.config import get_api_key, get_config_value
from .schemas.models import GenerateResponse, Language, LanguagesResponse, Voice, VoicesResponse
from .schemas.requests import (
    DEFAULT_LANGUAGE,
    DEFAULT_SPEED,
    DEFAULT_VOICE,
    GenerateRequest,
    MultiVoiceRequest,
    SpeechRequest,
    VoiceCloningRequest,
)

API_KEY_HEADER = "X-API-Key"
DURATION_HEADER = "X-Audio-Duration"
GENERATION_TIME_HEADER = "X-Generation-Time"
CHARACTERS_HEADER = "X-Characters-Processed"

_FLOAT_PREFIX = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([-+]?\d+)")


class LangVoiceClient:
    """LangVoice API client for text-to-speech generation.

    Example:
        client = LangVoiceClient(api_key="your-api-key")
        response = await client.generate("Hello, world!", voice="heart")
        response.save("output.mp3")

    Every call opens its own HTTP connection and is fully buffered; failures
    are raised immediately as :mod:`langvoice.exceptions` errors, without retries.
    """

    AMERICAN_VOICES = AMERICAN_VOICES
    BRITISH_VOICES = BRITISH_VOICES
    ALL_VOICES = ALL_VOICES
    LANGUAGES = LANGUAGES

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            api_key: API key; falls back to LANGVOICE_API_KEY, then the config file
            base_url: API root, defaults to the ``base_url`` setting
            timeout: Per-request timeout in seconds, defaults to the ``timeout`` setting
            transport: Optional httpx transport (proxies, tests)
        """
        self.logger = logging.getLogger(__name__)

        resolved_key = api_key or get_api_key()
        if not resolved_key:
            raise AuthenticationError(
                "API key is required. Pass api_key or set LANGVOICE_API_KEY environment variable."
            )
        self._api_key = resolved_key
        self.base_url = str(base_url or get_config_value("base_url")).rstrip("/")
        self.timeout = float(timeout if timeout is not None else get_config_value("timeout"))
        self._transport = transport

    @property
    def api_key(self) -> str:
        return self._api_key

    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self._api_key,
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> httpx.Response:
        url = self._build_url(path)
        self.logger.debug(f"{method} {url}")

        # self.timeout bounds the whole exchange, response body included
        try:
            async with asyncio.timeout(self.timeout):
                async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as http:
                    response = await http.request(method, url, headers=self._headers(), json=payload)
        except (TimeoutError, httpx.TimeoutException) as e:
            raise APIError("Request timeout", 408) from e
        except httpx.RequestError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        self.logger.debug(f"{method} {url} -> HTTP {response.status_code}")
        if not response.is_success:
            raise map_http_error(response.status_code, self._error_message(response))
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        fallback = f"API error: {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return response.reason_phrase or fallback
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return fallback

    @staticmethod
    def _parse_float_header(value: Optional[str]) -> Optional[float]:
        if not value:
            return None
        match = _FLOAT_PREFIX.match(value)
        return float(match.group(1)) if match else None

    @staticmethod
    def _parse_int_header(value: Optional[str]) -> Optional[int]:
        if not value:
            return None
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else None

    async def _generate(self, path: str, request: SpeechRequest) -> GenerateResponse:
        response = await self._request("POST", path, request.to_payload())
        headers = response.headers
        return GenerateResponse(
            audio_data=response.content,
            duration=self._parse_float_header(headers.get(DURATION_HEADER)),
            generation_time=self._parse_float_header(headers.get(GENERATION_TIME_HEADER)),
            characters_processed=self._parse_int_header(headers.get(CHARACTERS_HEADER)),
        )

    async def _get_json(self, path: str) -> Any:
        response = await self._request("GET", path)
        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON in response from {path}", response.status_code) from e

    async def generate(
        self,
        text: str,
        voice: Optional[str] = None,
        language: Optional[str] = None,
        speed: Optional[float] = None,
    ) -> GenerateResponse:
        """Generate speech from text.

        Args:
            text: Text to convert (1-5000 characters)
            voice: Voice ID, e.g. 'heart' or 'michael' (default: heart)
            language: Language ID, e.g. 'american_english' (default)
            speed: Speech speed from 0.5 to 2.0 (default: 1.0)

        Returns:
            GenerateResponse with MP3 audio and metadata

        Raises:
            ValidationError: Input rejected locally or by the server
            AuthenticationError, RateLimitError, APIError: Request failed
        """
        request = GenerateRequest.create(text=text, voice=voice, language=language, speed=speed)
        return await self._generate("/tts/generate", request)

    async def generate_multi_voice(
        self,
        text: str,
        language: Optional[str] = None,
        speed: Optional[float] = None,
    ) -> GenerateResponse:
        """Generate speech with several voices, e.g. '[heart] Hello! [michael] Hi there!'."""
        request = MultiVoiceRequest.create(text=text, language=language, speed=speed)
        return await self._generate("/tts/multi-voice-text", request)

    async def generate_cloned(
        self,
        text: str,
        voice_sample_base64: str,
        speed: Optional[float] = None,
    ) -> GenerateResponse:
        """Generate speech in the voice of a base64-encoded reference recording."""
        request = VoiceCloningRequest.create(text=text, voice_sample_base64=voice_sample_base64, speed=speed)
        return await self._generate("/tts/generate-cloned", request)

    async def list_voices(self) -> List[Voice]:
        data = await self._get_json("/tts/voices")
        try:
            return VoicesResponse.model_validate(data).voices
        except pydantic.ValidationError as e:
            raise APIError(f"Unexpected voices response: {e.error_count()} invalid field(s)") from e

    async def list_languages(self) -> List[Language]:
        data = await self._get_json("/tts/languages")
        try:
            return LanguagesResponse.model_validate(data).languages
        except pydantic.ValidationError as e:
            raise APIError(f"Unexpected languages response: {e.error_count()} invalid field(s)") from e

    async def text_to_speech(
        self,
        text: str,
        voice: str = DEFAULT_VOICE,
        language: str = DEFAULT_LANGUAGE,
        speed: float = DEFAULT_SPEED,
    ) -> bytes:
        """Convert text to speech and return only the MP3 bytes."""
        response = await self.generate(text, voice=voice, language=language, speed=speed)
        return response.audio_data
