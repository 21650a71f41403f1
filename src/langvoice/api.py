import asyncio
from typing import Optional

from .client import LangVoiceClient
from .internal.audio import PathLike


def generate_speech(
    text: str,
    *,
    voice: Optional[str] = None,
    language: Optional[str] = None,
    speed: Optional[float] = None,
    api_key: Optional[str] = None,
) -> bytes:
    client = LangVoiceClient(api_key)
    response = asyncio.run(client.generate(text, voice=voice, language=language, speed=speed))
    return response.audio_data


def save_speech(
    text: str,
    output_path: PathLike,
    *,
    voice: Optional[str] = None,
    language: Optional[str] = None,
    speed: Optional[float] = None,
    api_key: Optional[str] = None,
) -> str:
    client = LangVoiceClient(api_key)
    response = asyncio.run(client.generate(text, voice=voice, language=language, speed=speed))
    return str(response.save(output_path))
