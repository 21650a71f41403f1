from __future__ import annotations

import base64
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..internal.audio import PathLike, write_audio


class Voice(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    gender: Optional[str] = None
    language: Optional[str] = None
    description: Optional[str] = None


class Language(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    voices: Optional[List[str]] = None


class VoicesResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    voices: List[Voice]


class LanguagesResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    languages: List[Language]


class GenerateResponse(BaseModel):
    """Generated MP3 audio plus the metadata the API reports in its headers.

    ``audio_data`` is the authoritative value; the ``to_*`` methods are views
    of the same bytes.
    """

    model_config = ConfigDict(frozen=True)

    audio_data: bytes
    duration: Optional[float] = None
    generation_time: Optional[float] = None
    characters_processed: Optional[int] = None

    @classmethod
    def from_base64(cls, audio_base64: str, **metadata: object) -> "GenerateResponse":
        return cls(audio_data=base64.b64decode(audio_base64), **metadata)

    def to_base64(self) -> str:
        return base64.b64encode(self.audio_data).decode("ascii")

    def to_bytearray(self) -> bytearray:
        return bytearray(self.audio_data)

    def save(self, output_path: PathLike) -> Path:
        """Write the audio to ``output_path``; raises OSError on failure."""
        return write_audio(self.audio_data, output_path)
