from __future__ import annotations

from typing import Any, Dict

import pydantic
from pydantic import BaseModel, ConfigDict, model_validator

from ..exceptions import ValidationError

DEFAULT_VOICE = "heart"
DEFAULT_LANGUAGE = "american_english"
DEFAULT_SPEED = 1.0
MAX_TEXT_LENGTH = 5000
MIN_SPEED = 0.5
MAX_SPEED = 2.0


class SpeechRequest(BaseModel):
    """Fields and invariants shared by every speech generation request.

    ``None`` for an optional field means "use the default", so callers can pass
    tool arguments straight through without resolving defaults themselves.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    speed: float = DEFAULT_SPEED

    @model_validator(mode="before")
    @classmethod
    def _check_text(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = {key: value for key, value in data.items() if value is not None}
        # An empty voice or language selects the default
        for key in ("voice", "language"):
            if key in data and not data[key]:
                del data[key]
        text = data.get("text")
        if not text:
            raise ValidationError("Text is required", status_code=None)
        if isinstance(text, str) and len(text) > MAX_TEXT_LENGTH:
            raise ValidationError(f"Text must be {MAX_TEXT_LENGTH} characters or less", status_code=None)
        return data

    @model_validator(mode="after")
    def _check_speed(self) -> "SpeechRequest":
        if not MIN_SPEED <= self.speed <= MAX_SPEED:
            raise ValidationError(f"Speed must be between {MIN_SPEED} and {MAX_SPEED}", status_code=None)
        return self

    @classmethod
    def create(cls, **fields: Any) -> "SpeechRequest":
        """Build a request, reporting type errors as :class:`ValidationError`."""
        try:
            return cls(**fields)
        except pydantic.ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Invalid {location}: {first['msg']}" if location else first["msg"]
            raise ValidationError(message, status_code=None) from e

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class GenerateRequest(SpeechRequest):
    voice: str = DEFAULT_VOICE
    language: str = DEFAULT_LANGUAGE


class MultiVoiceRequest(SpeechRequest):
    """Text carries inline ``[voice_id]`` markers and is forwarded verbatim."""

    language: str = DEFAULT_LANGUAGE


class VoiceCloningRequest(SpeechRequest):
    voice_sample_base64: str

    @model_validator(mode="after")
    def _check_sample(self) -> "VoiceCloningRequest":
        if not self.voice_sample_base64:
            raise ValidationError("Voice sample is required", status_code=None)
        return self
