"""Tests for request model validation."""

import pydantic
import pytest

from langvoice.exceptions import ValidationError
from langvoice.schemas.requests import (
    MAX_TEXT_LENGTH,
    GenerateRequest,
    MultiVoiceRequest,
    VoiceCloningRequest,
)


class TestTextValidation:
    @pytest.mark.parametrize("length", [1, MAX_TEXT_LENGTH])
    def test_accepts_length_within_bounds(self, length):
        request = GenerateRequest.create(text="a" * length)
        assert len(request.text) == length

    @pytest.mark.parametrize("text", ["", None])
    def test_missing_text_rejected(self, text):
        with pytest.raises(ValidationError, match="Text is required") as exc_info:
            GenerateRequest.create(text=text)
        assert exc_info.value.status_code is None

    def test_text_over_limit_rejected(self):
        with pytest.raises(ValidationError, match="Text must be 5000 characters or less"):
            GenerateRequest.create(text="a" * (MAX_TEXT_LENGTH + 1))

    def test_non_string_text_reported_as_validation_error(self):
        with pytest.raises(ValidationError, match="Invalid text"):
            GenerateRequest.create(text=123)

    def test_multi_voice_text_kept_verbatim(self):
        text = "[heart] Hello! [michael] Hi there!"
        assert MultiVoiceRequest.create(text=text).text == text


class TestSpeedValidation:
    @pytest.mark.parametrize("speed", [0.5, 1.0, 2.0])
    def test_accepts_boundaries(self, speed):
        assert GenerateRequest.create(text="Hi", speed=speed).speed == speed

    @pytest.mark.parametrize("speed", [0, 0.49, 2.01, -1.0])
    def test_rejects_out_of_range(self, speed):
        with pytest.raises(ValidationError, match="Speed must be between 0.5 and 2.0"):
            GenerateRequest.create(text="Hi", speed=speed)


class TestDefaults:
    def test_generate_defaults(self):
        request = GenerateRequest.create(text="Hello world")
        assert request.to_payload() == {
            "text": "Hello world",
            "speed": 1.0,
            "voice": "heart",
            "language": "american_english",
        }

    def test_none_means_default(self):
        request = GenerateRequest.create(text="Hello", voice=None, language=None, speed=None)
        assert (request.voice, request.language, request.speed) == ("heart", "american_english", 1.0)

    def test_multi_voice_payload_has_no_voice(self):
        payload = MultiVoiceRequest.create(text="[heart] Hi", language="british_english").to_payload()
        assert payload == {"text": "[heart] Hi", "speed": 1.0, "language": "british_english"}

    def test_requests_are_immutable(self):
        request = GenerateRequest.create(text="Hello")
        with pytest.raises(pydantic.ValidationError):
            request.voice = "michael"


class TestVoiceCloningRequest:
    def test_sample_required(self):
        with pytest.raises(ValidationError, match="Voice sample is required"):
            VoiceCloningRequest.create(text="Hello", voice_sample_base64="")

    def test_missing_sample_reported(self):
        with pytest.raises(ValidationError, match="voice_sample_base64"):
            VoiceCloningRequest.create(text="Hello")

    def test_payload(self):
        payload = VoiceCloningRequest.create(text="Hello", voice_sample_base64="UklGRg==", speed=1.5).to_payload()
        assert payload == {"text": "Hello", "speed": 1.5, "voice_sample_base64": "UklGRg=="}

    def test_empty_voice_and_language_mean_default(self):
        request = GenerateRequest.create(text="Hi", voice="", language="")
        assert (request.voice, request.language) == ("heart", "american_english")

    def test_empty_language_defaults_for_multi_voice(self):
        assert MultiVoiceRequest.create(text="[heart] Hi", language="").language == "american_english"
