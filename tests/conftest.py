import json

import httpx
import pytest

from langvoice.client import LangVoiceClient
from langvoice.internal.config import reload_config

AUDIO = b"ID3\x03\x00fake-mp3-frames"

AUDIO_HEADERS = {
    "Content-Type": "audio/mpeg",
    "X-Audio-Duration": "2.5",
    "X-Generation-Time": "0.8",
    "X-Characters-Processed": "11",
}

VOICES = {
    "voices": [
        {"id": "heart", "name": "Heart", "gender": "female", "language": "american_english"},
        {"id": "michael", "name": "Michael", "gender": "male", "language": "american_english"},
        {"id": "george", "name": "George", "gender": "male", "language": "british_english"},
    ]
}

LANGUAGES = {
    "languages": [
        {"id": "american_english", "name": "American English"},
        {"id": "british_english", "name": "British English"},
    ]
}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config layer at an empty temp file and clear LANGVOICE_* overrides."""
    monkeypatch.setenv("LANGVOICE_CONFIG", str(tmp_path / "config.toml"))
    for name in ("LANGVOICE_API_KEY", "LANGVOICE_BASE_URL", "LANGVOICE_TIMEOUT", "LANGVOICE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reload_config()
    yield tmp_path / "config.toml"
    reload_config()


class FakeLangVoiceAPI:
    """Answers LangVoice endpoints in-process and records every request."""

    def __init__(self, status_code=200, error=None):
        self.status_code = status_code
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": self.error} if self.error else {})
        if request.url.path.endswith("/tts/voices"):
            return httpx.Response(200, json=VOICES)
        if request.url.path.endswith("/tts/languages"):
            return httpx.Response(200, json=LANGUAGES)
        return httpx.Response(200, content=AUDIO, headers=AUDIO_HEADERS)

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)


def make_client(handler) -> LangVoiceClient:
    return LangVoiceClient(api_key="test-key", transport=httpx.MockTransport(handler))


@pytest.fixture
def fake_api():
    return FakeLangVoiceAPI()


@pytest.fixture
def client(fake_api):
    return make_client(fake_api)
