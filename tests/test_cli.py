"""Tests for the langvoice command line interface."""

import base64
from unittest.mock import patch

import pytest

from conftest import AUDIO, FakeLangVoiceAPI, make_client
from langvoice import cli
from langvoice.internal.config import get_config_value


def run_cli(fake_api, *argv):
    with patch("langvoice.cli.LangVoiceClient", side_effect=lambda api_key=None: make_client(fake_api)):
        return cli.main(list(argv))


class TestListingCommands:
    def test_voices_prints_one_line_per_voice(self, fake_api, capsys):
        assert run_cli(fake_api, "voices") == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "heart: Heart (female, american_english)",
            "michael: Michael (male, american_english)",
            "george: George (male, british_english)",
        ]

    def test_languages(self, fake_api, capsys):
        assert run_cli(fake_api, "languages") == 0
        assert "british_english: British English" in capsys.readouterr().out


class TestSpeechCommands:
    def test_speak_writes_file(self, fake_api, tmp_path, capsys):
        target = tmp_path / "hello.mp3"

        assert run_cli(fake_api, "speak", "Hello world", "-o", str(target), "--voice", "michael") == 0

        assert target.read_bytes() == AUDIO
        assert fake_api.last_payload["voice"] == "michael"
        assert f"to {target} (2.5s)" in capsys.readouterr().out

    def test_unknown_voice_still_sent(self, fake_api, tmp_path):
        assert run_cli(fake_api, "speak", "Hi", "-o", str(tmp_path / "a.mp3"), "--voice", "custom_voice") == 0
        assert fake_api.last_payload["voice"] == "custom_voice"

    def test_multi(self, fake_api, tmp_path):
        assert run_cli(fake_api, "multi", "[heart] Hi! [michael] Hello!", "-o", str(tmp_path / "d.mp3")) == 0
        assert fake_api.requests[0].url.path.endswith("/tts/multi-voice-text")

    def test_clone_encodes_sample(self, fake_api, tmp_path):
        sample = tmp_path / "me.wav"
        sample.write_bytes(b"RIFF....WAVE")

        assert run_cli(fake_api, "clone", "Hi", "--sample", str(sample), "-o", str(tmp_path / "c.mp3")) == 0
        assert fake_api.last_payload["voice_sample_base64"] == base64.b64encode(b"RIFF....WAVE").decode()

    def test_api_error_exits_1(self, tmp_path, capsys):
        fake_api = FakeLangVoiceAPI(status_code=401, error="Invalid API key")

        assert run_cli(fake_api, "speak", "Hi", "-o", str(tmp_path / "a.mp3")) == 1
        assert "Invalid API key" in capsys.readouterr().err

    def test_validation_error_exits_1(self, fake_api, tmp_path, capsys):
        assert run_cli(fake_api, "speak", "Hi", "--speed", "5", "-o", str(tmp_path / "a.mp3")) == 1
        assert "Speed must be between" in capsys.readouterr().err
        assert fake_api.requests == []

    def test_missing_api_key_exits_1(self, capsys):
        assert cli.main(["voices"]) == 1
        assert "API key is required" in capsys.readouterr().err


class TestConfigCommands:
    def test_set_and_show_masks_key(self, capsys):
        assert cli.main(["config", "set", "api_key", "secret-key-123"]) == 0
        assert cli.main(["config", "set", "timeout", "15"]) == 0
        capsys.readouterr()

        assert cli.main(["config", "show"]) == 0

        out = capsys.readouterr().out
        assert "secret-key-123" not in out
        assert "api_key = 'secr...'" in out
        assert get_config_value("timeout") == 15.0

    def test_set_unknown_key(self, capsys):
        assert cli.main(["config", "set", "colour", "blue"]) == 1
        assert "Unknown setting" in capsys.readouterr().err

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            cli.main([])
