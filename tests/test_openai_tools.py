"""Tests for the OpenAI function-calling adapter."""

import json
from types import SimpleNamespace

import pytest

from conftest import AUDIO, FakeLangVoiceAPI, make_client
from langvoice.tools.openai_adapter import (
    LANGVOICE_TTS_TOOL,
    LangVoiceOpenAITools,
    get_openai_tools,
    handle_openai_tool_call,
    parse_arguments,
)


def tool_call(name, arguments):
    return {"id": "call_1", "type": "function", "function": {"name": name, "arguments": arguments}}


@pytest.fixture
def tools(client):
    return LangVoiceOpenAITools(client=client)


class TestToolDefinitions:
    def test_four_function_tools(self):
        tools = get_openai_tools()

        assert len(tools) == 4
        assert all(tool["type"] == "function" for tool in tools)
        assert [tool["function"]["name"] for tool in tools] == [
            "langvoice_text_to_speech",
            "langvoice_multi_voice_speech",
            "langvoice_list_voices",
            "langvoice_list_languages",
        ]

    def test_returned_tools_are_copies(self):
        get_openai_tools()[0]["function"]["name"] = "changed"
        assert LANGVOICE_TTS_TOOL["function"]["name"] == "langvoice_text_to_speech"


class TestParseArguments:
    @pytest.mark.parametrize("arguments", [None, ""])
    def test_empty(self, arguments):
        assert parse_arguments(arguments) == {}

    def test_json_string(self):
        assert parse_arguments('{"text": "Hi", "speed": 1.5}') == {"text": "Hi", "speed": 1.5}

    def test_mapping(self):
        assert parse_arguments({"text": "Hi"}) == {"text": "Hi"}

    def test_json_must_be_object(self):
        with pytest.raises(ValueError):
            parse_arguments('["Hi"]')


class TestHandleOpenAIToolCall:
    @pytest.mark.asyncio
    async def test_json_string_arguments(self, client, fake_api):
        output = await handle_openai_tool_call("langvoice_text_to_speech", '{"text": "Hello world"}', client=client)

        result = json.loads(output)
        assert result["success"] is True
        assert result["duration"] == 2.5
        assert fake_api.last_payload["voice"] == "heart"

    @pytest.mark.asyncio
    async def test_malformed_json_is_failure(self, client, fake_api):
        result = json.loads(await handle_openai_tool_call("langvoice_text_to_speech", "{not json", client=client))

        assert result["success"] is False
        assert result["error"].startswith("Invalid tool arguments")
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_unknown_tool(self, client):
        result = json.loads(await handle_openai_tool_call("get_weather", {}, client=client))

        assert result == {"success": False, "error": "Unknown tool: get_weather"}

    @pytest.mark.asyncio
    async def test_missing_api_key_is_failure(self):
        result = json.loads(await handle_openai_tool_call("langvoice_list_voices", None))

        assert result["success"] is False
        assert "API key is required" in result["error"]

    @pytest.mark.asyncio
    async def test_list_languages_without_arguments(self, client):
        result = json.loads(await handle_openai_tool_call("langvoice_list_languages", None, client=client))

        assert result["count"] == 2


class TestLangVoiceOpenAITools:
    @pytest.mark.asyncio
    async def test_handle_dict_tool_call(self, tools):
        result = await tools.handle_call(tool_call("langvoice_text_to_speech", '{"text": "Hello"}'))

        assert result["success"] is True
        assert tools.get_audio_bytes(result) == AUDIO

    @pytest.mark.asyncio
    async def test_handle_sdk_tool_call(self, tools):
        call = SimpleNamespace(
            id="call_1",
            function=SimpleNamespace(name="langvoice_list_voices", arguments="{}"),
        )

        result = await tools.handle_call(call)

        assert result["count"] == 3

    @pytest.mark.asyncio
    async def test_handle_call_json(self, tools):
        output = await tools.handle_call_json(tool_call("langvoice_list_languages", "{}"))
        assert json.loads(output)["languages"][0]["id"] == "american_english"

    @pytest.mark.asyncio
    async def test_server_error_is_failure(self):
        tools = LangVoiceOpenAITools(client=make_client(FakeLangVoiceAPI(status_code=401, error="Invalid API key")))

        result = await tools.handle_call(tool_call("langvoice_text_to_speech", '{"text": "Hello"}'))

        assert result == {"success": False, "error": "Invalid API key"}

    @pytest.mark.asyncio
    async def test_save_audio_from_result(self, tools, tmp_path):
        result = await tools.handle_call(tool_call("langvoice_text_to_speech", '{"text": "Hello"}'))

        assert tools.save_audio_from_result(result, tmp_path / "out.mp3") is True
        assert (tmp_path / "out.mp3").read_bytes() == AUDIO
        assert tools.save_audio_from_result({"success": False}, tmp_path / "none.mp3") is False

    def test_get_tools(self, tools):
        assert len(tools.get_tools()) == 4


class TestUnusableOutputPath:
    @pytest.mark.asyncio
    async def test_nul_byte_output_file_still_succeeds(self, client):
        output = await handle_openai_tool_call(
            "langvoice_text_to_speech", '{"text": "Hi", "output_file": "a\\u0000.mp3"}', client=client
        )

        result = json.loads(output)
        assert result["success"] is True
        assert "output_file" not in result
