"""
Command line interface for the LangVoice API.

Usage:
    langvoice speak "Hello world" -o hello.mp3 --voice michael
    langvoice multi "[heart] Hello! [michael] Hi there!" -o dialogue.mp3
    langvoice clone "Hello in my voice" --sample me.wav -o cloned.mp3
    langvoice voices
    langvoice languages
    langvoice config set api_key YOUR_KEY
    langvoice config show

    # Or directly:
    python -m langvoice.cli voices
"""

import argparse
import asyncio
import base64
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .catalog import is_known_language, is_known_voice
from .client import LangVoiceClient
from .exceptions import LangVoiceError
from .internal.config import get_config_path, get_config_value, load_toml_config, set_setting
from .schemas.models import GenerateResponse

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    level_name = "debug" if debug else str(get_config_value("log_level", "info"))
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _report(response: GenerateResponse, output: str) -> None:
    path = response.save(output)
    duration = f"{response.duration}s" if response.duration is not None else "unknown duration"
    print(f"Saved {len(response.audio_data)} bytes to {path} ({duration})")


async def _speak(args: argparse.Namespace) -> None:
    if args.voice and not is_known_voice(args.voice):
        logger.warning(f"Voice '{args.voice}' is not in the built-in catalogue; sending it anyway")
    if args.language and not is_known_language(args.language):
        logger.warning(f"Language '{args.language}' is not in the built-in catalogue; sending it anyway")
    client = LangVoiceClient(args.api_key)
    response = await client.generate(args.text, voice=args.voice, language=args.language, speed=args.speed)
    _report(response, args.output)


async def _multi(args: argparse.Namespace) -> None:
    client = LangVoiceClient(args.api_key)
    response = await client.generate_multi_voice(args.text, language=args.language, speed=args.speed)
    _report(response, args.output)


async def _clone(args: argparse.Namespace) -> None:
    sample = base64.b64encode(Path(args.sample).read_bytes()).decode("ascii")
    client = LangVoiceClient(args.api_key)
    response = await client.generate_cloned(args.text, sample, speed=args.speed)
    _report(response, args.output)


async def _voices(args: argparse.Namespace) -> None:
    client = LangVoiceClient(args.api_key)
    for voice in await client.list_voices():
        details = ", ".join(part for part in (voice.gender, voice.language) if part)
        print(f"{voice.id}: {voice.name}" + (f" ({details})" if details else ""))


async def _languages(args: argparse.Namespace) -> None:
    client = LangVoiceClient(args.api_key)
    for language in await client.list_languages():
        print(f"{language.id}: {language.name}")


def _config(args: argparse.Namespace) -> int:
    if args.config_command == "set":
        try:
            saved = set_setting(args.key, args.value)
        except KeyError as e:
            print(e.args[0], file=sys.stderr)
            return 1
        if not saved:
            print(f"Failed to write {get_config_path()}", file=sys.stderr)
            return 1
        print(f"Set {args.key} in {get_config_path()}")
        return 0

    print(f"# {get_config_path()}")
    for key, value in load_toml_config().items():
        if key == "api_key" and value:
            value = f"{str(value)[:4]}..."
        print(f"{key} = {value!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="langvoice", description="LangVoice text-to-speech")
    parser.add_argument("--api-key", default=None, help="API key (default: LANGVOICE_API_KEY or config file)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    speak = commands.add_parser("speak", help="Generate speech from text")
    speak.add_argument("text")
    speak.add_argument("--output", "-o", default="output.mp3")
    speak.add_argument("--voice", "-v", default=None)
    speak.add_argument("--language", "-l", default=None)
    speak.add_argument("--speed", "-s", type=float, default=None)
    speak.set_defaults(handler=_speak)

    multi = commands.add_parser("multi", help="Generate speech with [voice] markers")
    multi.add_argument("text")
    multi.add_argument("--output", "-o", default="output.mp3")
    multi.add_argument("--language", "-l", default=None)
    multi.add_argument("--speed", "-s", type=float, default=None)
    multi.set_defaults(handler=_multi)

    clone = commands.add_parser("clone", help="Generate speech in the voice of an audio sample")
    clone.add_argument("text")
    clone.add_argument("--sample", required=True, help="Reference audio file")
    clone.add_argument("--output", "-o", default="output.mp3")
    clone.add_argument("--speed", "-s", type=float, default=None)
    clone.set_defaults(handler=_clone)

    voices = commands.add_parser("voices", help="List available voices")
    voices.set_defaults(handler=_voices)

    languages = commands.add_parser("languages", help="List supported languages")
    languages.set_defaults(handler=_languages)

    config = commands.add_parser("config", help="Show or change configuration")
    config_commands = config.add_subparsers(dest="config_command", required=True)
    config_set = config_commands.add_parser("set", help="Set a configuration value")
    config_set.add_argument("key")
    config_set.add_argument("value")
    config_commands.add_parser("show", help="Show the effective configuration")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.debug)

    if args.command == "config":
        return _config(args)

    try:
        asyncio.run(args.handler(args))
    except LangVoiceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
