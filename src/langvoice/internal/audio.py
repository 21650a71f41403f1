"""Audio persistence helpers shared by the client models and tool adapters."""

import base64
import binascii
import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def write_audio(audio: bytes, output_path: PathLike) -> Path:
    """Write audio bytes to ``output_path``, creating parent directories.

    Raises OSError when the path cannot be written.
    """
    path = Path(output_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as audio_file:
        audio_file.write(audio)
    logger.debug(f"Wrote {len(audio)} bytes of audio to {path}")
    return path


def save_audio(audio: bytes, output_path: PathLike) -> Optional[str]:
    """Best-effort variant of :func:`write_audio`.

    Returns the written path, or None if the write failed. Failures are logged,
    never raised: an unusable path (NUL byte, non-path value) counts as a failure.
    """
    try:
        return str(write_audio(audio, output_path))
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Could not save audio to {output_path}: {e}")
        return None


def decode_audio_base64(audio_base64: Optional[str]) -> Optional[bytes]:
    if not audio_base64:
        return None
    try:
        return base64.b64decode(audio_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Ignoring malformed base64 audio: {e}")
        return None


def audio_preview(audio_base64: str, length: int) -> str:
    """Truncated base64 preview used when audio cannot be persisted."""
    return f"{audio_base64[:length]}..."
