"""Audio file to Base64 encoding.

The file is read once in a worker thread via ``asyncio.to_thread()`` so the
event loop stays responsive, rendered as a ``data:`` URL, and the scheme
prefix is stripped so only the Base64 payload is sent.
"""

import asyncio
import base64
import logging

from voicedetect.core.exceptions import EncodingError
from voicedetect.core.models import AudioAsset

logger = logging.getLogger(__name__)


def _media_type(mime_type: str) -> str:
    """Bare ``type/subtype`` with parameters dropped; commas would end the prefix early."""
    media_type = mime_type.split(";")[0].split(",")[0].strip()
    return media_type or "application/octet-stream"


def to_data_url(data: bytes, mime_type: str) -> str:
    """Render *data* as a ``data:<mime>;base64,<payload>`` URL."""
    return f"data:{_media_type(mime_type)};base64,{base64.b64encode(data).decode('ascii')}"


def strip_data_url_prefix(text: str) -> str:
    """Return everything after the first comma of a data URL.

    Text without a comma is assumed to be a bare payload and returned as is.
    """
    _, sep, payload = text.partition(",")
    return payload if sep else text


async def encode(asset: AudioAsset) -> str:
    """Read *asset* and return its content as standard Base64 text.

    Raises:
        EncodingError: If the file cannot be read (missing, permission denied, ...).
    """
    try:
        data = await asyncio.to_thread(asset.read_bytes)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to read audio file %s: %s", asset.name, exc)
        raise EncodingError(f"Failed to read audio file: {exc}") from exc

    payload = strip_data_url_prefix(to_data_url(data, asset.mime_type))
    logger.debug("Encoded %s: %d bytes -> %d chars", asset.name, len(data), len(payload))
    return payload
