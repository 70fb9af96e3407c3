"""Builds a validated ``ClassificationRequest`` from the user's selections."""

import logging
from collections.abc import Awaitable, Callable

from voicedetect.core.exceptions import ValidationError
from voicedetect.core.models import (
    AUDIO_FORMAT,
    AudioAsset,
    ClassificationRequest,
    Language,
    parse_language,
)
from voicedetect.services.detection import encoder

logger = logging.getLogger(__name__)

MISSING_AUDIO_MESSAGE = "Please upload an audio file"


class RequestBuilder:
    """Validates inputs, encodes the audio and assembles the request body.

    Args:
        encode: Async callable turning an ``AudioAsset`` into Base64 text.
            Defaults to :func:`encoder.encode`.
    """

    def __init__(
        self,
        encode: Callable[[AudioAsset], Awaitable[str]] | None = None,
    ) -> None:
        self._encode = encode or encoder.encode

    async def build(
        self,
        audio: AudioAsset | None,
        language: Language | str,
    ) -> ClassificationRequest:
        """Return a request for *audio* in *language*.

        Validation runs before the file is read. ``audio_format`` is always
        ``"wav"``, even for MP3 uploads.

        Raises:
            ValidationError: If no audio is selected, the language is
                unsupported, or the file is empty.
            EncodingError: If reading the file fails.
        """
        if audio is None:
            raise ValidationError(MISSING_AUDIO_MESSAGE)
        language = parse_language(language)
        logger.debug(
            "Building request: file=%s size=%d language=%s", audio.name, audio.size, language
        )

        audio_base64 = await self._encode(audio)
        if not audio_base64:
            raise ValidationError(f"Audio file is empty: {audio.name}")

        return ClassificationRequest(
            language=language,
            audio_format=AUDIO_FORMAT,
            audio_base64=audio_base64,
        )
