"""
Voice detection exception hierarchy.

All application-specific exceptions inherit from VoiceDetectError so the
submission controller can turn any of them into a single user-facing
message.
"""

from datetime import UTC, datetime


class VoiceDetectError(Exception):
    """Base exception for all voice detection errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "VOICEDETECT_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class ValidationError(VoiceDetectError):
    """Raised when submission input is missing or invalid, before any I/O."""

    def __init__(self, detail: str = "Invalid input") -> None:
        super().__init__(detail=detail, code="VALIDATION_ERROR")


class EncodingError(VoiceDetectError):
    """Raised when the audio file cannot be read for encoding."""

    def __init__(self, detail: str = "Failed to read audio file") -> None:
        super().__init__(detail=detail, code="ENCODING_ERROR")


class TransportError(VoiceDetectError):
    """Raised on a non-2xx response or a network failure."""

    def __init__(
        self,
        detail: str = "Request failed",
        status_code: int | None = None,
        code: str = "TRANSPORT_ERROR",
    ) -> None:
        self.status_code = status_code
        super().__init__(detail=detail, code=code)


class ParseError(TransportError):
    """Raised when a successful response body is not a JSON object."""

    def __init__(self, detail: str = "Malformed response from server") -> None:
        super().__init__(detail=detail, code="PARSE_ERROR")
