"""
Value objects shared by the submission pipeline.

Request / response models are pydantic v2; the wire format uses camelCase
(``audioFormat``, ``audioBase64``, ``confidenceScore``) while Python code
uses snake_case field names.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, BinaryIO

from pydantic import BaseModel, ConfigDict, Field

from voicedetect.core.exceptions import ValidationError

# The remote service is always told the clip is WAV, whatever was uploaded.
AUDIO_FORMAT = "wav"

SUPPORTED_EXTENSIONS = ("wav", "mp3")

_MIME_TYPES = {
    "wav": "audio/wav",
    "mp3": "audio/mpeg",
}

# ---------------------------------------------------------------------------
# Language
# ---------------------------------------------------------------------------


class Language(StrEnum):
    """Languages accepted by the classification service."""

    english = "english"
    hindi = "hindi"
    tamil = "tamil"
    telugu = "telugu"
    malayalam = "malayalam"

    @property
    def short_name(self) -> str:
        return _LANGUAGE_NAMES[self][0]

    @property
    def full_name(self) -> str:
        return _LANGUAGE_NAMES[self][1]


_LANGUAGE_NAMES = {
    Language.english: ("EN", "English"),
    Language.hindi: ("HI", "Hindi"),
    Language.tamil: ("TA", "Tamil"),
    Language.telugu: ("TE", "Telugu"),
    Language.malayalam: ("ML", "Malayalam"),
}


def parse_language(code: str | Language) -> Language:
    """Return the ``Language`` for *code*.

    Raises:
        ValidationError: If *code* is not one of the supported languages.
    """
    try:
        return Language(str(code).strip().lower())
    except ValueError:
        supported = ", ".join(lang.value for lang in Language)
        raise ValidationError(
            f"Unsupported language: {code}. Choose one of: {supported}"
        ) from None


# ---------------------------------------------------------------------------
# Audio asset
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AudioAsset:
    """A user-selected audio file, not yet read.

    ``source`` is either a filesystem path or a seekable binary stream
    (e.g. a Streamlit ``UploadedFile``). Only ``.wav`` and ``.mp3`` names
    are accepted.
    """

    name: str
    size: int
    mime_type: str
    source: Path | BinaryIO = field(repr=False)

    def __post_init__(self) -> None:
        if self.extension not in SUPPORTED_EXTENSIONS:
            raise ValidationError(
                f"Unsupported audio format: '{self.name}'. Upload a WAV or MP3 file"
            )

    @property
    def extension(self) -> str:
        return Path(self.name).suffix.lower().lstrip(".")

    @classmethod
    def from_path(cls, path: str | Path) -> "AudioAsset":
        """Build an asset from a file on disk (size is taken from ``stat``)."""
        path = Path(path)
        ext = path.suffix.lower().lstrip(".")
        size = path.stat().st_size if path.exists() else 0
        return cls(
            name=path.name,
            size=size,
            mime_type=_MIME_TYPES.get(ext, "application/octet-stream"),
            source=path,
        )

    @classmethod
    def from_upload(cls, uploaded: BinaryIO) -> "AudioAsset":
        """Build an asset from an uploaded stream.

        Reads ``name``, ``size`` and ``type`` when the stream provides them
        (Streamlit's ``UploadedFile`` does); otherwise the size is measured
        by seeking to the end.
        """
        name = getattr(uploaded, "name", "") or ""
        ext = Path(name).suffix.lower().lstrip(".")
        size = getattr(uploaded, "size", None)
        if size is None:
            uploaded.seek(0, 2)
            size = uploaded.tell()
            uploaded.seek(0)
        mime_type = getattr(uploaded, "type", None) or _MIME_TYPES.get(
            ext, "application/octet-stream"
        )
        return cls(name=name, size=size, mime_type=mime_type, source=uploaded)

    def read_bytes(self) -> bytes:
        """Read the whole file. Streams are rewound first so re-reads work."""
        if isinstance(self.source, Path):
            return self.source.read_bytes()
        self.source.seek(0)
        return self.source.read()


# ---------------------------------------------------------------------------
# Classification request / result
# ---------------------------------------------------------------------------


class ClassificationRequest(BaseModel):
    """POST body sent to the classification service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    language: Language
    audio_format: str = Field(default=AUDIO_FORMAT, alias="audioFormat")
    audio_base64: str = Field(alias="audioBase64", min_length=1)

    def to_payload(self) -> dict:
        """Return the JSON body with wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)


class ClassificationResult(BaseModel):
    """Response from the classification service.

    Every field is optional, untyped and never coerced; unknown fields are
    kept. The body is forwarded exactly as received, so callers must check
    types before using a value. Only ``status == "success"`` marks a verdict.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    status: Any = None
    classification: Any = None
    confidence_score: Any = Field(default=None, alias="confidenceScore")
    language: Any = None
    explanation: Any = None

    @property
    def is_verdict(self) -> bool:
        return self.status == "success"


# ---------------------------------------------------------------------------
# Submission outcome
# ---------------------------------------------------------------------------


class SubmissionState(StrEnum):
    """Lifecycle states of one submission attempt."""

    idle = "idle"
    pending = "pending"
    success = "success"
    failure = "failure"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Snapshot of the controller: exactly one state, with its payload."""

    state: SubmissionState
    result: ClassificationResult | None = None
    error_message: str = ""

    @classmethod
    def idle(cls) -> "SubmissionOutcome":
        return cls(state=SubmissionState.idle)

    @classmethod
    def pending(cls) -> "SubmissionOutcome":
        return cls(state=SubmissionState.pending)

    @classmethod
    def success(cls, result: ClassificationResult) -> "SubmissionOutcome":
        return cls(state=SubmissionState.success, result=result)

    @classmethod
    def failure(cls, message: str) -> "SubmissionOutcome":
        return cls(state=SubmissionState.failure, error_message=message)
