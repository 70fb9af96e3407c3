"""Shared pytest fixtures for the voice detection test suite.

Provides sample audio files, a mock transport and canned service
responses used across the unit tests.
"""

import io
import struct
from unittest.mock import AsyncMock

import pytest

from voicedetect.core.models import AudioAsset, ClassificationResult

# ---------------------------------------------------------------------------
# Audio Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_pcm_bytes():
    """Generate 0.1 second of 440Hz sine-wave PCM audio (16kHz, 16-bit, mono).

    Returns:
        bytes: Raw PCM audio data.
    """
    import math

    sample_rate = 16000
    duration = 0.1
    frequency = 440.0
    amplitude = 16000  # ~50% of max int16

    samples = []
    for i in range(int(sample_rate * duration)):
        value = int(amplitude * math.sin(2 * math.pi * frequency * i / sample_rate))
        samples.append(struct.pack("<h", value))
    return b"".join(samples)


@pytest.fixture
def sample_audio_path(tmp_path, sample_pcm_bytes):
    """Create a temporary WAV file from sample PCM data.

    Returns:
        Path: Path to the temporary WAV file.
    """
    import wave

    wav_path = tmp_path / "test_audio.wav"
    with wave.open(str(wav_path), "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(16000)
        wf.writeframes(sample_pcm_bytes)
    return wav_path


@pytest.fixture
def wav_asset(sample_audio_path):
    """An AudioAsset backed by the temporary WAV file."""
    return AudioAsset.from_path(sample_audio_path)


@pytest.fixture
def mp3_upload():
    """An in-memory upload named like an MP3 (content is arbitrary bytes)."""
    stream = io.BytesIO(b"ID3\x03\x00\x00\x00fake-mp3-frames")
    stream.name = "clip.mp3"
    return stream


# ---------------------------------------------------------------------------
# Service Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ai_generated_body():
    return {
        "status": "success",
        "classification": "AI_GENERATED",
        "confidenceScore": 0.87,
        "language": "hindi",
        "explanation": "Unnaturally stable pitch and spectral envelope.",
    }


@pytest.fixture
def human_body():
    return {
        "status": "success",
        "classification": "HUMAN",
        "confidenceScore": 0.42,
        "language": "tamil",
        "explanation": "Natural breathing and micro-variations in pitch.",
    }


@pytest.fixture
def mock_transport(ai_generated_body):
    """Create a mock transport for unit testing.

    Returns:
        AsyncMock: A mock implementing the BaseTransport interface with a
        default AI_GENERATED response.
    """
    from voicedetect.services.detection.transport import BaseTransport

    transport = AsyncMock(spec=BaseTransport)
    transport.send.return_value = ClassificationResult.model_validate(ai_generated_body)
    return transport
