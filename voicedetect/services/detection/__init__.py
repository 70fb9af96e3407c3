"""
Detection pipeline - encoder, request builder and transport.

Factory function for creating the HTTP transport from settings.
"""

from voicedetect.core.config import Settings, get_settings

from .request_builder import MISSING_AUDIO_MESSAGE, RequestBuilder
from .transport import BaseTransport, HttpTransport

__all__ = [
    "BaseTransport",
    "HttpTransport",
    "MISSING_AUDIO_MESSAGE",
    "RequestBuilder",
    "create_transport",
]


def create_transport(settings: Settings | None = None, **kwargs) -> BaseTransport:
    """Create an ``HttpTransport`` configured from *settings*.

    Args:
        settings: Settings to read the endpoint, key and timeout from
            (defaults to the cached application settings).
        **kwargs: Passed through to ``HttpTransport`` (e.g. ``transport``).

    Returns:
        BaseTransport implementation instance
    """
    settings = settings or get_settings()
    return HttpTransport(
        endpoint=settings.detection_api_url,
        api_key=settings.detection_api_key,
        timeout=settings.request_timeout,
        **kwargs,
    )
