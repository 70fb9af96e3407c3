"""
Application configuration via pydantic-settings.

Loads the detection endpoint and API key from the environment or a
``.env`` file. Use ``get_settings()`` to obtain the cached singleton so
configuration is resolved once per process.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Voice detection client settings loaded from environment / .env file.

    Field names map directly to env var names (case-insensitive).

    Attributes:
        detection_api_url: Full URL of the remote classification endpoint.
        detection_api_key: Credential sent in the ``X-API-Key`` header.
        default_language: Language selected when a session starts.
        request_timeout: Seconds before the HTTP call is aborted; ``None`` disables it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # --- Remote classification service ---
    # Not validated here; an empty URL or key fails at the transport layer
    detection_api_url: str = ""
    detection_api_key: str = ""

    # --- Submission defaults ---
    default_language: str = "hindi"  # english, hindi, tamil, telugu, malayalam
    request_timeout: float | None = None

    # --- Application ---
    log_level: str = "INFO"  # Python logging level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
