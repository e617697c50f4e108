"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, field_validator

from twilio_recordings.utils.path import API_BASE_URL


class DownloadConfig(BaseModel):
    """A validated configuration model for the application."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # API
    api_base_url: str = API_BASE_URL

    # Storage
    tmp_dir: str | None = None

    # Transport
    max_connections: int = 8
    connect_timeout: float = 15.0
    read_timeout: float = 90.0

    # Output
    verify_output: bool = False

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensures the base URL is a bare http(s) origin."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"API base URL must be an http(s) URL, got: {v!r}")
        if parsed.path not in ("", "/") or parsed.query or parsed.fragment:
            raise ValueError(
                "API base URL must not contain a path; the API version is added "
                "automatically."
            )
        return v.rstrip("/")

    @field_validator("tmp_dir")
    @classmethod
    def validate_tmp_dir(cls, v: str | None) -> str | None:
        """Treats an empty string as 'use the system default'."""
        return v or None

    @field_validator("max_connections")
    @classmethod
    def validate_connections(cls, v: int) -> int:
        """Ensures a reasonable number of connections."""
        if v < 1 or v > 64:
            raise ValueError("Max connections must be between 1 and 64.")
        return v

    @field_validator("connect_timeout", "read_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts must be positive.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
