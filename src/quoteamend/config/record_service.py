"""Remote quote-line record service configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_float_env, require_env_vars

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class RecordServiceConfig:
    """Holds connection settings for the remote quote-line record service."""

    base_url: str
    api_token: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Accept": "application/json",
        }


def get_record_service_config() -> RecordServiceConfig:
    values = require_env_vars(("QUOTEAMEND_API_BASE_URL", "QUOTEAMEND_API_TOKEN"))
    return RecordServiceConfig(
        base_url=values["QUOTEAMEND_API_BASE_URL"].rstrip("/"),
        api_token=values["QUOTEAMEND_API_TOKEN"],
        timeout_seconds=optional_float_env("QUOTEAMEND_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
    )
