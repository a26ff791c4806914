import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Generator identity: each running instance needs a distinct pair
    DATACENTER_ID: int = 1
    WORKER_ID: int = 1

    # Bit layout (widths must sum to <= 63)
    EPOCH_MS: int = 1_288_834_974_657  # 2010-11-04T01:42:54.657Z
    TIMESTAMP_BITS: int = 41
    DATACENTER_ID_BITS: int = 5
    WORKER_ID_BITS: int = 5
    SEQUENCE_BITS: int = 12

    # Formatting; JSON object in env, e.g. COUNTRY_CODES='{"France": "FR"}'
    COUNTRY_CODES: dict[str, str] = {
        "USA": "US",
        "Canada": "CA",
        "United Kingdom": "UK",
    }

    # App
    APP_NAME: str = "Tracking Number Generator"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @field_validator("COUNTRY_CODES")
    @classmethod
    def country_codes_two_letters(cls, v: dict[str, str]) -> dict[str, str]:
        """Enforce: every code is exactly 2 ASCII letters, stored uppercase."""
        for name, code in v.items():
            if not re.fullmatch(r"[A-Za-z]{2}", code):
                raise ValueError(f"Country code for {name!r} must be 2 letters, got {code!r}")
        return {name: code.upper() for name, code in v.items()}


settings = Settings()
