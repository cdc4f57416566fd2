"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Web search --------------------------------------------------------
    search_url: str = field(
        default_factory=lambda: os.getenv("SEARCH_URL", "https://html.duckduckgo.com/html/")
    )
    search_user_agent: str = field(
        default_factory=lambda: os.getenv("SEARCH_USER_AGENT", _BROWSER_USER_AGENT)
    )
    max_search_results: int = field(
        default_factory=lambda: int(os.getenv("MAX_SEARCH_RESULTS", "10"))
    )

    # --- Open-Meteo --------------------------------------------------------
    geocoding_url: str = field(
        default_factory=lambda: os.getenv(
            "GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
        )
    )
    weather_url: str = field(
        default_factory=lambda: os.getenv("WEATHER_URL", "https://api.open-meteo.com/v1/forecast")
    )
    geocoding_language: str = field(
        default_factory=lambda: os.getenv("GEOCODING_LANGUAGE", "es")
    )
    geocoding_candidates: int = field(
        default_factory=lambda: int(os.getenv("GEOCODING_CANDIDATES", "5"))
    )
    max_displayed_candidates: int = field(
        default_factory=lambda: int(os.getenv("MAX_DISPLAYED_CANDIDATES", "3"))
    )

    # --- HTTP --------------------------------------------------------------
    http_timeout: float = field(
        default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10.0"))
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))


# Module-level singleton -- import this everywhere.
settings = Settings()
