"""Settings from .local.env / environment, and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_ROOT = Path(__file__).resolve().parent.parent
_ENV_PATH = _ROOT / ".local.env"

DEFAULT_ORS_BASE_URL = "https://api.openrouteservice.org"
DEFAULT_OVERPASS_URL = "https://overpass-api.de/api/interpreter"


@dataclass(frozen=True)
class Settings:
    ors_api_key: Optional[str] = None
    ors_base_url: str = DEFAULT_ORS_BASE_URL
    ors_profile: str = "foot-walking"
    overpass_url: str = DEFAULT_OVERPASS_URL
    http_timeout: float = 10.0
    log_level: str = "INFO"

    def ors_client(self):
        from .ors_client import OpenRouteServiceClient

        if not self.ors_api_key:
            raise RuntimeError("ORS_API_KEY must be set in .local.env or the environment")
        return OpenRouteServiceClient(
            self.ors_api_key,
            base_url=self.ors_base_url,
            profile=self.ors_profile,
            timeout=self.http_timeout,
        )

    def overpass_client(self):
        from .overpass import OverpassClient

        return OverpassClient(url=self.overpass_url, timeout=self.http_timeout)


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """Read settings; values already in the environment win over the .env file."""
    load_dotenv(env_path or _ENV_PATH)
    return Settings(
        ors_api_key=os.getenv("ORS_API_KEY") or None,
        ors_base_url=os.getenv("ORS_BASE_URL", DEFAULT_ORS_BASE_URL).rstrip("/"),
        ors_profile=os.getenv("ORS_PROFILE", "foot-walking"),
        overpass_url=os.getenv("OVERPASS_URL", DEFAULT_OVERPASS_URL),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "10")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
