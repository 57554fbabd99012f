# File: services/settings.py
import os
from typing import Optional

from pydantic import BaseModel, Field

from utils.errors import ConfigurationError

DEFAULT_TIMEOUT = 30.0

EUROPE_PMC = "europe_pmc"
NIH_REPORTER = "nih_reporter"
ORCID = "orcid"
GOOGLE_MAPS = "google_maps"
SCREENING_LIST = "screening_list"


class RegistryConfig(BaseModel):
    name: str
    base_url: str
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    api_key: Optional[str] = Field(None, repr=False)
    api_key_env: Optional[str] = None

    def require_api_key(self) -> str:
        """Returns the credential or raises before any request is attempted."""
        if not self.api_key:
            env_name = self.api_key_env or f"{self.name.upper()}_API_KEY"
            raise ConfigurationError(
                f"{env_name} environment variable is not set.",
                registry=self.name,
            )
        return self.api_key


class Settings(BaseModel):
    europe_pmc: RegistryConfig = Field(
        default_factory=lambda: RegistryConfig(
            name=EUROPE_PMC,
            base_url="https://www.ebi.ac.uk/europepmc/webservices/rest",
        )
    )
    nih_reporter: RegistryConfig = Field(
        default_factory=lambda: RegistryConfig(
            name=NIH_REPORTER,
            base_url="https://api.reporter.nih.gov/v2",
            api_key_env="NIH_REPORTER_API_KEY",
        )
    )
    orcid: RegistryConfig = Field(
        default_factory=lambda: RegistryConfig(
            name=ORCID,
            base_url="https://pub.orcid.org/v3.0",
            api_key_env="ORCID_API_KEY",
        )
    )
    google_maps: RegistryConfig = Field(
        default_factory=lambda: RegistryConfig(
            name=GOOGLE_MAPS,
            base_url="https://maps.googleapis.com/maps/api",
            api_key_env="GOOGLE_MAPS_API_KEY",
        )
    )
    screening_list: RegistryConfig = Field(
        default_factory=lambda: RegistryConfig(
            name=SCREENING_LIST,
            base_url="https://data.trade.gov/consolidated_screening_list/v1",
            api_key_env="CONSOLIDATED_SCREENING_LIST_API_KEY",
        )
    )


def _timeout(env_name: str, fallback: float) -> float:
    raw = os.getenv(env_name)
    if not raw:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not value > 0:
        raise ConfigurationError(f"{env_name} must be a positive number of seconds, got '{raw}'")
    return value


def _registry(prefix: str, name: str, base_url_default: str, key_env: Optional[str], default_timeout: float) -> RegistryConfig:
    return RegistryConfig(
        name=name,
        base_url=(os.getenv(f"{prefix}_BASE_URL") or base_url_default).rstrip("/"),
        timeout=_timeout(f"{prefix}_TIMEOUT", default_timeout),
        api_key=os.getenv(key_env) if key_env else None,
        api_key_env=key_env,
    )


def load_settings() -> Settings:
    """
    Builds Settings from the process environment.
    Only the app entry point calls this; operations take Settings explicitly.
    """
    defaults = Settings()
    default_timeout = _timeout("REGISTRY_TIMEOUT", DEFAULT_TIMEOUT)

    return Settings(
        europe_pmc=_registry("EUROPE_PMC", EUROPE_PMC, defaults.europe_pmc.base_url, None, default_timeout),
        nih_reporter=_registry(
            "NIH_REPORTER", NIH_REPORTER, defaults.nih_reporter.base_url, "NIH_REPORTER_API_KEY", default_timeout
        ),
        orcid=_registry("ORCID", ORCID, defaults.orcid.base_url, "ORCID_API_KEY", default_timeout),
        google_maps=_registry(
            "GOOGLE_MAPS", GOOGLE_MAPS, defaults.google_maps.base_url, "GOOGLE_MAPS_API_KEY", default_timeout
        ),
        screening_list=_registry(
            "SCREENING_LIST",
            SCREENING_LIST,
            defaults.screening_list.base_url,
            "CONSOLIDATED_SCREENING_LIST_API_KEY",
            default_timeout,
        ),
    )
