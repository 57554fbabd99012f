# tests/test_settings.py
import pytest

from services.settings import DEFAULT_TIMEOUT, RegistryConfig, Settings, load_settings
from utils.errors import ConfigurationError

REGISTRY_ENV = [
    "EUROPE_PMC_BASE_URL",
    "EUROPE_PMC_TIMEOUT",
    "NIH_REPORTER_API_KEY",
    "ORCID_API_KEY",
    "ORCID_TIMEOUT",
    "GOOGLE_MAPS_API_KEY",
    "CONSOLIDATED_SCREENING_LIST_API_KEY",
    "REGISTRY_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in REGISTRY_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_point_at_public_registries(clean_env):
    settings = load_settings()

    assert settings.europe_pmc.base_url == "https://www.ebi.ac.uk/europepmc/webservices/rest"
    assert settings.orcid.base_url == "https://pub.orcid.org/v3.0"
    assert settings.google_maps.api_key is None
    assert settings.screening_list.timeout == DEFAULT_TIMEOUT


def test_environment_overrides(clean_env):
    clean_env.setenv("EUROPE_PMC_BASE_URL", "http://localhost:9000/rest/")
    clean_env.setenv("REGISTRY_TIMEOUT", "12")
    clean_env.setenv("ORCID_TIMEOUT", "3.5")
    clean_env.setenv("GOOGLE_MAPS_API_KEY", "maps-key")

    settings = load_settings()

    assert settings.europe_pmc.base_url == "http://localhost:9000/rest"
    assert settings.europe_pmc.timeout == 12.0
    assert settings.orcid.timeout == 3.5
    assert settings.google_maps.require_api_key() == "maps-key"


@pytest.mark.parametrize("raw", ["soon", "0", "-5", "nan"])
def test_invalid_timeout_is_a_configuration_error(clean_env, raw):
    clean_env.setenv("REGISTRY_TIMEOUT", raw)
    with pytest.raises(ConfigurationError, match="REGISTRY_TIMEOUT"):
        load_settings()


def test_require_api_key_names_the_variable():
    with pytest.raises(ConfigurationError, match="GOOGLE_MAPS_API_KEY environment variable is not set."):
        Settings().google_maps.require_api_key()


def test_api_key_is_hidden_from_repr():
    config = RegistryConfig(name="demo", base_url="http://x", api_key="top-secret")
    assert "top-secret" not in repr(config)


def test_settings_instances_do_not_share_configs():
    first, second = Settings(), Settings()
    first.google_maps.api_key = "maps-key"
    assert second.google_maps.api_key is None
