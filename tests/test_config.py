import pytest

from route_picker.config import DEFAULT_ORS_BASE_URL, Settings, load_settings
from route_picker.ors_client import OpenRouteServiceClient
from route_picker.overpass import OverpassClient

ENV_VARS = ["ORS_API_KEY", "ORS_BASE_URL", "ORS_PROFILE", "OVERPASS_URL", "HTTP_TIMEOUT", "LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    s = load_settings(tmp_path / "missing.env")
    assert s.ors_api_key is None
    assert s.ors_base_url == DEFAULT_ORS_BASE_URL
    assert s.ors_profile == "foot-walking"
    assert s.http_timeout == 10.0


def test_env_file(clean_env, tmp_path):
    env = tmp_path / ".local.env"
    env.write_text("ORS_API_KEY=abc\nORS_BASE_URL=https://ors.local/\nHTTP_TIMEOUT=2.5\n")
    s = load_settings(env)
    assert s.ors_api_key == "abc"
    assert s.ors_base_url == "https://ors.local"
    assert s.http_timeout == 2.5


def test_environment_wins_over_file(clean_env, tmp_path):
    env = tmp_path / ".local.env"
    env.write_text("ORS_PROFILE=cycling-regular\n")
    clean_env.setenv("ORS_PROFILE", "foot-hiking")
    assert load_settings(env).ors_profile == "foot-hiking"


def test_clients_from_settings():
    s = Settings(ors_api_key="k", ors_profile="foot-hiking", http_timeout=4)
    ors = s.ors_client()
    assert isinstance(ors, OpenRouteServiceClient)
    assert ors.profile == "foot-hiking" and ors.timeout == 4
    assert isinstance(s.overpass_client(), OverpassClient)


def test_ors_client_requires_key():
    with pytest.raises(RuntimeError):
        Settings().ors_client()
