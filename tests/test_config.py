import pytest
from pydantic import ValidationError

from mtgdb.config import DEFAULT_API_URL, ClientSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # set-then-delete so values written by load_dotenv are undone too
    for name in ("MTGDB_API_URL", "MTGDB_TIMEOUT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults(tmp_path):
    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"))
    assert settings.base_url == DEFAULT_API_URL
    assert settings.timeout is None


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MTGDB_API_URL", "http://127.0.0.1:8082/")
    monkeypatch.setenv("MTGDB_TIMEOUT", "7.5")
    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"))
    assert settings.base_url == "http://127.0.0.1:8082"
    assert settings.timeout == 7.5


def test_dotenv_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MTGDB_API_URL=http://localhost:9000\n")
    settings = load_settings(dotenv_path=str(env_file))
    assert settings.base_url == "http://localhost:9000"


def test_keyword_overrides_win(monkeypatch, tmp_path):
    monkeypatch.setenv("MTGDB_API_URL", "http://from-env")
    settings = load_settings(dotenv_path=str(tmp_path / "missing.env"), base_url="http://explicit", timeout=None)
    assert settings.base_url == "http://explicit"
    assert settings.timeout is None


def test_settings_are_frozen():
    settings = ClientSettings()
    with pytest.raises(ValidationError):
        settings.base_url = "http://elsewhere"


@pytest.mark.parametrize("kwargs", [{"base_url": "  "}, {"timeout": 0}, {"timeout": -1}])
def test_invalid_settings(kwargs):
    with pytest.raises(ValidationError):
        ClientSettings(**kwargs)


def test_non_numeric_timeout_names_the_variable(monkeypatch, tmp_path):
    monkeypatch.setenv("MTGDB_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="MTGDB_TIMEOUT"):
        load_settings(dotenv_path=str(tmp_path / "missing.env"))
