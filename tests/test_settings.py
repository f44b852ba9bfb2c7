import os

import pytest
from pydantic import ValidationError

from simplehttp.config.settings import Settings, get_settings
from simplehttp.core.constants import DEFAULT_USER_AGENT


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    # Point .env discovery at an empty dir so a developer's local file cannot leak in.
    monkeypatch.setenv("SIMPLEHTTP_ENV_FILE", str(tmp_path / "missing.env"))
    for name in (
        "SIMPLEHTTP_CONFIG_PATH",
        "SIMPLEHTTP_TIMEOUT_SECONDS",
        "SIMPLEHTTP_USER_AGENT",
        "SIMPLEHTTP_TRANSPORT",
        "SIMPLEHTTP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


def test_packaged_defaults(fresh_settings):
    settings = fresh_settings()
    assert settings.http.timeout_seconds == 10
    assert settings.http.user_agent == DEFAULT_USER_AGENT
    assert settings.http.encoding == "UTF-8"
    assert settings.http.transport == "httpx"


def test_env_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("SIMPLEHTTP_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("SIMPLEHTTP_USER_AGENT", "override-agent/1.0")
    monkeypatch.setenv("SIMPLEHTTP_TRANSPORT", " Requests ")
    monkeypatch.setenv("SIMPLEHTTP_LOG_LEVEL", "debug")

    settings = fresh_settings()
    assert settings.http.timeout_seconds == 3.5
    assert settings.http.user_agent == "override-agent/1.0"
    assert settings.http.transport == "requests"
    assert settings.app.log_level == "debug"


def test_dotenv_file_is_loaded(fresh_settings, monkeypatch, tmp_path):
    env_file = tmp_path / "local.env"
    env_file.write_text("SIMPLEHTTP_USER_AGENT=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("SIMPLEHTTP_ENV_FILE", str(env_file))

    from simplehttp.core.env import load_dotenv_if_present

    load_dotenv_if_present.cache_clear()
    try:
        assert fresh_settings().http.user_agent == "from-dotenv"
    finally:
        load_dotenv_if_present.cache_clear()
        os.environ.pop("SIMPLEHTTP_USER_AGENT", None)


def test_external_config_file(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("http:\n  timeout_seconds: 1\n  transport: requests\n", encoding="utf-8")
    monkeypatch.setenv("SIMPLEHTTP_CONFIG_PATH", str(path))

    settings = fresh_settings()
    assert settings.http.timeout_seconds == 1
    assert settings.http.transport == "requests"
    assert settings.http.user_agent == DEFAULT_USER_AGENT


def test_external_config_must_be_a_mapping(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("SIMPLEHTTP_CONFIG_PATH", str(path))

    with pytest.raises(ValueError, match="expected a mapping"):
        fresh_settings()


def test_non_positive_timeout_is_rejected(fresh_settings, monkeypatch):
    monkeypatch.setenv("SIMPLEHTTP_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        fresh_settings()


def test_unknown_encoding_is_rejected_at_load(fresh_settings, monkeypatch, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("http:\n  encoding: foo\n", encoding="utf-8")
    monkeypatch.setenv("SIMPLEHTTP_CONFIG_PATH", str(path))

    with pytest.raises(ValidationError, match="Unknown text encoding 'foo'"):
        fresh_settings()


def test_encoding_accepts_any_codec_alias():
    assert Settings(http={"encoding": "latin-1"}).http.encoding == "latin-1"


def test_dotenv_is_found_above_the_working_directory(monkeypatch, tmp_path):
    from simplehttp.core.env import load_dotenv_if_present

    (tmp_path / ".env").write_text("SIMPLEHTTP_TEST_MARKER=found\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    monkeypatch.delenv("SIMPLEHTTP_ENV_FILE", raising=False)

    load_dotenv_if_present.cache_clear()
    try:
        assert load_dotenv_if_present().resolve() == (tmp_path / ".env").resolve()
        assert os.environ["SIMPLEHTTP_TEST_MARKER"] == "found"
    finally:
        load_dotenv_if_present.cache_clear()
        os.environ.pop("SIMPLEHTTP_TEST_MARKER", None)
