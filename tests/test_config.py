"""Tests for configuration loading."""

import pytest

from filelocker.config import Config, Settings, load_settings
from filelocker.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("FILELOCKER_BASE_URL", raising=False)
    monkeypatch.delenv("FILELOCKER_TOKEN", raising=False)


def write_config(directory, text):
    (directory / Config.DEFAULT_CONFIG_FILE).write_text(text, encoding="utf-8")


def test_defaults_without_config_file(tmp_path):
    settings = load_settings(str(tmp_path))
    assert settings == Settings()
    assert settings.set_read_only is False
    assert ".3dm" in settings.native_extensions


def test_file_values(tmp_path):
    write_config(tmp_path, (
        "base-url: https://drive.example.com\n"
        "set-read-only: true\n"
        "native-extensions: [3DM, .gh]\n"
        "max-workers: 2\n"
    ))
    settings = load_settings(str(tmp_path))
    assert settings.base_url == "https://drive.example.com"
    assert settings.set_read_only is True
    assert settings.native_extensions == (".3dm", ".gh")
    assert settings.max_workers == 2


def test_precedence(tmp_path, monkeypatch):
    monkeypatch.setenv("FILELOCKER_BASE_URL", "https://env.example.com")
    monkeypatch.setenv("FILELOCKER_TOKEN", "env-token")
    write_config(tmp_path, "base-url: https://file.example.com\n")

    settings = load_settings(str(tmp_path))
    assert settings.base_url == "https://file.example.com"
    assert settings.token == "env-token"

    settings = load_settings(str(tmp_path), base_url="https://cli.example.com")
    assert settings.base_url == "https://cli.example.com"


def test_unknown_file_keys_are_ignored(tmp_path, caplog):
    write_config(tmp_path, "timeout: 5\nbogus: 1\n")
    settings = load_settings(str(tmp_path))
    assert settings.timeout == 5
    assert "bogus" in caplog.text


def test_unknown_override_rejected(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(str(tmp_path), colour="red")


@pytest.mark.parametrize("text", [
    "- just\n- a list\n",
    "base-url: [unclosed\n",
    "max-workers: 0\n",
    "log-level: verbose\n",
])
def test_bad_config_file(tmp_path, text):
    write_config(tmp_path, text)
    with pytest.raises(ConfigError):
        load_settings(str(tmp_path))


def test_log_level_is_normalized(tmp_path):
    write_config(tmp_path, "log-level: debug\n")
    assert load_settings(str(tmp_path)).log_level == "DEBUG"
    with pytest.raises(ConfigError):
        Settings(log_level="verbose")
