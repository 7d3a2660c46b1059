"""Tests for config.py - env loading, typed getters, and constants."""

import pytest

from dokploy_cli import config

_KNOWN_ENV_KEYS = [
    "DOKPLOY_URL",
    "DOKPLOY_API_KEY",
    "DOKPLOY_HTTP_TIMEOUT_SECONDS",
    "DOKPLOY_HTTP_MAX_RESPONSE_BYTES",
    "DOKPLOY_HTTP_LOG",
    "DOKPLOY_HTTP_LOG_SAMPLE_RATE",
    "DOKPLOY_MCP_RESPONSE_MODE",
    "TRANSPORT_TYPE",
    "HOST",
    "PORT",
]


@pytest.fixture(autouse=True)
def _clean_environ(monkeypatch):
    """Remove known keys from os.environ so file-parsing tests are isolated."""
    for key in _KNOWN_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestLoadEnv:
    def test_basic_key_value(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("DOKPLOY_URL=https://d.example.com\nDOKPLOY_API_KEY=abc\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"DOKPLOY_URL": "https://d.example.com", "DOKPLOY_API_KEY": "abc"}

    def test_strips_whitespace_and_quotes(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text('  KEY  =  "value"  \nOTHER=\'x\'\n')
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"KEY": "value", "OTHER": "x"}

    def test_skips_comments_and_blank_lines(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\nKEY=value\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"KEY": "value"}

    def test_value_with_equals_sign(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("DOKPLOY_API_KEY=abc=def==\n")
        monkeypatch.setattr(config, "ENV_PATH", str(env_file))
        assert config.load_env() == {"DOKPLOY_API_KEY": "abc=def=="}

    def test_missing_file_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "ENV_PATH", str(tmp_path / "missing.env"))
        assert config.load_env() == {}


class TestEnvGet:
    def test_env_file_value(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"DOKPLOY_URL": "https://file.example.com"})
        assert config._env_get("DOKPLOY_URL") == "https://file.example.com"

    def test_process_environment_wins(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"DOKPLOY_URL": "https://file.example.com"})
        monkeypatch.setenv("DOKPLOY_URL", "https://env.example.com")
        assert config._env_get("DOKPLOY_URL") == "https://env.example.com"

    def test_default(self):
        assert config._env_get("DOKPLOY_URL", "fallback") == "fallback"


class TestTypedGetters:
    def test_env_int_valid(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"PORT": "8080"})
        assert config._env_int("PORT", 3000) == 8080

    def test_env_int_missing_returns_default(self):
        assert config._env_int("PORT", 3000) == 3000

    def test_env_int_empty_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"PORT": ""})
        assert config._env_int("PORT", 3000) == 3000

    def test_env_int_bad_value_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"PORT": "abc"})
        assert config._env_int("PORT", 3000) == 3000

    def test_env_float_valid(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"DOKPLOY_HTTP_LOG_SAMPLE_RATE": "0.25"})
        assert config._env_float("DOKPLOY_HTTP_LOG_SAMPLE_RATE", 1.0) == 0.25

    def test_env_float_bad_value_returns_default(self, monkeypatch):
        monkeypatch.setattr(config, "env", {"DOKPLOY_HTTP_LOG_SAMPLE_RATE": "often"})
        assert config._env_float("DOKPLOY_HTTP_LOG_SAMPLE_RATE", 1.0) == 1.0

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "on"])
    def test_env_bool_truthy(self, monkeypatch, raw):
        monkeypatch.setattr(config, "env", {"DOKPLOY_HTTP_LOG": raw})
        assert config._env_bool("DOKPLOY_HTTP_LOG") is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", ""])
    def test_env_bool_falsy(self, monkeypatch, raw):
        monkeypatch.setattr(config, "env", {"DOKPLOY_HTTP_LOG": raw})
        assert config._env_bool("DOKPLOY_HTTP_LOG", True) is False


class TestConstants:
    def test_formats(self):
        assert config.VALID_FORMATS == {"json", "table"}

    def test_transports(self):
        assert config.VALID_TRANSPORTS == {"stdio", "http", "httpStream"}

    def test_response_modes(self):
        assert config.VALID_RESPONSE_MODES == {"legacy", "envelope"}
