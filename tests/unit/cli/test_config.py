"""
Tests for WaitForIt configuration.
"""
import dataclasses

import pytest

from waitforit.config import WaitForItConfig, build_joke_url, DEFAULT_JOKE_URL

ENV_VARS = [
    "WAITFORIT_SCHEME",
    "WAITFORIT_HOST",
    "WAITFORIT_PATH",
    "WAITFORIT_CATEGORY",
    "WAITFORIT_TIMEOUT",
    "WAITFORIT_LOG_LEVEL",
    "WAITFORIT_JSON_LOGS",
    "WAITFORIT_LOG_DIR",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestBuildJokeUrl:

    def test_default_url(self):
        assert build_joke_url() == "https://api.chucknorris.io/jokes/random?category=dev"

    def test_deterministic(self):
        assert build_joke_url() == build_joke_url() == DEFAULT_JOKE_URL

    def test_query_is_encoded(self):
        url = build_joke_url(query={"category": "a b&c"})
        assert url.endswith("?category=a+b%26c")


class TestWaitForItConfigDefaults:

    def test_default_url(self):
        assert WaitForItConfig().url == DEFAULT_JOKE_URL

    def test_default_timeout(self):
        assert WaitForItConfig().timeout == 10.0

    def test_default_logging(self):
        config = WaitForItConfig()
        assert config.log_level == "INFO"
        assert config.json_logs is False
        assert config.log_dir is None

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            WaitForItConfig().host = "elsewhere"


class TestWaitForItConfigFromEnv:

    def test_from_env_defaults(self, clean_env):
        assert WaitForItConfig.from_env() == WaitForItConfig()

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv("WAITFORIT_HOST", "jokes.example.test")
        clean_env.setenv("WAITFORIT_CATEGORY", "science")
        clean_env.setenv("WAITFORIT_TIMEOUT", "2.5")
        clean_env.setenv("WAITFORIT_LOG_LEVEL", "debug")
        clean_env.setenv("WAITFORIT_JSON_LOGS", "TRUE")
        clean_env.setenv("WAITFORIT_LOG_DIR", "/tmp/waitforit-logs")

        config = WaitForItConfig.from_env()

        assert config.url == "https://jokes.example.test/jokes/random?category=science"
        assert config.timeout == 2.5
        assert config.log_level == "DEBUG"
        assert config.json_logs is True
        assert config.log_dir == "/tmp/waitforit-logs"

    def test_invalid_timeout(self, clean_env):
        clean_env.setenv("WAITFORIT_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="WAITFORIT_TIMEOUT"):
            WaitForItConfig.from_env()

    def test_empty_log_dir_is_unset(self, clean_env):
        clean_env.setenv("WAITFORIT_LOG_DIR", "")
        assert WaitForItConfig.from_env().log_dir is None


class TestToDict:

    def test_to_dict(self):
        data = WaitForItConfig().to_dict()
        assert data["url"] == DEFAULT_JOKE_URL
        assert data["timeout"] == 10.0
        assert set(data) == {"url", "timeout", "log_level", "json_logs", "log_dir"}
