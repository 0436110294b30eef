"""Tests for client configuration."""

import pytest

from playmovies_partner.config import (
    DEFAULT_ROOT_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    PlayMoviesConfig,
)

ENV_VARS = (
    "PLAYMOVIES_USER_AGENT",
    "PLAYMOVIES_BASE_URL",
    "PLAYMOVIES_ROOT_URL",
    "PLAYMOVIES_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestPlayMoviesConfig:
    """Tests for PlayMoviesConfig."""

    def test_defaults(self) -> None:
        """Base and root URL both default to the service origin."""
        config = PlayMoviesConfig()

        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.base_url == DEFAULT_ROOT_URL
        assert config.root_url == DEFAULT_ROOT_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_from_env_without_variables(self) -> None:
        """Missing variables fall back to defaults."""
        assert PlayMoviesConfig.from_env() == PlayMoviesConfig()

    def test_from_env_reads_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each variable overrides its setting."""
        monkeypatch.setenv("PLAYMOVIES_USER_AGENT", "sync-job/3")
        monkeypatch.setenv("PLAYMOVIES_BASE_URL", "http://localhost:9000/")
        monkeypatch.setenv("PLAYMOVIES_ROOT_URL", "http://localhost:9000/")
        monkeypatch.setenv("PLAYMOVIES_TIMEOUT", "12.5")

        config = PlayMoviesConfig.from_env()

        assert config.user_agent == "sync-job/3"
        assert config.base_url == "http://localhost:9000/"
        assert config.root_url == "http://localhost:9000/"
        assert config.timeout == 12.5

    def test_from_env_rejects_bad_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A non-numeric timeout is a configuration error."""
        monkeypatch.setenv("PLAYMOVIES_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="PLAYMOVIES_TIMEOUT"):
            PlayMoviesConfig.from_env()

    def test_is_immutable(self) -> None:
        """Config cannot be changed after creation."""
        config = PlayMoviesConfig()

        with pytest.raises(AttributeError):
            config.timeout = 1.0  # type: ignore[misc]
