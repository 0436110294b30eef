"""Configuration management for the Play Movies Partner client."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ROOT_URL = "https://playmoviespartner.googleapis.com/"
DEFAULT_USER_AGENT = "playmovies-partner-python/0.1.0"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class PlayMoviesConfig:
    """Initial hub settings.

    The hub copies these at construction; later changes go through
    ``PlayMovies.set_user_agent`` / ``set_base_url`` / ``set_root_url``.
    """

    user_agent: str = DEFAULT_USER_AGENT
    base_url: str = DEFAULT_ROOT_URL
    root_url: str = DEFAULT_ROOT_URL
    timeout: float = DEFAULT_TIMEOUT  # only applies to hub-created HTTP clients

    @classmethod
    def from_env(cls) -> PlayMoviesConfig:
        """Create config from environment variables, falling back to defaults.

        Recognised env vars:
        - PLAYMOVIES_USER_AGENT
        - PLAYMOVIES_BASE_URL
        - PLAYMOVIES_ROOT_URL
        - PLAYMOVIES_TIMEOUT (seconds)
        """
        timeout_raw = os.environ.get("PLAYMOVIES_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                msg = f"PLAYMOVIES_TIMEOUT must be a number of seconds, got {timeout_raw!r}"
                raise ValueError(msg) from None

        return cls(
            user_agent=os.environ.get("PLAYMOVIES_USER_AGENT") or DEFAULT_USER_AGENT,
            base_url=os.environ.get("PLAYMOVIES_BASE_URL") or DEFAULT_ROOT_URL,
            root_url=os.environ.get("PLAYMOVIES_ROOT_URL") or DEFAULT_ROOT_URL,
            timeout=timeout,
        )
