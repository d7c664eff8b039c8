"""Settings for creature-dex.

`AppSettings` reads `CREATURE_DEX_*` variables from the process environment,
a project `.env` and the per-user `.env` that `doctor configure` maintains.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "creature-dex"
ENV_PREFIX = "CREATURE_DEX_"
_USER_ENV_HEADER = "# creature-dex user config (.env)"


def user_config_dir() -> Path:
    """Where `doctor configure` keeps the user `.env`."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / APP_DIR_NAME


def user_env_path() -> Path:
    return user_config_dir() / ".env"


def read_user_env(path: Path | None = None) -> dict[str, str]:
    """`KEY=value` pairs of the user `.env`; comments and blank lines skipped."""

    path = path or user_env_path()
    if not path.is_file():
        return {}

    pairs: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or key.startswith("#") or not key.strip():
            continue
        pairs[key.strip()] = value.strip().strip("\"'")
    return pairs


def save_user_settings(values: dict[str, str]) -> Path:
    """Merge `values` into the user `.env` and rewrite it with sorted keys.

    Only `CREATURE_DEX_*` keys are accepted.
    """

    foreign = sorted(key for key in values if not key.startswith(ENV_PREFIX))
    if foreign:
        raise ValueError(f"not creature-dex settings: {', '.join(foreign)}")

    path = user_env_path()
    merged = read_user_env(path)
    merged.update(values)

    path.parent.mkdir(parents=True, exist_ok=True)
    body = [_USER_ENV_HEADER, *(f"{key}={merged[key]}" for key in sorted(merged))]
    path.write_text("\n".join(body) + "\n", encoding="utf-8")
    return path


class AppSettings(BaseSettings):
    """API location, list size, HTTP behaviour and UI timing.

    Environment variables win over the user `.env`, which wins over a
    `.env` in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Later files override earlier ones.
        env_file=(".env", str(user_env_path())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://pokeapi.co/api/v2/pokemon/",
        min_length=8,
        description="List endpoint of the creature API.",
    )
    list_limit: int = Field(
        default=150,
        ge=1,
        le=2000,
        description="Number of creatures requested from the list endpoint (single page).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="creature-dex/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to the API.",
    )
    loading_hide_delay_seconds: float = Field(
        default=0.3,
        ge=0,
        description="Cosmetic delay before the loading message is removed.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    @property
    def list_url(self) -> str:
        return f"{self.api_base_url}?limit={self.list_limit}"
