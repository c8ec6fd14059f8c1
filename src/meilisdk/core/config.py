"""Connection configuration.

Why here:
- Centralizes env vars (pydantic-settings) so the client, the handlers and
  the CLI all read the same connection contract.
- The settings object is frozen: it is shared by reference with every handler
  and every bound `Index`, and nobody is allowed to mutate it.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from meilisdk import __version__


def get_user_config_dir() -> Path:
    """Per-user configuration directory, as resolved by click for the CLI."""

    return Path(typer.get_app_dir("meilisdk"))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def default_env_files() -> tuple[str, ...]:
    """Dotenv files in increasing priority: later files override earlier ones."""

    return (str(get_user_env_file()), ".env")


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env file.

    Values are always quoted, so API keys containing `#` or spaces survive a reload.
    `None` values leave the existing entry untouched.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text("# meilisdk user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(str(env_path), key, value, quote_mode="always")
    return env_path


class ClientSettings(BaseSettings):
    """Connection settings for a search engine instance.

    Resolution order: explicit kwargs, `MEILI_*` env vars, the project `.env`,
    then the user-level `.env`. The project file wins over the user file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MEILI_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=default_env_files(),
        env_file_encoding="utf-8",
    )

    host_url: str = Field(
        default="http://localhost:7700",
        min_length=8,
        description="Base URL of the search engine instance.",
    )
    api_key: str | None = Field(
        default=None,
        description="API key sent in the X-Meili-API-Key header (optional).",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"meilisdk/{__version__}",
        min_length=1,
        description="User-Agent sent with every request.",
    )
