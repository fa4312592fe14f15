# src/wordef/core/config.py
"""
Settings for a wordef instance.

Environment overrides:
    WORDEF_HOME      directory holding the saved words
    WORDEF_API_URL   dictionary endpoint; the word is appended to the path

Built once at start-up and passed down; nothing else in the core reads
the environment.
"""

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordef.core.dictionary import BASE_URL
from wordef.core.errors import IOFailure

APP_NAME = "wordef"


def user_config_dir(environ=None) -> Path:
    """The platform's per-user configuration directory."""
    environ = os.environ if environ is None else environ
    home = Path(environ.get("HOME") or Path.home())
    
    if sys.platform == "win32":
        appdata = environ.get("APPDATA")
        if not appdata:
            raise IOFailure(APP_NAME, "cannot locate the configuration directory: %APPDATA% is not set")
        return Path(appdata)
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"
    
    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return home / ".config"


def default_app_dir() -> Path:
    return user_config_dir() / APP_NAME


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WORDEF_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    app_dir: Path = Field(
        default_factory=default_app_dir,
        validation_alias=AliasChoices("WORDEF_HOME"),
    )
    api_url: str = BASE_URL

    @field_validator("app_dir")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def cache_dir(self) -> Path:
        # Records live directly in the app directory
        return self.app_dir
