"""Shell identity configuration loaded from a TOML file."""

import getpass
import os
import socket
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import toml
from platformdirs import user_config_dir

from .exceptions import InvalidConfig

APP_NAME = "termshell"
CONFIG_FILENAME = "config.toml"


def _default_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "guest"


@dataclass
class ShellConfig:
    """Name of the shell and the identity shown in the prompt."""

    name: str = APP_NAME
    user: str = field(default_factory=_default_user)
    host: str = field(default_factory=socket.gethostname)
    prompt: str = "{user}@{host}$ "

    def format_prompt(self) -> str:
        return self.prompt.format(user=self.user, host=self.host, name=self.name)


def default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME


def load_config(path: Optional[os.PathLike] = None) -> ShellConfig:
    """
    Load the shell configuration.

    Keys live at the top level of the file (or under a [shell] table) and
    match the ShellConfig fields. Missing keys keep their defaults.

    Args:
        path: Configuration file; the per-user default is used when None

    Raises:
        InvalidConfig: If an explicit path does not exist, the file does not
            parse, or it contains unknown or non-string keys
    """
    if path is None:
        config_path = default_config_path()
        if not config_path.is_file():
            return ShellConfig()
    else:
        config_path = Path(path)
        if not config_path.is_file():
            raise InvalidConfig(f"Config file '{config_path}' does not exist")

    try:
        data = toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise InvalidConfig(f"Cannot read config file '{config_path}': {e}")

    if isinstance(data.get("shell"), dict):
        data = data["shell"]

    known = {f.name for f in fields(ShellConfig)}
    values = {}
    for key, value in data.items():
        if key not in known:
            raise InvalidConfig(f"Unknown config key '{key}' in '{config_path}'")
        if not isinstance(value, str):
            raise InvalidConfig(f"Config key '{key}' must be a string")
        values[key] = value

    return ShellConfig(**values)
