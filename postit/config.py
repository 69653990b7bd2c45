"""Configuration file handling: location, loading, saving and the 'config' commands."""

from __future__ import annotations

import enum
import os
import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import tomli_w

from postit.errors import (
    ConfigError,
    EmptyEnvVarError,
    EmptySetArgsError,
    EnvVarNotPresentError,
    FileAlreadyExistsError,
    FileDoesntExistError,
    InvalidPathEnvVarError,
    PostitError,
)

ENV_VAR = "POSTIT_ROOT"


def _fmt(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Config:
    """Settings that specify or override postit's behaviour."""

    persister: str = "tasks.csv"
    force_drop: bool = False
    force_copy: bool = False
    drop_after_copy: bool = False

    def __str__(self) -> str:
        return "\n".join(f"{f.name}: {_fmt(getattr(self, f.name))}" for f in fields(self))

    def save(self) -> None:
        """Write the configuration to the config file."""
        config_path().write_text(tomli_w.dumps(asdict(self)), encoding="utf-8")
        print("Configuration saved")


@dataclass
class ConfigUpdate:
    """New values for 'config set'; None leaves a value unchanged."""

    persister: str | None = None
    force_drop: bool | None = None
    force_copy: bool | None = None
    drop_after_copy: bool | None = None

    def is_empty(self) -> bool:
        """Whether no value is to be changed."""
        return all(getattr(self, f.name) is None for f in fields(self))


class ConfigCommand(enum.Enum):
    """Subcommands of the 'config' command."""

    ENV = "env"
    PATH = "path"
    INIT = "init"
    LIST = "list"
    SET = "set"
    REMOVE = "remove"


def env_value() -> str:
    """Return the value of the POSTIT_ROOT environment variable."""
    value = os.environ.get(ENV_VAR)
    if value is None:
        raise EnvVarNotPresentError()
    return value


def config_file_name() -> str:
    """Name of the configuration file."""
    return ".postit.toml"


def home() -> Path:
    """The user's home directory."""
    try:
        return Path.home()
    except RuntimeError as exc:
        raise PostitError("Couldn't locate the user's home directory") from exc


def default_config_parent() -> Path:
    """Default directory of the configuration file."""
    return home() / ".postit"


def path_from_env() -> Path:
    """Directory that holds the config file, taken from POSTIT_ROOT if set."""
    value = os.environ.get(ENV_VAR)
    if value is None:
        path = default_config_parent()
    elif not value:
        raise EmptyEnvVarError()
    else:
        path = Path(value)

    if not path.is_absolute():
        raise InvalidPathEnvVarError(path)
    return path


def config_path() -> Path:
    """Full path of the configuration file."""
    return path_from_env() / config_file_name()


def check_path_exists() -> None:
    """Raise FileDoesntExistError if the configuration file is missing."""
    path = config_path()
    if not path.exists():
        raise FileDoesntExistError(path.parent)


def get_parent_path() -> Path:
    """Directory that stores the configuration file."""
    return config_path().parent


def build_path(path: str | os.PathLike[str]) -> Path:
    """Resolve a file persister path against the configuration directory."""
    path = Path(path)
    parent = get_parent_path()
    if path.is_relative_to(parent):
        return path
    return parent / path


def _from_mapping(data: dict) -> Config:
    values = {}
    for field in fields(Config):
        if field.name not in data:
            raise ConfigError(
                f"Failed to deserialize TOML to config: missing field `{field.name}`"
            )
        value = data[field.name]
        expected = str if field.name == "persister" else bool
        if not isinstance(value, expected):
            raise ConfigError(
                f"Failed to deserialize TOML to config: invalid type for `{field.name}`"
            )
        values[field.name] = value
    return Config(**values)


def load() -> Config:
    """Load the configuration, or the defaults if there is no file."""
    path = config_path()
    if not path.exists():
        return Config()

    content = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to deserialize TOML to config: {exc}") from exc
    return _from_mapping(data)


def init_config() -> None:
    """Create the configuration file with default values."""
    path = config_path()
    if path.exists():
        raise FileAlreadyExistsError(path)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomli_w.dumps(asdict(Config())), encoding="utf-8")
    print(f"Configuration file created at '{path}'")


def print_env() -> None:
    """Print the value of POSTIT_ROOT."""
    value = os.environ.get(ENV_VAR, "")
    if not value:
        raise EmptyEnvVarError()
    print(value)


def print_path() -> None:
    """Print the path of the configuration file."""
    check_path_exists()
    print(config_path())


def remove_config() -> None:
    """Delete the configuration file."""
    path = config_path()
    if not path.exists():
        raise FileDoesntExistError(path.parent)
    path.unlink()
    print(f"Config file removed from '{path.parent}'")


def list_config() -> None:
    """Print the current configuration values."""
    try:
        check_path_exists()
    except PostitError:
        print("Default configuration:")
        print(Config())
        print()
        raise
    print(load())


def set_config(update: ConfigUpdate) -> None:
    """Change configuration values and save them."""
    check_path_exists()
    if update.is_empty():
        raise EmptySetArgsError()

    config = load()
    for field in fields(ConfigUpdate):
        new = getattr(update, field.name)
        if new is None:
            continue
        print(f"{field.name}: {_fmt(getattr(config, field.name))} -> {_fmt(new)}")
        setattr(config, field.name, new)
    print()

    config.save()


def manage(command: ConfigCommand, update: ConfigUpdate | None = None) -> None:
    """Run a 'config' subcommand."""
    match command:
        case ConfigCommand.ENV:
            print_env()
        case ConfigCommand.PATH:
            print_path()
        case ConfigCommand.INIT:
            init_config()
        case ConfigCommand.REMOVE:
            remove_config()
        case ConfigCommand.LIST:
            list_config()
        case ConfigCommand.SET:
            set_config(update if update is not None else ConfigUpdate())