"""Exception hierarchy used across the package."""

from __future__ import annotations

from pathlib import Path


class PostitError(Exception):
    """Base class for every error raised by postit."""


class ConfigError(PostitError):
    """An error related to the configuration file or its location."""


class EmptySetArgsError(ConfigError):
    """Raised when 'config set' is used without any value to change."""

    def __init__(self) -> None:
        super().__init__("You must provide arguments to set (e.g.: --persister tasks.json)")


class EnvVarNotPresentError(ConfigError):
    """Raised when the 'POSTIT_ROOT' environment variable is not set."""

    def __init__(self) -> None:
        super().__init__("environment variable not found")


class EmptyEnvVarError(ConfigError):
    """Raised when the 'POSTIT_ROOT' environment variable is blank."""

    def __init__(self) -> None:
        super().__init__("The 'POSTIT_ROOT' environment variable is empty")


class InvalidPathEnvVarError(ConfigError):
    """Raised when 'POSTIT_ROOT' does not hold an absolute path."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(
            f"The value of 'POSTIT_ROOT' is not a valid path or is a relative path: {path}"
        )


class FileDoesntExistError(ConfigError):
    """Raised when the configuration file is expected but missing."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"The configuration file doesn't exist at '{path}'")


class FileAlreadyExistsError(ConfigError):
    """Raised when the configuration file exists but should not."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"The configuration file already exists at '{path}'")


class TaskError(PostitError):
    """An error related to the state of a single task."""


class AlreadyCheckedError(TaskError):
    """Raised when checking a task that is already checked."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} was already checked")


class AlreadyUncheckedError(TaskError):
    """Raised when unchecking a task that is already unchecked."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} was already unchecked")