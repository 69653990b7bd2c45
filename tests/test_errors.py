from pathlib import Path

import pytest

from postit.errors import (
    AlreadyCheckedError,
    AlreadyUncheckedError,
    ConfigError,
    EmptyEnvVarError,
    EmptySetArgsError,
    EnvVarNotPresentError,
    FileAlreadyExistsError,
    FileDoesntExistError,
    InvalidPathEnvVarError,
    PostitError,
    TaskError,
)


def test_empty_set_args_message():
    assert str(EmptySetArgsError()) == (
        "You must provide arguments to set (e.g.: --persister tasks.json)"
    )


def test_empty_env_var_message():
    assert str(EmptyEnvVarError()) == "The 'POSTIT_ROOT' environment variable is empty"


def test_env_var_not_present_is_config_error():
    err = EnvVarNotPresentError()
    assert isinstance(err, ConfigError)
    assert isinstance(err, PostitError)
    assert "not found" in str(err)


def test_invalid_path_keeps_path():
    err = InvalidPathEnvVarError("relative/dir")
    assert err.path == Path("relative/dir")
    assert str(err).endswith("relative/dir")


def test_file_doesnt_exist_message():
    err = FileDoesntExistError(Path("/some/dir"))
    assert str(err) == f"The configuration file doesn't exist at '{Path('/some/dir')}'"
    assert err.path == Path("/some/dir")


def test_file_already_exists_message():
    err = FileAlreadyExistsError(Path("/some/dir/.postit.toml"))
    assert str(err) == (
        f"The configuration file already exists at '{Path('/some/dir/.postit.toml')}'"
    )


def test_already_checked_message():
    err = AlreadyCheckedError(7)
    assert str(err) == "Task 7 was already checked"
    assert err.task_id == 7


def test_already_unchecked_message():
    err = AlreadyUncheckedError(3)
    assert str(err) == "Task 3 was already unchecked"
    assert err.task_id == 3


@pytest.mark.parametrize(
    ("error", "base"),
    [
        (EmptySetArgsError(), ConfigError),
        (EmptyEnvVarError(), ConfigError),
        (FileDoesntExistError("/x"), ConfigError),
        (AlreadyCheckedError(1), TaskError),
        (AlreadyUncheckedError(1), TaskError),
    ],
)
def test_hierarchy_catches_as_postit_error(error, base):
    with pytest.raises(PostitError) as info:
        raise error
    assert isinstance(info.value, base)
    assert str(info.value) == str(error)