import pytest

from postit.cli import build_parser, parse_args, parse_ids
from postit.config import ConfigCommand
from postit.docs import DocTopic
from postit.task import Priority


def test_parse_ids_single():
    assert parse_ids("2") == [2]


def test_parse_ids_many():
    assert parse_ids("2,3") == [2, 3]


@pytest.mark.parametrize("text", ["", "a", "2,", "-1", "2, 3", "4294967296"])
def test_parse_ids_invalid(text):
    with pytest.raises(ValueError):
        parse_ids(text)


def test_parse_ids_max_u32():
    assert parse_ids("4294967295") == [4294967295]


@pytest.mark.parametrize("name", ["view", "v"])
def test_view_and_alias(name):
    args = parse_args([name, "-p", "tasks.csv"])
    assert args.command == "view"
    assert args.persister == "tasks.csv"


def test_view_without_persister():
    args = parse_args(["view"])
    assert args.persister is None


def test_add():
    args = parse_args(["add", "low", "New task", "-p", "tasks.csv"])
    assert args.command == "add"
    assert args.priority is Priority.LOW
    assert args.content == "New task"
    assert args.persister == "tasks.csv"


def test_add_invalid_priority():
    with pytest.raises(SystemExit):
        parse_args(["add", "urgent", "New task"])


@pytest.mark.parametrize("name,command", [
    ("check", "check"), ("c", "check"),
    ("uncheck", "uncheck"), ("uc", "uncheck"),
    ("drop", "drop"), ("d", "drop"),
])
def test_edit_commands(name, command):
    args = parse_args([name, "2,3"])
    assert args.command == command
    assert args.ids == [2, 3]


def test_edit_ids_separate_tokens():
    args = parse_args(["check", "2", "3,4"])
    assert args.ids == [2, 3, 4]


def test_edit_requires_ids():
    with pytest.raises(SystemExit):
        parse_args(["check"])


def test_edit_rejects_bad_ids():
    with pytest.raises(SystemExit):
        parse_args(["drop", "x"])


def test_set_content():
    args = parse_args(["set", "-p", "tasks.csv", "content", "2", "New content"])
    assert args.command == "set"
    assert args.set_command == "content"
    assert args.ids == [2]
    assert args.content == "New content"
    assert args.persister == "tasks.csv"


def test_set_priority_alias():
    args = parse_args(["s", "priority", "2,3", "low"])
    assert args.command == "set"
    assert args.set_command == "priority"
    assert args.ids == [2, 3]
    assert args.priority is Priority.LOW


def test_copy():
    args = parse_args(["cp", "tasks.csv", "tasks.json"])
    assert args.command == "copy"
    assert (args.left, args.right) == ("tasks.csv", "tasks.json")


@pytest.mark.parametrize("name,command", [
    ("clean", "clean"), ("cl", "clean"),
    ("remove", "remove"), ("rm", "remove"),
    ("sample", "sample"), ("sa", "sample"),
])
def test_persister_commands(name, command):
    args = parse_args([name, "--persister", "tasks.json"])
    assert args.command == command
    assert args.persister == "tasks.json"


@pytest.mark.parametrize("words,expected", [
    (["env"], ConfigCommand.ENV),
    (["path"], ConfigCommand.PATH),
    (["init"], ConfigCommand.INIT),
    (["list"], ConfigCommand.LIST),
    (["ls"], ConfigCommand.LIST),
    (["remove"], ConfigCommand.REMOVE),
    (["rm"], ConfigCommand.REMOVE),
])
def test_config_commands(words, expected):
    args = parse_args(["conf", *words])
    assert args.command == "config"
    assert args.config_command is expected
    assert args.update is None


def test_config_set_values():
    args = parse_args(["config", "set", "--persister", "tasks.json", "--force-copy", "true"])
    assert args.config_command is ConfigCommand.SET
    assert args.update.persister == "tasks.json"
    assert args.update.force_copy is True
    assert args.update.force_drop is None
    assert args.update.drop_after_copy is None


def test_config_set_empty():
    args = parse_args(["config", "s"])
    assert args.update.is_empty()


def test_config_set_invalid_bool():
    with pytest.raises(SystemExit):
        parse_args(["config", "set", "--force-drop", "yes"])


@pytest.mark.parametrize("topic", list(DocTopic))
def test_docs_topics(topic):
    args = parse_args(["docs", topic.value])
    assert args.command == "docs"
    assert args.topic is topic


@pytest.mark.parametrize("alias,topic", [
    ("conf", DocTopic.CONFIG), ("v", DocTopic.VIEW), ("a", DocTopic.ADD),
    ("s", DocTopic.SET), ("c", DocTopic.CHECK), ("uc", DocTopic.UNCHECK),
    ("d", DocTopic.DROP), ("cp", DocTopic.COPY), ("cl", DocTopic.CLEAN),
    ("rm", DocTopic.REMOVE), ("sa", DocTopic.SAMPLE),
])
def test_docs_aliases(alias, topic):
    args = parse_args(["man", alias])
    assert args.topic is topic


def test_missing_command():
    with pytest.raises(SystemExit):
        parse_args([])


def test_unknown_command():
    with pytest.raises(SystemExit):
        parse_args(["frobnicate"])


def test_build_parser_prog():
    assert build_parser().prog == "postit"
    assert build_parser().parse_args(["view"]).command == "view"