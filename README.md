# postit

A small task manager library. Tasks have an id, a piece of text, a priority
(`high`, `med`, `low` or `none`) and a checked flag. When printed to a
terminal, tasks are shown bold and coloured by priority, and checked tasks are
crossed out. Colour is left off when output is not a terminal or `NO_COLOR` is
set, and can be forced with `CLICOLOR_FORCE`.

## Installation

```
pip install postit
```

## Tasks

A task can be read from a line of the form `id,content,priority,checked`:

```python
from postit.task import Priority, Task

task = Task.from_line("5,New task,low,false")
print(task.as_line())        # 5,New task,low,false

task.check()                 # marks it as done
task.check()                 # raises postit.errors.AlreadyCheckedError
```

Unknown priority names fall back to `med`: `Priority.parse("urgent")` gives
`Priority.MED`. A missing priority also means `med`, and the checked field
counts as checked only when it is `true` or `1`. An id that is not a natural
number raises `ValueError`.

## Lists of tasks

```python
from postit.task import Priority
from postit.todo import Todo

todo = Todo.sample()         # four example tasks
todo.view()                  # prints them, one per line

todo.check([2, 3])           # returns the ids that actually changed
todo.uncheck([3])
todo.set_content([1], "Write the report")
todo.set_priority([1], Priority.HIGH)
todo.drop([2, 3])            # returns the ids that were dropped
```

`check` and `uncheck` report tasks already in the requested state on standard
error and leave them out of the returned ids. `drop` removes only checked
tasks, unless `force_drop` is set in the configuration; the others are reported
on standard error and kept. Every one of these operations on an empty list
raises `postit.errors.PostitError`.

## Configuration

Settings live in a `.postit.toml` file. Its directory is taken from the
`POSTIT_ROOT` environment variable, which must hold an absolute path; when the
variable is not set, `~/.postit` is used.

```python
from postit import config

config.init_config()         # writes the default settings
settings = config.load()     # defaults are returned when there is no file
print(settings)

config.set_config(config.ConfigUpdate(force_drop=True))
```

The settings are:

- `persister` (default `tasks.csv`): where tasks are stored.
- `force_drop` (default `false`): drop tasks even when they are not checked.
- `force_copy` (default `false`): allow overwriting a store that already has tasks.
- `drop_after_copy` (default `false`): remove the source store after copying.

A `ConfigUpdate` holds only the values to change; one with nothing in it
raises `EmptySetArgsError`. `config.manage` runs any of the `ConfigCommand`
actions (`ENV`, `PATH`, `INIT`, `LIST`, `SET`, `REMOVE`), and `build_path`
resolves a relative file name against the configuration directory. Errors
are subclasses of `postit.errors.ConfigError`.

## Usage guide

`postit.docs` prints a usage page for each command, for example
`docs.show_add()` or `docs.run(docs.DocTopic.DROP)`; most pages end with a
worked example on the sample task list.

## Argument parsing

`postit.cli.parse_args` parses a command line such as
`["add", "low", "New task"]` or `["check", "2,3"]` into an
`argparse.Namespace`. `command` holds the full command name whichever alias was
used, ids given as comma-separated lists are flattened into `ids`, and the
values of `config set` are collected into a `ConfigUpdate` under `update`.

## What it does not do

postit does not store tasks anywhere: there is no reading or writing of CSV,
JSON or XML files and no database support, so the `persister` setting is only
recorded. It also installs no command: the command line is parsed, but nothing
here carries out the parsed commands.