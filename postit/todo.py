"""The task list, where most task management happens."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field

from postit import config
from postit.errors import PostitError, TaskError
from postit.task import Priority, Task


@dataclass
class Todo:
    """A list of tasks."""

    tasks: list[Task] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.tasks = list(self.tasks)

    @classmethod
    def sample(cls) -> "Todo":
        """A small list of made-up tasks."""
        return cls(
            [
                Task.from_line("1,Task,high,false"),
                Task.from_line("2,Task,med,false"),
                Task.from_line("3,Task,low,true"),
                Task.from_line("4,Task,none,true"),
            ]
        )

    def get(self, ids: Iterable[int]) -> list[Task]:
        """Return the tasks whose id is among ``ids``, in list order."""
        wanted = set(ids)
        return [task for task in self.tasks if task.id in wanted]

    def _require_tasks(self, verb: str) -> None:
        if not self.tasks:
            raise PostitError(f"There are no tasks to {verb}")

    def view(self) -> None:
        """Print every task, one per line."""
        self._require_tasks("print")
        for task in self.tasks:
            print(task)

    def add(self, task: Task) -> None:
        """Append a task to the list."""
        self.tasks.append(task)

    def set_priority(self, ids: Iterable[int], priority: Priority) -> None:
        """Change the priority of the selected tasks."""
        self._require_tasks("edit")
        for task in self.get(ids):
            task.priority = priority

    def set_content(self, ids: Iterable[int], content: str) -> None:
        """Change the content of the selected tasks."""
        self._require_tasks("edit")
        for task in self.get(ids):
            task.content = content

    def check(self, ids: Iterable[int]) -> list[int]:
        """Check the selected tasks and return the ids that changed."""
        self._require_tasks("check")
        changed = []
        for task in self.get(ids):
            try:
                task.check()
            except TaskError as exc:
                print(exc, file=sys.stderr)
            else:
                changed.append(task.id)
        return changed

    def uncheck(self, ids: Iterable[int]) -> list[int]:
        """Uncheck the selected tasks and return the ids that changed."""
        self._require_tasks("uncheck")
        changed = []
        for task in self.get(ids):
            try:
                task.uncheck()
            except TaskError as exc:
                print(exc, file=sys.stderr)
            else:
                changed.append(task.id)
        return changed

    def drop(self, ids: Iterable[int]) -> list[int]:
        """Remove the selected tasks and return the ids that were dropped.

        Unless 'force_drop' is set in the configuration, only checked tasks
        are dropped.
        """
        self._require_tasks("drop")
        force_drop = config.load().force_drop
        wanted = set(ids)

        kept = []
        changed = []
        for task in self.tasks:
            if task.id in wanted:
                if force_drop or task.checked:
                    changed.append(task.id)
                    continue
                print(
                    f"Task {task.id} can't be dropped; must be checked first",
                    file=sys.stderr,
                )
            kept.append(task)

        self.tasks = kept
        return changed