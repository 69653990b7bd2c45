"""The task, the core unit of task management."""

from __future__ import annotations

import enum
import os
import re
import sys
from dataclasses import dataclass

from postit.errors import AlreadyCheckedError, AlreadyUncheckedError

_U32_MAX = 0xFFFFFFFF
_ID_PATTERN = re.compile(r"\+?[0-9]+")


class Priority(enum.Enum):
    """Importance of a task, which also decides its colour."""

    HIGH = "high"
    MED = "med"
    LOW = "low"
    NONE = "none"

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """Read a priority from text; anything unknown becomes MED."""
        key = text.lower().strip()
        return {
            "high": cls.HIGH,
            "low": cls.LOW,
            "none": cls.NONE,
        }.get(key, cls.MED)

    def __str__(self) -> str:
        return self.value


_COLOR_CODES = {
    Priority.HIGH: "31",
    Priority.MED: "33",
    Priority.LOW: "34",
    Priority.NONE: "37",
}


def _should_colorize() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    if os.environ.get("CLICOLOR") == "0":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


def _parse_id(text: str) -> int:
    if _ID_PATTERN.fullmatch(text):
        value = int(text)
        if value <= _U32_MAX:
            return value
    raise ValueError("ID field parsed incorrectly; must be a natural number")


def split_line(line: str) -> tuple[int, str, Priority, bool]:
    """Split an 'id,content,priority,checked' line into its values."""
    fields = [field.strip() for field in line.split(",")]

    task_id = _parse_id(fields[0])

    if len(fields) < 2:
        raise ValueError("Content field is missing; expected 'id,content,priority,checked'")
    content = fields[1]

    priority = Priority.parse(fields[2]) if len(fields) > 2 else Priority.MED
    checked = len(fields) > 3 and fields[3] in ("true", "1")

    return task_id, content, priority, checked


@dataclass
class Task:
    """A single entry of the task list."""

    id: int = 0
    content: str = ""
    priority: Priority = Priority.MED
    checked: bool = False

    @classmethod
    def from_line(cls, line: str) -> "Task":
        """Build a task from an 'id,content,priority,checked' line."""
        return cls(*split_line(line))

    def as_line(self) -> str:
        """Format the task as an 'id,content,priority,checked' line."""
        return f"{self.id},{self.content},{self.priority},{str(self.checked).lower()}"

    def check(self) -> "Task":
        """Mark the task as checked."""
        if self.checked:
            raise AlreadyCheckedError(self.id)
        self.checked = True
        return self

    def uncheck(self) -> "Task":
        """Mark the task as unchecked."""
        if not self.checked:
            raise AlreadyUncheckedError(self.id)
        self.checked = False
        return self

    def __str__(self) -> str:
        text = f"{self.id}. {self.content}"
        if not _should_colorize():
            return text
        styles = "1;9" if self.checked else "1"
        return f"\x1b[{styles};{_COLOR_CODES[self.priority]}m{text}\x1b[0m"