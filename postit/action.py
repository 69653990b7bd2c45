"""Actions that can be taken when editing a persister's tasks."""

from __future__ import annotations

import enum


class Action(enum.Enum):
    """An edit applied to a set of tasks."""

    CHECK = "check"
    UNCHECK = "uncheck"
    DROP = "drop"
    SET_CONTENT = "set content"
    SET_PRIORITY = "set priority"

    def __str__(self) -> str:
        return self.value