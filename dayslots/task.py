"""A single planned or recorded activity for one time slot."""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER = "nothing"


@dataclass
class Task:
    """What is planned for, or was done in, one two-hour slot of the day."""

    name: str = ""
    content: str = ""
    timenum: int = 0
    is_finish: bool = False
    need_remind: int = 0
    reflection: str = ""
    timeusage: str = ""

    def clear(self) -> None:
        """Reset name and content to the placeholder and drop the reminder."""
        self.name = PLACEHOLDER
        self.content = PLACEHOLDER
        self.need_remind = 0