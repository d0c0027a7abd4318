"""Focus countdown timer logic."""

from __future__ import annotations

from dataclasses import dataclass, field

CHOICES = (30, 60, 90, 120, 150, 180)


def secs_to_time(seconds: int) -> str:
    """Format seconds as ``h:m:s`` without zero padding.

    Negative values keep their sign on each non-zero part, as with
    truncating integer division.
    """
    sign = -1 if seconds < 0 else 1
    hours, rest = divmod(abs(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{sign * hours}:{sign * minutes}:{sign * secs}"


def duration_for_choice(index: int) -> int:
    """Return the countdown length in seconds for menu entry ``index``."""
    if not 0 <= index < len(CHOICES):
        raise ValueError(f"choice must be between 0 and {len(CHOICES) - 1}, got {index}")
    return CHOICES[index] * 60


@dataclass
class Countdown:
    """A countdown started from one of the menu choices, ticked once a second."""

    choice: int = 0
    remaining: int = field(init=False)
    finished: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.remaining = duration_for_choice(self.choice)

    @property
    def minutes(self) -> int:
        return CHOICES[self.choice]

    @property
    def message(self) -> str:
        return f"时间到！你已经专注了{self.minutes}分钟啦！"

    def tick(self) -> str | None:
        """Advance one second and return the text to show, or None when time is up."""
        if self.finished:
            return None
        if self.remaining >= 0:
            self.remaining -= 1
            return secs_to_time(self.remaining)
        self.finished = True
        return None