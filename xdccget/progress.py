"""Download progress tracking and the one-line progress display."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field

from .config import SIZE_NAMES

NUM_AVERAGE_SPEED_VALUES = 8

# Width taken by everything on the progress line except the bar itself:
# percentage (8), received size (14), "/" (1), total size (14), "|" (1),
# speed (14), "/s|" (3) and the ETA (13).
_FIXED_COLUMNS = 8 + 14 + 1 + 14 + 1 + 14 + 3 + 13


class SpeedAverager:
    """Ring buffer of the most recent transfer speeds."""

    def __init__(self) -> None:
        self.values = [0] * NUM_AVERAGE_SPEED_VALUES
        self.index = 0
        self.filled = False

    def add(self, speed: int) -> None:
        """Store one speed sample, overwriting the oldest once the buffer is full."""
        self.values[self.index] = speed
        self.index = (self.index + 1) % NUM_AVERAGE_SPEED_VALUES
        if not self.filled and self.index == 0:
            self.filled = True

    def average(self, current: int) -> int:
        """Smoothed speed once the buffer is full, otherwise ``current``."""
        if not self.filled:
            return current
        average = 0
        for position, value in enumerate(self.values):
            average += value
            if position > 0:
                average //= 2
        return average


@dataclass
class DownloadProgress:
    """State of one file download, updated once per display tick."""

    complete_file_size: int
    complete_path: str = ""
    size_rcvd: int = 0
    size_now: int = 0
    size_last: int = 0
    average_speed: int = 0
    speed: SpeedAverager = field(default_factory=SpeedAverager)

    def update(self) -> int:
        """Take a speed sample from the bytes received since the last tick; return the speed shown."""
        self.size_last = self.size_now
        self.size_now = self.size_rcvd
        current = self.size_now - self.size_last
        shown = 0
        if self.size_rcvd > 0:
            self.speed.add(current)
            shown = self.speed.average(current)
            self.average_speed = shown
        return shown


def format_size(size: int) -> str:
    """Human-readable size with three decimals, e.g. ``1.500 MByte``."""
    value = float(size)
    unit = 0
    while value > 1024:
        value /= 1024
        unit += 1
    if unit >= len(SIZE_NAMES):
        return f"{size} Byte"
    return f"{value:0.3f} {SIZE_NAMES[unit]}"


def format_eta(seconds: float) -> str:
    """Remaining time such as ``45s``, ``3m12s`` or ``1d2h5m0s``."""
    if seconds <= 60:
        return f"{seconds:.0f}s"
    mins = seconds / 60
    hours = mins / 60
    remain_mins = mins - int(hours) * 60
    days = hours / 24
    remain_hours = hours - int(days) * 24
    remain_seconds = seconds - int(mins) * 60

    parts = []
    if days >= 1:
        parts.append(f"{days:.0f}d")
    if remain_hours >= 1:
        parts.append(f"{remain_hours:.0f}h")
    parts.append(f"{remain_mins:.0f}m{remain_seconds:.0f}s")
    return "".join(parts)


def progress_bar(num_bars: int, fraction: float) -> str:
    """A bar of ``num_bars`` cells, ``#`` for done and ``-`` for pending, in brackets."""
    done = int(num_bars * fraction)
    return "[" + "".join("#" if cell < done else "-" for cell in range(num_bars)) + "]"


def format_progress(progress: DownloadProgress, columns: int) -> str:
    """Advance ``progress`` by one tick and render the line for a terminal ``columns`` wide."""
    bar_len = columns - _FIXED_COLUMNS
    speed = progress.update()

    total = progress.complete_file_size
    fraction = 0.0 if total == 0 else progress.size_rcvd / total

    remaining = total - progress.size_rcvd
    if remaining > 0 and speed > 0:
        eta = format_eta(remaining / speed)
    else:
        eta = "---"

    line = (
        progress_bar(bar_len, fraction)
        + f" {fraction * 100:.2f}% "
        + format_size(progress.size_rcvd)
        + "/"
        + format_size(total)
        + "|"
        + format_size(speed)
        + "/s|"
        + eta
    )
    return line.ljust(columns - 1)


def terminal_columns() -> int:
    """Width of the controlling terminal in columns."""
    return shutil.get_terminal_size().columns