"""In-game message log."""

from __future__ import annotations

from .maths import clamp


class Logger:
    """Collects messages and hands back the most recent ones."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    @property
    def entries(self) -> tuple[str, ...]:
        """All messages, oldest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def last_entries(self, number: int) -> list[str]:
        """The newest messages, newest first.

        ``number`` is clamped to the log size and one more entry than
        asked for is returned when the log holds enough.
        """
        count = clamp(0, len(self._entries), number)
        start = max(len(self._entries) - count - 1, 0)
        return self._entries[start:][::-1]

    def add(self, entry: str) -> None:
        self._entries.append(str(entry))