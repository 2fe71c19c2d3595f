"""Back and forward navigation between visited files."""

from __future__ import annotations

from pathlib import Path


class History:
    """A list of visited files with a cursor into it."""

    def __init__(self, path: str | Path) -> None:
        self._history: list[Path] = [Path(path).resolve(strict=True)]
        self._index = 0

    def path(self) -> Path:
        """The file at the current position."""
        return self._history[self._index]

    def make_next(self, file_path: str | Path) -> None:
        """Visit a new file, discarding anything after the current position."""
        resolved = Path(file_path).resolve(strict=True)
        del self._history[self._index + 1 :]
        self._history.append(resolved)
        self._index += 1

    def next(self) -> Path | None:
        """Move forward, returning the new path, or ``None`` at the end."""
        if self._index + 1 == len(self._history):
            return None
        self._index += 1
        return self.path()

    def previous(self) -> Path | None:
        """Move back, returning the new path, or ``None`` at the start."""
        if self._index == 0:
            return None
        self._index -= 1
        return self.path()