"""Watching a document file for changes, renames and removals."""

from __future__ import annotations

import logging
import os
import queue
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

_log = logging.getLogger(__name__)

_DEBOUNCE_SECONDS = 0.010
_POLL_SECONDS = 0.015
_STOP = object()

_REREGISTER_KINDS = frozenset({"moved", "deleted"})
_RELOAD_KINDS = frozenset({"created", "modified"})


class DebouncerAction(Enum):
    """What to do after a burst of file system events."""

    REREGISTER_WATCHER = auto()
    FILE_RELOAD = auto()


def select_action(event_kinds: Iterable[str]) -> DebouncerAction | None:
    """Pick the most interesting action for a batch of event kinds.

    A rename or removal outweighs a creation or modification; other kinds
    are ignored. Returns ``None`` when nothing in the batch matters.
    """
    action = None
    for kind in event_kinds:
        if kind in _REREGISTER_KINDS:
            action = DebouncerAction.REREGISTER_WATCHER
        elif kind in _RELOAD_KINDS and action is None:
            action = DebouncerAction.FILE_RELOAD
    return action


@dataclass(frozen=True)
class _FileChange:
    new_path: Path
    contents: str


def _normalise(path: str | bytes | os.PathLike) -> str:
    return os.path.normcase(os.path.realpath(os.fsdecode(path)))


class _Handler(FileSystemEventHandler):
    def __init__(self, on_event: Callable[[FileSystemEvent], None]) -> None:
        super().__init__()
        self._on_event = on_event

    def on_any_event(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._on_event(event)


class Watcher:
    """Watches one file and reports reloads and path changes through callbacks.

    ``on_reload()`` is called when the watched file changes or reappears after
    being renamed or removed. ``on_change(contents)`` is called once the watcher
    has moved to a new file given to :meth:`update_file`.
    """

    def __init__(
        self,
        file_path: str | Path,
        on_reload: Callable[[], None],
        on_change: Callable[[str], None],
    ) -> None:
        path = Path(file_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Cannot watch missing file {path}")

        self._on_reload = on_reload
        self._on_change = on_change
        self._lock = threading.Lock()
        self._path = path
        self._target = _normalise(path)
        self._events: queue.Queue = queue.Queue()
        self._messages: queue.Queue = queue.Queue()
        self._stopped = threading.Event()

        self._handler = _Handler(self._on_fs_event)
        self._observer = Observer()
        self._watch = None
        self._watched_dir: Path | None = None
        if not self._ensure_watching(path.parent):
            raise FileNotFoundError(f"Cannot watch directory {path.parent}")
        self._observer.start()

        self._debouncer = threading.Thread(target=self._debounce_loop, daemon=True)
        self._worker = threading.Thread(target=self._handle_messages, daemon=True)
        self._debouncer.start()
        self._worker.start()

    def __enter__(self) -> Watcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def update_file(self, new_path: str | Path, contents: str) -> None:
        """Follow ``new_path`` instead, reporting ``contents`` once it is watched."""
        self._messages.put(_FileChange(Path(new_path).resolve(), contents))

    def stop(self) -> None:
        """Stop watching and shut down the background threads."""
        if self._stopped.is_set():
            return
        self._stopped.set()
        self._events.put(_STOP)
        self._messages.put(_STOP)
        self._observer.stop()
        current = threading.current_thread()
        for thread in (self._debouncer, self._worker):
            if thread is not current:
                thread.join(timeout=2)
        if self._observer is not current:
            self._observer.join(timeout=2)

    def _current(self) -> tuple[Path, str]:
        with self._lock:
            return self._path, self._target

    def _set_path(self, path: Path) -> None:
        with self._lock:
            self._path = path
            self._target = _normalise(path)

    def _on_fs_event(self, event: FileSystemEvent) -> None:
        _, target = self._current()
        kind = event.event_type
        source = _normalise(event.src_path)
        if kind == "moved":
            if source == target:
                self._events.put("moved")
            elif _normalise(event.dest_path) == target:
                self._events.put("created")
        elif source == target:
            self._events.put(kind)

    def _ensure_watching(self, directory: Path) -> bool:
        if self._watched_dir == directory:
            return True
        try:
            watch = self._observer.schedule(self._handler, str(directory), recursive=False)
        except OSError:
            return False
        if self._watch is not None:
            try:
                self._observer.unschedule(self._watch)
            except KeyError:
                pass
        self._watch = watch
        self._watched_dir = directory
        return True

    def _wait_until_watchable(self, path: Path) -> bool:
        """Poll until ``path`` exists and is watched; ``False`` if stopped first."""
        while not self._stopped.wait(_POLL_SECONDS):
            if path.exists() and self._ensure_watching(path.parent):
                return True
        return False

    def _debounce_loop(self) -> None:
        while True:
            first = self._events.get()
            if first is _STOP:
                return
            kinds = [first]
            while True:
                try:
                    item = self._events.get(timeout=_DEBOUNCE_SECONDS)
                except queue.Empty:
                    break
                if item is _STOP:
                    return
                kinds.append(item)
            _log.debug("Received debounced file events: %s", kinds)
            action = select_action(kinds)
            if action is None:
                _log.debug("Ignoring events")
            else:
                self._messages.put(action)

    def _handle_messages(self) -> None:
        while True:
            msg = self._messages.get()
            if msg is _STOP:
                return
            if msg is DebouncerAction.REREGISTER_WATCHER:
                _log.debug("File may have been renamed/removed. Falling back to polling")
                path, _ = self._current()
                if not self._wait_until_watchable(path):
                    return
                _log.debug("Successfully re-registered file watcher")
                self._on_reload()
            elif msg is DebouncerAction.FILE_RELOAD:
                _log.debug("Reloading file")
                self._on_reload()
            elif isinstance(msg, _FileChange):
                _log.info("Updating file watcher path: %s", msg.new_path)
                self._set_path(msg.new_path)
                if not self._wait_until_watchable(msg.new_path):
                    return
                self._on_change(msg.contents)