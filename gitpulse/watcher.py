"""
Watcher Layer - Scheduled refresh driven by filesystem activity.

Monitors the working directory with watchdog and re-renders the status
line shortly after edits settle, plus once per update interval so cache
expiry and new commits show up without further activity. A new line is
emitted only when the rendered text changes.
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .display import render
from .statusline import StatusLine

logger = logging.getLogger(__name__)

MIN_TICK = 1.0

# Events that can change the diff or the commit log. Reads (opened,
# closed_no_write) are excluded: git itself produces them while counting.
RELEVANT_EVENTS = {"created", "modified", "deleted", "moved", "closed"}

# Inside .git/ only ref movement matters (commits, checkouts, resets).
GIT_DIR_TRIGGERS = {"HEAD", "refs", "logs"}


def _write_line(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


class StatusWatcher:
    """Serializes refreshes and emits the rendered line when it changes."""

    def __init__(
        self,
        status_line: StatusLine,
        directory: str,
        emit: Callable[[str], None] = _write_line,
        fmt: str = "plain",
    ):
        self.status_line = status_line
        self.directory = directory
        self.emit = emit
        self.fmt = fmt
        self.last_line: Optional[str] = None
        self.lock = threading.Lock()

    def refresh(self) -> Optional[str]:
        """Refresh once. Returns the emitted line, or None if unchanged."""
        with self.lock:
            line = render(self.status_line.refresh(self.directory), self.fmt)
            if line == self.last_line:
                return None
            self.last_line = line
            self.emit(line)
            return line


class RefreshHandler(FileSystemEventHandler):
    """Debounces filesystem events into a single refresh call."""

    def __init__(self, callback: Callable[[], object], root: str, debounce: float = 1.0):
        super().__init__()
        self.callback = callback
        self.root = Path(root).resolve()
        self.debounce = debounce
        self.timer: Optional[threading.Timer] = None
        self.lock = threading.Lock()

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in RELEVANT_EVENTS:
            return
        if self.should_ignore_path(event.src_path):
            return
        self._schedule()

    def should_ignore_path(self, path) -> bool:
        """Check if a changed path cannot affect the counts."""
        if isinstance(path, bytes):
            path = path.decode(errors="replace")
        try:
            parts = Path(path).resolve().relative_to(self.root).parts
        except ValueError:
            return False

        if not parts or parts[0] != ".git":
            return False
        if parts[-1].endswith(".lock"):
            return True
        return len(parts) < 2 or parts[1] not in GIT_DIR_TRIGGERS

    def _schedule(self) -> None:
        with self.lock:
            if self.timer is not None:
                self.timer.cancel()
            self.timer = threading.Timer(self.debounce, self._fire)
            self.timer.daemon = True
            self.timer.start()

    def _fire(self) -> None:
        with self.lock:
            self.timer = None
        try:
            self.callback()
        except Exception:
            logger.exception("refresh after file change failed")

    def cancel(self) -> None:
        with self.lock:
            if self.timer is not None:
                self.timer.cancel()
                self.timer = None


def watch(
    status_line: StatusLine,
    directory: str,
    emit: Callable[[str], None] = _write_line,
    fmt: str = "plain",
    debounce: float = 1.0,
) -> None:
    """Keep the status line current until interrupted.

    Args:
        status_line: Refresher holding the cache and config
        directory: Directory to monitor and report on
        emit: Receives every new rendered line
        fmt: Renderer name (see ``display.RENDERERS``)
        debounce: Seconds of quiet after a file change before refreshing

    Raises:
        RuntimeError: If the directory cannot be watched
    """
    watch_path = Path(directory).resolve()
    if not watch_path.exists():
        raise RuntimeError(f"Path does not exist: {watch_path}")
    if not watch_path.is_dir():
        raise RuntimeError(f"Path is not a directory: {watch_path}")

    watcher = StatusWatcher(status_line, str(watch_path), emit=emit, fmt=fmt)
    handler = RefreshHandler(watcher.refresh, str(watch_path), debounce=debounce)

    observer = Observer()
    observer.schedule(handler, str(watch_path), recursive=True)
    observer.start()
    logger.info("watching %s", watch_path)

    try:
        watcher.refresh()
        while True:
            time.sleep(max(MIN_TICK, status_line.config.update_interval))
            watcher.refresh()
    except KeyboardInterrupt:
        logger.info("stopping watcher")
    finally:
        handler.cancel()
        observer.stop()
        observer.join()
