"""
Status Layer - The refresh entry point used by every status surface.

``StatusLine`` owns the change-count cache for one process and pairs it
with a fresh commit count on every refresh. Whatever drives the display
(a prompt hook, tmux, the watcher) calls ``refresh`` on its own schedule.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Callable, Optional

from .cache import ChangeCache
from .config import Config
from .core.git import run_change_command, run_today_log, run_word_diff
from .counters import CommandRunner, DiffRunner, LogRunner, count_changes, count_commits
from .display import StatusText, format_status

logger = logging.getLogger(__name__)


class StatusLine:
    """Cached change count plus live commit count for one directory."""

    def __init__(
        self,
        config: Optional[Config] = None,
        diff_runner: DiffRunner = run_word_diff,
        log_runner: LogRunner = run_today_log,
        command_runner: CommandRunner = run_change_command,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config or Config()
        self.diff_runner = diff_runner
        self.log_runner = log_runner
        self.command_runner = command_runner
        self.clock = clock
        self.cache = ChangeCache(self._count_changes)

    def _count_changes(self, directory: str) -> int:
        return count_changes(
            directory,
            self.config,
            diff_runner=self.diff_runner,
            command_runner=self.command_runner,
        )

    def change_count(self, directory: str, now: Optional[float] = None) -> int:
        if now is None:
            now = self.clock()
        return self.cache.get(directory, now, self.config.update_interval)

    def commit_count(self, directory: str) -> int:
        return count_commits(directory, log_runner=self.log_runner)

    def refresh(
        self,
        directory: Optional[str],
        now: Optional[float] = None,
        active: bool = True,
    ) -> Optional[StatusText]:
        """Compute the status fragment for ``directory``.

        Args:
            directory: Base directory of the current file, or None when unknown
            now: Timestamp to evaluate cache expiry against (defaults to the clock)
            active: Whether the surface asking is the one being rendered

        Returns:
            Optional[StatusText]: The fragment, or None when nothing should show
        """
        if not active:
            return None
        if not directory or not os.path.isdir(directory):
            logger.debug("no usable base directory: %r", directory)
            return None

        changes = self.change_count(directory, now)
        commits = self.commit_count(directory)
        return format_status(changes, commits, self.config.warning_threshold)
