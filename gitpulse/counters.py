"""
Counter Layer - Turn git command output into small integers.

The diff counter measures uncommitted word-level churn; the commit
counter measures today's non-merge commits. Both treat any command
failure as zero.
"""

from __future__ import annotations

import logging
from typing import Callable

from .config import Config
from .core.git import run_change_command, run_today_log, run_word_diff
from .core.util import parse_count
from .errors import GitError

logger = logging.getLogger(__name__)

DiffRunner = Callable[[str], str]
LogRunner = Callable[[str], str]
CommandRunner = Callable[[str, str], str]


def is_changed_word(line: str) -> bool:
    """Check if a word-diff line marks an added or removed word.

    Single ``+``/``-`` markers count; doubled markers (``+++``/``---``
    file headers) are diff metadata and never count.
    """
    if line.startswith("+"):
        return not line.startswith("++")
    if line.startswith("-"):
        return not line.startswith("--")
    return False


def count_diff_words(diff_text: str) -> int:
    """Count changed words in ``git diff --word-diff=porcelain`` output."""
    return sum(1 for line in diff_text.splitlines() if is_changed_word(line))


def count_commit_lines(log_text: str) -> int:
    return sum(1 for line in log_text.splitlines() if line.strip())


def count_changes(
    directory: str,
    config: Config,
    diff_runner: DiffRunner = run_word_diff,
    command_runner: CommandRunner = run_change_command,
) -> int:
    """Count changed words in ``directory`` versus the last commit.

    Args:
        directory: Working directory to inspect
        config: Selects the built-in word diff or the external command
        diff_runner: Produces word-diff text for a directory
        command_runner: Runs the external counter command in a directory

    Returns:
        int: Non-negative change count, 0 when the command fails
    """
    if config.use_builtin_diff:
        try:
            return count_diff_words(diff_runner(directory))
        except GitError as e:
            logger.debug("word diff unavailable in %s: %s", directory, e)
            return 0

    try:
        output = command_runner(directory, config.change_command)
    except GitError as e:
        logger.debug("change command unavailable in %s: %s", directory, e)
        return 0

    count = parse_count(output)
    if count is None:
        logger.warning("%s printed %r, expected a single integer", config.change_command, output)
        return 0
    return count


def count_commits(directory: str, log_runner: LogRunner = run_today_log) -> int:
    """Count non-merge commits made since local midnight in ``directory``."""
    try:
        return count_commit_lines(log_runner(directory))
    except GitError as e:
        logger.debug("commit log unavailable in %s: %s", directory, e)
        return 0
