from __future__ import annotations

import logging
import shlex

from ..errors import GitCommandError
from .util import CmdResult, run

logger = logging.getLogger(__name__)

WORD_DIFF_ARGS = ["git", "diff", "--no-color", "--word-diff=porcelain", "HEAD", "--", "."]
TODAY_LOG_ARGS = [
    "git", "log", "--since=midnight", "--no-merges", "--no-show-signature", "--format=%h",
]


def _checked(cmd: list[str], cwd: str) -> str:
    res: CmdResult = run(cmd, cwd=cwd)
    if not res.ok:
        logger.debug("command failed in %s: %s (%s)", cwd, " ".join(cmd), res.stderr)
        raise GitCommandError(cmd, res.code, res.stderr)
    return res.stdout


def run_word_diff(directory: str) -> str:
    return _checked(list(WORD_DIFF_ARGS), directory)


def run_today_log(directory: str) -> str:
    return _checked(list(TODAY_LOG_ARGS), directory)


def run_change_command(directory: str, command: str) -> str:
    args = shlex.split(command)
    if not args:
        raise GitCommandError([command], 127, "empty change command")
    return _checked(args, directory)
