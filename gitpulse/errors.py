"""
Error types shared across gitpulse.

Command failures never reach the status display: the counters catch
``GitError`` and fall back to zero.
"""

from __future__ import annotations


class GitError(Exception):
    """Exception raised for git (or external counter) command failures."""
    pass


class GitCommandError(GitError):
    """Exception raised when a command cannot run or exits non-zero."""

    def __init__(self, cmd: list[str], code: int, stderr: str = ""):
        self.cmd = cmd
        self.code = code
        self.stderr = stderr
        detail = f"\nError: {stderr}" if stderr else ""
        super().__init__(f"Command failed ({code}): {' '.join(cmd)}{detail}")


class ConfigError(ValueError):
    """Exception raised for invalid configuration values."""
    pass
