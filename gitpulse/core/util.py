from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass

_COUNT_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class CmdResult:
    code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.code == 0


def run(cmd: list[str], cwd: str | None = None) -> CmdResult:
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            text=True,
            encoding="utf-8",
            errors="replace",
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        # missing executable or unusable cwd
        return CmdResult(127, "", str(exc))
    return CmdResult(proc.returncode, proc.stdout.strip(), proc.stderr.strip())


def parse_count(text: str | None) -> int | None:
    if text is None:
        return None
    cleaned = text.strip()
    if not _COUNT_RE.match(cleaned):
        return None
    return int(cleaned)
