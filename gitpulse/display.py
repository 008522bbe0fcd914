"""
Output formatting for gitpulse.
Builds the "changes/commits" fragment and renders it for a status surface.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Dict, Optional

EMPHASIS_WARNING = "warning"
EMPHASIS_INFO = "info"

ANSI_RESET = "\033[0m"
ANSI_DIM = "\033[2m"
ANSI_BOLD_RED = "\033[1;31m"


@dataclass(frozen=True)
class StatusText:
    """A status fragment plus the emphasis level to draw it with."""
    text: str
    emphasis: str

    @property
    def is_warning(self) -> bool:
        return self.emphasis == EMPHASIS_WARNING


def format_status(changes: Optional[int], commits: Optional[int], threshold: int) -> Optional[StatusText]:
    """Combine the counts into ``"<changes>/<commits>"``, or None when there are no changes to show."""
    if changes is None:
        return None
    text = str(changes) if commits is None else f"{changes}/{commits}"
    emphasis = EMPHASIS_WARNING if changes >= threshold else EMPHASIS_INFO
    return StatusText(text, emphasis)


def render_plain(status: StatusText) -> str:
    return status.text


def render_ansi(status: StatusText) -> str:
    color = ANSI_BOLD_RED if status.is_warning else ANSI_DIM
    return f"{color}{status.text}{ANSI_RESET}"


def render_tmux(status: StatusText) -> str:
    style = "fg=red,bold" if status.is_warning else "fg=default"
    return f"#[{style}]{status.text}#[default]"


def render_json(status: StatusText) -> str:
    return json.dumps({"text": status.text, "emphasis": status.emphasis}, sort_keys=True)


RENDERERS: Dict[str, Callable[[StatusText], str]] = {
    "plain": render_plain,
    "ansi": render_ansi,
    "tmux": render_tmux,
    "json": render_json,
}


def render(status: Optional[StatusText], fmt: str = "plain") -> str:
    if status is None:
        return ""
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"unknown output format: {fmt}")
    return renderer(status)
