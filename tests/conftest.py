"""Shared fixtures for gitpulse tests."""

import pytest

from gitpulse.config import (
    ENV_CHANGE_COMMAND,
    ENV_UPDATE_INTERVAL,
    ENV_USE_BUILTIN_DIFF,
    ENV_WARNING_THRESHOLD,
)

SAMPLE_WORD_DIFF = "\n".join([
    "diff --git a/notes.txt b/notes.txt",
    "index 3b18e51..a9c2f10 100644",
    "--- a/notes.txt",
    "+++ b/notes.txt",
    "@@ -1,2 +1,2 @@",
    " hello",
    "-world",
    "+there",
    "~",
    " again",
    "+friend",
    "~",
])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's GITPULSE_* settings out of the tests."""
    for name in (ENV_UPDATE_INTERVAL, ENV_WARNING_THRESHOLD, ENV_USE_BUILTIN_DIFF, ENV_CHANGE_COMMAND):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_word_diff():
    return SAMPLE_WORD_DIFF


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
