"""gitpulse - uncommitted word churn and today's commits for a status line."""

__version__ = "0.1.0"
