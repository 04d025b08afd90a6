"""commitgate - commit-msg hook that enforces the changelog commit convention."""

__version__ = "0.1.0"
