"""Commit message validation package."""

from .validation import (
    PatternHandler,
    ReleasePatternHandler,
    ConventionalPatternHandler,
    create_validation_chain,
    parse_header,
)
from .validator import CommitMessageValidator

__all__ = [
    'PatternHandler',
    'ReleasePatternHandler',
    'ConventionalPatternHandler',
    'create_validation_chain',
    'parse_header',
    'CommitMessageValidator',
]
