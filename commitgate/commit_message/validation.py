"""Commit message classification using Chain of Responsibility pattern.

A message is accepted by the first handler whose pattern matches it. When
no handler matches, the last handler in the chain produces the rejection.
"""
import re
from abc import ABC, abstractmethod
from typing import Optional

from ..diagnostics import DEFAULT_CONVENTION_DOC, build_diagnostic
from ..models import CommitType, ConventionalHeader, ValidationResult

RELEASE_RE = re.compile(r"^v[0-9]")

# Characters that end a line for the header match.
LINE_TERMINATORS = "\n\r\u2028\u2029"

# Subject is matched as a prefix: text past the 50th character is allowed.
CONVENTIONAL_RE = re.compile(
    r"^(?P<revert>revert: )?"
    r"(?P<type>" + "|".join(re.escape(t.value) for t in CommitType) + r")"
    r"(?:\((?P<scope>[^)" + LINE_TERMINATORS + r"]+)\))?"
    r": (?P<subject>[^" + LINE_TERMINATORS + r"]{1,50})"
)


def parse_header(message: str) -> Optional[ConventionalHeader]:
    """Parse the conventional header at the start of a message, if any."""
    match = CONVENTIONAL_RE.match(message)
    if not match:
        return None
    return ConventionalHeader(
        revert=match.group("revert") is not None,
        type=CommitType(match.group("type")),
        scope=match.group("scope"),
        subject=match.group("subject"),
    )


class PatternHandler(ABC):
    """Abstract base class for pattern handlers."""

    def __init__(
        self,
        next_handler: Optional['PatternHandler'] = None,
        convention_doc: str = DEFAULT_CONVENTION_DOC,
    ):
        self.next_handler = next_handler
        self.convention_doc = convention_doc

    def handle(self, message: str) -> ValidationResult:
        """Accept on match, otherwise pass to the next handler."""
        result = self.match(message)
        if result is not None:
            return result
        if self.next_handler:
            return self.next_handler.handle(message)
        return ValidationResult(
            message=message,
            accepted=False,
            diagnostic=build_diagnostic(self.convention_doc),
        )

    @abstractmethod
    def match(self, message: str) -> Optional[ValidationResult]:
        """Return an accepted result if the message matches, else None."""
        pass


class ReleasePatternHandler(PatternHandler):
    """Accepts version-tag messages such as ``v2.0.0``."""

    def match(self, message: str) -> Optional[ValidationResult]:
        if not RELEASE_RE.match(message):
            return None
        return ValidationResult(message=message, accepted=True, matched_by="release")


class ConventionalPatternHandler(PatternHandler):
    """Accepts ``[revert: ]type[(scope)]: subject`` messages."""

    def match(self, message: str) -> Optional[ValidationResult]:
        header = parse_header(message)
        if header is None:
            return None
        return ValidationResult(
            message=message,
            accepted=True,
            matched_by="conventional",
            header=header,
        )


def create_validation_chain(convention_doc: str = DEFAULT_CONVENTION_DOC) -> PatternHandler:
    """Create the default validation chain."""
    conventional = ConventionalPatternHandler(convention_doc=convention_doc)
    release = ReleasePatternHandler(conventional, convention_doc=convention_doc)

    return release
