"""Commit message validation."""
from ..diagnostics import DEFAULT_CONVENTION_DOC
from ..models import ValidationResult
from .validation import create_validation_chain

class CommitMessageValidator:
    """Validates commit messages against the release and conventional formats."""

    def __init__(self, convention_doc: str = DEFAULT_CONVENTION_DOC):
        self.convention_doc = convention_doc
        self.validation_chain = create_validation_chain(convention_doc)

    def validate(self, message: str) -> ValidationResult:
        """Classify an already trimmed commit message."""
        return self.validation_chain.handle(message)
