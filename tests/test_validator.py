"""Tests for the CommitMessageValidator facade."""
import pytest

from commitgate.commit_message import CommitMessageValidator
from commitgate.diagnostics import DEFAULT_CONVENTION_DOC


@pytest.fixture
def validator():
    return CommitMessageValidator()


@pytest.mark.parametrize("message", [
    "v2.0.0 release",
    "v1",
    "v3 anything at all: here",
    "feat: add 'comments' option",
    "fix: handle events on blur (close #28)",
    "fix(core): handle null input",
    "revert: fix(core): handle null input",
    "revert: chore: bump deps",
    "workflow: tidy up the release script",
    "deps(npm): bump vite",
    "perf: " + "a" * 50,
    "refactor: " + "b" * 80,
    "feat(ui): add dark mode\n\nCloses #12",
])
def test_accepted_messages(validator, message):
    result = validator.validate(message)
    assert result.accepted
    assert result.diagnostic == ""


@pytest.mark.parametrize("message", [
    "",
    "feature: add thing",
    "fix handle events",
    "style: format code",
    "update readme",
    "Merge branch 'main' into dev",
    "WIP",
    "vx.1",
])
def test_rejected_messages(validator, message):
    result = validator.validate(message)
    assert not result.accepted
    assert result.matched_by is None
    assert result.header is None


def test_rejection_diagnostic_contents(validator):
    result = validator.validate("fix handle events")

    assert "feat: add 'comments' option" in result.diagnostic
    assert "fix: handle events on blur (close #28)" in result.diagnostic
    assert DEFAULT_CONVENTION_DOC in result.diagnostic


def test_custom_convention_doc():
    validator = CommitMessageValidator(convention_doc="CONTRIBUTING.md")

    result = validator.validate("nope")
    assert "CONTRIBUTING.md" in result.diagnostic
    assert DEFAULT_CONVENTION_DOC not in result.diagnostic


def test_result_keeps_message(validator):
    result = validator.validate("feat: add option\n\nbody")
    assert result.message == "feat: add option\n\nbody"
    assert result.first_line == "feat: add option"


def test_validation_is_deterministic(validator):
    messages = ["feat: add option", "garbage", "v1.0.0", ""]
    first = [validator.validate(m) for m in messages]
    second = [CommitMessageValidator().validate(m) for m in messages]
    assert first == second
