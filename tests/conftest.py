import pytest
from click.testing import CliRunner

@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()

@pytest.fixture
def write_message(tmp_path):
    """Write a commit message file the way git does for the commit-msg hook."""
    def _write(content: str, name: str = "COMMIT_EDITMSG"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
