"""Tests for version reporting."""
from pathlib import Path

from commitgate import __version__, version


def test_installation_path_is_package_directory():
    path = version.get_installation_path()
    assert path == Path(version.__file__).parent
    assert (path / "__init__.py").exists()


def test_display_version_info_matching(monkeypatch, capsys):
    monkeypatch.setattr(version, "get_installed_version", lambda: __version__)

    version.display_version_info()
    output = capsys.readouterr().out

    assert "Installation path:" in output
    assert "differs" not in output


def test_display_version_info_mismatch(monkeypatch, capsys):
    monkeypatch.setattr(version, "get_installed_version", lambda: "0.0.0")

    version.display_version_info()
    output = capsys.readouterr().out

    assert "Installed version: 0.0.0" in output
    assert "Imported version differs from the installed package" in output
