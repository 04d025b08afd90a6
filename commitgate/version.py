"""Version reporting for commitgate."""

import importlib.metadata
from pathlib import Path
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__

console = Console()


def get_current_version() -> str:
    """Get the current version of commitgate."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version("commitgate")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_installation_path() -> Path:
    """Get the directory the commitgate package is imported from."""
    return Path(__file__).parent


def display_version_info() -> None:
    """Display version information."""
    current_version = get_current_version()
    installed_version = get_installed_version()
    installation_path = get_installation_path()

    version_text = Text()
    version_text.append("commitgate\n", style="bold blue")
    version_text.append(f"Current version: {current_version}\n", style="green")
    version_text.append(f"Installed version: {installed_version}\n", style="cyan")
    version_text.append(f"Installation path: {installation_path}\n", style="yellow")

    if current_version != installed_version:
        version_text.append(
            "\nImported version differs from the installed package\n", style="red"
        )

    panel = Panel(
        version_text,
        title="Version Information",
        border_style="blue"
    )
    console.print(panel)
