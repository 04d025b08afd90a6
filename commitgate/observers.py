"""Observer pattern for validation outcomes."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console

from .diagnostics import DEFAULT_CONVENTION_DOC, render_diagnostic
from .models import ValidationResult


class ValidationObserver(ABC):
    """Abstract base class for validation observers."""

    @abstractmethod
    def on_message_accepted(self, result: ValidationResult) -> None:
        """Called when a commit message is accepted."""
        pass

    @abstractmethod
    def on_message_rejected(self, result: ValidationResult) -> None:
        """Called when a commit message is rejected."""
        pass


def notify(observers: Iterable[ValidationObserver], result: ValidationResult) -> None:
    """Dispatch a result to every observer."""
    for observer in observers:
        if result.accepted:
            observer.on_message_accepted(result)
        else:
            observer.on_message_rejected(result)


class ConsoleLogObserver(ValidationObserver):
    """Observer that reports outcomes on the console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        convention_doc: str = DEFAULT_CONVENTION_DOC,
        verbose: bool = False,
    ):
        self.console = console or Console(stderr=True)
        self.convention_doc = convention_doc
        self.verbose = verbose

    def on_message_accepted(self, result: ValidationResult) -> None:
        if self.verbose:
            self.console.print(
                f"[green]Commit message accepted ({result.matched_by})[/green]"
            )

    def on_message_rejected(self, result: ValidationResult) -> None:
        render_diagnostic(self.console, self.convention_doc)


class FileLogObserver(ValidationObserver):
    """Observer that logs outcomes to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_message_accepted(self, result: ValidationResult) -> None:
        self._log(f"Accepted commit message: {result.first_line}")

    def on_message_rejected(self, result: ValidationResult) -> None:
        self._log(f"Rejected commit message: {result.first_line}")
