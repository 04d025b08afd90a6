"""Rejection diagnostics shown by the commit-msg hook."""
from rich.console import Console
from rich.text import Text

DEFAULT_CONVENTION_DOC = ".github/commit-convention.md"

EXAMPLE_MESSAGES = (
    "feat: add 'comments' option",
    "fix: handle events on blur (close #28)",
)

TITLE = "Invalid commit message format."
EXPLANATION = (
    "A well-formed message is required to generate the changelog. Examples:"
)


def build_diagnostic(convention_doc: str = DEFAULT_CONVENTION_DOC) -> str:
    """Build the plain-text rejection diagnostic."""
    lines = [f"ERROR {TITLE}", "", EXPLANATION, ""]
    lines.extend(f"    {example}" for example in EXAMPLE_MESSAGES)
    lines.extend(["", f"See {convention_doc} for more details."])
    return "\n".join(lines)


def render_diagnostic(console: Console, convention_doc: str = DEFAULT_CONVENTION_DOC) -> None:
    """Write the styled rejection diagnostic to the given console."""
    console.print()
    title = Text("  ")
    title.append(" ERROR ", style="bold white on red")
    title.append(" ")
    title.append(TITLE, style="red")
    console.print(title)
    console.print()
    console.print(Text(f"  {EXPLANATION}", style="red"))
    console.print()
    for example in EXAMPLE_MESSAGES:
        console.print(Text(f"    {example}", style="green"))
    console.print()
    console.print(Text(f"  See {convention_doc} for more details.", style="red"))
