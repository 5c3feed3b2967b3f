"""Rich rendering for calculator breakdowns and example runs."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stringcalc.examples import ExampleResult
from stringcalc.models import Breakdown

_VERDICT_STYLES = {
    "pass": "[green]PASS[/green]",
    "fail": "[red]FAIL[/red]",
}


def _fmt_text(text: str) -> str:
    """Show control characters as typed and keep brackets out of Rich markup."""
    return escape(repr(text)[1:-1])


def render_breakdown(bd: Breakdown, console: Console, max_value: int) -> None:
    """Render a token-by-token table for one add() call."""
    if not bd.tokens:
        console.print(f"[yellow]No numbers in input[/yellow] '{_fmt_text(bd.input)}' -> 0")
        return

    delims = ", ".join(f"'{_fmt_text(d)}'" for d in bd.delimiters)
    table = Table(
        title=f"Breakdown: '{_fmt_text(bd.input)}'",
        caption=f"Delimiters: {delims}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Token", min_width=8)
    table.add_column("Value", justify="right")
    table.add_column("Status")

    for i, (token, value) in enumerate(zip(bd.tokens, bd.numbers), start=1):
        if value > max_value:
            status = f"[yellow]ignored (> {max_value})[/yellow]"
        else:
            status = "[green]added[/green]"
        table.add_row(str(i), f"'{_fmt_text(token)}'", str(value), status)

    table.add_section()
    table.add_row("", "[bold]Total[/bold]", f"[bold]{bd.total}[/bold]", "")
    console.print(table)


def render_examples(results: list[ExampleResult], console: Console) -> None:
    """Render a pass/fail table for the reference examples."""
    table = Table(title="Reference Examples", show_header=True, header_style="bold")
    table.add_column("Input", style="cyan", min_width=15)
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Verdict")
    table.add_column("Note", style="dim")

    for r in results:
        expected = r.example.expected
        expected_text = str(expected) if isinstance(expected, int) else expected.__name__
        table.add_row(
            f"'{_fmt_text(r.example.input)}'",
            expected_text,
            escape(r.actual_display),
            _VERDICT_STYLES.get(r.verdict, r.verdict),
            r.example.note,
        )

    passed = sum(1 for r in results if r.verdict == "pass")
    console.print()
    console.print(table)
    console.print(f"{passed}/{len(results)} examples passed")
