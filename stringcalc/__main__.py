"""CLI for the string calculator.

Usage:
    python -m stringcalc add "1,2,3"                 # Print the sum
    python -m stringcalc add "//;\\n1;2"              # Backslash escapes are decoded
    echo "1,2" | python -m stringcalc add -          # Read input from stdin
    python -m stringcalc add "2,1001" --json         # Full breakdown as JSON
    python -m stringcalc explain "//[*][%]\\n1*2%3"   # Token-by-token table
    python -m stringcalc examples                    # Check the reference inputs
"""

from __future__ import annotations

import json
import logging
import re
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from stringcalc.calculator import breakdown
from stringcalc.config import CalculatorConfig
from stringcalc.errors import CalculatorError
from stringcalc.examples import run_examples
from stringcalc.models import Breakdown
from stringcalc.report import render_breakdown, render_examples

app = typer.Typer(
    name="stringcalc",
    help="Sum the numbers in a delimited string",
    no_args_is_help=True,
)
console = Console(stderr=True)
logger = logging.getLogger("stringcalc")

_ESCAPE_RE = re.compile(r'\\([nt\\])')
_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}


def decode_input(raw: str, keep_escapes: bool = False) -> str:
    """Turn a command-line argument into calculator input.

    '-' reads stdin verbatim. Otherwise \\n, \\t and \\\\ are decoded so a
    header can be typed on one line, unless keep_escapes is set.
    """
    if raw == "-":
        return sys.stdin.read()
    if keep_escapes:
        return raw
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(1)], raw)


def _load_config() -> CalculatorConfig:
    try:
        return CalculatorConfig.from_env()
    except ValueError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _compute(text: str, config: CalculatorConfig) -> Breakdown:
    try:
        return breakdown(text, config)
    except CalculatorError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Sum the numbers in a delimited string."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@app.command("add")
def cmd_add(
    numbers: str = typer.Argument(help="Input string, or '-' to read stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print the full breakdown as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Do not decode backslash escapes"),
) -> None:
    """Print the sum of the numbers in INPUT."""
    config = _load_config()
    bd = _compute(decode_input(numbers, keep_escapes=raw), config)
    if as_json:
        typer.echo(json.dumps(bd.to_dict(), indent=2))
    else:
        typer.echo(bd.total)


@app.command("explain")
def cmd_explain(
    numbers: str = typer.Argument(help="Input string, or '-' to read stdin"),
    raw: bool = typer.Option(False, "--raw", help="Do not decode backslash escapes"),
) -> None:
    """Show how INPUT is split, which values count and the total."""
    config = _load_config()
    bd = _compute(decode_input(numbers, keep_escapes=raw), config)
    render_breakdown(bd, console, config.max_value)


@app.command("examples")
def cmd_examples() -> None:
    """Run the reference examples and compare against expected results."""
    results = run_examples()
    render_examples(results, console)
    failed = [r for r in results if r.verdict != "pass"]
    if failed:
        logger.error("%d example(s) failed", len(failed))
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
