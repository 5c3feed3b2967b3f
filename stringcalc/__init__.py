"""stringcalc — the String Calculator kata as a small library and CLI.

Sums the integers in a delimited string, with optional custom delimiters
declared in a ``//`` header line.

Usage:
    python -m stringcalc add "1,2,3"                 # 6
    python -m stringcalc add "//[*][%]\\n1*2%3"       # 6
    python -m stringcalc explain "2,1001"            # Token-by-token table
    python -m stringcalc examples                    # Run reference inputs
"""

from stringcalc.calculator import add, breakdown
from stringcalc.config import CalculatorConfig
from stringcalc.errors import (
    CalculatorError,
    InvalidTokenError,
    MalformedHeaderError,
    NegativeNumberError,
)

__all__ = [
    "add",
    "breakdown",
    "CalculatorConfig",
    "CalculatorError",
    "InvalidTokenError",
    "MalformedHeaderError",
    "NegativeNumberError",
]
