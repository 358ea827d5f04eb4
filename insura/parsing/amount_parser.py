from __future__ import annotations
import re
from typing import List, Tuple

PARSE_FAILURE_MESSAGE = (
    "Unable to parse amount insured. Please provide numeric value or use formats "
    "like \"12 lakhs\", \"1.2M\", or \"1200000\""
)

_NUM = r"([0-9]+(?:\.[0-9]+)?)"   # ASCII digits only

# First match wins; order matters ("12 lakhs" must not fall through to the bare number).
_PATTERNS: List[Tuple[re.Pattern, float]] = [
    (re.compile(_NUM + r"\s*(?:lakh|lac)s?"), 100_000),
    (re.compile(_NUM + r"\s*crores?"), 10_000_000),
    (re.compile(_NUM + r"\s*m", re.IGNORECASE), 1_000_000),
    (re.compile(_NUM + r"\s*k", re.IGNORECASE), 1_000),
    (re.compile(_NUM), 1),
]


class ParseError(ValueError):
    """No numeric amount could be recognised in the text."""


def parse_amount(text: str) -> float:
    """
    Convert spoken/typed amount shorthand into a number:
      "12 lakhs" -> 1200000, "2 crores" -> 20000000, "1.2M" -> 1200000,
      "5k" -> 5000, "500000" -> 500000.
    Searches are unanchored, so "about 5 lakh rupees" parses too.
    """
    s = str(text or "").lower().strip()
    for pattern, multiplier in _PATTERNS:
        m = pattern.search(s)
        if m:
            return float(m.group(1)) * multiplier
    raise ParseError(f"Unable to parse amount: {text!r}")
