from __future__ import annotations
import math

ONES = ["", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
TEENS = ["ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
         "sixteen", "seventeen", "eighteen", "nineteen"]
TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]

# Indian grouping, largest first: (divisor, word)
_GROUPS = [
    (10_000_000, "crore"),
    (100_000, "lakh"),
    (1_000, "thousand"),
]


def round_half_up(value: float) -> int:
    """Nearest integer, ties toward +infinity: 2.5 -> 3, -2.5 -> -2."""
    return int(math.floor(value + 0.5))


def _join(head: str, rest: int) -> str:
    return head + (" " + number_to_words(rest) if rest else "")


def number_to_words(n: int) -> str:
    """
    Spell an integer in English words with lakh/crore grouping, e.g.
    20310 -> "twenty thousand three hundred ten",
    12345678 -> "one crore twenty three lakh forty five thousand six hundred seventy eight".
    """
    if isinstance(n, float):
        if not n.is_integer():
            raise ValueError(f"number_to_words expects an integer, got {n!r}")
        n = int(n)
    if n == 0:
        return "zero"
    if n < 0:
        return "negative " + number_to_words(-n)
    if n < 10:
        return ONES[n]
    if n < 20:
        return TEENS[n - 10]
    if n < 100:
        return TENS[n // 10] + (" " + ONES[n % 10] if n % 10 else "")
    if n < 1000:
        return _join(ONES[n // 100] + " hundred", n % 100)
    for divisor, word in _GROUPS:
        if n >= divisor:
            return _join(number_to_words(n // divisor) + " " + word, n % divisor)
    raise ValueError(f"Cannot convert {n!r} to words")
