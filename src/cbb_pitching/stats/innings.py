"""Parsing of scraped box-score values.

Box scores record innings pitched as ``<innings>.<outs>``: the digit after
the point counts outs in the partial inning (0, 1 or 2), so ``"5.2"`` is
five and two-thirds innings, not 5.2. Counting stats arrive as strings and
are frequently blank or junk; both parsers treat anything unreadable as 0
so a dirty line never aborts an aggregation.
"""

import re

OUTS_PER_INNING = 3

# ASCII digits only; superscripts and other scripts read as junk
_INNINGS_RE = re.compile(r"(\d*)(?:\.(\d*))?", re.ASCII)
_LEADING_INT_RE = re.compile(r"^\s*(\d+)", re.ASCII)


def parse_innings(value: str | float | int | None) -> float:
    if value is None:
        return 0.0
    text = str(value).strip()
    if not text:
        return 0.0

    match = _INNINGS_RE.fullmatch(text)
    if match is None:
        return 0.0

    whole = int(match.group(1) or 0)
    outs = int(match.group(2) or 0)
    if outs >= OUTS_PER_INNING:
        return 0.0
    return whole + outs / OUTS_PER_INNING


def parse_count(value: str | int | None) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return max(value, 0)
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else 0


def format_innings(innings: float) -> str:
    """Render a true inning count back into box-score notation."""
    total_outs = round(innings * OUTS_PER_INNING)
    whole, outs = divmod(total_outs, OUTS_PER_INNING)
    return f"{whole}.{outs}"
