"""Allow-list spans: text regions that look numeric but are not identifying.

Age ranges and decades ("20-30", "40s", "40-talet") share their digits with
precise ages. The precise-age detector asks this module whether a candidate
sits fully inside such a region before reporting it.
"""
from __future__ import annotations
import re

Span = tuple[int, int]

_DASH = r"[-‐‑‒–—]"
_RANGE_SEP = rf"(?:\s*{_DASH}\s*|\s+(?:to|till)\s+)"

_AGE_UNIT = (
    r"(?:years?(?:[\s-]*old)?|yrs?(?:[\s-]*old)?|y/?o|"
    r"år(?:iga|ig|ingar|ing)?|åringar)"
)

_ACCEPTABLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Decades: "40s", "40's", "40-talet", "40-årsåldern"
    re.compile(r"\b\d0(?:'s|s)\b", re.IGNORECASE),
    re.compile(r"\b\d0\s*-?\s*(?:talet|tal|årsåldern|årsålder|års\s+ålder)\b", re.IGNORECASE),
    # Ranges followed by an age unit: "20-30 years old", "20–30 år"
    re.compile(rf"\b\d{{1,3}}{_RANGE_SEP}\d{{1,3}}[\s-]*{_AGE_UNIT}\b", re.IGNORECASE),
    # Explicit two-ended ranges: "20-30", "20 to 30"
    re.compile(rf"\b\d{{1,3}}{_RANGE_SEP}\d{{1,3}}\b", re.IGNORECASE),
    re.compile(
        rf"\bbetween\s+\d{{1,3}}\s+and\s+\d{{1,3}}(?:[\s-]*{_AGE_UNIT})?\b", re.IGNORECASE
    ),
    re.compile(
        rf"\bmellan\s+\d{{1,3}}\s+och\s+\d{{1,3}}(?:[\s-]*{_AGE_UNIT})?\b", re.IGNORECASE
    ),
)

# A dash, "to"/"till" or "och"/"and" between two numbers.
RANGE_TOKEN_RE = re.compile(
    rf"\d{_RANGE_SEP}\d|\d\s+(?:and|och)\s+\d", re.IGNORECASE
)


def allowed_spans(text: str) -> list[Span]:
    """Return the (start, end) offsets of every acceptable-pattern match."""
    spans: list[Span] = []
    for pattern in _ACCEPTABLE_PATTERNS:
        spans.extend(m.span() for m in pattern.finditer(text))
    return spans


def is_suppressed(start: int, end: int, spans: list[Span]) -> bool:
    """True if some span fully contains [start, end)."""
    return any(s <= start and end <= e for s, e in spans)
