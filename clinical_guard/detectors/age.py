from __future__ import annotations
import re
from .base import BaseDetector
from ..allowlist import RANGE_TOKEN_RE, allowed_spans, is_suppressed
from ..models import IdentifierReason

_NUM = r"\d{1,3}"
_RANGE_TAIL = rf"(?:\s*[-‐‑‒–—]\s*{_NUM}|\s+(?:to|till)\s+{_NUM})?"

# Candidate patterns in priority order. Label patterns take an optional
# range tail so that "age 20-30" is matched whole and then recognised as a
# range instead of leaving "age 20" behind.
_CANDIDATES: tuple[re.Pattern[str], ...] = (
    # "47 years old", "47-year-old", "47 yrs old"
    re.compile(rf"\b{_NUM}[\s-]*(?:years?|yrs?)[\s-]*old\b", re.IGNORECASE),
    # "47 yo", "47y/o"
    re.compile(rf"\b{_NUM}\s*y/?o\b", re.IGNORECASE),
    # "age 47", "aged: 47", "age of 47"
    re.compile(
        rf"\b(?:age|aged)(?:\s+of)?\s*[:=]?\s*{_NUM}{_RANGE_TAIL}\b", re.IGNORECASE
    ),
    # "ålder 47", "Ålder: 47"
    re.compile(rf"\bålder\s*[:=]?\s*{_NUM}{_RANGE_TAIL}\b", re.IGNORECASE),
    # "47 år", "47-årig", "3-åring"; not durations such as "i 3 år" or
    # "2 år sedan"
    re.compile(
        r"(?<!\bi\s)(?<!\bom\s)(?<!för\s)(?<!under\s)(?<!efter\s)(?<!inom\s)"
        rf"(?<!senaste\s)\b{_NUM}[\s-]*år(?:iga|ig|ingen|ing)?\b(?!\s+sedan)",
        re.IGNORECASE,
    ),
    # Sex shorthand: "47M", "32F"
    re.compile(rf"\b{_NUM}[MF]\b"),
)


class PreciseAgeDetector(BaseDetector):
    reason = IdentifierReason.PRECISE_AGE

    def detect(self, text: str) -> str | None:
        spans = allowed_spans(text)

        for pattern in _CANDIDATES:
            for match in pattern.finditer(text):
                candidate = match.group(0)
                if RANGE_TOKEN_RE.search(candidate):
                    continue
                if is_suppressed(match.start(), match.end(), spans):
                    continue
                return candidate

        return None
