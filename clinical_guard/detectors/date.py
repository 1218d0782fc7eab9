from __future__ import annotations
import re
from .base import PatternDetector
from ..models import IdentifierReason

# Month names in English and Swedish, full forms before abbreviations.
MONTH_NAMES = (
    r"(?:january|januari|february|februari|march|mars|april|may|maj|"
    r"june|juni|july|juli|august|augusti|september|october|oktober|"
    r"november|december|"
    r"jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|okt|nov|dec)\b\.?"
)

_DAY = r"(?:0?[1-9]|[12]\d|3[01])"
_MONTH = r"(?:0?[1-9]|1[0-2])"
_YEAR = r"(?:\d{4}|\d{2})"
_ORDINAL_SUFFIX = r"(?:st|nd|rd|th|:e|:a)"

# Numeric dates. Separators must be consistent within one date ("\1").
_ISO_RE = re.compile(
    rf"(?<![\d.\-/])(?:19|20)\d{{2}}([-/.]){_MONTH}\1{_DAY}(?!\d)"
)
_DMY_RE = re.compile(rf"(?<![\d.\-/]){_DAY}([-/.]){_MONTH}\1{_YEAR}(?!\d)")
_MDY_RE = re.compile(rf"(?<![\d.\-/]){_MONTH}([-/.]){_DAY}\1{_YEAR}(?!\d)")

# "4 Jan 2026", "15th of March", "3:e maj 2024"
_DAY_MONTH_NAME_RE = re.compile(
    rf"\b{_DAY}{_ORDINAL_SUFFIX}?\.?\s+(?:of\s+)?{MONTH_NAMES}"
    rf"(?:,?\s+\d{{4}}\b)?",
    re.IGNORECASE,
)
# "Jan 4, 2026", "March 15th"
_MONTH_NAME_DAY_RE = re.compile(
    rf"\b{MONTH_NAMES}\s+{_DAY}(?:st|nd|rd|th)?\b(?:,?\s+\d{{4}}\b)?",
    re.IGNORECASE,
)

# A month mentioned on its own ("in May", "i maj"). English month names are
# capitalised so the modal verb "may" and the verb "march" are left alone.
_BARE_MONTH_EN_RE = re.compile(
    r"\b(?:January|February|March|April|May|June|July|August|September|"
    r"October|November|December)\b"
)
_BARE_MONTH_SV_RE = re.compile(
    r"\b(?:januari|februari|mars|april|maj|juni|juli|augusti|september|"
    r"oktober|november|december)\b",
    re.IGNORECASE,
)


class DateDetector(PatternDetector):
    reason = IdentifierReason.DATE
    patterns = (
        _ISO_RE,
        _DMY_RE,
        _MDY_RE,
        _DAY_MONTH_NAME_RE,
        _MONTH_NAME_DAY_RE,
        _BARE_MONTH_EN_RE,
        _BARE_MONTH_SV_RE,
    )
