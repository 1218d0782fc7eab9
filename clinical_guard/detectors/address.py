from __future__ import annotations
import re
from .base import PatternDetector
from ..models import IdentifierReason
from ..wordlists import load_lines


def _build_suffix_re(name: str, title_case: bool = False) -> str:
    suffixes = load_lines(name)
    if title_case:
        # "Street", "street", "St"; never the all-caps "ST" or "CT"
        suffixes = [v for s in suffixes for v in (s, s.capitalize())]
    # Longest first so the engine prefers longer matches
    suffixes.sort(key=len, reverse=True)
    return "|".join(re.escape(s) for s in suffixes)


_SV_SUFFIX_RE = _build_suffix_re("street_suffixes_sv.txt")
_EN_SUFFIX_RE = _build_suffix_re("street_suffixes_en.txt", title_case=True)

# House number: digits optionally followed by a letter ("12B")
_HOUSE_RE = r"\d{1,5}[A-Za-z]?"

# Swedish street names are compounds ending in the suffix ("Storgatan 12",
# "Kungsvägen 3B"); a space or hyphen before the suffix is allowed
# ("Drottning Kristinas väg 5", "Anna-Lisas gränd 2").
_SV_STREET_RE = re.compile(
    rf"\b[A-ZÅÄÖ][a-zåäöé]*[ \t-]?(?:{_SV_SUFFIX_RE})[ \t]+{_HOUSE_RE}\b"
)

# English addresses put the number first ("221 Baker Street") or, in some
# notes, after the street ("Baker Street 221B").
_EN_NAME_RE = r"(?:[A-Z][a-z]+[ \t]+){1,3}"
_EN_NUMBER_FIRST_RE = re.compile(
    rf"\b\d{{1,5}}[A-Za-z]?[ \t]+{_EN_NAME_RE}(?:{_EN_SUFFIX_RE})\b\.?"
)
_EN_NUMBER_LAST_RE = re.compile(
    rf"\b{_EN_NAME_RE}(?:{_EN_SUFFIX_RE})\.?[ \t]+{_HOUSE_RE}\b"
)

_PO_BOX_RE = re.compile(
    r"\b(?:[Pp]\.?\s?[Oo]\.?\s?[Bb]ox|Box|[Pp]ostbox|[Pp]ostfack)\s+\d{1,6}\b"
)

# An address always carries a number; skip the heavier patterns without one.
_DIGIT_PREFILTER = re.compile(r"\d")


class AddressDetector(PatternDetector):
    reason = IdentifierReason.ADDRESS
    patterns = (_SV_STREET_RE, _EN_NUMBER_FIRST_RE, _EN_NUMBER_LAST_RE, _PO_BOX_RE)

    def detect(self, text: str) -> str | None:
        if not _DIGIT_PREFILTER.search(text):
            return None
        return super().detect(text)
