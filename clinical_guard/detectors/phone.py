from __future__ import annotations
import re
from .base import BaseDetector
from .personal_number import PERSONAL_NUMBER_RE
from ..models import IdentifierReason

# Phone numbers in international or national format.
# International: +46 70 123 45 67 / 0046 8 123 456 / +44 (0)20 7946 0958
# National: 070-123 45 67 / 08-123 456 78 / (08) 123 456
# Separators: single space or dash between digit groups. Dots and slashes
# are left out so decimals, doses and blood pressures never chain up.
_PHONE_RE = re.compile(
    r"""
    (?<![\w+])
    (?:
        (?:\+|\b00)\d{1,3}[ \-]?(?:\(0\)[ \-]?)?     # country code, optional (0)
    |
        \(0?\d{1,4}\)[ \-]?                          # bracketed area code
    )?
    \d(?:[ \-]?\d){6,}
    (?!\w)
    """,
    re.VERBOSE,
)

# Digit runs that are dates or year ranges rather than phone numbers. They
# are blanked out like personal numbers, so a date followed by a clock time
# ("2024-01-15 14:30") cannot chain into one long digit run.
_NOT_A_PHONE = (
    PERSONAL_NUMBER_RE,
    re.compile(r"(?<!\d)\d{4}-\d{1,2}-\d{1,2}(?!\d)"),
    re.compile(r"(?<!\d)\d{1,2}-\d{1,2}-\d{2,4}(?!\d)"),
    re.compile(r"(?<!\d)(?:19|20)\d{2}\s?-\s?(?:19|20)\d{2}(?!\d)"),
)

_MIN_DIGITS = 7


def _digit_count(s: str) -> int:
    return sum(1 for c in s if c.isdigit())


def _mask(text: str) -> str:
    # Same-length blanking keeps offsets aligned with the original text.
    for pattern in _NOT_A_PHONE:
        text = pattern.sub(lambda m: "#" * len(m.group(0)), text)
    return text


class PhoneDetector(BaseDetector):
    reason = IdentifierReason.PHONE_NUMBER

    def detect(self, text: str) -> str | None:
        masked = _mask(text)

        for match in _PHONE_RE.finditer(masked):
            raw = text[match.start() : match.end()]
            if _digit_count(raw) < _MIN_DIGITS:
                continue
            return raw

        return None
