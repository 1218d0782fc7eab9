from __future__ import annotations
import re
from .base import PatternDetector
from ..models import IdentifierReason

# Swedish personnummer / samordningsnummer: (YY)YYMMDD[-+]XXXX.
# Coordination numbers add 60 to the day (61-91). The '+' separator marks
# people aged 100 or more. No Luhn check: the shape alone is a strong enough
# indicator to block the text.
PERSONAL_NUMBER_RE = re.compile(
    r"\b(?:\d{2})?\d{2}"
    r"(?:0[1-9]|1[0-2])"
    r"(?:0[1-9]|[12]\d|3[01]|6[1-9]|[78]\d|9[01])"
    r"[-+]\d{4}\b"
)


class PersonalNumberDetector(PatternDetector):
    reason = IdentifierReason.SWEDISH_PERSONAL_NUMBER
    patterns = (PERSONAL_NUMBER_RE,)
