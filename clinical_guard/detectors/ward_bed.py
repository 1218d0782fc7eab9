from __future__ import annotations
import re
from .base import PatternDetector
from ..models import IdentifierReason

# Ward + bed + time: "Avd 12 sal 3 kl. 14:30", "Ward 4B bed 2 at 08:15".
# A bare clock time is not an identifier, but pinned to a ward and bed it
# points at one specific patient.
_WARD_BED_TIMESTAMP_RE = re.compile(
    r"\b(?:avdelning|avd\.?|ward|unit)[ \t]*\d{1,3}[a-z]?"
    r"[ \t]*[,;/]?[ \t]*"
    r"(?:bed|säng|plats|sal|rum|room)[ \t]*\d{1,3}[a-z]?"
    r"[ \t]*[,;]?[ \t]*"
    r"(?:(?:kl\.?|klockan|at|@)[ \t]*)?"
    r"(?:[01]?\d|2[0-3])[:.][0-5]\d\b",
    re.IGNORECASE,
)


class WardBedTimestampDetector(PatternDetector):
    reason = IdentifierReason.WARD_BED_TIMESTAMP
    patterns = (_WARD_BED_TIMESTAMP_RE,)
