from __future__ import annotations
import re
from .base import BaseDetector
from ..models import IdentifierReason
from ..wordlists import NON_NAME_WORDS

# Labelled record identifiers: "MRN: 123456", "journalnr 4711-22",
# "Patient-ID #AB1234", "MRN: ABCDEF".
_PATIENT_ID_RE = re.compile(
    r"\b(?:"
    r"patient[-\s]?(?:id|nr|number|no\.?)|pat[-\s]?id|"
    r"journal[-\s]?(?:nummer|nr\.?|number|no\.?)|"
    r"medical\s+record\s+(?:number|no\.?)|record\s+(?:number|no\.?)|"
    r"case\s+(?:number|no\.?)|"
    r"mrn|pid"
    r")"
    r"\s*[:#]?\s*#?\s*"
    r"(?P<code>[a-z0-9][a-z0-9\-]{2,})\b",
    re.IGNORECASE,
)


def _is_code(code: str) -> bool:
    if any(c.isdigit() for c in code):
        return True
    # Letter-only codes are written in capitals ("ABCDEF"); "unknown",
    # "Pending" or "NONE" after a label are not codes.
    return code.isupper() and code not in NON_NAME_WORDS


class PatientIdDetector(BaseDetector):
    reason = IdentifierReason.PATIENT_ID_OR_JOURNAL_NUMBER

    def detect(self, text: str) -> str | None:
        for match in _PATIENT_ID_RE.finditer(text):
            if _is_code(match.group("code")):
                return match.group(0)
        return None
