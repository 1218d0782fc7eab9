from __future__ import annotations
import re
from .base import BaseDetector, is_name_like
from ..models import IdentifierReason
from ..wordlists import NON_NAME_WORDS

# "Name: John Smith", "Patient - Anna", "Namn: Karin Ek", "Efternamn: Lund"
_LABEL_RE = re.compile(
    r"\b(?:patient\s*name|full\s*name|first\s*name|last\s*name|surname|name|"
    r"patientens\s+namn|patientnamn|förnamn|efternamn|namn|patient)"
    r"\s*[:\-–]\s*"
    r"(?P<first>[^\s,;:.()]+)(?:[ \t]+(?P<second>[^\s,;:.()]+))?",
    re.IGNORECASE,
)


def _acceptable(token: str | None) -> bool:
    return bool(token) and is_name_like(token) and token not in NON_NAME_WORDS


class NameLabelDetector(BaseDetector):
    reason = IdentifierReason.NAME_LABEL

    def detect(self, text: str) -> str | None:
        for match in _LABEL_RE.finditer(text):
            if not _acceptable(match.group("first")):
                continue
            end = match.end("first")
            if _acceptable(match.group("second")):
                end = match.end("second")
            return text[match.start("first") : end]
        return None
