from __future__ import annotations
import regex
from .base import BaseDetector
from ..models import IdentifierReason

# One capitalised word, optionally a hyphenated compound ("Anna-Karin").
# Unicode letter classes cover Å/Ä/Ö, accented and non-Latin names alike.
_NAME_WORD = r"\p{Lu}\p{Ll}+(?:-\p{Lu}\p{Ll}+)?"

# Horizontal whitespace only: a word ending one line and a word starting the
# next are not a name.
_FULL_NAME_RE = regex.compile(rf"\b{_NAME_WORD}[ \t]+{_NAME_WORD}\b")

# "J. Smith", "A.Lindqvist"
_INITIAL_LAST_NAME_RE = regex.compile(rf"\b\p{{Lu}}\.[ \t]?{_NAME_WORD}\b")


class FullNameDetector(BaseDetector):
    reason = IdentifierReason.FULL_NAME

    def detect(self, text: str) -> str | None:
        match = _FULL_NAME_RE.search(text)
        return match.group(0) if match else None


class InitialLastNameDetector(BaseDetector):
    reason = IdentifierReason.INITIAL_LAST_NAME

    def detect(self, text: str) -> str | None:
        match = _INITIAL_LAST_NAME_RE.search(text)
        return match.group(0) if match else None
