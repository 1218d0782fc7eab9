from __future__ import annotations
import re
from .base import BaseDetector, is_name_like
from ..models import IdentifierReason
from ..wordlists import NON_NAME_WORDS

_WORD = r"[^\W\d_]{2,20}(?:-[^\W\d_]{2,20})?"

# Speaker-style line prefixes: "Anna: har ont i magen", "Karl Berg: ..."
_TAG_LINE_RE = re.compile(
    rf"^[ \t]*(?P<tag>{_WORD}(?:[ \t]+{_WORD})?)[ \t]*:[ \t]*\S.*$",
    re.MULTILINE,
)


def _is_shouted(line: str) -> bool:
    letters = [c for c in line if c.isalpha()]
    return bool(letters) and all(c.isupper() for c in letters)


class NameTagDetector(BaseDetector):
    reason = IdentifierReason.NAME_TAG

    def detect(self, text: str) -> str | None:
        for match in _TAG_LINE_RE.finditer(text):
            if _is_shouted(match.group(0)):
                continue
            words = match.group("tag").split()
            if all(is_name_like(w) and w not in NON_NAME_WORDS for w in words):
                return match.group("tag")
        return None
