from __future__ import annotations
import re
from abc import ABC, abstractmethod
from typing import ClassVar
from ..models import IdentifierReason


class BaseDetector(ABC):
    reason: ClassVar[IdentifierReason]

    @abstractmethod
    def detect(self, text: str) -> str | None:
        """Return the first identifying substring in text, or None."""
        ...


class PatternDetector(BaseDetector):
    """Detector defined by an ordered tuple of patterns.

    Patterns are tried in order; the left-most match of the first pattern
    that matches at all is returned.
    """

    patterns: ClassVar[tuple[re.Pattern[str], ...]] = ()

    def detect(self, text: str) -> str | None:
        for pattern in self.patterns:
            match = pattern.search(text)
            if match:
                return match.group(0)
        return None


def is_name_like(token: str) -> bool:
    """Capitalised alphabetic word (hyphen/apostrophe compounds allowed), not an acronym."""
    core = token.replace("-", "").replace("'", "").replace("’", "")
    if len(core) < 2 or not core.isalpha():
        return False
    if not token[0].isupper():
        return False
    return not core.isupper()
