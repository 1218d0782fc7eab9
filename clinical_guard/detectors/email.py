from __future__ import annotations
import re
from .base import PatternDetector
from ..models import IdentifierReason

_EMAIL_RE = re.compile(
    r"\b[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}\b", re.IGNORECASE
)


class EmailDetector(PatternDetector):
    reason = IdentifierReason.EMAIL
    patterns = (_EMAIL_RE,)
