"""clinical-guard: detects patient identifiers in free-text clinical notes
before they are sent to an external text-generation service."""
from .models import IdentifierDetectionResult, IdentifierMatch, IdentifierReason
from .scanner import IdentifierScanner, detect_identifiers
from .allowlist import allowed_spans, is_suppressed

__all__ = [
    "IdentifierDetectionResult",
    "IdentifierMatch",
    "IdentifierReason",
    "IdentifierScanner",
    "detect_identifiers",
    "allowed_spans",
    "is_suppressed",
]
