from __future__ import annotations
import logging
from .models import IdentifierDetectionResult, IdentifierMatch, IdentifierReason
from .detectors.base import BaseDetector
from .detectors.personal_number import PersonalNumberDetector
from .detectors.date import DateDetector
from .detectors.temporal import TemporalReferenceDetector
from .detectors.age import PreciseAgeDetector
from .detectors.name import FullNameDetector, InitialLastNameDetector
from .detectors.name_label import NameLabelDetector
from .detectors.name_tag import NameTagDetector
from .detectors.name_prose import NameInProseDetector
from .detectors.patient_id import PatientIdDetector
from .detectors.phone import PhoneDetector
from .detectors.email import EmailDetector
from .detectors.address import AddressDetector
from .detectors.ward_bed import WardBedTimestampDetector

logger = logging.getLogger(__name__)


def _default_detectors() -> list[BaseDetector]:
    # Order decides which reason is reported first.
    return [
        PersonalNumberDetector(),
        DateDetector(),
        TemporalReferenceDetector(),
        PreciseAgeDetector(),
        FullNameDetector(),
        InitialLastNameDetector(),
        NameLabelDetector(),
        NameTagDetector(),
        NameInProseDetector(),
        PatientIdDetector(),
        PhoneDetector(),
        EmailDetector(),
        AddressDetector(),
        WardBedTimestampDetector(),
    ]


class IdentifierScanner:
    def __init__(self, detectors: list[BaseDetector] | None = None) -> None:
        self._detectors: list[BaseDetector] = (
            detectors if detectors is not None else _default_detectors()
        )
        self._disabled: set[IdentifierReason] = set()

    @property
    def reasons(self) -> list[IdentifierReason]:
        return [d.reason for d in self._detectors]

    def disable_detector(self, reason: IdentifierReason) -> None:
        self._disabled.add(reason)

    def enable_detector(self, reason: IdentifierReason) -> None:
        self._disabled.discard(reason)

    def scan(self, text: str) -> IdentifierDetectionResult:
        found: list[IdentifierMatch] = []

        for detector in self._detectors:
            if detector.reason in self._disabled:
                continue
            match = detector.detect(text)
            if match:
                # Never log the matched text itself: it is patient data.
                logger.debug("Detector %s triggered", detector.reason.value)
                found.append(IdentifierMatch(reason=detector.reason, match=match))

        reasons = tuple(dict.fromkeys(m.reason for m in found))
        matches = tuple(dict.fromkeys(found))

        logger.debug(
            "Scanned %d chars: %d reason(s), %d match(es)",
            len(text),
            len(reasons),
            len(matches),
        )
        return IdentifierDetectionResult(
            has_identifiers=bool(reasons),
            reasons=reasons,
            matches=matches,
        )


_default_scanner = IdentifierScanner()


def detect_identifiers(text: str) -> IdentifierDetectionResult:
    """Scan text with every detector enabled.

    Safe to call from several threads at once: detectors keep no state.
    """
    return _default_scanner.scan(text)
