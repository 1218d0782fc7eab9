from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IdentifierReason(str, Enum):
    FULL_NAME = "full_name"
    INITIAL_LAST_NAME = "initial_last_name"
    NAME_LABEL = "name_label"
    NAME_TAG = "name_tag"
    NAME_IN_PROSE = "name_in_prose"
    DATE = "date"
    TEMPORAL_REFERENCE = "temporal_reference"
    PRECISE_AGE = "precise_age"
    SWEDISH_PERSONAL_NUMBER = "swedish_personal_number"
    PATIENT_ID_OR_JOURNAL_NUMBER = "patient_id_or_journal_number"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    ADDRESS = "address"
    WARD_BED_TIMESTAMP = "ward_bed_timestamp"


NAME_REASONS: frozenset[IdentifierReason] = frozenset(
    {
        IdentifierReason.FULL_NAME,
        IdentifierReason.INITIAL_LAST_NAME,
        IdentifierReason.NAME_LABEL,
        IdentifierReason.NAME_TAG,
        IdentifierReason.NAME_IN_PROSE,
    }
)


@dataclass(frozen=True)
class IdentifierMatch:
    reason: IdentifierReason
    match: str  # literal slice of the scanned text


@dataclass(frozen=True)
class IdentifierDetectionResult:
    has_identifiers: bool
    reasons: tuple[IdentifierReason, ...] = field(default_factory=tuple)
    matches: tuple[IdentifierMatch, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> IdentifierDetectionResult:
        return cls(has_identifiers=False)

    def first_match(self, *reasons: IdentifierReason) -> IdentifierMatch | None:
        """Return the first match whose reason is one of ``reasons``.

        Without arguments the first match of any reason is returned.
        """
        for m in self.matches:
            if not reasons or m.reason in reasons:
                return m
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_identifiers": self.has_identifiers,
            "reasons": [r.value for r in self.reasons],
            "matches": [
                {"reason": m.reason.value, "match": m.match} for m in self.matches
            ],
        }
