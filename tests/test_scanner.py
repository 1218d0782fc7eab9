import pytest
from clinical_guard import (
    IdentifierDetectionResult,
    IdentifierReason,
    IdentifierScanner,
    detect_identifiers,
)
from clinical_guard.detectors.base import BaseDetector


class _FixedDetector(BaseDetector):
    def __init__(self, reason, match):
        self.reason = reason
        self._match = match

    def detect(self, text):
        return self._match if self._match in text else None


@pytest.fixture
def scanner():
    return IdentifierScanner()


def test_clean_note(scanner):
    result = scanner.scan("Patient reports chest pain, vitals stable, no acute distress.")
    assert result.has_identifiers is False
    assert result.reasons == ()
    assert result.matches == ()


def test_empty_text(scanner):
    assert scanner.scan("") == IdentifierDetectionResult.empty()


def test_iso_date(scanner):
    result = scanner.scan("Born 2024-01-15")
    assert result.has_identifiers is True
    assert IdentifierReason.DATE in result.reasons
    assert result.first_match(IdentifierReason.DATE).match == "2024-01-15"


def test_bare_month(scanner):
    result = scanner.scan("saw patient in May")
    assert IdentifierReason.DATE in result.reasons


def test_temporal_reference(scanner):
    result = scanner.scan("patient came in yesterday evening")
    assert IdentifierReason.TEMPORAL_REFERENCE in result.reasons


def test_precise_age_and_ranges(scanner):
    result = scanner.scan("age 47")
    assert result.first_match(IdentifierReason.PRECISE_AGE).match == "age 47"
    assert IdentifierReason.PRECISE_AGE not in scanner.scan("age 20-30").reasons
    assert IdentifierReason.PRECISE_AGE not in scanner.scan("in their 40s").reasons


def test_labelled_name(scanner):
    result = scanner.scan("Name: John Smith reports fatigue")
    assert IdentifierReason.NAME_LABEL in result.reasons
    assert IdentifierReason.FULL_NAME in result.reasons
    assert IdentifierReason.NAME_IN_PROSE not in result.reasons
    assert result.first_match(IdentifierReason.NAME_LABEL).match == "John Smith"


def test_personal_number_not_reported_as_phone(scanner):
    result = scanner.scan("Personnummer 19850312-1234")
    assert IdentifierReason.SWEDISH_PERSONAL_NUMBER in result.reasons
    assert IdentifierReason.PHONE_NUMBER not in result.reasons


def test_reasons_follow_detector_order(scanner):
    result = scanner.scan("Name: John Smith, born 2024-01-15")
    assert result.reasons == (
        IdentifierReason.DATE,
        IdentifierReason.FULL_NAME,
        IdentifierReason.NAME_LABEL,
    )


def test_whitespace_padding_does_not_change_result(scanner):
    text = "Woman, age 47, reports dizziness"
    assert scanner.scan(f"  \n{text}\t ").reasons == scanner.scan(text).reasons


def test_matches_are_substrings(scanner):
    text = "Anna uppger smärta sedan 3 dagar, tel 070-123 45 67, Storgatan 12"
    result = scanner.scan(text)
    assert result.has_identifiers is True
    assert all(m.match in text for m in result.matches)


def test_duplicates_removed():
    scanner = IdentifierScanner(
        [
            _FixedDetector(IdentifierReason.EMAIL, "a@b.se"),
            _FixedDetector(IdentifierReason.EMAIL, "a@b.se"),
            _FixedDetector(IdentifierReason.PHONE_NUMBER, "070-1234567"),
        ]
    )
    result = scanner.scan("a@b.se, 070-1234567")
    assert result.reasons == (IdentifierReason.EMAIL, IdentifierReason.PHONE_NUMBER)
    assert len(result.matches) == 2


def test_disable_detector(scanner):
    scanner.disable_detector(IdentifierReason.DATE)
    result = scanner.scan("Born 2024-01-15")
    assert IdentifierReason.DATE not in result.reasons


def test_enable_detector(scanner):
    scanner.disable_detector(IdentifierReason.EMAIL)
    scanner.enable_detector(IdentifierReason.EMAIL)
    result = scanner.scan("Mail: anna@region.se")
    assert result.reasons == (IdentifierReason.EMAIL,)


def test_reasons_property_lists_every_detector(scanner):
    assert set(scanner.reasons) == set(IdentifierReason)


def test_first_match_without_filter():
    result = detect_identifiers("Mail: anna@region.se")
    assert result.first_match().reason == IdentifierReason.EMAIL
    assert result.first_match(IdentifierReason.DATE) is None


def test_to_dict():
    result = detect_identifiers("Mail: anna@region.se")
    assert result.to_dict() == {
        "has_identifiers": True,
        "reasons": ["email"],
        "matches": [{"reason": "email", "match": "anna@region.se"}],
    }


def test_repeated_email_reported_once(scanner):
    result = scanner.scan("Mail a@region.se, cc a@region.se")
    assert [m.reason for m in result.matches] == [IdentifierReason.EMAIL]


def test_scan_is_deterministic(scanner):
    text = "Karl Berg denies fever. Ring 070-123 45 67 igår kväll."
    assert scanner.scan(text) == scanner.scan(text)


def test_status_block_has_no_name(scanner):
    text = "Status: opåverkad\nCor: RR, inga blåsljud\nPulm: vesikulärt\nBuk: mjuk, oöm"
    assert IdentifierReason.NAME_TAG not in scanner.scan(text).reasons


def test_date_and_time_not_a_phone(scanner):
    result = scanner.scan("Admitted 2024-01-15 14:30 via ED.")
    assert IdentifierReason.DATE in result.reasons
    assert IdentifierReason.PHONE_NUMBER not in result.reasons


def test_letter_only_record_number(scanner):
    result = scanner.scan("MRN: ABCDEF")
    assert result.reasons == (IdentifierReason.PATIENT_ID_OR_JOURNAL_NUMBER,)
