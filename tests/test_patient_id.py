import pytest
from clinical_guard.detectors.patient_id import PatientIdDetector


@pytest.fixture
def detector():
    return PatientIdDetector()


def test_mrn(detector):
    assert detector.detect("MRN: 12345678") == "MRN: 12345678"


def test_swedish_journal_number(detector):
    assert detector.detect("journalnr 4711-22") == "journalnr 4711-22"


def test_patient_id_with_hash(detector):
    assert detector.detect("Patient-ID #AB1234") == "Patient-ID #AB1234"


def test_code_without_digit_rejected(detector):
    assert detector.detect("MRN unknown") is None


def test_code_too_short_rejected(detector):
    assert detector.detect("PID: 12") is None


def test_label_inside_word_ignored(detector):
    assert detector.detect("rapid 12345") is None


def test_letter_only_code(detector):
    assert detector.detect("MRN: ABCDEF") == "MRN: ABCDEF"


def test_placeholder_words_rejected(detector):
    assert detector.detect("MRN: Pending") is None
    assert detector.detect("Patient-ID: NONE") is None
    assert detector.detect("patient no fever") is None


def test_later_label_checked(detector):
    assert detector.detect("MRN unknown, journalnr 4711-22") == "journalnr 4711-22"
