import pytest
from clinical_guard.detectors.name_tag import NameTagDetector


@pytest.fixture
def detector():
    return NameTagDetector()


def test_single_name_tag(detector):
    assert detector.detect("Anna: har ont i magen") == "Anna"


def test_two_word_tag(detector):
    assert detector.detect("Karl Berg: mår bättre idag") == "Karl Berg"


def test_tag_on_later_line(detector):
    text = "Status: stabil\nLisa: kände sig yr"
    assert detector.detect(text) == "Lisa"


def test_vital_sign_tags_rejected(detector):
    assert detector.detect("BP: 120/80") is None
    assert detector.detect("NEWS: 3") is None
    assert detector.detect("Temp: 38.2") is None


def test_section_tags_rejected(detector):
    assert detector.detect("Plan: kontroll om 2 veckor") is None
    assert detector.detect("Bedömning: sannolikt viral") is None


def test_label_word_rejected(detector):
    assert detector.detect("Name: John Smith") is None


def test_all_caps_line_rejected(detector):
    assert detector.detect("ANNA: HAR ONT") is None


def test_tag_without_content_rejected(detector):
    assert detector.detect("Anna:") is None


def test_swedish_status_block(detector):
    text = "Status: opåverkad\nCor: RR, inga blåsljud\nPulm: vesikulärt\nBuk: mjuk, oöm"
    assert detector.detect(text) is None


def test_english_exam_block(detector):
    text = (
        "Heart: regular rhythm\n"
        "Lungs: clear\n"
        "Abdomen: soft, non-tender\n"
        "Pain: 3/10\n"
        "Weight: 82 kg"
    )
    assert detector.detect(text) is None


def test_name_tag_after_status_block(detector):
    text = "Cor: RR\nPulm: vesikulärt\nEva: känner sig bättre"
    assert detector.detect(text) == "Eva"
