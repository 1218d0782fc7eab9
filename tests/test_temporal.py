import pytest
from clinical_guard.detectors.temporal import TemporalReferenceDetector


@pytest.fixture
def detector():
    return TemporalReferenceDetector()


def test_yesterday_evening(detector):
    assert detector.detect("patient came in yesterday evening") == "yesterday evening"


def test_clock_time_with_at(detector):
    assert detector.detect("Seen at 14:30 by the team") == "at 14:30"


def test_clock_time_with_kl(detector):
    assert detector.detect("Ankom kl. 08.15 med ambulans") == "kl. 08.15"


def test_clock_time_with_am_pm(detector):
    assert detector.detect("Woke at 3 am with chest pain") == "3 am"


def test_bare_clock_time_not_reported(detector):
    assert detector.detect("BP taken 14:30, 120/80") is None


def test_swedish_relative_day(detector):
    assert detector.detect("Besök igår på vårdcentralen") == "igår"


def test_swedish_part_of_day(detector):
    assert detector.detect("Ont i bröstet igår kväll") == "igår kväll"


def test_relative_week(detector):
    assert detector.detect("Started antibiotics last week") == "last week"


def test_qualified_weekday(detector):
    assert detector.detect("Fell last Friday at home") == "last Friday"


def test_swedish_past_weekday(detector):
    assert detector.detect("Ont sedan i måndags") == "i måndags"


def test_bare_weekday(detector):
    assert detector.detect("Planned for Tuesday") == "Tuesday"


def test_ordinal_day(detector):
    assert detector.detect("Seen on the 24th") == "24th"


def test_duration_ago(detector):
    assert detector.detect("Symptoms started 3 days ago") == "3 days ago"


def test_swedish_duration(detector):
    assert detector.detect("Insjuknade för 2 veckor sedan") == "för 2 veckor sedan"


def test_spelled_out_ordinal_and_month(detector):
    assert detector.detect("Planned for the first of May") == "the first of May"


def test_cascade_order_prefers_clock_time(detector):
    # The clock time is tried before relative words even though it comes later
    assert detector.detect("Yesterday, seen at 09:45") == "at 09:45"


def test_symptom_words_not_temporal(detector):
    assert detector.detect("Reports night sweats and morning stiffness") is None


def test_clean_text(detector):
    text = "Patient reports chest pain, vitals stable, no acute distress."
    assert detector.detect(text) is None
