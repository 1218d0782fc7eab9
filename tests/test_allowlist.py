from clinical_guard.allowlist import allowed_spans, is_suppressed


def test_decade_span():
    assert allowed_spans("patient in their 40s") == [(17, 20)]


def test_numeric_range_span():
    assert allowed_spans("age 20-30") == [(4, 9)]


def test_swedish_decade_span():
    assert (0, 8) in allowed_spans("40-talet")


def test_range_with_age_unit_span():
    spans = allowed_spans("20-30 år")
    assert (0, 8) in spans
    assert (0, 5) in spans


def test_swedish_between_span():
    assert (0, 16) in allowed_spans("mellan 20 och 30")


def test_no_spans_in_plain_text():
    assert allowed_spans("Patient reports chest pain.") == []


def test_contained_candidate_suppressed():
    assert is_suppressed(5, 9, [(4, 9)]) is True
    assert is_suppressed(4, 9, [(4, 9)]) is True


def test_partially_covered_candidate_not_suppressed():
    assert is_suppressed(3, 9, [(4, 9)]) is False
    assert is_suppressed(4, 10, [(4, 9)]) is False


def test_any_span_may_contain():
    assert is_suppressed(12, 14, [(0, 3), (10, 20)]) is True


def test_empty_span_list():
    assert is_suppressed(0, 1, []) is False
