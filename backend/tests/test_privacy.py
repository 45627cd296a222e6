import pytest

from pregnancy_reports.modules.privacy import sanitize_for_privacy


def test_text_without_identifiers_is_unchanged():
    text = "Hemoglobin 11.2 g/dL, BP 120/80 mmHg"
    assert sanitize_for_privacy(text) == text


@pytest.mark.parametrize("text,expected", [
    ("Dr. Anita Sharma reviewed", "[PROVIDER] reviewed"),
    ("DOCTOR JOHN SMITH", "[PROVIDER]"),
    ("Patient: Priya Rao", "[PATIENT]"),
    ("MRN: 445-221", "[ID]"),
    ("Phone: +91 98765 43210", "[PHONE]"),
])
def test_labelled_identifiers_are_redacted(text, expected):
    assert sanitize_for_privacy(text) == expected


def test_unlabelled_name_passes_through():
    assert sanitize_for_privacy("Seen by Priya Rao") == "Seen by Priya Rao"


def test_id_label_matches_inside_words():
    assert sanitize_for_privacy("paid: 500") == "pa[ID]"


def test_non_string_returned_as_is():
    assert sanitize_for_privacy(None) is None
