import pytest

from pregnancy_reports.modules.clinical_parser import (
    FieldPattern,
    _compile,
    extract_value,
    parse_report_text,
)
from pregnancy_reports.modules.report_models import ReportType


class TestHemoglobin:
    def test_labelled_value(self):
        data = parse_report_text("Hemoglobin: 10.8 g/dL")
        assert data.values.hemoglobin.value == 10.8
        assert data.values.hemoglobin.unit == "g/dL"

    def test_dash_separated_falls_back_to_second_pattern(self):
        data = parse_report_text("HGB - 11.2")
        assert data.values.hemoglobin.value == 11.2


class TestBloodPressure:
    def test_labelled_reading(self):
        bp = parse_report_text("BP: 120/80 mmHg").values.blood_pressure
        assert (bp.systolic, bp.diastolic) == (120, 80)

    def test_hyphen_separator(self):
        bp = parse_report_text("Blood Pressure 130-85").values.blood_pressure
        assert (bp.systolic, bp.diastolic) == (130, 85)

    def test_unlabelled_reading_with_unit(self):
        bp = parse_report_text("Reading 118/76 mmHg").values.blood_pressure
        assert (bp.systolic, bp.diastolic) == (118, 76)

    def test_absent_reading_is_not_serialised(self):
        data = parse_report_text("Hemoglobin 11.5 g/dL")
        assert data.values.blood_pressure is None
        assert "blood_pressure" not in data.to_dict()["values"]


class TestGlucose:
    def test_three_readings(self):
        text = "Fasting glucose: 95 mg/dL\n1 hr glucose: 170\n2 hr glucose: 140"
        data = parse_report_text(text)
        g = data.values.glucose
        assert (g.fasting, g.one_hour, g.two_hour) == (95.0, 170.0, 140.0)
        assert data.report_type == ReportType.BLOOD_TEST

    def test_partial_readings_only_serialise_present_values(self):
        data = parse_report_text("FBS 88")
        assert data.to_dict()["values"]["glucose"] == {"fasting": 88.0, "unit": "mg/dL"}

    def test_group_absent_when_nothing_found(self):
        assert parse_report_text("Hb 11").values.glucose is None


class TestUltrasound:
    @pytest.mark.parametrize("text,expected", [
        ("Cervical length: 35", 3.5),
        ("Cervical length: 3.5 cm", 3.5),
        ("Cervix 28 mm", 2.8),
    ])
    def test_cervical_length_normalised_to_cm(self, text, expected):
        assert parse_report_text(text).values.ultrasound.cervical_length == pytest.approx(expected)

    def test_afi_labelled(self):
        assert parse_report_text("AFI: 4.2 cm").values.ultrasound.afi == 4.2

    def test_afi_loose_amniotic_mention(self):
        text = "Amniotic fluid volume adequate, 12 cm"
        assert parse_report_text(text).values.ultrasound.afi == 12.0

    def test_efw_percentile_skips_weight(self):
        text = "EFW 2100 g, 45th percentile"
        assert parse_report_text(text).values.ultrasound.efw_percentile == 45

    @pytest.mark.parametrize("text,expected", [
        ("Placenta is located at posterior wall", "posterior"),
        ("Placenta: Low-lying", "low-lying"),
        ("PLACENTA ANTERIOR", "anterior"),
    ])
    def test_placenta_position_lowercased(self, text, expected):
        assert parse_report_text(text).values.ultrasound.placenta_position == expected

    def test_fetal_heart_rate(self):
        assert parse_report_text("Fetal heart rate: 152 bpm").values.ultrasound.fhr == 152


class TestGestationalAgeAndDate:
    @pytest.mark.parametrize("text,expected", [
        ("Gestational age: 24 weeks 3 days", "24 weeks 3 days"),
        ("GA 32 wks", "32 weeks"),
        ("28w 4d", "28 weeks 4 days"),
    ])
    def test_gestational_age_normalised(self, text, expected):
        data = parse_report_text(text)
        assert data.gestational_age_reported == expected
        assert data.values.ultrasound.gestational_age == expected

    def test_labelled_date(self):
        assert parse_report_text("Date: 12/03/2024").report_date == "12/03/2024"

    def test_labelled_date_preferred_over_earlier_bare_date(self):
        text = "Sample 01/01/2024 collected. Report date: 15/01/2024"
        assert parse_report_text(text).report_date == "15/01/2024"

    def test_bare_date(self):
        assert parse_report_text("Collected 5-6-2023 morning").report_date == "5-6-2023"


class TestWholeReport:
    def test_mixed_vitals_line(self, end_to_end_text):
        data = parse_report_text(end_to_end_text)

        assert data.report_type == ReportType.VITAL_SIGNS
        assert data.values.hemoglobin.value == 9.2
        assert (data.values.blood_pressure.systolic, data.values.blood_pressure.diastolic) == (165, 70)
        assert data.values.ultrasound.fhr == 145
        assert data.values.ultrasound.afi is None
        assert data.values.glucose is None
        assert data.gestational_age_reported is None
        assert data.report_date is None

    def test_parsing_is_deterministic(self, end_to_end_text):
        assert parse_report_text(end_to_end_text) == parse_report_text(end_to_end_text)

    @pytest.mark.parametrize("text", ["", "Thank you for visiting our clinic.", "%%%% ////"])
    def test_text_without_values(self, text):
        data = parse_report_text(text)
        assert data.values.present_keys() == []
        assert data.to_dict()["values"] == {}


def test_extract_value_moves_on_when_conversion_fails():
    def convert(match):
        if match.group(1) == "x":
            raise ValueError("not a number")
        return int(match.group(1))

    field = FieldPattern(_compile(r'value=(x)', r'value=(\d+)'), convert)
    assert extract_value("value=x value=7", field) == 7


def test_extract_value_returns_none_without_match():
    field = FieldPattern(_compile(r'value=(\d+)'), int)
    assert extract_value("nothing here", field) is None


@pytest.mark.parametrize("text", [
    "Hemoglobin " + "9" * 400 + " g/dL",
    "AFI " + "1" * 400,
    "Cervical length: " + "3" * 400,
])
def test_overflowing_numbers_are_left_absent(text):
    data = parse_report_text(text)
    assert data.values.present_keys() == []


def test_overflowing_number_does_not_hide_other_fields():
    data = parse_report_text("Hemoglobin " + "9" * 400 + "\nAFI 11.5")
    assert data.values.hemoglobin is None
    assert data.values.ultrasound.afi == 11.5
