# clinical_parser.py
# ─────────────────────────────────────────────────────────────────────────────
# Value extraction from raw report text (PDF text layer or OCR output).
#
# Every field has an ordered list of patterns: labelled patterns first, looser
# fallbacks after. The first pattern that matches decides the field; later
# patterns for that field are not consulted.
#
# Extraction is best-effort and total. A field nothing matched is left unset
# and never blocks the other fields.
# ─────────────────────────────────────────────────────────────────────────────

import re
import math
import logging
from typing import Any, Callable, NamedTuple, Optional, Sequence

from .report_classifier import detect_report_type
from .report_models import (
    BloodPressureReading,
    ExtractedReportData,
    GlucoseReadings,
    HemoglobinReading,
    ReportValues,
    UltrasoundFindings,
)

logger = logging.getLogger(__name__)


class FieldPattern(NamedTuple):
    patterns: Sequence[re.Pattern]
    convert: Callable[[re.Match], Any]


def _compile(*patterns: str, flags: int = re.IGNORECASE) -> tuple:
    return tuple(re.compile(p, flags) for p in patterns)


def _finite_float(raw: str) -> float:
    # float() turns an over-long digit run into inf instead of raising
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value from {len(raw)}-character number")
    return value


def _first_float(match: re.Match) -> float:
    return _finite_float(match.group(1))


def _first_int(match: re.Match) -> int:
    return int(match.group(1))


def _cervical_length_cm(match: re.Match) -> float:
    # Values above 10 are read as millimetres: "35" -> 3.5 cm
    value = _finite_float(match.group(1))
    return value / 10 if value > 10 else value


def _gestational_age(match: re.Match) -> str:
    weeks, days = match.group(1), match.group(2)
    return f"{weeks} weeks {days} days" if days else f"{weeks} weeks"


# ══════════════════════════════════════════════════════════════════════════════
# FIELD PATTERNS (order within each list is priority)
# ══════════════════════════════════════════════════════════════════════════════

HEMOGLOBIN = FieldPattern(
    _compile(
        r'(?:hemoglobin|hb|hgb)[\s:]*(\d+\.?\d*)\s*(?:g/dl|gm/dl|g%)?',
        r'(?:hb|hgb)\s*[-:]\s*(\d+\.?\d*)',
    ),
    lambda m: HemoglobinReading(value=_first_float(m)),
)

BLOOD_PRESSURE = FieldPattern(
    _compile(
        r'(?:bp|blood pressure)[\s:]*(\d{2,3})\s*[/\-]\s*(\d{2,3})',
        r'(\d{2,3})\s*/\s*(\d{2,3})\s*(?:mmhg|mm\s*hg)',
    ),
    lambda m: BloodPressureReading(systolic=int(m.group(1)), diastolic=int(m.group(2))),
)

FASTING_GLUCOSE = FieldPattern(
    _compile(
        r'(?:fasting|fbs|fpg)[\s:]*(?:glucose|blood sugar)?[\s:]*(\d+\.?\d*)',
        r'fasting[\s\S]{0,20}?(\d{2,3})\s*(?:mg/dl)?',
    ),
    _first_float,
)

ONE_HOUR_GLUCOSE = FieldPattern(
    _compile(
        r'(?:1\s*hr?|1\s*hour|one\s*hour)[\s:]*(?:glucose)?[\s:]*(\d+\.?\d*)',
    ),
    _first_float,
)

TWO_HOUR_GLUCOSE = FieldPattern(
    _compile(
        r'(?:pp|postprandial|2\s*hr?|2\s*hour)[\s:]*(?:glucose|blood sugar)?[\s:]*(\d+\.?\d*)',
        r'(?:2|two)\s*h(?:ou)?r[\s\S]{0,20}?(\d{2,3})',
    ),
    _first_float,
)

FETAL_HEART_RATE = FieldPattern(
    _compile(
        r'(?:fhr|fetal heart rate|fetal heart)[\s:]*(\d{2,3})',
        r'heart rate[\s:]*(\d{2,3})\s*(?:bpm)?',
    ),
    _first_int,
)

AMNIOTIC_FLUID_INDEX = FieldPattern(
    _compile(
        r'(?:afi|amniotic fluid index)[\s:]*(\d+\.?\d*)',
        r'amniotic[\s\S]{0,30}?(\d+\.?\d*)\s*(?:cm)?',
    ),
    _first_float,
)

EFW_PERCENTILE = FieldPattern(
    _compile(
        r'(?:efw|estimated fetal weight)[\s\S]{0,30}?(\d{1,2})(?:th|st|nd|rd)?\s*(?:percentile|%ile)',
        r'percentile[\s:]*(\d{1,2})',
    ),
    _first_int,
)

CERVICAL_LENGTH = FieldPattern(
    _compile(
        r'(?:cervical length|cx length|cervix)[\s:]*(\d+\.?\d*)\s*(?:cm|mm)?',
    ),
    _cervical_length_cm,
)

PLACENTA_POSITION = FieldPattern(
    _compile(
        r'placenta[\s:]*(?:is\s*)?(?:located\s*)?(?:at\s*)?'
        r'(anterior|posterior|fundal|lateral|low[\s-]?lying|previa)',
    ),
    lambda m: m.group(1).lower(),
)

GESTATIONAL_AGE = FieldPattern(
    _compile(
        r'(?:gestational age|ga)[\s:]*(\d{1,2})\s*(?:weeks?|wks?)\s*(?:and\s*)?(\d)?\s*(?:days?|d)?',
        r'(\d{1,2})\s*w(?:eeks?)?\s*(?:and\s*)?(\d)?\s*d(?:ays?)?',
    ),
    _gestational_age,
)

# Labelled date first, then any bare dd/mm/yyyy
REPORT_DATE = FieldPattern(
    (
        re.compile(r'(?:date|dated?)[\s:]*(\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4})', re.IGNORECASE),
        re.compile(r'(\d{1,2}[/\-]\d{1,2}[/\-]\d{4})'),
    ),
    lambda m: m.group(1),
)


def extract_value(text: str, field: FieldPattern) -> Optional[Any]:
    """Return the converted value of the first matching pattern, or None."""
    for pattern in field.patterns:
        match = pattern.search(text)
        if not match:
            continue
        try:
            return field.convert(match)
        except (ValueError, TypeError) as e:
            logger.debug(f"Discarding match {match.group(0)!r}: {e}")
    return None


# ══════════════════════════════════════════════════════════════════════════════
# MAIN ENTRY POINT
# ══════════════════════════════════════════════════════════════════════════════

def parse_report_text(text: str) -> ExtractedReportData:
    """
    Pull structured clinical values out of unstructured report text.

    Composite groups (glucose, ultrasound) are only set when at least one of
    their readings was found.
    """
    report_type = detect_report_type(text)
    values = {}

    hemoglobin = extract_value(text, HEMOGLOBIN)
    if hemoglobin is not None:
        values['hemoglobin'] = hemoglobin

    blood_pressure = extract_value(text, BLOOD_PRESSURE)
    if blood_pressure is not None:
        values['blood_pressure'] = blood_pressure

    glucose = _present(
        fasting=extract_value(text, FASTING_GLUCOSE),
        one_hour=extract_value(text, ONE_HOUR_GLUCOSE),
        two_hour=extract_value(text, TWO_HOUR_GLUCOSE),
    )
    if glucose:
        values['glucose'] = GlucoseReadings(**glucose)

    gestational_age = extract_value(text, GESTATIONAL_AGE)
    ultrasound = _present(
        fhr=extract_value(text, FETAL_HEART_RATE),
        afi=extract_value(text, AMNIOTIC_FLUID_INDEX),
        efw_percentile=extract_value(text, EFW_PERCENTILE),
        cervical_length=extract_value(text, CERVICAL_LENGTH),
        placenta_position=extract_value(text, PLACENTA_POSITION),
        gestational_age=gestational_age,
    )
    if ultrasound:
        values['ultrasound'] = UltrasoundFindings(**ultrasound)

    extracted = ExtractedReportData(
        report_type=report_type,
        values=ReportValues(**values),
        gestational_age_reported=gestational_age,
        report_date=extract_value(text, REPORT_DATE),
    )

    logger.info(
        f"Parsed {report_type.value} report: "
        f"{', '.join(values) if values else 'no values matched'}"
    )
    return extracted


def _present(**readings) -> dict:
    return {k: v for k, v in readings.items() if v is not None}
