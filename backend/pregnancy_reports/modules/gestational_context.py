"""
Gestational Context Builder

Maps a gestational week to its trimester and reference values, and renders
that context (and extracted report data) as plain text for a downstream
text-generation service.
"""

import re
import logging
from typing import List, Optional

from .clinical_rules import get_hemoglobin_normal, get_trimester
from .gestational_norms import MAX_WEEK, MIN_WEEK, get_norms_for_week
from .report_models import (
    ClinicalContextForAI,
    ExtractedReportData,
    FetalHeartRateRange,
    GestationalContext,
    NormalRanges,
    Trimester,
)

logger = logging.getLogger(__name__)


TRIMESTER_NAMES = {
    Trimester.FIRST: 'First Trimester (Weeks 1-12)',
    Trimester.SECOND: 'Second Trimester (Weeks 13-27)',
    Trimester.THIRD: 'Third Trimester (Weeks 28-40+)',
}

WEEK_DESCRIPTIONS = {
    Trimester.FIRST: (
        "During the first trimester at week {week}, your baby's major organs are forming. "
        "Nausea, fatigue, and breast tenderness are common."
    ),
    Trimester.SECOND: (
        "At week {week} in the second trimester, your energy typically increases and you may "
        "start feeling baby movements. The baby is growing rapidly."
    ),
    Trimester.THIRD: (
        "In the third trimester at week {week}, your baby is gaining weight and preparing for "
        "birth. You may experience more discomfort as the baby grows."
    ),
}

BLOOD_PRESSURE_RANGE = '< 140/90 mmHg (≥ 160/110 is urgent)'
GLUCOSE_RANGE = 'Fasting < 92, 1-hr < 180, 2-hr < 153 mg/dL'
AFI_RANGE = '8-24 cm (< 5 cm is urgent)'


def clamp_week(week: int) -> int:
    return min(max(week, MIN_WEEK), MAX_WEEK)


def get_gestational_context(week: int) -> GestationalContext:
    """
    Build the reference context for a gestational week.

    Weeks outside 4-42 are clamped, never rejected.
    """
    clamped = clamp_week(week)
    if clamped != week:
        logger.debug(f"Gestational week {week} clamped to {clamped}")

    trimester = get_trimester(clamped)
    norms = get_norms_for_week(clamped)
    normal_values = norms['normal_values']

    return GestationalContext(
        week=clamped,
        trimester=trimester,
        trimester_name=TRIMESTER_NAMES[trimester],
        baby_size=norms['baby_size'],
        key_developments=list(norms['key_developments']),
        typical_symptoms=list(norms['typical_symptoms']),
        normal_fetal_heart_rate=FetalHeartRateRange(**normal_values['fetal_heart_rate']),
        expected_movements=normal_values['expected_movements'],
        week_description=WEEK_DESCRIPTIONS[trimester].format(week=clamped),
    )


def build_clinical_context_for_ai(week: int) -> ClinicalContextForAI:
    context = get_gestational_context(week)
    fhr = context.normal_fetal_heart_rate

    return ClinicalContextForAI(
        gestational_week=context.week,
        trimester=context.trimester_name,
        week_context=context.week_description,
        normal_ranges=NormalRanges(
            hemoglobin=f"≥ {get_hemoglobin_normal(context.week):.1f} g/dL",
            blood_pressure=BLOOD_PRESSURE_RANGE,
            glucose=GLUCOSE_RANGE,
            fetal_heart_rate=f"{fhr.min}-{fhr.max} bpm",
            afi=AFI_RANGE,
        ),
        development_context=(
            f"At {context.week} weeks, your baby is about the size of a {context.baby_size}. "
            f"Key developments: {', '.join(context.key_developments)}. "
            f"Expected movements: {context.expected_movements}."
        ),
    )


def _num(value) -> str:
    # 10.0 -> "10"; otherwise repr, which keeps every significant digit
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def format_extracted_data_for_ai(extracted_data: ExtractedReportData) -> str:
    """
    Render extracted values one per line, in a fixed order.

    Absent values are not printed.
    """
    lines: List[str] = []
    values = extracted_data.values

    lines.append(f"Report Type: {extracted_data.report_type.value.replace('_', ' ')}")

    if extracted_data.gestational_age_reported:
        lines.append(f"Gestational Age (from report): {extracted_data.gestational_age_reported}")

    if values.hemoglobin is not None:
        lines.append(f"Hemoglobin: {_num(values.hemoglobin.value)} {values.hemoglobin.unit}")

    if values.blood_pressure is not None:
        bp = values.blood_pressure
        lines.append(f"Blood Pressure: {bp.systolic}/{bp.diastolic} {bp.unit}")

    if values.glucose is not None:
        g = values.glucose
        if g.fasting is not None:
            lines.append(f"Fasting Glucose: {_num(g.fasting)} {g.unit}")
        if g.one_hour is not None:
            lines.append(f"1-Hour Glucose: {_num(g.one_hour)} {g.unit}")
        if g.two_hour is not None:
            lines.append(f"2-Hour Glucose: {_num(g.two_hour)} {g.unit}")

    if values.ultrasound is not None:
        us = values.ultrasound
        if us.fhr is not None:
            lines.append(f"Fetal Heart Rate: {us.fhr} bpm")
        if us.afi is not None:
            lines.append(f"Amniotic Fluid Index: {_num(us.afi)} cm")
        if us.efw_percentile is not None:
            lines.append(f"EFW Percentile: {us.efw_percentile}th percentile")
        if us.placenta_position is not None:
            lines.append(f"Placenta Position: {us.placenta_position}")
        if us.cervical_length is not None:
            lines.append(f"Cervical Length: {_num(us.cervical_length)} cm")

    return '\n'.join(lines)


def get_week_from_reported_ga(ga_string: str) -> Optional[int]:
    """'22 weeks 3 days' -> 22; None if no week count is present."""
    match = re.search(r'(\d{1,2})\s*(?:weeks?|wks?)', ga_string, re.IGNORECASE)
    if match:
        return int(match.group(1))
    return None
