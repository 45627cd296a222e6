"""
Clinical Rules
==============
Reference thresholds for pregnancy lab and ultrasound values, and the
per-parameter evaluators that grade an extracted value as normal / mild /
urgent.

Sources: WHO/ACOG guidelines (hemoglobin, blood pressure, fetal heart rate,
AFI, cervical length), ACOG GDM screening at 24-28 weeks (glucose).
"""

import re
import logging
from typing import Dict, List, Optional

from .report_models import (
    ClinicalEvaluation,
    ExtractedReportData,
    RiskLevel,
    Trimester,
)

logger = logging.getLogger(__name__)


THRESHOLDS = {
    'hemoglobin': {
        'unit': 'g/dL',
        'trimester_min': {
            Trimester.FIRST: 11.0,
            Trimester.SECOND: 10.5,
            Trimester.THIRD: 11.0,
        },
        'default_min': 11.0,
    },
    'blood_pressure': {
        'unit': 'mmHg',
        'systolic_mild': 140,
        'systolic_urgent': 160,
        'diastolic_mild': 90,
        'diastolic_urgent': 110,
    },
    'glucose': {
        'unit': 'mg/dL',
        'fasting_max': 92,
        'one_hour_max': 180,
        'two_hour_max': 153,
    },
    'fetal_heart_rate': {
        'unit': 'bpm',
        'min': 110,
        'max': 160,
    },
    'afi': {
        'unit': 'cm',
        'urgent_below': 5,
        'normal_min': 8,
        'normal_max': 24,
    },
    'efw_percentile': {
        'unit': '%',
        'normal_min': 10,
        'normal_max': 90,
    },
    'cervical_length': {
        'unit': 'cm',
        'normal_min': 2.5,
        'urgent_before_week': 24,
    },
}


def get_trimester(week) -> Trimester:
    if week <= 12:
        return Trimester.FIRST
    if week <= 27:
        return Trimester.SECOND
    return Trimester.THIRD


def get_hemoglobin_normal(week) -> float:
    hb = THRESHOLDS['hemoglobin']
    return hb['trimester_min'].get(get_trimester(week), hb['default_min'])


# ════════════════════════════════════════════════════════════════════════════
# PER-PARAMETER EVALUATORS
# ════════════════════════════════════════════════════════════════════════════

def evaluate_hemoglobin(value: float, week: int) -> ClinicalEvaluation:
    normal_min = get_hemoglobin_normal(week)
    trimester = get_trimester(week).value

    if value >= normal_min:
        return ClinicalEvaluation(
            level=RiskLevel.NORMAL,
            message=f"Hemoglobin is within the normal range for the {trimester} trimester.",
        )
    if value >= normal_min - 1:
        return ClinicalEvaluation(
            level=RiskLevel.MILD,
            message=(
                f"Hemoglobin is slightly below the expected range ({normal_min} g/dL) "
                f"for the {trimester} trimester."
            ),
        )
    return ClinicalEvaluation(
        level=RiskLevel.URGENT,
        message=(
            f"Hemoglobin is significantly below normal for the {trimester} trimester. "
            "Medical review recommended."
        ),
    )


def evaluate_blood_pressure(systolic: int, diastolic: int) -> ClinicalEvaluation:
    bp = THRESHOLDS['blood_pressure']

    if systolic >= bp['systolic_urgent'] or diastolic >= bp['diastolic_urgent']:
        return ClinicalEvaluation(
            level=RiskLevel.URGENT,
            message="Blood pressure is in the urgent range. Please contact your healthcare provider today.",
        )
    if systolic >= bp['systolic_mild'] or diastolic >= bp['diastolic_mild']:
        return ClinicalEvaluation(
            level=RiskLevel.MILD,
            message="Blood pressure is elevated and may need evaluation at your next appointment.",
        )
    return ClinicalEvaluation(
        level=RiskLevel.NORMAL,
        message="Blood pressure is within the normal range for pregnancy.",
    )


def evaluate_glucose(
    fasting: Optional[float] = None,
    one_hour: Optional[float] = None,
    two_hour: Optional[float] = None,
) -> ClinicalEvaluation:
    limits = THRESHOLDS['glucose']
    readings = [
        (fasting, limits['fasting_max']),
        (one_hour, limits['one_hour_max']),
        (two_hour, limits['two_hour_max']),
    ]
    abnormal_count = sum(
        1 for value, limit in readings if value is not None and value >= limit
    )

    if abnormal_count >= 2:
        return ClinicalEvaluation(
            level=RiskLevel.URGENT,
            message=(
                "Multiple glucose values are above threshold. "
                "Follow-up with your healthcare provider is important."
            ),
        )
    if abnormal_count == 1:
        return ClinicalEvaluation(
            level=RiskLevel.MILD,
            message="One glucose value is slightly elevated. Your provider may recommend monitoring.",
        )
    return ClinicalEvaluation(
        level=RiskLevel.NORMAL,
        message="Glucose values are within the normal screening range.",
    )


def evaluate_afi(value: float) -> ClinicalEvaluation:
    afi = THRESHOLDS['afi']

    if value < afi['urgent_below']:
        return ClinicalEvaluation(
            level=RiskLevel.URGENT,
            message="Amniotic fluid index is low. Please contact your healthcare provider promptly.",
        )
    if value < afi['normal_min'] or value > afi['normal_max']:
        return ClinicalEvaluation(
            level=RiskLevel.MILD,
            message="Amniotic fluid index is outside the typical range. Monitoring may be recommended.",
        )
    return ClinicalEvaluation(
        level=RiskLevel.NORMAL,
        message="Amniotic fluid index is within the normal range.",
    )


def evaluate_fetal_heart_rate(value: int) -> ClinicalEvaluation:
    fhr = THRESHOLDS['fetal_heart_rate']

    if value < fhr['min'] or value > fhr['max']:
        return ClinicalEvaluation(
            level=RiskLevel.MILD,
            message=(
                "Fetal heart rate is outside the typical range. "
                "Your provider may want to investigate further."
            ),
        )
    return ClinicalEvaluation(
        level=RiskLevel.NORMAL,
        message="Fetal heart rate is within the normal range.",
    )


def evaluate_cervical_length(value: float, week: int) -> ClinicalEvaluation:
    cl = THRESHOLDS['cervical_length']

    if week < cl['urgent_before_week'] and value < cl['normal_min']:
        return ClinicalEvaluation(
            level=RiskLevel.URGENT,
            message="Cervical length is short for this stage of pregnancy. Please discuss with your provider.",
        )
    if value < cl['normal_min']:
        return ClinicalEvaluation(
            level=RiskLevel.MILD,
            message="Cervical length may need monitoring. Discuss with your healthcare provider.",
        )
    return ClinicalEvaluation(
        level=RiskLevel.NORMAL,
        message="Cervical length is within the normal range.",
    )


def evaluate_report_values(
    data: ExtractedReportData, week: int
) -> Dict[str, ClinicalEvaluation]:
    """
    Grade every extracted value that has an evaluator.

    Args:
        data: Extraction result
        week: Patient's current gestational week

    Returns:
        Ordered dict: hemoglobin, blood_pressure, glucose, fetal_heart_rate,
        afi, cervical_length. Parameters not present in ``data`` are omitted.
    """
    values = data.values
    evaluations: Dict[str, ClinicalEvaluation] = {}

    if values.hemoglobin is not None:
        evaluations['hemoglobin'] = evaluate_hemoglobin(values.hemoglobin.value, week)

    if values.blood_pressure is not None:
        bp = values.blood_pressure
        evaluations['blood_pressure'] = evaluate_blood_pressure(bp.systolic, bp.diastolic)

    if values.glucose is not None:
        g = values.glucose
        evaluations['glucose'] = evaluate_glucose(g.fasting, g.one_hour, g.two_hour)

    us = values.ultrasound
    if us is not None:
        if us.fhr is not None:
            evaluations['fetal_heart_rate'] = evaluate_fetal_heart_rate(us.fhr)
        if us.afi is not None:
            evaluations['afi'] = evaluate_afi(us.afi)
        if us.cervical_length is not None:
            evaluations['cervical_length'] = evaluate_cervical_length(us.cervical_length, week)

    flagged = [k for k, v in evaluations.items() if v.level != RiskLevel.NORMAL]
    if flagged:
        logger.info(f"Week {week}: parameters outside normal range: {', '.join(flagged)}")

    return evaluations


# ════════════════════════════════════════════════════════════════════════════
# GUARD FOR GENERATED EXPLANATIONS
# ════════════════════════════════════════════════════════════════════════════

FORBIDDEN_OUTPUT_PATTERNS = [
    re.compile(r'you have\s+[a-z]+', re.IGNORECASE),
    re.compile(r'diagnosed\s+with', re.IGNORECASE),
    re.compile(r'you are diagnosed', re.IGNORECASE),
    re.compile(r'take\s+\d+\s*mg', re.IGNORECASE),
    re.compile(r'take\s+\d+\s*ml', re.IGNORECASE),
    re.compile(r'start medication', re.IGNORECASE),
    re.compile(r'prescribe', re.IGNORECASE),
    re.compile(r'this means you have', re.IGNORECASE),
    re.compile(r'you suffer from', re.IGNORECASE),
    re.compile(r'your condition is', re.IGNORECASE),
]

SAFE_ESCALATION_MESSAGE = (
    "These findings may require prompt medical review. "
    "Please contact your healthcare provider today."
)

DISCLAIMER = (
    "This explanation is for pregnancy education only and does not replace medical advice. "
    "Always consult your healthcare provider for personalized guidance. "
    "Note: Complete medical records and history are required for a definitive clinical assessment."
)


def validate_ai_output(output: str) -> dict:
    """
    Check generated explanation text for diagnostic or prescriptive phrasing.

    Returns:
        {"is_valid": bool, "violations": list[str]}
    """
    violations: List[str] = []

    for pattern in FORBIDDEN_OUTPUT_PATTERNS:
        if pattern.search(output):
            violations.append(f"Contains forbidden phrase matching: {pattern.pattern}")

    if 'week' not in output.lower():
        violations.append("Output should reference gestational week")

    if violations:
        logger.warning(f"Generated output rejected: {len(violations)} violation(s)")

    return {
        "is_valid": not violations,
        "violations": violations,
    }
