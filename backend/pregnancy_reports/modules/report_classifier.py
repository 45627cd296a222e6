"""
Report Type Detector

Scores lowercased report text against one keyword vocabulary per report type.
A keyword counts when it occurs anywhere as a substring, including inside a
longer word ("ac" in "background"), so short abbreviations can inflate a
score.

Ties resolve in vocabulary order: ultrasound, then blood_test, then
vital_signs.
"""

import logging
from typing import Dict, Mapping, Sequence

from .report_models import ReportType

logger = logging.getLogger(__name__)


REPORT_TYPE_VOCABULARIES: Mapping[ReportType, Sequence[str]] = {
    ReportType.ULTRASOUND: (
        'ultrasound', 'sonography', 'usg', 'fetal', 'gestational age',
        'bpd', 'hc', 'ac', 'fl', 'efw', 'afi', 'placenta', 'amniotic',
        'fhr', 'fetal heart', 'cervical length', 'nuchal',
    ),
    ReportType.BLOOD_TEST: (
        'hemoglobin', 'hb', 'hgb', 'cbc', 'complete blood count',
        'glucose', 'gtt', 'ogtt', 'hba1c', 'fasting', 'postprandial',
        'blood sugar', 'tsh', 'thyroid', 'platelet', 'wbc', 'rbc',
    ),
    ReportType.VITAL_SIGNS: (
        'blood pressure', 'bp', 'systolic', 'diastolic', 'mmhg',
        'pulse', 'heart rate', 'weight', 'bmi', 'vital',
    ),
}


def score_report_types(
    text: str,
    vocabularies: Mapping[ReportType, Sequence[str]] = REPORT_TYPE_VOCABULARIES,
) -> Dict[ReportType, int]:
    lower_text = text.lower()
    return {
        report_type: sum(1 for keyword in keywords if keyword in lower_text)
        for report_type, keywords in vocabularies.items()
    }


def detect_report_type(text: str) -> ReportType:
    scores = score_report_types(text)
    ultrasound = scores[ReportType.ULTRASOUND]
    blood = scores[ReportType.BLOOD_TEST]
    vital = scores[ReportType.VITAL_SIGNS]

    if ultrasound >= blood and ultrasound >= vital:
        report_type = ReportType.ULTRASOUND
    elif blood >= vital:
        report_type = ReportType.BLOOD_TEST
    else:
        report_type = ReportType.VITAL_SIGNS

    logger.debug(
        f"Report type scores: ultrasound={ultrasound} blood_test={blood} "
        f"vital_signs={vital} -> {report_type.value}"
    )
    return report_type
