"""
Urgency Evaluator

Absolute thresholds, independent of gestational week. Each check runs on its
own and every triggered reason is reported. Missing values never count as
urgent.
"""

import logging
from typing import List

from pydantic import ValidationError

from .report_models import ExtractedReportData, UrgencyVerdict

logger = logging.getLogger(__name__)


URGENT_THRESHOLDS = {
    'systolic': 160,      # mmHg, at or above
    'diastolic': 110,     # mmHg, at or above
    'afi': 5.0,           # cm, below
    'hemoglobin': 7.0,    # g/dL, below
}

REASON_BLOOD_PRESSURE = "Blood pressure is very high and may need immediate attention"
REASON_AFI = "Amniotic fluid level is critically low"
REASON_HEMOGLOBIN = "Hemoglobin level is very low"


def should_show_urgent_alert(extracted_data) -> UrgencyVerdict:
    """
    Decide whether extracted values need immediate attention.

    Args:
        extracted_data: ExtractedReportData, or a mapping in the same shape
            (e.g. a stored to_dict() result)

    Returns:
        UrgencyVerdict; urgent is True iff at least one reason fired
    """
    if not isinstance(extracted_data, ExtractedReportData):
        try:
            extracted_data = ExtractedReportData.model_validate(extracted_data)
        except ValidationError as e:
            logger.warning(f"Cannot evaluate urgency of malformed report data: {e.error_count()} error(s)")
            return UrgencyVerdict(urgent=False, reasons=[])

    values = extracted_data.values
    reasons: List[str] = []

    bp = values.blood_pressure
    if bp is not None:
        if bp.systolic >= URGENT_THRESHOLDS['systolic'] or bp.diastolic >= URGENT_THRESHOLDS['diastolic']:
            reasons.append(REASON_BLOOD_PRESSURE)

    us = values.ultrasound
    if us is not None and us.afi is not None and us.afi < URGENT_THRESHOLDS['afi']:
        reasons.append(REASON_AFI)

    hb = values.hemoglobin
    if hb is not None and hb.value < URGENT_THRESHOLDS['hemoglobin']:
        reasons.append(REASON_HEMOGLOBIN)

    if reasons:
        logger.warning(f"URGENT: {len(reasons)} finding(s): {'; '.join(reasons)}")

    return UrgencyVerdict(urgent=bool(reasons), reasons=reasons)
