"""
Report Extraction Utility
Reads a PDF or image report and prints the extracted clinical values,
extraction confidence and urgency verdict as JSON.
"""

import sys
import json
import logging

from dotenv import load_dotenv

load_dotenv()

from pregnancy_reports.config import settings
from pregnancy_reports.modules.clinical_rules import DISCLAIMER, SAFE_ESCALATION_MESSAGE
from pregnancy_reports.modules import (
    ReportProcessingError,
    UploadedReport,
    analyze_report,
    process_report,
    sanitize_for_privacy,
    should_show_urgent_alert,
)

logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)


def run(path: str, week=None) -> dict:
    upload = UploadedReport.from_path(path)

    if week is None:
        report = process_report(upload)
        urgency = should_show_urgent_alert(report.extracted_data)
        context = None
        evaluations = {}
    else:
        analysis = analyze_report(upload, week)
        report = analysis.report
        urgency = analysis.urgency
        context = analysis.context.model_dump(mode="json")
        evaluations = {k: v.model_dump(mode="json") for k, v in analysis.evaluations.items()}

    return {
        "file": upload.filename,
        "confidence": report.confidence,
        "extracted_data": report.extracted_data.to_dict(),
        "urgency": urgency.model_dump(),
        "evaluations": evaluations,
        "gestational_context": context,
        "text": sanitize_for_privacy(report.raw_text),
        "escalation": SAFE_ESCALATION_MESSAGE if urgency.urgent else None,
        "disclaimer": DISCLAIMER,
    }


if __name__ == "__main__":
    if len(sys.argv) < 2 or len(sys.argv) > 3:
        print("Usage: python process_report.py <report.pdf|image> [gestational_week]")
        sys.exit(1)

    week = None
    if len(sys.argv) == 3:
        try:
            week = int(sys.argv[2])
        except ValueError:
            print(f"✗ Gestational week must be an integer, got '{sys.argv[2]}'")
            sys.exit(1)

    try:
        result = run(sys.argv[1], week)
    except FileNotFoundError:
        print(f"✗ File not found: {sys.argv[1]}")
        sys.exit(1)
    except ReportProcessingError as e:
        print(f"✗ {e}")
        sys.exit(2)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    if result["urgency"]["urgent"]:
        print("\n⚠ URGENT: " + "; ".join(result["urgency"]["reasons"]))
        print(f"  {result['escalation']}")
    if result["confidence"] <= 0.5:
        print("\n⚠ Low extraction confidence: please verify values manually")
