"""
Report processing pipeline
==========================
file -> text acquisition -> type detection + value extraction
     -> gestational context -> urgency verdict

Confidence is a heuristic, not a probability:
  - PDF text layer             1.0
  - OCR                        0.85 (flat; per-word OCR confidence is ignored)
  - no value matched at all    halved

Low confidence means "verify manually", not an error. Only acquisition
raises (UnsupportedFileType, AcquisitionFailure); every later stage is total.
"""

import logging
from pathlib import Path
from typing import Union

from .clinical_parser import parse_report_text
from .clinical_rules import evaluate_report_values
from .errors import UnsupportedFileType
from .gestational_context import get_gestational_context
from .ocr_utils import extract_text_from_image
from .pdf_text import extract_text_from_pdf
from .privacy import sanitize_for_privacy
from .report_models import ProcessedReport, ReportAnalysis, UploadedReport
from .urgency import should_show_urgent_alert

logger = logging.getLogger(__name__)

PDF_CONFIDENCE = 1.0
OCR_CONFIDENCE = 0.85
NO_VALUES_PENALTY = 0.5

LOG_PREVIEW_CHARS = 200


def process_report(upload: UploadedReport) -> ProcessedReport:
    """
    Extract and classify one uploaded report.

    Raises:
        UnsupportedFileType: content type is neither application/pdf nor image/*
        AcquisitionFailure: PDF or OCR engine failed
    """
    if upload.is_pdf:
        source = 'pdf'
        confidence = PDF_CONFIDENCE
    elif upload.is_image:
        source = 'image'
        confidence = OCR_CONFIDENCE
    else:
        logger.error(f"Rejected {upload.filename}: unsupported type {upload.content_type}")
        raise UnsupportedFileType(upload.content_type)

    logger.info(f"Processing {upload.filename} ({upload.content_type}, {len(upload.data)} bytes)")

    if source == 'pdf':
        raw_text = extract_text_from_pdf(upload)
    else:
        raw_text = extract_text_from_image(upload)

    logger.debug(f"Text preview: {sanitize_for_privacy(raw_text[:LOG_PREVIEW_CHARS])!r}")

    extracted_data = parse_report_text(raw_text)

    if not extracted_data.values.present_keys():
        confidence *= NO_VALUES_PENALTY
        logger.warning(
            f"No clinical values recognised in {upload.filename}; "
            f"confidence lowered to {confidence:.3f}, manual review advised"
        )

    return ProcessedReport(
        raw_text=raw_text,
        extracted_data=extracted_data,
        confidence=confidence,
    )


def process_report_file(path: Union[str, Path]) -> ProcessedReport:
    return process_report(UploadedReport.from_path(path))


def analyze_report(upload: UploadedReport, gestational_week: int) -> ReportAnalysis:
    """
    Full flow for a patient at ``gestational_week``: extraction, week-specific
    grading of each value, and the week-independent urgency verdict.
    """
    report = process_report(upload)
    context = get_gestational_context(gestational_week)

    evaluations = evaluate_report_values(report.extracted_data, context.week)
    urgency = should_show_urgent_alert(report.extracted_data)

    logger.info(
        f"{upload.filename}: week {context.week} ({context.trimester.value} trimester), "
        f"confidence={report.confidence:.3f}, urgent={urgency.urgent}"
    )

    return ReportAnalysis(
        report=report,
        context=context,
        urgency=urgency,
        evaluations=evaluations,
    )
