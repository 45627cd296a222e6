"""
PregnancyReports Modules Package
Report text acquisition, value extraction and clinical classification
"""

from .errors import ReportProcessingError, UnsupportedFileType, AcquisitionFailure
from .report_models import (
    ReportType,
    Trimester,
    RiskLevel,
    UploadedReport,
    ExtractedReportData,
    UrgencyVerdict,
    GestationalContext,
    ProcessedReport,
    ReportAnalysis,
)
from .gestational_context import (
    get_gestational_context,
    build_clinical_context_for_ai,
    format_extracted_data_for_ai,
    get_week_from_reported_ga,
)
from .report_classifier import detect_report_type
from .clinical_parser import parse_report_text
from .clinical_rules import evaluate_report_values, validate_ai_output
from .urgency import should_show_urgent_alert
from .privacy import sanitize_for_privacy
from .pdf_text import extract_text_from_pdf
from .ocr_utils import extract_text_from_image
from .report_pipeline import process_report, process_report_file, analyze_report
from .data_loader import load_myths
from .myth_classifier import classify_user_query


__all__ = [
    'ReportProcessingError',
    'UnsupportedFileType',
    'AcquisitionFailure',
    'ReportType',
    'Trimester',
    'RiskLevel',
    'UploadedReport',
    'ExtractedReportData',
    'UrgencyVerdict',
    'GestationalContext',
    'ProcessedReport',
    'ReportAnalysis',
    'get_gestational_context',
    'build_clinical_context_for_ai',
    'format_extracted_data_for_ai',
    'get_week_from_reported_ga',
    'detect_report_type',
    'parse_report_text',
    'evaluate_report_values',
    'validate_ai_output',
    'should_show_urgent_alert',
    'sanitize_for_privacy',
    'extract_text_from_pdf',
    'extract_text_from_image',
    'process_report',
    'process_report_file',
    'analyze_report',
    'load_myths',
    'classify_user_query',
]
