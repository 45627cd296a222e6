"""
Error taxonomy for report processing.

Only text acquisition raises. Everything downstream of a successful read
(type detection, value extraction, context building, urgency evaluation)
reports problems as missing fields or lowered confidence instead.
"""


class ReportProcessingError(Exception):
    """Base class for failures surfaced to the caller."""


class UnsupportedFileType(ReportProcessingError):
    """Uploaded file is neither a PDF nor an image."""

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(
            f"Unsupported file type '{content_type}'. "
            "Please upload a PDF or image file."
        )


class AcquisitionFailure(ReportProcessingError):
    """PDF parsing or OCR engine failed to produce text."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Could not read {source} report: {message}")
