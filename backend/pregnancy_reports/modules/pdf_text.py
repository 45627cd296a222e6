"""
PDF text acquisition (PyMuPDF).

Reads the embedded text layer page by page, in order. No OCR happens here,
so scanned PDFs without a text layer come back (nearly) empty and the caller
sees that as low extraction confidence.
"""

import logging

import fitz  # PyMuPDF

from .errors import AcquisitionFailure
from .report_models import UploadedReport

logger = logging.getLogger(__name__)


def extract_text_from_pdf(upload: UploadedReport) -> str:
    """
    Concatenate the text of every page.

    Words on a page are joined with single spaces; each page ends with a
    newline.

    Raises:
        AcquisitionFailure: document could not be opened or read
    """
    doc = None
    try:
        doc = fitz.open(stream=upload.data, filetype="pdf")
        full_text = ''
        for page in doc:
            words = page.get_text("words")
            full_text += ' '.join(word[4] for word in words) + '\n'

        logger.debug(f"PDF {upload.filename}: {doc.page_count} page(s), {len(full_text)} characters")
        return full_text

    except Exception as e:
        logger.error(f"PDF text extraction failed for {upload.filename}: {e}")
        raise AcquisitionFailure('pdf', str(e)) from e

    finally:
        if doc is not None:
            doc.close()
