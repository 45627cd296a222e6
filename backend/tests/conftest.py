from pathlib import Path

import fitz
import pytest

from pregnancy_reports.modules.data_loader import load_myths
from pregnancy_reports.modules.report_models import UploadedReport


def build_pdf(*pages: str) -> bytes:
    """One PDF page per argument; newlines start a new text line."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        y = 72
        for line in text.splitlines():
            page.insert_text((72, y), line)
            y += 14
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def pdf_upload():
    def _upload(*pages: str) -> UploadedReport:
        return UploadedReport(
            filename="report.pdf", content_type="application/pdf", data=build_pdf(*pages)
        )
    return _upload


@pytest.fixture
def image_upload():
    return UploadedReport(filename="scan.png", content_type="image/png", data=b"\x89PNG fake")


SAMPLE_MYTHS = Path(__file__).parent / "data" / "myths_sample.json"


@pytest.fixture(scope="session")
def myths():
    return load_myths(str(SAMPLE_MYTHS))


@pytest.fixture
def end_to_end_text():
    return "BP: 165/70 mmHg, Hb 9.2 g/dL, FHR 145 bpm"
