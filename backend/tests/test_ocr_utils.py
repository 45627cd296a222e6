import os
from unittest.mock import MagicMock

import pytest
from PIL import Image

from pregnancy_reports.config import settings
from pregnancy_reports.modules import ocr_utils
from pregnancy_reports.modules.errors import AcquisitionFailure


def test_temp_file_removed_after_success(monkeypatch, image_upload):
    seen = {}

    def fake_ocr(path):
        seen["path"] = path
        with open(path, "rb") as f:
            seen["data"] = f.read()
        return "Hb 10.2 g/dL"

    monkeypatch.setattr(ocr_utils, "perform_ocr", fake_ocr)

    assert ocr_utils.extract_text_from_image(image_upload) == "Hb 10.2 g/dL"
    assert seen["data"] == image_upload.data
    assert seen["path"].endswith(".png")
    assert not os.path.exists(seen["path"])


def test_temp_file_removed_after_failure(monkeypatch, image_upload):
    seen = {}

    def failing_ocr(path):
        seen["path"] = path
        raise RuntimeError("tesseract not installed")

    monkeypatch.setattr(ocr_utils, "perform_ocr", failing_ocr)

    with pytest.raises(AcquisitionFailure) as exc_info:
        ocr_utils.extract_text_from_image(image_upload)

    assert exc_info.value.source == "image"
    assert "tesseract not installed" in str(exc_info.value)
    assert not os.path.exists(seen["path"])


def test_perform_ocr_retries_with_fallback_psm(monkeypatch):
    monkeypatch.setattr(settings, "OCR_PSM", 4)
    monkeypatch.setattr(settings, "OCR_FALLBACK_PSM", 6)
    monkeypatch.setattr(ocr_utils, "preprocess_image", lambda path: Image.new("L", (10, 10)))
    image_to_string = MagicMock(side_effect=["  \n", "Hb 10"])
    monkeypatch.setattr(ocr_utils.pytesseract, "image_to_string", image_to_string)

    assert ocr_utils.perform_ocr("scan.png") == "Hb 10"
    configs = [call.kwargs["config"] for call in image_to_string.call_args_list]
    assert configs == ["--psm 4 --oem 1", "--psm 6 --oem 1"]


def test_perform_ocr_single_pass_when_text_found(monkeypatch):
    monkeypatch.setattr(ocr_utils, "preprocess_image", lambda path: Image.new("L", (10, 10)))
    image_to_string = MagicMock(return_value="BP 120/80")
    monkeypatch.setattr(ocr_utils.pytesseract, "image_to_string", image_to_string)

    assert ocr_utils.perform_ocr("scan.png") == "BP 120/80"
    assert image_to_string.call_count == 1


def test_preprocess_image_upscales_to_grayscale(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "OCR_UPSCALE", 2)
    path = tmp_path / "page.png"
    Image.new("RGB", (40, 20), "white").save(path)

    processed = ocr_utils.preprocess_image(str(path))

    assert processed.mode == "L"
    assert processed.size == (80, 40)


def test_missing_tesseract_cmd_warns_once_on_first_ocr(monkeypatch, caplog):
    monkeypatch.setattr(settings, "TESSERACT_CMD", "")
    monkeypatch.setattr(ocr_utils, "_tesseract_configured", False)
    monkeypatch.setattr(ocr_utils, "preprocess_image", lambda path: Image.new("L", (10, 10)))
    monkeypatch.setattr(ocr_utils.pytesseract, "image_to_string", MagicMock(return_value="Hb 10"))

    with caplog.at_level("WARNING", logger=ocr_utils.__name__):
        ocr_utils.perform_ocr("a.png")
        ocr_utils.perform_ocr("b.png")

    warnings = [r for r in caplog.records if "TESSERACT_CMD not set" in r.getMessage()]
    assert len(warnings) == 1


def test_configured_tesseract_cmd_is_applied(monkeypatch):
    monkeypatch.setattr(settings, "TESSERACT_CMD", "/opt/tesseract/bin/tesseract")
    monkeypatch.setattr(ocr_utils, "_tesseract_configured", False)
    monkeypatch.setattr(ocr_utils.pytesseract.pytesseract, "tesseract_cmd", "tesseract")
    monkeypatch.setattr(ocr_utils, "preprocess_image", lambda path: Image.new("L", (10, 10)))
    monkeypatch.setattr(ocr_utils.pytesseract, "image_to_string", MagicMock(return_value="Hb 10"))

    ocr_utils.perform_ocr("scan.png")

    assert ocr_utils.pytesseract.pytesseract.tesseract_cmd == "/opt/tesseract/bin/tesseract"
