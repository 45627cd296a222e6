"""
ocr_utils.py: image report text acquisition
============================================

Pipeline:
  1. Uploaded bytes are written to a temporary file scoped to one call
  2. preprocess_image(): upscale, grayscale, top-hat watermark suppression,
     adaptive threshold, light dilation (OpenCV)
  3. perform_ocr(): Tesseract LSTM engine, primary PSM with a fallback PSM
     when the first pass returns nothing
  4. Temporary file and images are released whether OCR succeeds or fails

Any engine failure is raised as AcquisitionFailure. There is no retry and no
timeout here; callers that need bounded latency wrap the call themselves.
"""

import logging
import tempfile
from pathlib import Path

import cv2
import numpy as np
import pytesseract
from PIL import Image

from ..config import settings
from .errors import AcquisitionFailure
from .report_models import UploadedReport

logger = logging.getLogger(__name__)

_tesseract_configured = False


def _configure_tesseract() -> None:
    """Apply TESSERACT_CMD once, on the first OCR call."""
    global _tesseract_configured
    if _tesseract_configured:
        return

    if settings.TESSERACT_CMD:
        pytesseract.pytesseract.tesseract_cmd = settings.TESSERACT_CMD
    else:
        logger.warning("TESSERACT_CMD not set. Using 'tesseract' from PATH for image reports.")
    _tesseract_configured = True


# ══════════════════════════════════════════════════════════════════════════════
# IMAGE PREPROCESSING
# ══════════════════════════════════════════════════════════════════════════════

def preprocess_image(image_path: str) -> Image.Image:
    """
    Prepare a report photo or scan for Tesseract.

      1. Upscale (Tesseract wants roughly 300 DPI)
      2. Grayscale
      3. Top-hat transform: lifts light watermark ink into the background
      4. Adaptive Gaussian threshold: grey ink -> white, printed text -> black
      5. 2x2 dilation to reconnect broken digit strokes
    """
    with Image.open(image_path) as original:
        width, height = original.size
        scale = settings.OCR_UPSCALE
        gray = original.resize(
            (width * scale, height * scale), Image.Resampling.LANCZOS
        ).convert('L')

    img_np = np.array(gray)
    gray.close()

    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (25, 25))
    tophat = cv2.morphologyEx(img_np, cv2.MORPH_TOPHAT, kernel)
    img_np = cv2.add(img_np, tophat)

    img_np = cv2.adaptiveThreshold(
        img_np,
        maxValue=255,
        adaptiveMethod=cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
        thresholdType=cv2.THRESH_BINARY,
        blockSize=15,
        C=8,
    )

    img_np = cv2.dilate(img_np, np.ones((2, 2), np.uint8), iterations=1)

    logger.debug("Preprocessing: adaptive threshold applied")
    return Image.fromarray(img_np)


def _tesseract_config(psm: int) -> str:
    # --oem 1 = LSTM engine only
    return f'--psm {psm} --oem 1'


def perform_ocr(image_path: str) -> str:
    """
    Run Tesseract on a report image.

    PSM 4 ("single column of variable-size text") suits columnar lab reports;
    if it yields nothing, the fallback PSM (6, uniform block) is tried once.
    """
    _configure_tesseract()
    img = preprocess_image(image_path)
    try:
        text = pytesseract.image_to_string(
            img, lang=settings.OCR_LANGUAGE, config=_tesseract_config(settings.OCR_PSM)
        )

        if not text.strip():
            logger.warning(
                f"PSM {settings.OCR_PSM} gave empty output, retrying with PSM {settings.OCR_FALLBACK_PSM}"
            )
            text = pytesseract.image_to_string(
                img, lang=settings.OCR_LANGUAGE, config=_tesseract_config(settings.OCR_FALLBACK_PSM)
            )

        logger.debug(f"OCR extracted {len(text)} characters")
        return text
    finally:
        img.close()


# ══════════════════════════════════════════════════════════════════════════════
# UPLOAD ENTRY POINT
# ══════════════════════════════════════════════════════════════════════════════

def extract_text_from_image(upload: UploadedReport) -> str:
    """
    OCR an uploaded image report.

    The temporary file exists only for the duration of this call.

    Raises:
        AcquisitionFailure: image could not be decoded or Tesseract failed
    """
    suffix = Path(upload.filename).suffix or '.img'
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp:
            tmp.write(upload.data)
            tmp_path = tmp.name

        return perform_ocr(tmp_path)

    except Exception as e:
        logger.error(f"OCR failed for {upload.filename}: {e}")
        raise AcquisitionFailure('image', str(e)) from e

    finally:
        if tmp_path is not None:
            Path(tmp_path).unlink(missing_ok=True)
