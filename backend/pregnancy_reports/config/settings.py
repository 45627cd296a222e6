"""
Runtime configuration, read from the environment (.env supported).

Unset optional values fall back to defaults with a warning; nothing here
raises at import time.
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# ── OCR ───────────────────────────────────────────────────────────────────────
# Empty means "tesseract" from PATH; ocr_utils warns on first use
TESSERACT_CMD = os.getenv('TESSERACT_CMD', '')

OCR_LANGUAGE = os.getenv('OCR_LANGUAGE', 'eng')


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, '')
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default


OCR_PSM = _int_env('OCR_PSM', 4)
OCR_FALLBACK_PSM = _int_env('OCR_FALLBACK_PSM', 6)
OCR_UPSCALE = max(1, _int_env('OCR_UPSCALE', 2))

# ── Reference data ────────────────────────────────────────────────────────────
MYTHS_DATA_FILE = os.getenv(
    'MYTHS_DATA_FILE', str(PACKAGE_DIR / 'data' / 'myths_facts.json')
)
