"""
Privacy Sanitizer

Best-effort redaction of direct identifiers from report text before it is
logged, stored or sent to another service:
  - provider names ("Dr. Jane Smith")       -> [PROVIDER]
  - labelled patient names ("Name: A B")    -> [PATIENT]
  - labelled identifiers (MRN, UHID, ID)    -> [ID]
  - labelled phone / contact numbers        -> [PHONE]

This is NOT complete de-identification. Only labelled or titled identifiers
are caught; unlabelled names, addresses, dates of birth and free-text
identifiers pass through untouched. Matching is substring based, so a label
such as "id" can also fire inside a longer word.
"""

import re
import logging

logger = logging.getLogger(__name__)


REDACTION_RULES = [
    (re.compile(r'(?:dr\.?|doctor)\s+[a-z]+\s+[a-z]+', re.IGNORECASE), '[PROVIDER]'),
    (re.compile(r'(?:patient|name)[\s:]+[a-z]+\s+[a-z]+', re.IGNORECASE), '[PATIENT]'),
    (re.compile(r'(?:mrn|uhid|patient id|id)[\s:]+[\w\-]+', re.IGNORECASE), '[ID]'),
    (re.compile(r'(?:phone|mobile|contact)[\s:]+[\d\-+\s]+', re.IGNORECASE), '[PHONE]'),
]


def sanitize_for_privacy(text: str) -> str:
    """
    Replace labelled identifiers with placeholders.

    Text with nothing to redact is returned unchanged.
    """
    if not isinstance(text, str):
        logger.warning(f"sanitize_for_privacy expected str, got {type(text).__name__}; left as-is")
        return text

    sanitized = text
    for pattern, placeholder in REDACTION_RULES:
        sanitized = pattern.sub(placeholder, sanitized)

    return sanitized
