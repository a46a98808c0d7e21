# zerosource/validation.py

"""
Structural README validation.

Only checks that the required level-2 sections exist. Content quality and
consistency checks belong to the generation service (see
`zerosource.generation_client`), which this module never calls.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from zerosource.markdown_parser import extract_sections
from zerosource.models.validation import ValidationResult

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS: Tuple[str, ...] = (
    "Description",
    "Functionality",
    "Technical Implementation",
)


def validate_structure(document: str) -> ValidationResult:
    sections = extract_sections(document)

    # Exact, case-sensitive key match in the fixed required order.
    missing: List[str] = [name for name in REQUIRED_SECTIONS if name not in sections]

    if missing:
        logger.debug("README is missing sections: %s", ", ".join(missing))

    return ValidationResult(valid=not missing, missing_sections=missing)
