# zerosource/__init__.py

"""
Zero Source bootstrapper: README section extraction, structural validation
and a client boundary for the generation / deep-validation service.
"""

from .markdown_parser import (
    extract_sections,
    extract_title,
    iter_sections,
    project_name,
    project_slug,
)
from .validation import REQUIRED_SECTIONS, validate_structure

__all__ = [
    "REQUIRED_SECTIONS",
    "extract_sections",
    "extract_title",
    "iter_sections",
    "project_name",
    "project_slug",
    "validate_structure",
]

__version__ = "0.1.0"
