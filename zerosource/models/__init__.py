# zerosource/models/__init__.py

from .generation import AnalysisResult, ComponentSpec
from .section import MarkdownSection
from .validation import ValidationResult

__all__ = ["AnalysisResult", "ComponentSpec", "MarkdownSection", "ValidationResult"]
