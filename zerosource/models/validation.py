# zerosource/models/validation.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a structural README check.

    `missing_sections` keeps the order of the required-section list, not the
    order the document happens to use. `valid` is True iff it is empty.
    """

    valid: bool
    missing_sections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "missingSections": list(self.missing_sections)}
