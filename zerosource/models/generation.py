# zerosource/models/generation.py

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class AnalysisResult(BaseModel):
    """
    Verdict returned by the generation service's deep README analysis.

    Fields
    ------
    valid:
        Whether the service considers the README implementable as written.
    details:
        Free-form explanation shown on success.
    issues:
        One human-readable line per problem found; shown on failure.
    """

    valid: bool
    details: str = ""
    issues: List[str] = Field(default_factory=list)


class ComponentSpec(BaseModel):
    """
    A single unit of a planned implementation (one output file).
    """

    name: str = Field(..., description="Human-readable component name.")
    path: str = Field(..., description="Output path relative to the project root.")
    description: str = Field("", description="What the component is responsible for.")
