# zerosource/models/section.py
from dataclasses import dataclass

@dataclass(frozen=True)
class MarkdownSection:
    name: str
    body: str
    line: int  # 1-based line number of the "## " heading
