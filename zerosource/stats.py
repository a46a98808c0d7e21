# zerosource/stats.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class CodeStats:
    extension: str
    files: int = 0
    test_files: int = 0
    total_lines: int = 0


def _normalize_extension(extension: str) -> str:
    extension = extension.strip()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def _is_test_file(path: Path, extension: str) -> bool:
    name = path.name
    stem = name[: -len(extension)] if extension else path.stem
    return ".test." in name or name.startswith("test_") or stem.endswith("_test")


def collect_stats(root: Union[str, Path], extension: str = ".py") -> CodeStats:
    """
    Count source files, test files and lines under `root` (recursively).

    Lines are counted by splitting on "\\n", so a file ending in a newline
    contributes one extra (empty) line.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Directory not found: {root}")

    extension = _normalize_extension(extension)
    stats = CodeStats(extension=extension)

    for path in sorted(root.rglob(f"*{extension}")):
        if not path.is_file():
            continue
        stats.files += 1
        if _is_test_file(path, extension):
            stats.test_files += 1
        content = path.read_text(encoding="utf-8", errors="replace")
        stats.total_lines += len(content.split("\n"))

    return stats
