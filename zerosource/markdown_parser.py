# zerosource/markdown_parser.py

from __future__ import annotations

import logging
import re
from typing import Dict, Iterator, List, Optional

from zerosource.models.section import MarkdownSection

logger = logging.getLogger(__name__)

SECTION_PREFIX = "## "
TITLE_PREFIX = "# "
DEFAULT_PROJECT_NAME = "Unnamed Project"

_WHITESPACE_RUN = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _split_lines(document: str) -> List[str]:
    """
    Split on "\\n" only; a trailing "\\r" stays on the line and is removed
    by the strip applied to names and bodies.
    """
    return document.split("\n")


def _is_section_heading(line: str) -> bool:
    return line.startswith(SECTION_PREFIX)


# ---------------------------------------------------------------------------
# Section extraction
# ---------------------------------------------------------------------------


def iter_sections(document: str) -> Iterator[MarkdownSection]:
    """
    Yield every level-2 section of a Markdown document, in document order.

    A level-2 heading is a line that starts, at column 0, with "## ".
    Anything else (level-1 and level-3+ headings, indented "## ") is body
    text of whichever section it falls in. Text before the first level-2
    heading belongs to no section and is skipped.

    Unlike `extract_sections`, repeated names are yielded once per
    occurrence.
    """
    name: Optional[str] = None
    start_line = 0
    body: List[str] = []

    for lineno, line in enumerate(_split_lines(document), start=1):
        if _is_section_heading(line):
            if name is not None:
                yield MarkdownSection(name=name, body="\n".join(body).strip(), line=start_line)
            name = line[len(SECTION_PREFIX):].strip()
            start_line = lineno
            body = []
        elif name is not None:
            body.append(line)

    if name is not None:
        yield MarkdownSection(name=name, body="\n".join(body).strip(), line=start_line)


def extract_sections(document: str) -> Dict[str, str]:
    """
    Map each level-2 heading name to its trimmed body.

    If a name repeats, the body of the last occurrence wins while the key
    keeps the position of its first occurrence.
    """
    sections: Dict[str, str] = {}
    for section in iter_sections(document):
        if section.name in sections:
            logger.debug(
                "Duplicate section %r at line %d overrides earlier body",
                section.name,
                section.line,
            )
        sections[section.name] = section.body
    return sections


# ---------------------------------------------------------------------------
# Title extraction
# ---------------------------------------------------------------------------


def extract_title(document: str) -> Optional[str]:
    """
    Return the text of the first level-1 heading ("# Title"), stripped.

    Lines starting with "##" never match because the second character must
    be the space. A bare "# " with nothing after it is skipped. Returns
    None when the document has no usable level-1 heading.
    """
    for line in _split_lines(document):
        if not line.startswith(TITLE_PREFIX):
            continue
        title = line[len(TITLE_PREFIX):].strip()
        if title:
            return title
    return None


def project_name(document: str, default: str = DEFAULT_PROJECT_NAME) -> str:
    title = extract_title(document)
    return title if title is not None else default


def project_slug(name: str) -> str:
    """
    Package-style name: lower-cased, whitespace runs collapsed to "-".

    >>> project_slug("My Cool  App")
    'my-cool-app'
    """
    return _WHITESPACE_RUN.sub("-", name.strip().lower())
