# tests/test_markdown_parser.py

from zerosource.markdown_parser import (
    extract_sections,
    extract_title,
    iter_sections,
    project_name,
    project_slug,
)

MY_APP = """# My App

## Description
Does things.

## Functionality
- A
- B
"""


def test_extract_sections_concrete_readme():
    assert extract_sections(MY_APP) == {
        "Description": "Does things.",
        "Functionality": "- A\n- B",
    }


def test_no_level2_headings_gives_empty_mapping():
    assert extract_sections("") == {}
    assert extract_sections("# Title\n\nSome text\n### Deep heading\n") == {}
    assert extract_sections("##NoSpace\n  ## indented\n") == {}


def test_preamble_is_discarded():
    doc = "# Title\nIntro paragraph.\n\n## Description\nBody"
    sections = extract_sections(doc)
    assert sections == {"Description": "Body"}
    assert "Intro paragraph." not in sections["Description"]


def test_other_heading_levels_stay_in_body():
    doc = (
        "## Technical Implementation\n"
        "### Storage\n"
        "Uses files.\n"
        "# Stray title\n"
        "#### Notes\n"
        "## Next\n"
        "x"
    )
    sections = extract_sections(doc)
    assert sections["Technical Implementation"] == (
        "### Storage\nUses files.\n# Stray title\n#### Notes"
    )
    assert sections["Next"] == "x"


def test_body_keeps_internal_whitespace():
    doc = "## Description\n\n  first line\n\n\n    indented\n\n"
    assert extract_sections(doc)["Description"] == "first line\n\n\n    indented"


def test_heading_name_is_trimmed_and_may_be_empty():
    doc = "##    Spaced Name   \nbody\n## \nanonymous"
    sections = extract_sections(doc)
    assert sections == {"Spaced Name": "body", "": "anonymous"}


def test_duplicate_heading_last_body_wins_first_position_kept():
    doc = "## Foo\nfirst\n## Bar\nmiddle\n## Foo\nsecond\n"
    sections = extract_sections(doc)
    assert sections["Foo"] == "second"
    assert list(sections) == ["Foo", "Bar"]


def test_extract_sections_is_pure():
    assert extract_sections(MY_APP) == extract_sections(MY_APP)


def test_crlf_line_endings():
    doc = "# Title\r\n\r\n## Description\r\nDoes things.\r\n"
    assert extract_sections(doc) == {"Description": "Does things."}
    assert extract_title(doc) == "Title"


def test_iter_sections_keeps_duplicates_and_line_numbers():
    doc = "# T\n## A\none\n## A\ntwo"
    found = list(iter_sections(doc))
    assert [(s.name, s.body, s.line) for s in found] == [
        ("A", "one", 2),
        ("A", "two", 4),
    ]


def test_extract_title():
    assert extract_title("# Hello World\n\n## Description\n...") == "Hello World"
    assert extract_title("## Description\nNo title here") is None
    assert extract_title("") is None


def test_extract_title_skips_empty_and_indented_headings():
    assert extract_title("# \n#   \n  # Indented\n#NoSpace\n# Real Title  \n") == "Real Title"


def test_extract_title_first_match_wins():
    assert extract_title("## Description\ntext\n# First\n# Second") == "First"


def test_project_name_and_slug():
    assert project_name(MY_APP) == "My App"
    assert project_name("no heading") == "Unnamed Project"
    assert project_name("no heading", default="Nameless") == "Nameless"
    assert project_slug("My  Cool\tApp ") == "my-cool-app"
