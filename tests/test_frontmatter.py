from __future__ import annotations

from docs_retitler.frontmatter import extract_title, find_field, split_front_matter, strip_front_matter


def test_extract_title_returns_trimmed_value() -> None:
    content = "---\ntitle:   Build Workflows  \nsidebar_position: 2\n---\n# Heading\n"

    assert extract_title(content) == "Build Workflows"


def test_extract_title_keeps_colons_inside_value() -> None:
    content = "---\ntitle: Flows: a primer\n---\nbody\n"

    assert extract_title(content) == "Flows: a primer"


def test_extract_title_field_name_is_case_insensitive() -> None:
    content = "---\nslug: intro\nTitle: Introduction\n---\n"

    assert extract_title(content) == "Introduction"


def test_extract_title_accepts_crlf_line_endings() -> None:
    content = "---\r\ntitle: Windows Guide\r\n---\r\nbody\r\n"

    assert extract_title(content) == "Windows Guide"


def test_extract_title_without_front_matter_is_none() -> None:
    assert extract_title("# Just a heading\n\ntitle: not front matter\n") is None


def test_extract_title_without_title_line_is_none() -> None:
    assert extract_title("---\nslug: intro\n---\nbody\n") is None


def test_extract_title_with_empty_value_is_none() -> None:
    assert extract_title("---\ntitle:   \n---\nbody\n") is None


def test_unterminated_block_is_not_front_matter() -> None:
    content = "---\ntitle: Dangling\nno closing delimiter here\n"

    assert split_front_matter(content) is None
    assert extract_title(content) is None


def test_split_front_matter_returns_fields_and_body() -> None:
    parsed = split_front_matter("---\ntitle: A\nslug: a\n---\nBody text\n")

    assert parsed == (["title: A", "slug: a"], "Body text\n")


def test_find_field_ignores_indented_keys() -> None:
    lines = ["meta:", "  title: Nested", "title: Top"]

    assert find_field(lines, "title") == "Top"


def test_strip_front_matter_leaves_only_body() -> None:
    content = "---\ntitle: Build Workflows\n---\n\n\n# Build workflows\n\nText --- inline\n"

    assert strip_front_matter(content) == "# Build workflows\n\nText --- inline\n"


def test_strip_front_matter_without_block_only_trims_leading_whitespace() -> None:
    assert strip_front_matter("\n\n# Title\n") == "# Title\n"


def test_extract_title_ignores_leading_byte_order_mark() -> None:
    content = "\ufeff---\ntitle: Saved With BOM\n---\nbody\n"

    assert extract_title(content) == "Saved With BOM"
    assert strip_front_matter(content) == "body\n"
