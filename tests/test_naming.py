from __future__ import annotations

from pathlib import Path

from docs_retitler.naming import NamingRules, build_filename, is_in_connectors, sanitize_title

DOCS_PAGE = Path("docs") / "guides" / "page.md"
CONNECTOR_PAGE = Path("docs") / "connectors" / "page.md"


def test_sanitize_is_idempotent_on_clean_titles() -> None:
    once = sanitize_title("Build Workflows", DOCS_PAGE)

    assert once == "Build workflows"
    assert sanitize_title(once, DOCS_PAGE) == once


def test_dashes_collapse_to_single_space() -> None:
    assert sanitize_title("build---workflows", DOCS_PAGE) == "Build workflows"
    assert build_filename("build---workflows", DOCS_PAGE) == "Build workflows.md"


def test_invalid_characters_are_removed_not_replaced() -> None:
    filename = build_filename('Inputs/Outputs: what "counts"?', DOCS_PAGE)

    assert filename == "Inputsoutputs what counts.md"
    for character in '<>:"/\\|?*':
        assert character not in filename


def test_connectors_substitutes_component_and_keeps_case() -> None:
    filename = build_filename("My Connector Guide", CONNECTOR_PAGE)

    assert filename == "My component Guide.md"
    assert "connector" not in filename.lower()


def test_connector_substitution_respects_word_boundaries() -> None:
    assert sanitize_title("Connectors and connector-types", CONNECTOR_PAGE) == "Connectors and component types"


def test_connector_word_is_untouched_outside_connectors_folder() -> None:
    assert sanitize_title("My Connector Guide", DOCS_PAGE) == "My connector guide"


def test_brand_term_is_fixed_after_sentence_case() -> None:
    assert build_filename("flow builder basics", DOCS_PAGE) == "Flow Builder basics.md"
    assert build_filename("Using the FLOW   BUILDER", DOCS_PAGE) == "Using the Flow Builder.md"


def test_brand_term_is_fixed_under_connectors() -> None:
    assert sanitize_title("flow builder connector", CONNECTOR_PAGE) == "Flow Builder component"


def test_connectors_segment_must_be_a_directory() -> None:
    assert is_in_connectors(Path("docs") / "Connectors" / "nested" / "page.md")
    assert not is_in_connectors(Path("docs") / "connectors.md")
    assert not is_in_connectors(Path("docs") / "my-connectors" / "page.md")


def test_build_filename_reuses_extension() -> None:
    assert build_filename("Getting started", Path("docs") / "intro.MD") == "Getting started.MD"
    assert build_filename("Getting started", "no-extension") == "Getting started.md"


def test_build_filename_returns_none_for_unusable_title() -> None:
    assert build_filename(' ?*"- ', DOCS_PAGE) is None


def test_custom_rules_extend_substitutions_and_brands() -> None:
    rules = NamingRules(
        connectors_segment="integrations",
        substitutions=(("plugin", "extension"),),
        brand_terms=("Flow Builder", "Data Mapper"),
    )
    path = Path("docs") / "integrations" / "page.md"

    assert sanitize_title("data mapper plugin", path, rules) == "Data Mapper extension"


def test_naming_rules_are_hashable() -> None:
    assert hash(NamingRules()) == hash(NamingRules())
    assert {NamingRules(), NamingRules()} == {NamingRules()}
