import pytest

from confdoc.book import (
    DuplicateConfigError,
    collect_configs,
    configs_for_lint,
    malformed_configs,
    render_config_list,
    render_configuration_book,
    render_link_references,
)
from confdoc.models import ConfigDeclaration
from confdoc.rules import BOOK_HEADER


def declarations():
    return [
        ConfigDeclaration(
            name="too_many_lines_threshold",
            config_type="u64",
            default="100",
            doc_comment=" Lint: TOO_MANY_LINES. The maximum number of lines a function or method can have",
        ),
        ConfigDeclaration(
            name="avoid_breaking_exported_api",
            config_type="bool",
            default="true",
            doc_comment=" Lint: ENUM_VARIANT_NAMES, WRONG_SELF_CONVENTION. Suppress lints on exported items.",
        ),
        ConfigDeclaration(
            name="blacklisted_names",
            config_type="Vec<String>",
            default='["foo", "baz", "quux"]',
            doc_comment="Deprecated, use disallowed names instead",
            deprecation_reason="Use the `disallowed-names` config instead",
        ),
    ]


def test_collect_configs_sorted_by_display_name():
    configs = collect_configs(declarations())
    assert [c.name for c in configs] == [
        "avoid-breaking-exported-api",
        "blacklisted-names",
        "too-many-lines-threshold",
    ]


def test_collect_configs_rejects_duplicates():
    decls = declarations()
    decls.append(decls[0].model_copy(update={"name": "too-many-lines-threshold"}))
    with pytest.raises(DuplicateConfigError) as excinfo:
        collect_configs(decls)
    assert excinfo.value.name == "too-many-lines-threshold"


def test_one_bad_doc_does_not_block_the_rest():
    configs = collect_configs(declarations())
    assert [c.name for c in malformed_configs(configs)] == ["blacklisted-names"]
    assert all(c.lints for c in configs if not c.is_malformed)


def test_render_configuration_book():
    configs = collect_configs(declarations())
    book = render_configuration_book(configs)
    assert book.startswith(BOOK_HEADER)
    assert book.index("## `avoid-breaking-exported-api`") < book.index("## `too-many-lines-threshold`")
    assert book == render_configuration_book(collect_configs(reversed(declarations())))


def test_render_link_references():
    links = render_link_references(collect_configs(declarations())).split("\n")
    assert len(links) == 3
    assert links[0].startswith("[`avoid-breaking-exported-api`]: ")


def test_render_config_list_skips_deprecated():
    listing = render_config_list(collect_configs(declarations()))
    assert "blacklisted-names" not in listing
    assert listing.count("\n") == 2
    assert "* `too-many-lines-threshold`: `u64`(defaults to `100`): " in listing


def test_configs_for_lint():
    configs = collect_configs(declarations())
    assert [c.name for c in configs_for_lint(configs, "WRONG_SELF_CONVENTION")] == [
        "avoid-breaking-exported-api"
    ]
    assert configs_for_lint(configs, "unknown_lint") == []
