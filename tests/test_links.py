"""Tests for apiheaders.links."""

from __future__ import annotations

import pytest

from apiheaders.links import rewrite_link, rewrite_links


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("./other.md#section", "./other#section"),
        ("other.md", "other"),
        ("../../pkg.v2.md", "../../pkg---v2"),
        ("../sibling/README.md", "../sibling/README"),
        ("./v1.2/guide.md#opts.mode", "./v1---2/guide#opts---mode"),
    ],
)
def test_rewrite_link_routes_markdown_targets(target: str, expected: str) -> None:
    assert rewrite_link("label", target) == expected


@pytest.mark.parametrize(
    "target",
    ["./image.png", "#anchor", "https://example.com/page", "./notes.md.txt", "docs.mdx"],
)
def test_rewrite_link_ignores_other_targets(target: str) -> None:
    assert rewrite_link("label", target) is None


def test_rewrite_link_does_not_special_case_urls() -> None:
    assert rewrite_link("ext", "https://example.com/readme.md") == "https://example---com/readme"


def test_rewrite_link_collapses_literal_double_dots() -> None:
    # Known limitation: consecutive dots inside a name read as a parent segment.
    assert rewrite_link("odd", "./wait..what.md") == "./wait..what"


def test_rewrite_links_leaves_unmatched_links_verbatim() -> None:
    markdown = "See [the guide](./guide.md#setup) and [logo](./logo.png).\n"
    result, count = rewrite_links(markdown)
    assert result == "See [the guide](./guide#setup) and [logo](./logo.png).\n"
    assert count == 1


def test_rewrite_links_handles_multiple_links_per_line() -> None:
    markdown = "[a](a.md) | [b](../b.v2.md) | [c](https://x.dev)"
    result, count = rewrite_links(markdown)
    assert result == "[a](a) | [b](../b---v2) | [c](https://x.dev)"
    assert count == 2


def test_rewrite_links_uses_custom_placeholder() -> None:
    result, _ = rewrite_links("[x](../x.y.md)", placeholder="_")
    assert result == "[x](../x_y)"
