"""Tests for apiheaders.routes."""

from __future__ import annotations

from apiheaders.routes import route_path, substitute_dots


def test_readme_resolves_to_index() -> None:
    assert route_path("content/api/webpack/README.md") == "/docs/api/webpack/index"


def test_dots_in_path_are_substituted() -> None:
    assert route_path("content/api/parser/v1.2/guide.md") == "/docs/api/parser/v1---2/guide"


def test_dots_in_filename_are_substituted() -> None:
    assert route_path("content/api/ga/ga.config.md") == "/docs/api/ga/ga---config"


def test_only_leading_source_root_is_replaced() -> None:
    assert route_path("content/api/content/page.md") == "/docs/api/content/page"
    assert route_path("contents/api/page.md") == "/contents/api/page"


def test_custom_roots_and_placeholder() -> None:
    route = route_path(
        "src/ref/a.b/README.md",
        source_root="src",
        route_root="reference",
        index_name="home",
        placeholder="_",
    )
    assert route == "/reference/ref/a_b/home"


def test_substitute_dots_replaces_every_dot() -> None:
    assert substitute_dots("a.b.c", "---") == "a---b---c"
