"""Route computation for API documents."""

from __future__ import annotations

DOT_PLACEHOLDER = "---"
README_NAME = "README.md"
MARKDOWN_SUFFIX = ".md"


def substitute_dots(value: str, placeholder: str = DOT_PLACEHOLDER) -> str:
    """Replace every literal dot in ``value`` with ``placeholder``."""
    return value.replace(".", placeholder)


def route_path(
    relative_path: str,
    *,
    source_root: str = "content",
    route_root: str = "docs",
    index_name: str = "index",
    placeholder: str = DOT_PLACEHOLDER,
) -> str:
    """Return the site route for a document path relative to the project root.

    ``content/api/webpack/README.md`` resolves to ``/docs/api/webpack/index``
    and ``content/api/parser/v1.2/guide.md`` to
    ``/docs/api/parser/v1---2/guide``.
    """
    path = relative_path.replace("\\", "/")
    if path == source_root or path.startswith(f"{source_root}/"):
        path = route_root + path[len(source_root):]

    head, _, name = path.rpartition("/")
    if name == README_NAME:
        name = index_name
    elif name.endswith(MARKDOWN_SUFFIX):
        name = name[: -len(MARKDOWN_SUFFIX)]
    path = f"{head}/{name}" if head else name

    return "/" + substitute_dots(path, placeholder)


__all__ = ["DOT_PLACEHOLDER", "README_NAME", "route_path", "substitute_dots"]
