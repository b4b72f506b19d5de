"""Rewrites a tree of API reference Markdown into site-ready documents."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import Settings
from .frontmatter import prepend_front_matter, read_front_matter_path
from .links import rewrite_links
from .logging import get_logger
from .models import TransformedDocument
from .routes import MARKDOWN_SUFFIX, README_NAME, route_path

_logger = get_logger("transformer")


def _read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def transform_document(
    path: Path, *, settings: Settings, dry_run: bool = False
) -> TransformedDocument:
    """Prepend routing front matter to ``path`` and rewrite its document links.

    ``README.md`` is replaced by a sibling named after ``settings.index_name``;
    any other document is overwritten in place. A README whose sibling index
    already exists raises ``FileExistsError`` before anything is written.
    With ``dry_run`` the file system is left untouched.
    """
    renamed = path.name == README_NAME
    destination = path.with_name(settings.index_name + MARKDOWN_SUFFIX) if renamed else path
    if renamed and destination.exists():
        raise FileExistsError(
            f"{destination} already exists; refusing to replace it with {path.name}"
        )

    content = _read_text(path)
    relative = path.relative_to(settings.project_root).as_posix()
    route = route_path(
        relative,
        source_root=settings.source_root,
        route_root=settings.route_root,
        index_name=settings.index_name,
        placeholder=settings.placeholder,
    )
    result, rewritten = rewrite_links(
        prepend_front_matter(content, route), placeholder=settings.placeholder
    )
    _logger.debug("%s -> %s (%d links rewritten)", relative, route, rewritten)

    if not dry_run:
        _write_text(destination, result)
        if renamed:
            path.unlink()

    return TransformedDocument(
        source=path,
        destination=destination,
        route=route,
        links_rewritten=rewritten,
        renamed=renamed,
    )


def add_headers(
    directory: Path, *, settings: Settings, dry_run: bool = False
) -> List[TransformedDocument]:
    """Transform every Markdown document under ``directory``, depth first."""
    entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    documents = [
        entry for entry in entries if entry.name.endswith(MARKDOWN_SUFFIX) and entry.is_file()
    ]
    # README first, so an index collision aborts before its siblings are rewritten.
    documents.sort(key=lambda entry: entry.name != README_NAME)
    subdirectories = [
        entry for entry in entries if entry.name not in {".", ".."} and entry.is_dir()
    ]

    results = [
        transform_document(document, settings=settings, dry_run=dry_run)
        for document in documents
    ]
    for subdirectory in subdirectories:
        results.extend(add_headers(subdirectory, settings=settings, dry_run=dry_run))
    return results


def list_namespaces(base: Path) -> List[str]:
    """Return the API namespaces (sub directories) found directly under ``base``."""
    if not base.exists():
        raise FileNotFoundError(f"API documentation directory not found: {base}")
    if not base.is_dir():
        raise NotADirectoryError(f"API documentation path is not a directory: {base}")
    return sorted(
        entry.name for entry in base.iterdir() if entry.name not in {".", ".."} and entry.is_dir()
    )


def find_transformed(base: Path) -> List[Path]:
    """Return Markdown files under ``base`` that already declare a route."""
    found: List[Path] = []
    for path in sorted(base.rglob(f"*{MARKDOWN_SUFFIX}")):
        if path.is_file() and read_front_matter_path(_read_text(path)) is not None:
            found.append(path)
    return found


class DocTreeTransformer:
    """Runs the header pass over every namespace of the API documentation."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.logger = _logger

    def run(self, *, dry_run: bool = False) -> List[TransformedDocument]:
        base = self.settings.api_base
        results: List[TransformedDocument] = []
        for namespace in list_namespaces(base):
            self.logger.info("Processing namespace %s", namespace)
            results.extend(add_headers(base / namespace, settings=self.settings, dry_run=dry_run))
        self.logger.info(
            "Transformed %d documents under %s%s",
            len(results),
            base,
            " (dry-run)" if dry_run else "",
        )
        return results


__all__ = [
    "DocTreeTransformer",
    "add_headers",
    "find_transformed",
    "list_namespaces",
    "transform_document",
]
