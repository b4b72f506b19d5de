"""Inline link rewriting for cross-document references."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .routes import DOT_PLACEHOLDER, substitute_dots

LINK_PATTERN = re.compile(r"\[(.*?)\]\((.*?)\)")
_MARKDOWN_TARGET = re.compile(r"\.md(#.*)?$")


def rewrite_link(
    label: str, target: str, *, placeholder: str = DOT_PLACEHOLDER
) -> Optional[str]:
    """Return the routed form of ``target`` or ``None`` when it is not a document link.

    The extension is stripped, every dot becomes ``placeholder`` and doubled
    placeholders collapse back into ``..`` so parent segments survive.
    Two consecutive dots inside a name are restored the same way.
    ``.`` and ``..`` segments are kept as they are. ``label`` is never altered.
    """
    match = _MARKDOWN_TARGET.search(target)
    if match is None:
        return None
    stripped = target[: match.start()] + (match.group(1) or "")
    segments = [
        segment
        if segment in {".", ".."}
        else substitute_dots(segment, placeholder).replace(placeholder * 2, "..")
        for segment in stripped.split("/")
    ]
    return "/".join(segments)


def rewrite_links(markdown: str, *, placeholder: str = DOT_PLACEHOLDER) -> Tuple[str, int]:
    """Rewrite every document link in ``markdown``; return the text and rewrite count."""
    rewritten = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal rewritten
        label, target = match.group(1), match.group(2)
        new_target = rewrite_link(label, target, placeholder=placeholder)
        if new_target is None:
            return match.group(0)
        rewritten += 1
        return f"[{label}]({new_target})"

    return LINK_PATTERN.sub(_replace, markdown), rewritten


__all__ = ["LINK_PATTERN", "rewrite_link", "rewrite_links"]
