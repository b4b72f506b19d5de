"""Front matter helpers consumed by the site generator."""

from __future__ import annotations

import re
from typing import Optional

import yaml

_FRONT_MATTER_BLOCK = re.compile(r"\A---\r?\n(.*?)\r?\n---\r?\n", re.DOTALL)


def render_front_matter(route: str) -> str:
    return f'---\npath: "{route}"\n---\n'


def prepend_front_matter(content: str, route: str) -> str:
    """Place the routing block ahead of ``content`` and terminate with a newline."""
    return f"{render_front_matter(route)}{content}\n"


def read_front_matter_path(text: str) -> Optional[str]:
    """Return the ``path`` declared in a leading front matter block, if any."""
    match = _FRONT_MATTER_BLOCK.match(text)
    if match is None:
        return None
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError:
        return None
    if isinstance(data, dict) and isinstance(data.get("path"), str):
        return data["path"]
    return None


__all__ = ["prepend_front_matter", "read_front_matter_path", "render_front_matter"]
