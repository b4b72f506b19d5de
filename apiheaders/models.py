"""Data records produced by the documentation transformer."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class TransformedDocument:
    """Outcome of rewriting a single Markdown document."""

    source: Path
    destination: Path
    route: str
    links_rewritten: int = 0
    renamed: bool = False
