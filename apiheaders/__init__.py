"""Build-time rewriting of API reference Markdown for the documentation site."""

from .config import ConfigError, Settings, load_settings
from .links import rewrite_link, rewrite_links
from .models import TransformedDocument
from .routes import DOT_PLACEHOLDER, route_path
from .transformer import DocTreeTransformer, add_headers, transform_document

__all__ = [
    "ConfigError",
    "DOT_PLACEHOLDER",
    "DocTreeTransformer",
    "Settings",
    "TransformedDocument",
    "add_headers",
    "load_settings",
    "rewrite_link",
    "rewrite_links",
    "route_path",
    "transform_document",
]
