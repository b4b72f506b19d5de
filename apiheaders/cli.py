"""CLI entrypoint for the API header pass."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .logging import configure_logging
from .transformer import DocTreeTransformer, find_transformed, list_namespaces


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apiheaders",
        description="Add routing front matter to API reference Markdown and fix internal links.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the site root holding the content directory (defaults to current directory).",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the computed routes without writing any files.",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Fail if any document already carries a routing front matter block.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for apiheaders."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    try:
        settings = load_settings(Path(args.path))
    except ConfigError as exc:
        parser.exit(1, f"apiheaders: invalid configuration: {exc}\n")

    if args.check:
        try:
            list_namespaces(settings.api_base)
            transformed = find_transformed(settings.api_base)
        except (OSError, UnicodeDecodeError) as exc:
            parser.exit(1, f"apiheaders check failed: {exc}\n")
        for path in transformed:
            print(_relativize(path, settings.project_root))
        if transformed:
            parser.exit(1, f"{len(transformed)} document(s) already carry front matter\n")
        print("No transformed documents found")
        return

    try:
        results = DocTreeTransformer(settings).run(dry_run=bool(args.dry_run))
    except (OSError, UnicodeDecodeError) as exc:
        parser.exit(1, f"apiheaders failed: {exc}\nRun with --verbose for more details.\n")

    if args.dry_run:
        for result in results:
            print(f"{result.route}\t{_relativize(result.source, settings.project_root)}")
    else:
        print(f"Added headers to {len(results)} documents")


def _relativize(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
