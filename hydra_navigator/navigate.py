"""Command-line entry point for resolving references in Hydra configs.

Usage:
    python -m hydra_navigator.navigate WORKSPACE FILE LINE [--hover]
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from hydra_navigator.config_error import ConfigError
from hydra_navigator.line_at import line_at
from hydra_navigator.load_config import load_config
from hydra_navigator.navigator_environment import activate
from hydra_navigator.provide_definition import provide_definition
from hydra_navigator.provide_hover import provide_hover
from hydra_navigator.reference_resolver import ReferenceResolver


def _print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def run_navigation(args: argparse.Namespace) -> int:
    """Resolve the requested line and print the result."""
    try:
        config = load_config(args.config)
    except ConfigError as e:
        raise SystemExit(str(e)) from e

    try:
        text = args.file.read_text(encoding="utf-8")
        line = line_at(text, args.line - 1)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Could not read {args.file}: {e}"
        raise SystemExit(msg) from e
    except IndexError as e:
        raise SystemExit(str(e)) from e

    workspace_root = str(args.workspace.resolve()) if args.workspace else ""
    if workspace_root:
        activate(workspace_root, config.env_file)

    resolver = ReferenceResolver(
        workspace_root, config=config, report_error=_print_error
    )
    if args.hover:
        hover = provide_hover(resolver, line)
        if hover is None:
            return 1
        print(hover)
        return 0

    location = provide_definition(resolver, line)
    if location is None:
        return 1
    print(location.path)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the navigator."""
    ap = argparse.ArgumentParser(
        description=(
            "Resolve a config reference (defaults override or _target_) on one "
            "line of a YAML file to the file it points at."
        ),
    )
    ap.add_argument(
        "workspace",
        type=Path,
        nargs="?",
        help="Workspace root holding conf/ and .env (omit for no workspace)",
    )
    ap.add_argument(
        "file",
        type=Path,
        help="YAML file containing the reference",
    )
    ap.add_argument(
        "line",
        type=int,
        help="1-based line number of the reference",
    )
    ap.add_argument(
        "--hover",
        action="store_true",
        help="Print hover text instead of the definition path",
    )
    ap.add_argument(
        "--config",
        help="Path to navigator configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every probed path",
    )
    args = ap.parse_args(argv)
    if args.line < 1:
        ap.error("line must be 1 or greater")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_navigation(args)


if __name__ == "__main__":
    raise SystemExit(main())
