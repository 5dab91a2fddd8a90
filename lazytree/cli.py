"""Command-line front door for lazytree.

Loads a workspace file, refreshes the tree down to a depth, sorts it, and
prints an outline.
"""

from __future__ import annotations

import argparse
import asyncio
import locale
import logging
import sys
from pathlib import Path

from . import config
from .backends import load_workspace
from .errors import LazyTreeError
from .render import DEFAULT_THEME, PLAIN_THEME, render_tree
from .tree_model import SORT_ASC, SORT_COLUMNS, SORT_DESC, Root, read_tree


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytree",
        description="Print the unified archive tree described by a workspace file.",
    )
    parser.add_argument(
        "workspace",
        nargs="?",
        default=None,
        help="Workspace JSON file. Defaults to the last one used.",
    )
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=2,
        help="How many container levels to load below the root (default: 2).",
    )
    parser.add_argument("--sort", choices=SORT_COLUMNS, default=None, help="Sort column.")
    parser.add_argument("--desc", action="store_true", help="Sort descending.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log refresh activity to stderr.")
    return parser


async def load_tree(workspace_path: Path, depth: int) -> Root:
    """Build the root for ``workspace_path`` and load ``depth`` levels below it."""
    workspace = load_workspace(workspace_path)
    root = Root(workspace.backends)
    await read_tree(root, depth + 1)
    return root


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree outline.

    Explicit ``--sort``/``--desc`` and workspace choices are remembered in the
    persisted config and used as defaults next time.
    """
    args = build_parser().parse_args(argv)

    # name sorting collates with the user's locale
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        pass

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.workspace is not None:
        workspace_path = Path(args.workspace)
    else:
        workspace_path = config.load_workspace_path()
        if workspace_path is None:
            raise SystemExit("No workspace given and none remembered.")
    if not workspace_path.exists():
        raise SystemExit(f"Path not found: {workspace_path}")

    if args.sort is not None or args.desc:
        column = args.sort
        direction = SORT_DESC if args.desc else SORT_ASC
        config.save_sort_preference(column, direction)
    else:
        column, direction = config.load_sort_preference()

    try:
        root = asyncio.run(load_tree(workspace_path, args.depth))
    except LazyTreeError as exc:
        raise SystemExit(str(exc)) from exc
    config.save_workspace_path(workspace_path)

    for child in root.children:
        child.sort(column, direction)

    use_color = not args.no_color and sys.stdout.isatty()
    sys.stdout.write(render_tree(root, DEFAULT_THEME if use_color else PLAIN_THEME))
