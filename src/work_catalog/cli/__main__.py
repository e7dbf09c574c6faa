"""
Command-line entry point for WorkCatalog.

Usage:
    python -m work_catalog.cli <command> [options]

Available commands:
    list       - Table of works (optionally one category)
    show       - Full record for one work as JSON
    slugs      - One slug per line (for static page generation)
    summaries  - Listing summaries as JSON
    export     - Write the catalogue JSON document

Examples:
    python -m work_catalog.cli list --category products
    python -m work_catalog.cli show corevia-financial-platform
    python -m work_catalog.cli export --output build/works.json
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from work_catalog.catalog import CatalogError, WorkCatalog, WorkCategory, get_catalog
from work_catalog.catalog.exporter import project_to_dict, summary_to_dict, write_catalog_json
from work_catalog.cli.console import BaseConsole, get_console
from work_catalog.config import get_settings
from work_catalog.utils.logging import bind_context


def _print_json(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _cmd_list(catalog: WorkCatalog, args: argparse.Namespace, console: BaseConsole) -> int:
    if args.category:
        works = catalog.list_by_category(args.category)
        title = f"Works ({args.category})"
    else:
        works = catalog.list_all()
        title = "Works"

    if not works:
        console.print("(no works)")
        return 0

    rows = [[w.id, w.title, w.category.value, w.about.year] for w in works]
    console.table(title, ["slug", "title", "category", "year"], rows)
    return 0


def _cmd_show(catalog: WorkCatalog, args: argparse.Namespace, console: BaseConsole) -> int:
    work = catalog.get_by_slug(args.slug)
    if work is None:
        print(f"Work '{args.slug}' not found", file=sys.stderr)
        return 1
    _print_json(project_to_dict(work))
    return 0


def _cmd_slugs(catalog: WorkCatalog, args: argparse.Namespace, console: BaseConsole) -> int:
    for slug in catalog.list_all_slugs():
        print(slug)
    return 0


def _cmd_summaries(catalog: WorkCatalog, args: argparse.Namespace, console: BaseConsole) -> int:
    _print_json([summary_to_dict(s) for s in catalog.list_summaries()])
    return 0


def _cmd_export(catalog: WorkCatalog, args: argparse.Namespace, console: BaseConsole) -> int:
    output = args.output or get_settings().export_path
    path = write_catalog_json(catalog, output)
    console.print(f"Catalogue written to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="work_catalog.cli",
        description="WorkCatalog CLI - inspect and export the portfolio catalogue",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Plain text output even on a terminal",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    list_parser = subparsers.add_parser("list", help="List works")
    list_parser.add_argument(
        "--category",
        choices=[c.value for c in WorkCategory],
        help="Only works in this category",
    )
    list_parser.set_defaults(handler=_cmd_list)

    show_parser = subparsers.add_parser("show", help="Show one work as JSON")
    show_parser.add_argument("slug")
    show_parser.set_defaults(handler=_cmd_show)

    slugs_parser = subparsers.add_parser("slugs", help="Print all work slugs")
    slugs_parser.set_defaults(handler=_cmd_slugs)

    summaries_parser = subparsers.add_parser("summaries", help="Print listing summaries as JSON")
    summaries_parser.set_defaults(handler=_cmd_summaries)

    export_parser = subparsers.add_parser("export", help="Write the catalogue JSON document")
    export_parser.add_argument(
        "--output",
        help="Destination file (defaults to WCAT_EXPORT_PATH)",
    )
    export_parser.set_defaults(handler=_cmd_export)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 success, 1 work not found, 2 catalogue could not be built)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = bind_context(command=args.command)

    try:
        catalog = get_catalog()
    except CatalogError as e:
        logger.error("catalog.build_failed", **e.to_dict())
        print(f"Error: {e}", file=sys.stderr)
        return 2

    console = get_console(no_rich=args.no_rich)
    return args.handler(catalog, args, console)


if __name__ == "__main__":
    sys.exit(main())
