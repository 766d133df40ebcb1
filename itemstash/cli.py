"""Command line helpers for itemstash."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .app import StashApp
from .browse import MAIN_CATEGORIES, ItemDetails, SortOrder, featured, list_entries, search
from .config import SOURCE_FILES, StashConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .domain.catalog import Catalog, LooseCategory
from .domain.exceptions import NOT_FOUND_MESSAGE, CatalogLoadError
from .domain.items import Item
from .loaders.sources import directory_locations
from .validators import validate_catalog

console = Console()

SORT_CHOICES = {"asc": SortOrder.NAME_ASC, "desc": SortOrder.NAME_DESC}
LISTING_TARGETS = ("home", "cases", "collections", "case", "collection")


def run_browse(argv: list[str] | None = None) -> None:
    parser = _base_parser("Browse the composed item catalog")
    parser.add_argument(
        "target",
        choices=LISTING_TARGETS + tuple(category.value for category in LooseCategory),
        help="Page to show",
    )
    parser.add_argument("name", nargs="?", help="Collection or case name for detail pages")
    parser.add_argument("--search", default="", help="Filter items by name (case-insensitive)")
    parser.add_argument("--sort", choices=sorted(SORT_CHOICES), help="Sort items by name")
    args = parser.parse_args(argv)

    app = _build_app(args)
    catalog = _load_or_exit(app)
    order = SORT_CHOICES.get(args.sort, SortOrder.DEFAULT)

    if args.target == "home":
        _render_home(catalog, app)
    elif args.target in {"cases", "collections"}:
        values = catalog.iter_cases() if args.target == "cases" else catalog.iter_collections()
        _render_listing(args.target.title(), list_entries(values))
    elif args.target in {"case", "collection"}:
        if not args.name:
            parser.error(f"'{args.target}' requires a name")
        finder = catalog.find_case if args.target == "case" else catalog.find_collection
        entry = finder(args.name)
        if entry is None:
            console.print(f"[red]{NOT_FOUND_MESSAGE}[/red]")
            sys.exit(1)
        _render_items(entry.name, search(entry.items, args.search, order))
    else:
        category = LooseCategory(args.target)
        title = next(
            (menu.name for menu in MAIN_CATEGORIES if menu.page == category.value),
            category.value,
        )
        _render_items(title, search(catalog.category(category), args.search, order))


def run_checklist(argv: list[str] | None = None) -> None:
    parser = _base_parser("itemstash catalog sanity checks")
    args = parser.parse_args(argv)

    app = _build_app(args)
    catalog = _load_or_exit(app)

    errors = validate_catalog(catalog)
    for error in errors:
        console.print(f"[ERROR] {error}", markup=False)
    issues = checklist_run(catalog)
    for issue in issues:
        console.print(f"[{issue.severity.upper()}] {issue.message}", markup=False)
    if errors or any(issue.severity == "error" for issue in issues):
        sys.exit(1)
    if not issues:
        console.print("No issues found.")


def _base_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--source-dir", help="Directory holding the catalog JSON files")
    source.add_argument("--base-url", help="Base URL of the catalog API")
    parser.add_argument("--language", help="Catalog language code, e.g. 'en'")
    parser.add_argument("--log-level", help="Logging level (default from ITEMSTASH_LOG_LEVEL)")
    return parser


def _build_app(args: argparse.Namespace) -> StashApp:
    config = StashConfig.from_env()
    if args.base_url:
        config.sources.base_url = args.base_url
    if args.language:
        config.sources.language = args.language
    _configure_logging(args.log_level or config.log_level)

    locations = None
    if args.source_dir:
        locations = directory_locations(args.source_dir, SOURCE_FILES)
    return StashApp(config, locations=locations)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_or_exit(app: StashApp) -> Catalog:
    try:
        return asyncio.run(app.load())
    except CatalogLoadError as exc:
        console.print("[red]An Error Occurred[/red]")
        console.print("Could not load the item data. Please check the log for details.")
        console.print(f"({exc})", markup=False, style="dim")
        sys.exit(2)


def _render_home(catalog: Catalog, app: StashApp) -> None:
    menu = Table(title="Item Database")
    menu.add_column("Category")
    menu.add_column("Command")
    for entry in MAIN_CATEGORIES:
        menu.add_row(entry.name, f"itemstash-browse {entry.page}")
    console.print(menu)
    _render_listing("Featured Cases", featured(catalog.iter_cases(), rng=app.rng))
    _render_listing("Featured Collections", featured(catalog.iter_collections(), rng=app.rng))


def _render_listing(title: str, entries: list) -> None:
    table = Table(title=title)
    table.add_column("Name")
    table.add_column("Items", justify="right")
    for entry in entries:
        table.add_row(Text(entry.name), str(len(entry.items)))
    console.print(table)


def _render_items(title: str, items: list[Item]) -> None:
    if not items:
        console.print(Text(title, style="bold"))
        console.print("No items match your search.")
        return
    table = Table(title=title)
    table.add_column("Name")
    table.add_column("Rarity")
    table.add_column("Category")
    table.add_column("Weapon")
    for item in items:
        details = ItemDetails.from_item(item)
        table.add_row(
            Text(details.name),
            Text(details.rarity, style=details.color or ""),
            Text(details.category),
            Text(details.weapon),
        )
    console.print(table)
