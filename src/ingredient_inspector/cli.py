"""Command-line front end for the watchlist and barcode scanner."""

import argparse
import logging
import pathlib
import sys
from typing import List, Optional

from ingredient_inspector.batch import check_barcodes, read_barcodes
from ingredient_inspector.config import Settings
from ingredient_inspector.ingredients import explain_matches
from ingredient_inspector.lookup import OpenFoodFactsClient
from ingredient_inspector.report import alert_summary, format_report
from ingredient_inspector.scanning import ScanSession
from ingredient_inspector.watchlist import WatchlistEditor, WatchlistStore

logger = logging.getLogger(__name__)


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ingredient-inspector",
        description="Scan product barcodes and check ingredients against your watchlist",
    )
    parser.add_argument(
        "--db-path",
        type=pathlib.Path,
        help="Path to the watchlist database (default: $INGREDIENT_INSPECTOR_DB "
        "or data/watchlist.db)",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        help="Open Food Facts base URL",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        help="Lookup timeout in seconds",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    watchlist_parser = subparsers.add_parser("watchlist", help="Manage the watchlist")
    watchlist_sub = watchlist_parser.add_subparsers(dest="action", required=True)
    watchlist_sub.add_parser("list", help="Show the watchlist, newest first")
    add_parser = watchlist_sub.add_parser("add", help="Add an ingredient to avoid")
    add_parser.add_argument("text", help="Ingredient name, e.g. 'Palm Oil'")
    remove_parser = watchlist_sub.add_parser("remove", help="Remove an entry by position")
    remove_parser.add_argument("index", type=int, help="Position shown by 'list'")

    check_parser = subparsers.add_parser(
        "check", help="Check an ingredient listing against the watchlist"
    )
    check_parser.add_argument("ingredients", help="Ingredient text as printed")

    scan_parser = subparsers.add_parser("scan", help="Look up a barcode and check it")
    scan_parser.add_argument("barcode", help="EAN-13 / UPC-A barcode")

    batch_parser = subparsers.add_parser(
        "batch", help="Check every barcode in a file (one per line)"
    )
    batch_parser.add_argument("file", type=pathlib.Path, help="File of barcodes")
    batch_parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=pathlib.Path("barcode_check.csv"),
        help="CSV file to write results to",
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    settings = Settings.from_env()
    if args.db_path is not None:
        settings.db_path = args.db_path
    if args.api_url:
        settings.api_url = args.api_url
    if args.timeout is not None:
        settings.timeout = args.timeout
    return settings


def _load_editor(settings: Settings) -> WatchlistEditor:
    editor = WatchlistEditor(WatchlistStore(settings.db_path))
    editor.load()
    if editor.last_error:
        print(f"Error: {editor.last_error}", file=sys.stderr)
    return editor


def _print_watchlist(entries: List[str]) -> None:
    if not entries:
        print("Your watchlist is empty.")
        return
    for index, entry in enumerate(entries):
        print(f"{index}: {entry}")


def run_watchlist(args: argparse.Namespace, settings: Settings) -> int:
    editor = _load_editor(settings)

    if args.action == "add":
        if not editor.add(args.text):
            print("Nothing to add: entry is blank.", file=sys.stderr)
            return 1
    elif args.action == "remove":
        try:
            removed = editor.remove(args.index)
        except IndexError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Removed {removed}")

    if editor.last_error:
        print(f"Error: {editor.last_error}", file=sys.stderr)
        return 1
    _print_watchlist(editor.entries)
    return 0


def run_check(args: argparse.Namespace, settings: Settings) -> int:
    editor = _load_editor(settings)
    hits = explain_matches(args.ingredients, editor.entries)
    print("\n".join(alert_summary([hit.entry for hit in hits])))
    for hit in hits:
        logger.debug(f"{hit.entry} matched on '{hit.term}'")
    return 0


def _make_session(settings: Settings) -> ScanSession:
    client = OpenFoodFactsClient(
        base_url=settings.api_url,
        user_agent=settings.user_agent,
        timeout=settings.timeout,
    )
    return ScanSession(client, _load_editor(settings))


def run_scan(args: argparse.Namespace, settings: Settings) -> int:
    session = _make_session(settings)
    outcome = session.scan(args.barcode)
    if not outcome.ok:
        print(outcome.message, file=sys.stderr)
        return 1
    print(format_report(outcome.product, outcome.matches))
    return 0


def run_batch(args: argparse.Namespace, settings: Settings) -> int:
    try:
        barcodes = read_barcodes(args.file)
    except OSError as e:
        print(f"Error: could not read {args.file}: {e}", file=sys.stderr)
        return 1

    session = _make_session(settings)
    df = check_barcodes(session, barcodes)
    df.to_csv(args.output, index=False)
    print(f"Wrote {len(df)} results to {args.output}")
    return 0


COMMANDS = {
    "watchlist": run_watchlist,
    "check": run_check,
    "scan": run_scan,
    "batch": run_batch,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    settings = load_settings(args)
    return COMMANDS[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
