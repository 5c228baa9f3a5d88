#!/usr/bin/env python3

import argparse
import logging
import signal
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional

from copycat.app import CopyCatApp
from copycat.clipboard import ClipboardUnavailableError
from copycat.config import AppConfig
from copycat.models.view import EntryView
from copycat.services.dispatcher import (
    ClearAll,
    ClearNonFavorites,
    Copy,
    Delete,
    Intent,
    ToggleFavorite,
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="CopyCat - clipboard history manager"
    )

    parser.add_argument(
        "--history-file",
        type=Path,
        default=None,
        help="History file (default: $COPYCAT_HISTORY_FILE or clipboard_history.json)"
    )

    parser.add_argument(
        "--max-history",
        type=int,
        default=None,
        help="Maximum number of entries kept (default: 1000)"
    )

    parser.add_argument(
        "-i", "--poll-interval",
        type=int,
        default=None,
        help="Clipboard polling interval in milliseconds (default: 500)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument("--list", action="store_true",
                         help="Print the history and exit")
    actions.add_argument("--copy", type=int, metavar="ID",
                         help="Copy an entry back to the clipboard")
    actions.add_argument("--delete", type=int, metavar="ID",
                         help="Delete an entry")
    actions.add_argument("--toggle-favorite", type=int, metavar="ID",
                         help="Mark or unmark an entry as favorite")
    actions.add_argument("--clear", action="store_true",
                         help="Delete every entry")
    actions.add_argument("--clear-non-favorites", action="store_true",
                         help="Delete every entry that is not a favorite")

    parser.add_argument("-s", "--search", default="",
                        help="Case-insensitive filter for --list")
    parser.add_argument("-f", "--favorites", action="store_true",
                        help="Only list favorites")

    return parser.parse_args(argv)


def build_config(args) -> AppConfig:
    config = AppConfig.from_env()
    overrides = {}
    if args.history_file is not None:
        overrides["history_file"] = args.history_file
    if args.max_history is not None:
        if args.max_history < 1:
            raise ValueError("--max-history must be >= 1")
        overrides["max_history"] = args.max_history
    if args.poll_interval is not None:
        if args.poll_interval < 0:
            raise ValueError("--poll-interval must be >= 0")
        overrides["poll_interval_ms"] = args.poll_interval
    return replace(config, **overrides)


def render(rows: List[EntryView], status: str) -> str:
    if not rows:
        lines = ["No clipboard entries found"]
    else:
        lines = [
            f"{'★' if row.favorite else ' '} [{row.id}] {row.preview} ({row.age})"
            for row in rows
        ]
    lines.append(status)
    return "\n".join(lines)


def one_shot_intents(args, app: CopyCatApp) -> Optional[Iterable[Intent]]:
    if args.copy is not None:
        entry = app.store.get(args.copy)
        if entry is None:
            logger.warning(f"No entry with id {args.copy}")
            return []
        return [Copy(entry.content)]
    if args.delete is not None:
        return [Delete(args.delete)]
    if args.toggle_favorite is not None:
        return [ToggleFavorite(args.toggle_favorite)]
    if args.clear:
        return [ClearAll()]
    if args.clear_non_favorites:
        return [ClearNonFavorites()]
    return None


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"copycat: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format='%(levelname)s: %(message)s',
    )

    app = CopyCatApp(config)

    history_only = (args.list or args.clear or args.clear_non_favorites
                    or args.delete is not None or args.toggle_favorite is not None)
    if not history_only:
        try:
            backend = app.clipboard.resolve()
        except ClipboardUnavailableError as e:
            logger.error(f"Failed to initialize clipboard: {e}")
            return 1
        logger.info(f"Using {backend.name} clipboard")

    app.state.search_query = args.search
    app.state.favorites_only = args.favorites

    intents = one_shot_intents(args, app)
    if intents is not None:
        app.dispatcher.submit_all(intents)
        app.dispatcher.drain()
        print(app.status())
        return 0

    if args.list:
        print(render(app.view(), app.status()))
        return 0

    def signal_handler(signum, frame):
        app.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    print(f"CopyCat watching the clipboard ({app.status()}). Press Ctrl+C to stop")
    app.run_forever()
    print("CopyCat stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
