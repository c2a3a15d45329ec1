"""Demo application: a copy list panel over an in-process ListStore."""

import argparse
import logging
import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

from copylist_view.core.log_utils import setup_logging
from copylist_view.protocols import ViewConfig, set_view_config
from copylist_view.services import InMemoryListStore
from copylist_view.widgets import CopyListWidget

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="copylist-view",
        description="Show and edit a list of file paths queued for copying.",
    )
    parser.add_argument("paths", nargs="*", help="initial entries of the copy list")
    parser.add_argument("--log-level", default=None, help="logging level (default: INFO)")
    parser.add_argument("--log-file", nargs="?", const=True, default=None,
                        help="also log to this file (no value: timestamped file in the log dir)")
    parser.add_argument("--no-focus-refresh", action="store_true",
                        help="do not refresh when the window regains focus")
    parser.add_argument("--background", action="store_true",
                        help="run list store calls in background threads")
    return parser


def config_from_args(args: argparse.Namespace) -> ViewConfig:
    config = ViewConfig(
        refresh_on_focus=not args.no_focus_refresh,
        run_in_background=args.background,
    )
    if args.log_level:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    set_view_config(config)
    setup_logging(config.log_level, args.log_file)

    app = QApplication.instance() or QApplication(sys.argv[:1])

    store = InMemoryListStore(args.paths)
    panel = CopyListWidget(store, config)
    panel.setWindowTitle(config.title_text)
    panel.resize(520, 360)
    app.aboutToQuit.connect(panel.shutdown)
    panel.show()

    logger.info(f"Started with {len(args.paths)} entr(ies)")
    return app.exec()
