import argparse
import curses
import logging
import os
import sys

from default_items_initializer import DefaultItemsInitializer

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from app_state import AppState
from _version import __version__


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vilist",
        description="vilist - modal terminal list editor",
    )
    parser.add_argument("items", nargs="*", help="items to start the list with")
    parser.add_argument(
        "-e", "--empty", action="store_true", help="start with an empty list"
    )
    parser.add_argument("--log", metavar="FILE", help="write debug log to FILE")
    parser.add_argument(
        "-v", "-V", "--version", action="version", version=__version__
    )
    return parser


def build_state(args: argparse.Namespace) -> AppState:
    if args.items:
        return AppState(args.items, selected=0)
    if args.empty:
        return AppState()
    items, selected = DefaultItemsInitializer().create()
    return AppState(items, selected=selected)


def configure_logging(path: str | None):
    # the terminal belongs to curses; logs only ever go to a file
    if not path:
        return
    logging.basicConfig(filename=path, level=logging.DEBUG, format=LOG_FORMAT)


def main(argv=None):
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(args.log)

    state = build_state(args)
    logger.info("vilist %s starting", __version__)

    def curses_main(stdscr):
        Orchestrator(stdscr, state).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
