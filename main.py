import argparse
import curses
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from app_state import AppState
from config_paths import load_config
from event_feed import EventFeed
from ingestion import LineParser
from orchestrator import Orchestrator
from temporal_store import TemporalStore

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"


NOT_A_PIPE_MSG = (
    "We only support streams from unix pipes at the moment, "
    "please pipe something into pfdb"
)


def build_arg_parser(cfg):
    parser = argparse.ArgumentParser(
        prog="pfdb",
        description="pfdb - scrub through a piped log and the variables printed in it",
    )
    parser.add_argument(
        "-prefix",
        "--prefix",
        dest="prefix",
        default=cfg["PREFIX"],
        help="Prefix used to match variable lines (default: %(default)r)",
    )
    parser.add_argument(
        "-delimiter",
        "--delimiter",
        "-delimeter",
        dest="delimiter",
        default=cfg["DELIMITER"],
        help="Separates a variable name from its value (default: %(default)r)",
    )
    parser.add_argument(
        "-v", "-V", "--version", action="store_true", help="Print version and exit"
    )
    return parser


def parse_args(argv, cfg=None):
    cfg = cfg if cfg is not None else load_config()
    args = build_arg_parser(cfg).parse_args(argv)
    if not args.delimiter:
        args.delimiter = cfg["DELIMITER"]
    return args


def _detach_stdin():
    """Hand the piped stdin to the reader and put the terminal on fd 0.

    curses reads keys from fd 0, so the pipe is duplicated first and
    /dev/tty is opened in its place.
    """
    pipe_fd = os.dup(sys.stdin.fileno())
    tty_fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(tty_fd, sys.stdin.fileno())
    os.close(tty_fd)
    return os.fdopen(pipe_fd, "rb")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    cfg = load_config()
    args = parse_args(argv, cfg)

    if args.version:
        print(__version__)
        return 0

    if sys.stdin.isatty():
        print(NOT_A_PIPE_MSG)
        return 0

    try:
        stream = _detach_stdin()
    except OSError as e:
        print(f"Unable to open the terminal for keyboard input: {e}", file=sys.stderr)
        return 1

    parser = LineParser(args.prefix, args.delimiter)
    store = TemporalStore()
    feed = EventFeed()

    def curses_main(stdscr):
        state = AppState(store)
        Orchestrator(stdscr, state, parser, feed, config=cfg).run()

    feed.start_reader(stream)
    try:
        curses.wrapper(curses_main)
    except curses.error as e:
        print(f"Terminal init failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
