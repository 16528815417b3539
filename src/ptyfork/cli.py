"""Command-line interface for ptyfork."""

import argparse
import logging
import os
import sys

from pydantic import ValidationError

from ptyfork import __version__
from ptyfork.config import load_config
from ptyfork.errors import PtyError
from ptyfork.launcher import launch

log = logging.getLogger("ptyfork")

READ_SIZE = 4096


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ptyfork",
        description="Run a command as another user on a new pseudo-terminal",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-t", "--term",
        help="TERM for the child (default: $PTYFORK_TERM, then vt100)",
    )
    parser.add_argument("--cols", type=int, help="Terminal width, requires --rows")
    parser.add_argument("--rows", type=int, help="Terminal height, requires --cols")
    parser.add_argument("user", help="User to run the command as")
    parser.add_argument("command", help="Program to run, without arguments")
    return parser


def _write_all(fd: int, data: bytes) -> bool:
    """Write all of ``data`` to ``fd``. Return False if the reader has gone."""
    view = memoryview(data)
    while view:
        try:
            written = os.write(fd, view)
        except BrokenPipeError:
            return False
        view = view[written:]
    return True


def copy_output(master_fd: int, out_fd: int) -> int:
    """Copy everything readable from ``master_fd`` to ``out_fd`` until EOF.

    Stops early, without error, when ``out_fd`` is a pipe nobody reads.
    Returns the number of bytes copied.
    """
    total = 0
    while True:
        try:
            data = os.read(master_fd, READ_SIZE)
        except OSError:
            # Linux reports EIO once the last slave descriptor is closed.
            break
        if not data:
            break
        if not _write_all(out_fd, data):
            log.debug("output closed after %d bytes, stopped copying", total)
            break
        total += len(data)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValidationError as e:
        print(f"Error: invalid PTYFORK_* environment: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.debug or config.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    term = args.term or config.term
    try:
        session = launch(args.command, args.user, term, cols=args.cols, rows=args.rows)
    except PtyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        copied = copy_output(session.master_fd, sys.stdout.fileno())
    finally:
        os.close(session.master_fd)
    log.debug("pid=%d closed its terminal after %d bytes", session.pid, copied)
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
