"""Read and change the window size of a pty."""

import fcntl
import logging
import struct
import termios

from pydantic import ValidationError

from ptyfork.errors import InvalidArgument, IoctlFailure
from ptyfork.models import WindowSize

log = logging.getLogger(__name__)

_WINSIZE = struct.Struct("HHHH")


def window_size(cols: int | None = None, rows: int | None = None) -> WindowSize:
    """Return the geometry for ``cols``/``rows``, or 80x30 when both are omitted.

    The two dimensions are all-or-nothing: giving only one of them, or a
    value that is not a positive integer, raises InvalidArgument.
    """
    if cols is None and rows is None:
        return WindowSize()
    if cols is None or rows is None:
        raise InvalidArgument("cols and rows must be given together")
    try:
        return WindowSize(cols=cols, rows=rows)
    except ValidationError as e:
        raise InvalidArgument(f"cols and rows must be positive integers: {e}") from e


def _check_fd(fd: int) -> None:
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise InvalidArgument(f"file descriptor must be an int, got {type(fd).__name__}")


def set_window_size(fd: int, size: WindowSize) -> None:
    """Apply ``size`` to the terminal on ``fd`` with a single TIOCSWINSZ."""
    packed = _WINSIZE.pack(size.rows, size.cols, 0, 0)
    try:
        fcntl.ioctl(fd, termios.TIOCSWINSZ, packed)
    except OSError as e:
        raise IoctlFailure(fd, e.errno, e.strerror or "") from e


def get_window_size(fd: int) -> WindowSize:
    """Read back the geometry of the terminal on ``fd``."""
    _check_fd(fd)
    try:
        raw = fcntl.ioctl(fd, termios.TIOCGWINSZ, b"\x00" * _WINSIZE.size)
    except OSError as e:
        raise IoctlFailure(fd, e.errno, e.strerror or "") from e
    rows, cols, _xp, _yp = _WINSIZE.unpack(raw)
    return WindowSize.model_construct(cols=cols, rows=rows)


def resize(master_fd: int, cols: int | None = None, rows: int | None = None) -> None:
    """Set the window size of the pty behind ``master_fd``.

    Omitting both dimensions resets the terminal to 80x30, whatever its
    current size. The kernel delivers SIGWINCH to the terminal's foreground
    process group.
    """
    _check_fd(master_fd)
    size = window_size(cols, rows)
    set_window_size(master_fd, size)
    log.debug("resized fd=%d to %dx%d", master_fd, size.cols, size.rows)
