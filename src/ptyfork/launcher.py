"""Launch a program on a new pty as another user.

The parent allocates a pty pair, sizes it and forks. The child makes the
slave its controlling terminal, drops to the target user's groups and then
uid, sets TERM, changes to the user's home directory and execs the command.
The caller gets back the master descriptor and the child's pid, nothing
more: a child that fails after the fork can only report it by exiting with
EXEC_FAILURE_EXIT_CODE and writing a line to the pty.
"""

import fcntl
import logging
import os
import termios
from typing import NoReturn

from ptyfork.constants import DEFAULT_TERM, EXEC_FAILURE_EXIT_CODE
from ptyfork.errors import ForkFailure, InvalidArgument, IoctlFailure, UserLookupFailure
from ptyfork.identity import resolve_identity
from ptyfork.models import Identity, PtySession
from ptyfork.reaping import ignore_child_exit
from ptyfork.winsize import set_window_size, window_size

log = logging.getLogger(__name__)


def _check_name(label: str, value: object) -> None:
    if not isinstance(value, str):
        raise InvalidArgument(f"{label} must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidArgument(f"{label} must not be empty")


def _ensure_reaping() -> None:
    try:
        ignore_child_exit()
    except ValueError as e:
        raise ForkFailure(
            "SIGCHLD can only be ignored from the main thread; "
            "call ptyfork.ignore_child_exit() there before launching"
        ) from e


def _report(message: str) -> None:
    """Write a diagnostic line to fd 2 of the child (the pty slave)."""
    os.write(2, f"ptyfork: {message}\n".encode(errors="replace"))


def _drop_privileges(identity: Identity) -> None:
    # Groups first: once the uid is dropped the process may no longer
    # change its groups.
    os.setregid(identity.gid, identity.gid)
    os.setgroups([identity.gid])
    os.setreuid(identity.uid, identity.uid)


def _exec_child(
    master_fd: int, slave_fd: int, identity: Identity, command: str, term: str
) -> NoReturn:
    """Run in the forked child. Never returns into the caller's stack."""
    try:
        os.close(master_fd)
        os.setsid()
        fcntl.ioctl(slave_fd, termios.TIOCSCTTY, 0)
        os.dup2(slave_fd, 0)
        os.dup2(slave_fd, 1)
        os.dup2(slave_fd, 2)
        if slave_fd > 2:
            os.close(slave_fd)

        _drop_privileges(identity)

        env = dict(os.environ)
        env["TERM"] = term
        try:
            os.chdir(identity.home)
        except OSError as e:
            _report(f"cannot chdir to {identity.home}: {e.strerror}")

        os.execvpe(command, [command], env)
    except OSError as e:
        _report(f"cannot run {command!r} as {identity.name}: {e.strerror or e}")
    finally:
        os._exit(EXEC_FAILURE_EXIT_CODE)


def launch(
    command: str,
    username: str,
    terminal_type: str | None = None,
    cols: int | None = None,
    rows: int | None = None,
) -> PtySession:
    """Run ``command`` as ``username`` on a new pty and return the session.

    ``command`` is looked up on PATH and exec'd with no arguments besides
    its own name. ``terminal_type`` becomes TERM in the child (default
    ``vt100``); ``cols``/``rows`` size the pty before the child starts
    (default 80x30, both or neither).

    The first call sets SIGCHLD to SIG_IGN for the whole process, see
    ``ptyfork.reaping``.

    Raises InvalidArgument, UserLookupFailure or ForkFailure; in each case
    no process has been started and no descriptor is left open.
    """
    _check_name("command", command)
    _check_name("username", username)
    if terminal_type is not None:
        _check_name("terminal_type", terminal_type)
    size = window_size(cols, rows)

    identity = resolve_identity(username)
    if identity is None:
        raise UserLookupFailure(username)

    _ensure_reaping()
    term = terminal_type or DEFAULT_TERM

    try:
        master_fd, slave_fd = os.openpty()
    except OSError as e:
        raise ForkFailure(f"cannot allocate a pty: {e.strerror}", e.errno) from e

    try:
        set_window_size(slave_fd, size)
        pid = os.fork()
    except (OSError, IoctlFailure) as e:
        os.close(master_fd)
        os.close(slave_fd)
        raise ForkFailure(f"cannot start {command!r}: {e}", getattr(e, "errno", None)) from e

    if pid == 0:
        _exec_child(master_fd, slave_fd, identity, command, term)

    os.close(slave_fd)
    log.debug(
        "launched %r as %s (uid=%d gid=%d): pid=%d fd=%d size=%dx%d term=%s",
        command,
        identity.name,
        identity.uid,
        identity.gid,
        pid,
        master_fd,
        size.cols,
        size.rows,
        term,
    )
    return PtySession(master_fd=master_fd, pid=pid)
