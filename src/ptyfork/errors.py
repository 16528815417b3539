"""Exceptions raised by ptyfork.

Only parent-side failures are exceptions. A child that fails after the fork
(privilege drop or exec) cannot reach the caller; it exits with
``EXEC_FAILURE_EXIT_CODE`` instead.
"""


class PtyError(Exception):
    """Base class for every ptyfork error."""


class InvalidArgument(PtyError, TypeError, ValueError):
    """A caller-side contract violation, detected before any side effect."""


class UserLookupFailure(PtyError, LookupError):
    """The requested user does not exist in the user database."""

    def __init__(self, username: str) -> None:
        super().__init__(f"unknown user: {username!r}")
        self.username = username


class ForkFailure(PtyError):
    """The pty pair or the child process could not be created."""

    def __init__(self, message: str, errno: int | None = None) -> None:
        super().__init__(message)
        self.errno = errno


class IoctlFailure(PtyError):
    """The kernel rejected a window-size ioctl on a descriptor."""

    def __init__(self, fd: int, errno: int | None = None, reason: str = "") -> None:
        message = f"ioctl failed on fd {fd}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.fd = fd
        self.errno = errno
