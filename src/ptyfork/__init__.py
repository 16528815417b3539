"""Spawn processes on a pseudo-terminal as another user, and resize them."""

from ptyfork.errors import ForkFailure, InvalidArgument, IoctlFailure, PtyError, UserLookupFailure
from ptyfork.identity import resolve_identity
from ptyfork.launcher import launch
from ptyfork.models import Identity, PtySession, WindowSize
from ptyfork.reaping import ignore_child_exit
from ptyfork.winsize import get_window_size, resize

__version__ = "0.1.0"

__all__ = [
    "ForkFailure",
    "Identity",
    "InvalidArgument",
    "IoctlFailure",
    "PtyError",
    "PtySession",
    "UserLookupFailure",
    "WindowSize",
    "get_window_size",
    "ignore_child_exit",
    "launch",
    "resize",
    "resolve_identity",
]
