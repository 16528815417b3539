"""Model package for ptyfork."""

from ptyfork.models.identity import Identity
from ptyfork.models.ptyfork_config import PtyforkConfig
from ptyfork.models.pty_session import PtySession
from ptyfork.models.window_size import WindowSize

__all__ = [
    "Identity",
    "PtySession",
    "PtyforkConfig",
    "WindowSize",
]
