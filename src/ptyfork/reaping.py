"""Process-wide child reaping policy.

ptyfork never waits on the children it spawns. Instead SIGCHLD is set to
SIG_IGN the first time a session is launched, which makes the kernel reap
every terminated child of this process immediately. This is process-wide:
it applies to children started by any other code in the host too, and none
of them will ever have an exit status to collect (waitpid fails with
ECHILD). Hosts that need exit statuses should not use ptyfork.
"""

import logging
import signal
import threading

log = logging.getLogger(__name__)

_lock = threading.Lock()
_installed = False


def ignore_child_exit() -> None:
    """Set SIGCHLD to SIG_IGN for the whole process, once.

    Must run on the main thread the first time; later calls from any thread
    are no-ops. Raises ValueError from signal.signal otherwise.
    """
    global _installed
    with _lock:
        if _installed:
            return
        signal.signal(signal.SIGCHLD, signal.SIG_IGN)
        _installed = True
    log.info("SIGCHLD set to SIG_IGN; terminated children are reaped by the kernel")


def child_exit_ignored() -> bool:
    """Return whether ignore_child_exit() has run in this process."""
    return _installed
