"""Result of a successful launch."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PtySession:
    """A pty master descriptor and the pid of the child attached to its slave.

    The caller owns ``master_fd`` and must close it. The child is reaped by
    the kernel (see ``ptyfork.reaping``), so its exit status is never
    available; poll ``os.kill(pid, 0)`` or watch the master for EOF/EIO to
    learn that it has gone.
    """

    master_fd: int
    pid: int
