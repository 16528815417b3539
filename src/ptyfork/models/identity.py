"""Resolved user identity for the child process."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Point-in-time snapshot of a user database entry."""

    name: str
    uid: int
    gid: int
    home: str
    shell: str
