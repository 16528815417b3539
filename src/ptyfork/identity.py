"""User database lookups."""

import logging
import pwd

from ptyfork.models import Identity

log = logging.getLogger(__name__)


def resolve_identity(username: str) -> Identity | None:
    """Look up ``username`` and return its identity, or None if it is unknown."""
    try:
        entry = pwd.getpwnam(username)
    except KeyError:
        log.debug("no passwd entry for %r", username)
        return None
    return Identity(
        name=entry.pw_name,
        uid=entry.pw_uid,
        gid=entry.pw_gid,
        home=entry.pw_dir,
        shell=entry.pw_shell,
    )
