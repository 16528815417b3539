"""Configuration for the ptyfork CLI."""

import os

from ptyfork.models import PtyforkConfig

ENV_TERM = "PTYFORK_TERM"
ENV_DEBUG = "PTYFORK_DEBUG"


def load_config() -> PtyforkConfig:
    """Build the CLI configuration from PTYFORK_* environment variables.

    Raises pydantic.ValidationError when a variable holds an invalid value.
    """
    values: dict[str, str] = {}
    term = os.environ.get(ENV_TERM, "").strip()
    if term:
        values["term"] = term
    debug = os.environ.get(ENV_DEBUG, "").strip()
    if debug:
        values["debug"] = debug
    return PtyforkConfig(**values)
