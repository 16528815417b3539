"""Shared constants for ptyfork."""

DEFAULT_COLS = 80
DEFAULT_ROWS = 30
DEFAULT_TERM = "vt100"

# struct winsize stores each dimension as an unsigned short.
MAX_DIMENSION = 0xFFFF

# Exit status of a child that could not drop privileges or exec.
EXEC_FAILURE_EXIT_CODE = 1
