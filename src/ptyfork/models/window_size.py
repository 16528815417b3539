"""Terminal geometry model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from ptyfork.constants import DEFAULT_COLS, DEFAULT_ROWS, MAX_DIMENSION


class WindowSize(BaseModel):
    """Columns and rows of a terminal. Defaults to 80x30."""

    model_config = ConfigDict(frozen=True)

    cols: StrictInt = Field(default=DEFAULT_COLS, gt=0, le=MAX_DIMENSION)
    rows: StrictInt = Field(default=DEFAULT_ROWS, gt=0, le=MAX_DIMENSION)
