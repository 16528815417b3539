"""Configuration model for the ptyfork CLI."""

from pydantic import BaseModel, Field


class PtyforkConfig(BaseModel):
    """Runtime configuration read from the environment."""

    term: str | None = Field(default=None, min_length=1)
    debug: bool = False
