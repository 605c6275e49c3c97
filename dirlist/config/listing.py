"""
Listing configuration consumed by the listing pipeline.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SortKey(str, Enum):
    """Keys the listing can be ordered by."""

    NAME = "name"
    SIZE = "size"
    CREATED = "created"


class ListingConfiguration(BaseModel):
    """Immutable options for one listing run."""

    model_config = ConfigDict(frozen=True)

    paths: List[str] = Field(default_factory=lambda: ["."], description="Paths to list")
    show_all: bool = Field(False, description="Include entries whose name starts with a dot")
    long_form: bool = Field(False, description="Render one aligned row per entry")
    colourize: bool = Field(True, description="Colour entry names by kind")
    human_readable: bool = Field(False, description="Show sizes in 1024-based units")
    numeric_ids: bool = Field(False, description="Show numeric owner and group ids")
    sort_key: SortKey = Field(SortKey.NAME, description="Key the entries are ordered by")
    reverse: bool = Field(False, description="Reverse the sort order")
    width: Optional[int] = Field(
        None, gt=0, description="Output width for the short form; terminal width if unset"
    )
