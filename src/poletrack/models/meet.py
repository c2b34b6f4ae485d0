# src/poletrack/models/meet.py

import datetime as dt
from typing import Optional, Union
import enum

from pydantic import BaseModel, ConfigDict

class PoleMetric(enum.Enum):
    LENGTH_FT  = "length_ft"
    RATING_LBS = "rating_lbs"
    FLEX       = "flex"

class TrendRange(enum.Enum):
    LAST_30 = "30"
    LAST_90 = "90"
    ALL     = "all"

    @property
    def days(self) -> Optional[int]:
        if self is TrendRange.ALL:
            return None
        return int(self.value)


class MeetRecord(BaseModel):
    """A meet as supplied by the schedule store; metric fields are free text."""

    model_config = ConfigDict(frozen=True)

    id:              Union[int, str]
    name:            Optional[str] = None
    date:            Union[dt.datetime, dt.date, str]
    location:        Optional[str] = None
    height_cleared:  Optional[str] = None
    deepest_takeoff: Optional[str] = None
    pole_used:       Optional[str] = None
    place:           Optional[str] = None

    @property
    def has_metrics(self) -> bool:
        return any([self.height_cleared, self.pole_used, self.deepest_takeoff, self.place])


class TrendRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    id:                  Union[int, str]
    name:                Optional[str] = None
    location:            Optional[str] = None
    start_at:            dt.date
    height_cleared_raw:  Optional[str] = None
    deepest_takeoff_raw: Optional[str] = None
    pole_used_raw:       Optional[str] = None
