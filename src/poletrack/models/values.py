from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .meet import PoleMetric

class FeetInches(BaseModel):
    """Whole feet plus whole inches, inches normalized into 0..11."""

    model_config = ConfigDict(frozen=True)

    feet: int
    inches: int = Field(ge=0, le=11)


class ParsedPole(BaseModel):
    """Pole length, rating and flex pulled out of a free-text pole description.

    ``raw`` is always set; the numeric fields are ``None`` when they could not
    be extracted.
    """

    model_config = ConfigDict(frozen=True)

    raw: str = ""
    length_ft: Optional[float] = None
    rating_lbs: Optional[float] = None
    flex: Optional[float] = None

    def to_dict(self) -> dict:
        """Return ``raw`` plus only the values that were found."""
        return self.model_dump(exclude_none=True)

    def value_for(self, metric: PoleMetric) -> Optional[float]:
        return getattr(self, PoleMetric(metric).value)
