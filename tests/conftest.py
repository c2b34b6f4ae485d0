import datetime as dt

import pytest

from poletrack.models.meet import MeetRecord


@pytest.fixture
def today():
    return dt.date(2024, 6, 1)


@pytest.fixture
def meets():
    """A season of meets as the schedule store hands them over."""
    return [
        MeetRecord(id=1, name="Spring Invitational", date="2024-05-20",
                   height_cleared="4.60m", deepest_takeoff="12' 3\"",
                   pole_used="15’ 170lbs 18.5"),
        MeetRecord(id=2, name="Indoor Open", date="2024-04-10",
                   height_cleared="15'1\"", deepest_takeoff="12'",
                   pole_used="14'6\" 160 lbs 17.9"),
        MeetRecord(id=3, name="Conference", date="2024-05-25",
                   height_cleared="NH", pole_used="15'6\" 170 lbs"),
        MeetRecord(id=4, name="Rained Out", date="sometime in May",
                   height_cleared="4.40m"),
        MeetRecord(id=5, name="State Qualifier", date="2024-06-10"),
        MeetRecord(id=6, name="Early Entry", date="2024-06-15",
                   height_cleared="4.70m"),
        MeetRecord(id=7, name="Last Year's Finals", date="2023-01-05",
                   height_cleared="4.20m"),
    ]
