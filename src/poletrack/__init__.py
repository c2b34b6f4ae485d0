from .models.values import FeetInches, ParsedPole
from .utils.parsing import parse_height_to_meters, parse_pole_used, parse_takeoff_to_feet
from .utils.units import feet_decimal_to_feet_inches, meters_to_feet_inches

__all__ = [
    "FeetInches",
    "ParsedPole",
    "feet_decimal_to_feet_inches",
    "meters_to_feet_inches",
    "parse_height_to_meters",
    "parse_pole_used",
    "parse_takeoff_to_feet",
]
