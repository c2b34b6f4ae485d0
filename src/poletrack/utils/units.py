import math

from ..models.values import FeetInches

METERS_PER_INCH = 0.0254
INCHES_PER_FOOT = 12

_UNIT_ALIASES = {
    'm': 'm', 'meter': 'm', 'meters': 'm', 'metre': 'm', 'metres': 'm',
    'ft': 'ft', 'foot': 'ft', 'feet': 'ft', "'": 'ft',
    'in': 'in', 'inch': 'in', 'inches': 'in', '"': 'in',
}

def normalize_unit(unit: str) -> str:
    """Map a unit spelling onto one of ``m``, ``ft`` or ``in``."""
    key = unit.strip().lower()
    if key not in _UNIT_ALIASES:
        raise ValueError(f"Unknown length unit: {unit!r}")
    return _UNIT_ALIASES[key]

def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert between meters, feet and inches."""
    from_unit = normalize_unit(from_unit)
    to_unit = normalize_unit(to_unit)

    if from_unit == to_unit:
        return value

    conversions = {
        ('in', 'm'): lambda x: x * METERS_PER_INCH,
        ('m', 'in'): lambda x: x / METERS_PER_INCH,
        ('ft', 'in'): lambda x: x * INCHES_PER_FOOT,
        ('in', 'ft'): lambda x: x / INCHES_PER_FOOT,
        ('ft', 'm'): lambda x: x * INCHES_PER_FOOT * METERS_PER_INCH,
        ('m', 'ft'): lambda x: x / METERS_PER_INCH / INCHES_PER_FOOT,
    }

    return conversions[(from_unit, to_unit)](value)

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)

def _split_inches(total_inches: float) -> FeetInches:
    if not math.isfinite(total_inches):
        return FeetInches(feet=0, inches=0)
    # floor/mod keeps inches in 0..11 for negative totals too
    feet, inches = divmod(round_half_up(total_inches), INCHES_PER_FOOT)
    return FeetInches(feet=feet, inches=inches)

def meters_to_feet_inches(meters: float) -> FeetInches:
    """Convert meters to whole feet and inches for display.

    The value is rounded once, to the nearest inch, before it is split into
    feet and inches. Non-finite input yields 0' 0".
    """
    if not math.isfinite(meters):
        return FeetInches(feet=0, inches=0)

    return _split_inches(convert_length(meters, 'm', 'in'))

def feet_decimal_to_feet_inches(feet: float) -> FeetInches:
    """Convert decimal feet (e.g. 12.25) to whole feet and inches (12' 3")."""
    if not math.isfinite(feet):
        return FeetInches(feet=0, inches=0)

    return _split_inches(convert_length(feet, 'ft', 'in'))
