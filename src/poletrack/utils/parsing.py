import math
import re
from typing import List, Optional, Tuple

from ..models.values import ParsedPole
from .logging import setup_logger
from .units import INCHES_PER_FOOT, convert_length

logger = setup_logger(__name__)

# Digits and word boundaries are ASCII only; \s still matches no-break and thin spaces
_NUMBER = r'([0-9]+(?:\.[0-9]+)?)'
_START = r'(?<![0-9A-Za-z_])'
_END = r'(?![0-9A-Za-z_])'
_FLAGS = re.IGNORECASE

# Feet/inches vocabulary shared by height, takeoff and pole length
FEET_AND_INCHES = re.compile(_NUMBER + r'\s*\'\s*' + _NUMBER + r'\s*(?:"|in(?:ches)?' + _END + ')', _FLAGS)
FEET_ONLY = re.compile(_NUMBER + r'\s*\'', _FLAGS)

NO_HEIGHT = re.compile(_START + r'(?:nh|no height)' + _END, _FLAGS)
METERS = re.compile(_NUMBER + r'\s*m' + _END, _FLAGS)

POLE_FEET_ONLY = re.compile(_NUMBER + r'\s*(?:\'|(?:ft|feet|foot)' + _END + ')', _FLAGS)
POLE_RATING = re.compile(_NUMBER + r'\s*lbs?' + _END, _FLAGS)
FLEX_LABEL_FIRST = re.compile(r'flex\s*' + _NUMBER, _FLAGS)
FLEX_LABEL_AFTER = re.compile(_NUMBER + r'\s*flex' + _END, _FLAGS)
ANY_NUMBER = re.compile(_NUMBER)

_QUOTES = str.maketrans({
    '’': "'", '‘': "'",
    '“': '"', '”': '"',
})

# str.strip() leaves the byte-order mark in place
_EDGE_SPACE = re.compile(r'\A[\s\ufeff]+|[\s\ufeff]+\Z')

Span = Tuple[int, int]

def normalize_text(text: Optional[str]) -> str:
    """Trim the input and straighten typographic quotes; ``None`` becomes ''."""
    if text is None:
        return ''
    return _EDGE_SPACE.sub('', str(text)).translate(_QUOTES)

def to_finite_number(value: Optional[str]) -> Optional[float]:
    """Convert a captured numeric token, or ``None`` if it is not a finite number."""
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None

def parse_feet_inches(text: str) -> Optional[Tuple[float, float]]:
    """Match ``15'1"`` / ``12' 3 in`` first, then a bare ``12'``.

    Returns ``(feet, inches)`` or ``None`` when neither form is present.
    """
    match = FEET_AND_INCHES.search(text)
    if match:
        feet = to_finite_number(match.group(1))
        inches = to_finite_number(match.group(2))
        if feet is not None and inches is not None:
            return feet, inches

    match = FEET_ONLY.search(text)
    if match:
        feet = to_finite_number(match.group(1))
        if feet is not None:
            return feet, 0.0

    return None

def parse_height_to_meters(text: Optional[str]) -> Optional[float]:
    """Convert a free-text height cleared to meters.

    "NH" / "No height" yields 0. A metric mark such as ``4.60m`` wins over
    any feet/inches in the same string. ``None`` means the text could not
    be read as a height.
    """
    normalized = normalize_text(text)
    if not normalized:
        return None

    if NO_HEIGHT.search(normalized):
        return 0.0

    match = METERS.search(normalized)
    if match:
        return to_finite_number(match.group(1))

    feet_inches = parse_feet_inches(normalized)
    if feet_inches is None:
        return None

    feet, inches = feet_inches
    total_inches = feet * INCHES_PER_FOOT + inches
    if not math.isfinite(total_inches):
        return None

    meters = convert_length(total_inches, 'in', 'm')
    return meters if math.isfinite(meters) else None

def parse_takeoff_to_feet(text: Optional[str]) -> Optional[float]:
    """Convert a free-text takeoff depth to decimal feet. Imperial only."""
    normalized = normalize_text(text)
    if not normalized:
        return None

    feet_inches = parse_feet_inches(normalized)
    if feet_inches is None:
        return None

    feet, inches = feet_inches
    total_feet = feet + inches / INCHES_PER_FOOT
    return total_feet if math.isfinite(total_feet) else None

def _overlaps(start: int, end: int, used: List[Span]) -> bool:
    return any(start < used_end and used_start < end for used_start, used_end in used)

def _span(match: re.Match) -> Span:
    return match.start(), match.end()

def _fallback_flex(text: str, used: List[Span], require_decimal: bool) -> Optional[float]:
    # Unlabeled flex is conventionally the last free-standing number, e.g. "18.5"
    for match in reversed(list(ANY_NUMBER.finditer(text))):
        if _overlaps(match.start(), match.end(), used):
            continue

        token = match.group(1)
        value = to_finite_number(token)
        if value is None:
            continue

        if '.' in token or not require_decimal:
            return value

    return None

def parse_pole_used(text: Optional[str]) -> ParsedPole:
    """Pull pole length (ft), weight rating (lbs) and flex out of free text.

    The pieces may appear in any order. Length and rating are found by their
    unit markers, flex by a ``flex`` label or, failing that, as the rightmost
    number no earlier match consumed that either has a decimal point or is
    left over once both length and rating are known.
    """
    raw = normalize_text(text)
    if not raw:
        return ParsedPole(raw='')

    used: List[Span] = []
    length_ft = None
    rating_lbs = None
    flex = None

    match = FEET_AND_INCHES.search(raw)
    if match:
        feet = to_finite_number(match.group(1))
        inches = to_finite_number(match.group(2))
        if feet is not None and inches is not None:
            length_ft = feet + inches / INCHES_PER_FOOT
            used.append(_span(match))
    else:
        match = POLE_FEET_ONLY.search(raw)
        if match:
            feet = to_finite_number(match.group(1))
            if feet is not None:
                length_ft = feet
                used.append(_span(match))

    match = POLE_RATING.search(raw)
    if match:
        rating = to_finite_number(match.group(1))
        if rating is not None:
            rating_lbs = rating
            used.append(_span(match))

    match = FLEX_LABEL_FIRST.search(raw) or FLEX_LABEL_AFTER.search(raw)
    if match:
        flex = to_finite_number(match.group(1))
        if flex is not None:
            used.append(_span(match))

    if flex is None:
        flex = _fallback_flex(
            raw, used, require_decimal=length_ft is None or rating_lbs is None
        )
        if flex is not None:
            logger.debug(f"Took unlabeled flex {flex} from {raw!r}")

    return ParsedPole(raw=raw, length_ft=length_ft, rating_lbs=rating_lbs, flex=flex)
