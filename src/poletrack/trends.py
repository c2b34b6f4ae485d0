# src/poletrack/trends.py

import datetime as dt
import math
import re
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from .config import settings
from .metrics import record_parse, trend_rows_total
from .models.meet import MeetRecord, PoleMetric, TrendRange, TrendRow
from .models.values import ParsedPole
from .utils.logging import setup_logger
from .utils.parsing import parse_height_to_meters, parse_pole_used, parse_takeoff_to_feet
from .utils.units import feet_decimal_to_feet_inches, meters_to_feet_inches

logger = setup_logger(__name__, level=settings.log_level)

ISO_DAY = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class TrendPoint(BaseModel):
    """One meet on a chart; ``value`` is ``None`` when its field did not parse."""

    model_config = ConfigDict(frozen=True)

    row: TrendRow
    value: Optional[float] = None


class PolePoint(TrendPoint):
    pole: ParsedPole


class SeriesSummary(BaseModel):
    latest: Optional[TrendPoint] = None
    best: Optional[TrendPoint] = None


class TrendDashboard(BaseModel):
    trend_range: TrendRange
    pole_metric: PoleMetric
    rows: List[TrendRow]
    height: List[TrendPoint]
    takeoff: List[TrendPoint]
    pole: List[PolePoint]
    height_summary: str
    takeoff_summary: str
    pole_summary: str


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def parse_meet_date(value: Union[dt.datetime, dt.date, str, None]) -> Optional[dt.date]:
    """Read a meet date as a calendar day, or ``None`` if it is not a date."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        if ISO_DAY.match(text):
            return dt.date.fromisoformat(text)
        # accept a trailing Z the way browsers do
        return dt.datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        return None


def build_trend_rows(meets: Iterable[MeetRecord], today: Optional[dt.date] = None) -> List[TrendRow]:
    """Turn meet records into chart rows ordered by date.

    Meets with an unreadable date are dropped, as are meets from today on
    that have nothing recorded yet.
    """
    today = today or dt.date.today()
    rows = []

    for meet in meets:
        meet_date = parse_meet_date(meet.date)
        if meet_date is None:
            logger.debug(f"Skipping meet {meet.id}: unreadable date {meet.date!r}")
            trend_rows_total.labels(status='invalid_date').inc()
            continue

        if meet_date >= today and not meet.has_metrics:
            trend_rows_total.labels(status='upcoming').inc()
            continue

        rows.append(TrendRow(
            id=meet.id,
            name=meet.name,
            location=meet.location,
            start_at=meet_date,
            height_cleared_raw=meet.height_cleared,
            deepest_takeoff_raw=meet.deepest_takeoff,
            pole_used_raw=meet.pole_used,
        ))
        trend_rows_total.labels(status='included').inc()

    # sorted() is stable, meets on the same day keep their input order
    return sorted(rows, key=lambda row: row.start_at)


def filter_rows_by_range(
    rows: Iterable[TrendRow],
    trend_range: Union[TrendRange, str],
    today: Optional[dt.date] = None,
) -> List[TrendRow]:
    trend_range = TrendRange(trend_range)
    if trend_range.days is None:
        return list(rows)

    today = today or dt.date.today()
    start = today - dt.timedelta(days=trend_range.days)
    return [row for row in rows if start <= row.start_at <= today]


# ---------------------------------------------------------------------------
# Series
# ---------------------------------------------------------------------------

def round_to_half_foot(value: float, step: Optional[float] = None) -> float:
    step = step or settings.pole_length_step_ft
    return math.floor(value / step + 0.5) * step


def height_series(rows: Iterable[TrendRow]) -> List[TrendPoint]:
    points = []
    for row in rows:
        meters = parse_height_to_meters(row.height_cleared_raw)
        record_parse('height_cleared', row.height_cleared_raw, meters)
        points.append(TrendPoint(row=row, value=meters))
    return points


def takeoff_series(rows: Iterable[TrendRow]) -> List[TrendPoint]:
    points = []
    for row in rows:
        feet = parse_takeoff_to_feet(row.deepest_takeoff_raw)
        record_parse('deepest_takeoff', row.deepest_takeoff_raw, feet)
        points.append(TrendPoint(row=row, value=feet))
    return points


def pole_series(rows: Iterable[TrendRow], metric: Union[PoleMetric, str]) -> List[PolePoint]:
    metric = PoleMetric(metric)
    points = []
    for row in rows:
        pole = parse_pole_used(row.pole_used_raw)
        value = pole.value_for(metric)
        if value is not None and metric is PoleMetric.LENGTH_FT:
            value = round_to_half_foot(value)
        record_parse(f'pole_used.{metric.value}', row.pole_used_raw, value)
        points.append(PolePoint(row=row, value=value, pole=pole))
    return points


def summarize_series(points: Iterable[TrendPoint]) -> SeriesSummary:
    """Latest point with a value, and the first point holding the maximum."""
    latest = None
    best = None
    for point in points:
        if point.value is None:
            continue
        latest = point
        if best is None or point.value > best.value:
            best = point
    return SeriesSummary(latest=latest, best=best)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def format_number(value: float) -> str:
    """Whole numbers without a trailing ``.0``: 170 not 170.0."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_feet_inches(feet: float, inches: float) -> str:
    if not math.isfinite(feet) or not math.isfinite(inches):
        return ""
    if inches == 0:
        return f"{format_number(feet)}'"
    return f"{format_number(feet)}' {format_number(inches)}\""


def format_meters_value(meters: float) -> str:
    imperial_value = meters_to_feet_inches(meters)
    imperial = format_feet_inches(imperial_value.feet, imperial_value.inches)
    formatted = f"{meters:.2f}"
    return f"{formatted} m ({imperial})" if imperial else f"{formatted} m"


def format_takeoff_value(feet: float) -> str:
    value = feet_decimal_to_feet_inches(feet)
    return format_feet_inches(value.feet, value.inches)


def format_pole_metric_value(metric: Union[PoleMetric, str], value: float) -> str:
    if not math.isfinite(value):
        return ""

    metric = PoleMetric(metric)
    if metric is PoleMetric.LENGTH_FT:
        return format_takeoff_value(round_to_half_foot(value))
    if metric is PoleMetric.RATING_LBS:
        return f"{format_number(value)} lbs"
    return f"{format_number(value)} flex"


def height_summary(summary: SeriesSummary) -> str:
    if summary.latest is None or summary.best is None:
        return "No height data yet"
    return (
        f"Latest {format_meters_value(summary.latest.value)}"
        f" · PR {format_meters_value(summary.best.value)}"
    )


def takeoff_summary(summary: SeriesSummary) -> str:
    if summary.latest is None or summary.best is None:
        return "No takeoff data yet"
    return (
        f"Latest {format_takeoff_value(summary.latest.value)}"
        f" · Best {format_takeoff_value(summary.best.value)}"
    )


def pole_summary(summary: SeriesSummary, metric: Union[PoleMetric, str]) -> str:
    if summary.latest is None:
        return "No pole data yet"
    return f"Latest {format_pole_metric_value(metric, summary.latest.value)}"


def build_dashboard(
    meets: Iterable[MeetRecord],
    trend_range: Union[TrendRange, str, None] = None,
    metric: Union[PoleMetric, str] = PoleMetric.LENGTH_FT,
    today: Optional[dt.date] = None,
) -> TrendDashboard:
    """Derive every chart series and summary line for the trends page."""
    today = today or dt.date.today()
    trend_range = TrendRange(trend_range or settings.default_trend_range)
    metric = PoleMetric(metric)

    rows = filter_rows_by_range(build_trend_rows(meets, today=today), trend_range, today=today)

    heights = height_series(rows)
    takeoffs = takeoff_series(rows)
    poles = pole_series(rows, metric)

    logger.info(f"Built trends for {len(rows)} meets (range={trend_range.value}, pole metric={metric.value})")

    return TrendDashboard(
        trend_range=trend_range,
        pole_metric=metric,
        rows=rows,
        height=heights,
        takeoff=takeoffs,
        pole=poles,
        height_summary=height_summary(summarize_series(heights)),
        takeoff_summary=takeoff_summary(summarize_series(takeoffs)),
        pole_summary=pole_summary(summarize_series(poles), metric),
    )
