from prometheus_client import Counter
from .config import settings

# Trend row metrics
trend_rows_total = Counter(
    'trend_rows_total',
    'Meet records considered for the trends dashboard',
    ['status'],
    namespace=settings.metrics_namespace,
)

# Parse metrics
metric_parse_total = Counter(
    'metric_parse_total',
    'Free-text metric fields parsed for trend series',
    ['field', 'status'],
    namespace=settings.metrics_namespace,
)

def record_parse(field: str, raw, value) -> None:
    """Count a parse outcome: empty input, a parsed value, or unparseable text."""
    if raw is None or not str(raw).strip():
        status = 'empty'
    elif value is None:
        status = 'unparsed'
    else:
        status = 'parsed'
    metric_parse_total.labels(field=field, status=status).inc()
