from datetime import timezone
from typing import Optional

import pandas as pd

from app.models.health_calculations import calculate_bmi
from app.models.schemas import ChartDataPoint, ChartSeries, ProgressLog

# Metrics whose values come from body logs rather than the points themselves
BODY_METRICS = ("bmi", "bodyFat")


def _log_date(log: ProgressLog) -> str:
    logged_at = log.logged_at
    if logged_at.tzinfo is not None:
        logged_at = logged_at.astimezone(timezone.utc)
    return logged_at.date().isoformat()


def _values_by_date(progress_logs: list[ProgressLog], log_type: str) -> dict:
    """First logged value of `log_type` per calendar day (UTC)."""
    rows = [
        {"date": _log_date(log), "value": log.value}
        for log in progress_logs
        if log.type == log_type and log.value
    ]
    if not rows:
        return {}

    logs_df = pd.DataFrame(rows)
    return logs_df.drop_duplicates(subset="date", keep="first").set_index("date")["value"].to_dict()


def _utc_day(dates: pd.Series) -> pd.Series:
    return pd.to_datetime(dates, format="ISO8601", utc=True).dt.strftime("%Y-%m-%d")


def build_chart_data(
    points: list[ChartDataPoint],
    metric: str,
    unit: str = "",
    progress_logs: Optional[list[ProgressLog]] = None,
    height_cm: Optional[float] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> ChartSeries:
    """
    Reshape raw metric points into the series plotted on the progress chart.

    Points outside [start, end] are dropped when a range is given. For "bmi"
    the value is recomputed from the WEIGHT log of the same day, for
    "bodyFat" it is taken from the BODY_FAT log; both need a known height
    and fall back to the point's own value. Points left without a value are
    removed.
    """
    progress_logs = progress_logs or []
    if not points:
        return ChartSeries(metric=metric, unit=unit, points=[])

    df = pd.DataFrame([point.model_dump() for point in points], columns=["date", "value"])
    # Date-only and offset timestamps may be mixed; naive ones are read as UTC
    df["day"] = _utc_day(df["date"])

    # Both bounds are inclusive, compared by calendar day
    if start:
        df = df[df["day"] >= _utc_day(pd.Series([start])).iloc[0]]
    if end:
        df = df[df["day"] <= _utc_day(pd.Series([end])).iloc[0]]

    is_body_metric = metric in BODY_METRICS
    if is_body_metric and (not height_cm or height_cm <= 0):
        print(f"⚠️ Cannot calculate {metric} - missing or invalid height")
        return ChartSeries(metric=metric, unit=unit, points=[])

    weights = _values_by_date(progress_logs, "WEIGHT")
    body_fat = _values_by_date(progress_logs, "BODY_FAT")

    chart_points = []
    for row in df.itertuples(index=False):
        value = None if pd.isna(row.value) else float(row.value)

        if metric == "bmi" and row.day in weights:
            value = calculate_bmi(weights[row.day], height_cm)
        elif metric == "bodyFat" and row.day in body_fat:
            value = float(body_fat[row.day])

        if value is None:
            continue
        chart_points.append(ChartDataPoint(date=row.day, value=value))

    first_value = chart_points[0].value if chart_points else None
    last_value = chart_points[-1].value if chart_points else None

    return ChartSeries(
        metric=metric,
        unit=unit,
        points=chart_points,
        first_value=first_value,
        last_value=last_value,
        change=last_value - first_value if chart_points else None,
    )
