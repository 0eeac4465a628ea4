"""
Historical view.

Aggregates over all completed sessions, optionally restricted to a
``start_time`` range:

- ``overall``  count, total, average and longest duration,
- ``daily``    sessions and minutes per UTC date over the trailing
               ``daily_history_days`` (also restricted by the range),
- ``hourly``   sessions and average duration per UTC start hour; all
               24 hours are reported, empty ones as zero.
"""

from __future__ import annotations

import datetime
from typing import Optional

from sqlmodel import Session

from babysleep.core.rounding import round_half_up
from babysleep.core.timeutils import as_utc, utcnow
from babysleep.db.repositories.sleep_session import SleepSessionRepository
from babysleep.schemas.stats import DailyTotal, HourlyBucket, OverallStats, OverviewStatsResponse
from babysleep.stats.config import StatsConfig, default_config


def _build_overall(totals: dict) -> OverallStats:
    return OverallStats(total_sessions=totals["total_sessions"], total_minutes=round_half_up(totals["total_minutes"]),
                        avg_minutes=round_half_up(totals["avg_minutes"]),
                        max_minutes=round_half_up(totals["max_minutes"]), )


def _build_daily(rows: list[dict]) -> list[DailyTotal]:
    return [DailyTotal(date=r["date"], sessions=r["sessions"], total_minutes=round_half_up(r["total_minutes"]))
            for r in sorted(rows, key=lambda r: r["date"])]


def _build_hourly(rows: list[dict]) -> list[HourlyBucket]:
    """Expand the per-hour rows to a full 0-23 distribution."""
    by_hour = { r["hour"]: r for r in rows }
    buckets = []
    for hour in range(24):
        row = by_hour.get(hour)
        if row is None:
            buckets.append(HourlyBucket(hour=hour, sessions=0, avg_minutes=0))
        else:
            buckets.append(HourlyBucket(hour=hour, sessions=row["sessions"],
                                        avg_minutes=round_half_up(row["avg_minutes"])))
    return buckets


def compute_overview_stats(session: Session, start_date: Optional[datetime.datetime] = None,
                           end_date: Optional[datetime.datetime] = None, as_of: Optional[datetime.datetime] = None,
                           config: Optional[StatsConfig] = None, ) -> OverviewStatsResponse:
    """Compute the historical view.

    Args:
        session: Database session.
        start_date: Optional inclusive lower bound on ``start_time``.
        end_date: Optional inclusive upper bound on ``start_time``.
        as_of: Reference time for the trailing daily window (defaults to now).
        config: Optional :class:`StatsConfig` override.
    """
    cfg = config or default_config()
    now = as_utc(as_of) if as_of else utcnow()
    since = now - datetime.timedelta(days=cfg.daily_history_days)
    repo = SleepSessionRepository(session)

    overall = _build_overall(repo.overall_totals(start_date, end_date))
    daily = _build_daily(repo.totals_by_date(since, now, start_date, end_date))
    hourly = _build_hourly(repo.totals_by_hour(start_date, end_date))

    return OverviewStatsResponse(overall=overall, daily=daily, hourly=hourly)
