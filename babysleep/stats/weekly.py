"""
Weekly view.

Completed sessions started in the trailing week are grouped by the UTC
date of their start.  Each session is attributed *entirely* to one
bucket by its start hour:

    night   start hour >= night_start_hour  or  < day_start_hour
    day     day_start_hour <= start hour < night_start_hour

A session starting at 20:00 and lasting 8 hours is 480 night minutes on
the day it started, even though it ends the next morning.  Day-bucket
sessions are the day's naps.

Averages divide by the number of days that have data (at least 1), so a
new user is not penalised for the empty days before they started.
"""

from __future__ import annotations

import datetime
from typing import Optional

from sqlmodel import Session

from babysleep.core.rounding import round_half_up, round_to_tenth
from babysleep.core.timeutils import as_utc, utcnow
from babysleep.db.repositories.sleep_session import SleepSessionRepository
from babysleep.schemas.stats import WeeklyAverages, WeeklyDay, WeeklyStatsResponse
from babysleep.stats.config import StatsConfig, default_config


def _build_weekly_stats(rows: list[dict]) -> WeeklyStatsResponse:
    """Round per-day totals and average them over the days with data."""
    n = max(len(rows), 1)

    averages = WeeklyAverages(total_minutes=round_half_up(sum(r["total_minutes"] for r in rows) / n),
                              night_minutes=round_half_up(sum(r["night_minutes"] for r in rows) / n),
                              day_minutes=round_half_up(sum(r["day_minutes"] for r in rows) / n),
                              naps=round_to_tenth(sum(r["naps"] for r in rows) / n), )

    daily = [WeeklyDay(date=r["date"], total_minutes=round_half_up(r["total_minutes"]),
                       night_minutes=round_half_up(r["night_minutes"]), day_minutes=round_half_up(r["day_minutes"]),
                       naps=r["naps"], ) for r in sorted(rows, key=lambda r: r["date"])]

    return WeeklyStatsResponse(averages=averages, daily=daily)


def compute_weekly_stats(session: Session, as_of: Optional[datetime.datetime] = None,
                         config: Optional[StatsConfig] = None, ) -> WeeklyStatsResponse:
    """Compute the weekly night/day view.

    Args:
        session: Database session.
        as_of: Reference time (defaults to now); the window is the
            ``weekly_window_days`` before it.
        config: Optional :class:`StatsConfig` override.
    """
    cfg = config or default_config()
    now = as_utc(as_of) if as_of else utcnow()
    since = now - datetime.timedelta(days=cfg.weekly_window_days)

    rows = SleepSessionRepository(session).day_night_totals_by_date(since=since, until=now,
                                                                    night_start_hour=cfg.night_start_hour,
                                                                    day_start_hour=cfg.day_start_hour, )
    return _build_weekly_stats(rows)
