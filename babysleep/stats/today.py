"""
Today view.

"Today" starts at the morning wake-up: the latest end, between 04:00
and 12:00 UTC on the reference date, of a session that started in the
night bucket (same rule as the weekly view).  A morning nap ending in
the window is therefore not a wake-up.  Everything after the wake-up
and up to the reference time is day time:

    naps              = completed sessions started after the wake-up
    day_sleep_minutes = sum of their durations
    awake_minutes     = minutes since wake-up - day_sleep_minutes   (>= 0)

Without a wake-up in the window the day has not started and every
counter is zero.  A nap in progress is not counted yet, so
``awake_minutes`` keeps running through it; the floor at zero absorbs
clock skew between client-supplied times and the server.
"""

from __future__ import annotations

import datetime
from typing import Optional

from sqlmodel import Session

from babysleep.core.rounding import round_half_up
from babysleep.core.timeutils import as_utc, minutes_between, utcnow
from babysleep.db.repositories.sleep_session import SleepSessionRepository
from babysleep.schemas.stats import TodayStatsResponse
from babysleep.stats.config import StatsConfig, default_config


def _wake_window(as_of: datetime.datetime, cfg: StatsConfig) -> tuple[datetime.datetime, datetime.datetime]:
    """Morning wake-up window on the UTC date of *as_of*."""
    midnight = datetime.datetime.combine(as_utc(as_of).date(), datetime.time.min, tzinfo=datetime.timezone.utc)
    return (midnight + datetime.timedelta(hours=cfg.wake_window_start_hour),
            midnight + datetime.timedelta(hours=cfg.wake_window_end_hour))


def _build_today_stats(woke_up: Optional[datetime.datetime], naps: int, day_sleep_total: float,
                       as_of: datetime.datetime, ) -> TodayStatsResponse:
    """Assemble the today view from the wake-up anchor and nap totals."""
    if woke_up is None:
        return TodayStatsResponse(woke_up=None, day_sleep_minutes=0, awake_minutes=0, naps=0)

    day_sleep_minutes = round_half_up(day_sleep_total)
    awake_minutes = max(0, round_half_up(minutes_between(woke_up, as_of)) - day_sleep_minutes)
    return TodayStatsResponse(woke_up=as_utc(woke_up), day_sleep_minutes=day_sleep_minutes,
                              awake_minutes=awake_minutes, naps=naps, )


def compute_today_stats(session: Session, as_of: Optional[datetime.datetime] = None,
                        config: Optional[StatsConfig] = None, ) -> TodayStatsResponse:
    """Compute the today view.

    Args:
        session: Database session.
        as_of: Reference time (defaults to now).
        config: Optional :class:`StatsConfig` override.
    """
    cfg = config or default_config()
    now = as_utc(as_of) if as_of else utcnow()
    repo = SleepSessionRepository(session)

    window_start, window_end = _wake_window(now, cfg)
    woke_up = repo.latest_wake_up(window_start, window_end, night_start_hour=cfg.night_start_hour,
                                  day_start_hour=cfg.day_start_hour, until=now, )
    if woke_up is None:
        return _build_today_stats(None, 0, 0.0, now)

    naps, day_sleep_total = repo.sum_completed_after(woke_up, until=now)
    return _build_today_stats(woke_up, naps, day_sleep_total, now)
