"""Tests for the weekly night/day view."""

import datetime

from babysleep.stats.config import StatsConfig
from babysleep.stats.weekly import _build_weekly_stats, compute_weekly_stats

UTC = datetime.timezone.utc


def _utc(day: int, hour: int, minute: int = 0) -> datetime.datetime:
    return datetime.datetime(2024, 1, day, hour, minute, tzinfo=UTC)


def _row(day: int, night: float, day_minutes: float, naps: int) -> dict:
    return {
        "date": datetime.date(2024, 1, day),
        "total_minutes": night + day_minutes,
        "night_minutes": night,
        "day_minutes": day_minutes,
        "naps": naps,
    }


# ======================================================================
# _build_weekly_stats
# ======================================================================


class TestBuildWeeklyStats:
    def test_empty_week(self):
        stats = _build_weekly_stats([])
        assert stats.daily == []
        assert stats.averages.total_minutes == 0
        assert stats.averages.night_minutes == 0
        assert stats.averages.day_minutes == 0
        assert stats.averages.naps == 0.0

    def test_averages_over_days_with_data(self):
        rows = [_row(15, 600, 120, 2), _row(16, 660, 90, 3)]
        stats = _build_weekly_stats(rows)
        assert stats.averages.night_minutes == 630
        assert stats.averages.day_minutes == 105
        assert stats.averages.total_minutes == 735
        assert stats.averages.naps == 2.5

    def test_half_minutes_round_up(self):
        rows = [_row(15, 601, 0, 0), _row(16, 600, 0, 0)]
        stats = _build_weekly_stats(rows)
        assert stats.averages.night_minutes == 601

    def test_naps_average_one_decimal(self):
        rows = [_row(14, 600, 60, 1), _row(15, 600, 60, 1), _row(16, 600, 120, 2)]
        stats = _build_weekly_stats(rows)
        assert stats.averages.naps == 1.3

    def test_daily_sorted_by_date(self):
        rows = [_row(16, 600, 0, 0), _row(14, 500, 0, 0), _row(15, 550, 0, 0)]
        stats = _build_weekly_stats(rows)
        assert [d.date.day for d in stats.daily] == [14, 15, 16]


# ======================================================================
# compute_weekly_stats
# ======================================================================


class TestComputeWeeklyStats:
    def test_evening_session_counts_fully_as_night(self, db, add_session):
        add_session(_utc(15, 20), _utc(16, 4))  # 480 min, starts 20:00

        stats = compute_weekly_stats(db, as_of=_utc(16, 12), config=StatsConfig(night_start_hour=19))

        assert len(stats.daily) == 1
        day = stats.daily[0]
        assert day.date == datetime.date(2024, 1, 15)
        assert day.night_minutes == 480
        assert day.day_minutes == 0
        assert day.naps == 0

    def test_day_sessions_are_naps(self, db, add_session):
        add_session(_utc(15, 9), _utc(15, 10, 30))  # 90 min
        add_session(_utc(15, 14), _utc(15, 15))  # 60 min
        add_session(_utc(15, 20), _utc(16, 4))  # 480 min night

        stats = compute_weekly_stats(db, as_of=_utc(16, 12))

        day = stats.daily[0]
        assert day.day_minutes == 150
        assert day.night_minutes == 480
        assert day.total_minutes == 630
        assert day.naps == 2
        assert stats.averages.naps == 2.0

    def test_early_morning_start_is_night(self, db, add_session):
        add_session(_utc(15, 3), _utc(15, 6))  # 03:00 < day_start_hour

        stats = compute_weekly_stats(db, as_of=_utc(16, 12))

        assert stats.daily[0].night_minutes == 180
        assert stats.daily[0].naps == 0

    def test_night_start_hour_is_configurable(self, db, add_session):
        add_session(_utc(15, 19, 30), _utc(15, 20, 30))

        late = compute_weekly_stats(db, as_of=_utc(16, 12), config=StatsConfig(night_start_hour=21))
        early = compute_weekly_stats(db, as_of=_utc(16, 12), config=StatsConfig(night_start_hour=19))

        assert late.daily[0].day_minutes == 60
        assert early.daily[0].night_minutes == 60

    def test_trailing_window_and_active_excluded(self, db, add_session):
        add_session(_utc(1, 20), _utc(2, 6))  # too old
        add_session(_utc(16, 9))  # active

        stats = compute_weekly_stats(db, as_of=_utc(16, 12))

        assert stats.daily == []

    def test_sessions_after_as_of_ignored(self, db, add_session):
        add_session(_utc(12, 20), _utc(13, 6))
        add_session(_utc(15, 20), _utc(16, 4))  # starts after as_of

        stats = compute_weekly_stats(db, as_of=_utc(14, 12))

        assert [d.date.day for d in stats.daily] == [12]
        assert stats.averages.night_minutes == 600

    def test_averages_ignore_days_without_data(self, db, add_session):
        add_session(_utc(12, 20), _utc(13, 6))  # 600 night
        add_session(_utc(15, 20), _utc(16, 4))  # 480 night

        stats = compute_weekly_stats(db, as_of=_utc(16, 12))

        assert len(stats.daily) == 2
        assert stats.averages.night_minutes == 540
