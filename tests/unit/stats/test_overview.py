"""Tests for the historical view."""

import datetime

from babysleep.stats.config import StatsConfig
from babysleep.stats.overview import _build_daily, _build_hourly, _build_overall, compute_overview_stats

UTC = datetime.timezone.utc


def _utc(day: int, hour: int, minute: int = 0) -> datetime.datetime:
    return datetime.datetime(2024, 1, day, hour, minute, tzinfo=UTC)


# ======================================================================
# Builders
# ======================================================================


class TestBuildOverall:
    def test_rounds_average(self):
        overall = _build_overall({ "total_sessions": 2, "total_minutes": 91.0, "avg_minutes": 45.5,
                                   "max_minutes": 60.0 })
        assert overall.avg_minutes == 46
        assert overall.total_minutes == 91
        assert overall.max_minutes == 60


class TestBuildHourly:
    def test_always_24_buckets(self):
        hourly = _build_hourly([])
        assert [b.hour for b in hourly] == list(range(24))
        assert all(b.sessions == 0 and b.avg_minutes == 0 for b in hourly)

    def test_fills_hours_with_data(self):
        hourly = _build_hourly([{ "hour": 13, "sessions": 2, "avg_minutes": 52.5 }])
        assert hourly[13].sessions == 2
        assert hourly[13].avg_minutes == 53
        assert hourly[12].sessions == 0


class TestBuildDaily:
    def test_sorted_by_date(self):
        rows = [
            { "date": datetime.date(2024, 1, 16), "sessions": 1, "total_minutes": 30.0 },
            { "date": datetime.date(2024, 1, 15), "sessions": 2, "total_minutes": 90.0 },
        ]
        assert [d.date.day for d in _build_daily(rows)] == [15, 16]


# ======================================================================
# compute_overview_stats
# ======================================================================


class TestComputeOverviewStats:
    def _seed(self, add_session):
        add_session(_utc(15, 22), _utc(15, 23, 30))  # 90
        add_session(_utc(16, 9), _utc(16, 9, 45))  # 45
        add_session(_utc(16, 13), _utc(16, 14))  # 60
        add_session(_utc(16, 19))  # active, excluded

    def test_empty_store(self, db):
        stats = compute_overview_stats(db, as_of=_utc(20, 12))
        assert stats.overall.total_sessions == 0
        assert stats.overall.avg_minutes == 0
        assert stats.daily == []
        assert len(stats.hourly) == 24

    def test_overall(self, db, add_session):
        self._seed(add_session)
        stats = compute_overview_stats(db, as_of=_utc(20, 12))
        assert stats.overall.total_sessions == 3
        assert stats.overall.total_minutes == 195
        assert stats.overall.avg_minutes == 65
        assert stats.overall.max_minutes == 90

    def test_daily(self, db, add_session):
        self._seed(add_session)
        stats = compute_overview_stats(db, as_of=_utc(20, 12))
        assert [(d.date.day, d.sessions, d.total_minutes) for d in stats.daily] == [(15, 1, 90), (16, 2, 105)]

    def test_hourly(self, db, add_session):
        self._seed(add_session)
        stats = compute_overview_stats(db, as_of=_utc(20, 12))
        by_hour = { b.hour: b for b in stats.hourly }
        assert (by_hour[22].sessions, by_hour[22].avg_minutes) == (1, 90)
        assert (by_hour[9].sessions, by_hour[9].avg_minutes) == (1, 45)
        assert (by_hour[13].sessions, by_hour[13].avg_minutes) == (1, 60)
        assert by_hour[19].sessions == 0

    def test_date_range_filter(self, db, add_session):
        self._seed(add_session)
        stats = compute_overview_stats(db, start_date=_utc(16, 0), end_date=_utc(16, 23, 59), as_of=_utc(20, 12))
        assert stats.overall.total_sessions == 2
        assert stats.overall.total_minutes == 105
        assert [d.date.day for d in stats.daily] == [16]
        assert stats.hourly[22].sessions == 0

    def test_daily_ends_at_as_of(self, db, add_session):
        add_session(_utc(10, 22), _utc(10, 23))
        add_session(_utc(25, 22), _utc(25, 23))

        stats = compute_overview_stats(db, as_of=_utc(12, 0))

        assert [d.date for d in stats.daily] == [datetime.date(2024, 1, 10)]

    def test_daily_history_window(self, db, add_session):
        self._seed(add_session)
        stats = compute_overview_stats(db, as_of=_utc(20, 12), config=StatsConfig(daily_history_days=4))
        # since = 16th 12:00, the morning nap is outside
        assert [(d.date.day, d.sessions) for d in stats.daily] == [(16, 1)]
        assert stats.overall.total_sessions == 3
