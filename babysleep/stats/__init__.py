"""Sleep stats views: today, weekly night/day split, history."""

from babysleep.stats.config import StatsConfig
from babysleep.stats.overview import compute_overview_stats
from babysleep.stats.today import compute_today_stats
from babysleep.stats.weekly import compute_weekly_stats

__all__ = ["StatsConfig", "compute_today_stats", "compute_weekly_stats", "compute_overview_stats"]
