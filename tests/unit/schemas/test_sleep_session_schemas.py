"""Tests for sleep session schemas."""

import datetime

from babysleep.models.sleep_session import SleepSession
from babysleep.schemas.sleep_session import SleepSessionBounds, SleepSessionResponse

UTC = datetime.timezone.utc


class TestSleepSessionResponse:
    def test_from_attributes_enabled(self):
        assert SleepSessionResponse.model_config["from_attributes"] is True

    def test_validates_from_model_row(self):
        # Rows read back from SQLite carry naive UTC values
        row = SleepSession(id=3, start_time=datetime.datetime(2024, 1, 15, 22, 0),
                           end_time=datetime.datetime(2024, 1, 15, 23, 30), duration_minutes=90,
                           created_at=datetime.datetime(2024, 1, 15, 22, 0),
                           updated_at=datetime.datetime(2024, 1, 15, 23, 30), )

        response = SleepSessionResponse.model_validate(row)

        assert response.id == 3
        assert response.start_time == datetime.datetime(2024, 1, 15, 22, 0, tzinfo=UTC)
        assert response.end_time.tzinfo is not None
        assert response.duration_minutes == 90


class TestSleepSessionBounds:
    def test_offsets_normalised_to_utc(self):
        bounds = SleepSessionBounds(start_time="2024-01-15T23:00:00+01:00", end_time="2024-01-15T23:30:00Z")
        assert bounds.start_time == datetime.datetime(2024, 1, 15, 22, 0, tzinfo=UTC)
        assert bounds.start_time.utcoffset() == datetime.timedelta(0)
