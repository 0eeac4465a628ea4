"""Baby Sleep Tracker API."""
