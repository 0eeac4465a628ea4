"""
Database initialization script.

Waits for the database, then creates the tables and the
single-active-session index.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from babysleep.core.errors import StorageUnavailableError
from babysleep.core.observability import setup_logging
from babysleep.db.init_db import init_db, wait_for_db

if __name__ == "__main__":
    setup_logging()
    print("=" * 50)
    print("Baby Sleep Tracker Database Initialization")
    print("=" * 50)
    print()

    try:
        wait_for_db()
        init_db()
    except StorageUnavailableError as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e.message}")
        print("=" * 50)
        sys.exit(1)

    print()
    print("=" * 50)
    print("SUCCESS: Database initialized!")
    print("=" * 50)
