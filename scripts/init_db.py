#!/usr/bin/env python3
"""
Create the Jobly tables.

Usage: python scripts/init_db.py
"""
import sys
from pathlib import Path

sys.path.insert(0, '.')

from sqlalchemy import text

from app.db.postgres import get_db_session

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def main():
    schema_sql = SCHEMA_PATH.read_text()
    with get_db_session() as db:
        db.execute(text(schema_sql))
    print(f"Schema applied from {SCHEMA_PATH}")


if __name__ == "__main__":
    main()
