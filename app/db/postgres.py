import logging
import re
from contextlib import contextmanager
from typing import Any, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from app.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Create engine with connection pool
# pool_size=5: maintain 5 connections ready
# max_overflow=10: allow 10 extra connections under load
engine = create_engine(
    settings.database_url,
    pool_size=5,
    max_overflow=10,
    pool_pre_ping=True,
    echo=settings.debug  # Log SQL queries in debug mode
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# $1, $2, ... positional placeholders
_POSITIONAL_PARAM = re.compile(r"\$(\d+)")


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM users"))
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection() -> bool:
    """
    Test if PostgreSQL is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("PostgreSQL connection failed: %s", e)
        return False


def bind_positional(sql: str, values: Sequence[Any]) -> tuple:
    """
    Rewrite `$N` placeholders into SQLAlchemy named binds.

    Returns (sql, params) where `$1` became `:p1` and params["p1"] is values[0].
    """
    params = {f"p{i}": value for i, value in enumerate(values, start=1)}
    for match in _POSITIONAL_PARAM.finditer(sql):
        if f"p{match.group(1)}" not in params:
            raise ValueError(f"No bind value for placeholder ${match.group(1)}")
    return _POSITIONAL_PARAM.sub(r":p\1", sql), params


def execute_sql(sql: str, values: Sequence[Any] = ()) -> list:
    """
    Execute SQL written with $N placeholders and return rows as list of dicts.

    Statements that return no rows (no RETURNING clause) yield [].
    """
    bound_sql, params = bind_positional(sql, values)
    with get_db_session() as db:
        result = db.execute(text(bound_sql), params)
        if not result.returns_rows:
            return []
        columns = list(result.keys())
        return [dict(zip(columns, row)) for row in result.fetchall()]
