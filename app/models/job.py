"""
Job data access.

Rows are returned as {id, title, salary, equity, companyHandle}.
equity comes back from NUMERIC as a Decimal.
"""

import logging
from typing import List, Optional

from app.core.errors import BadRequestError, NotFoundError
from app.db.postgres import execute_sql
from app.utils.sql import FilterRule, build_filter_query, contains, sql_for_partial_update, where_key

logger = logging.getLogger(__name__)

JOB_COLUMNS = '''id,
       title,
       salary,
       equity,
       company_handle AS "companyHandle"'''

UPDATE_COLUMNS = {
    "companyHandle": "company_handle",
}

# hasEquity is tri-state: True -> equity > 0, False -> equity = 0, None -> no filter
JOB_FILTERS = (
    FilterRule("title", "title ILIKE {}", to_value=contains),
    FilterRule("min_salary", "salary >= {}"),
    FilterRule("has_equity", "equity > 0", is_present=lambda value: value is True, consumes_value=False),
    FilterRule("has_equity", "equity = 0", is_present=lambda value: value is False, consumes_value=False),
)


def create(data: dict) -> dict:
    """
    Create a job from {title, salary, equity, companyHandle}.

    Raises BadRequestError if the company does not exist.
    """
    company = execute_sql("SELECT handle FROM companies WHERE handle = $1", [data["companyHandle"]])
    if not company:
        raise BadRequestError(f"No company: {data['companyHandle']}")

    rows = execute_sql(
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}""",
        [data["title"], data.get("salary"), data.get("equity"), data["companyHandle"]],
    )
    job = rows[0]
    logger.info("Created job %s for %s", job["id"], data["companyHandle"])
    return job


def find_all() -> List[dict]:
    """All jobs, ordered by title."""
    return execute_sql(f"SELECT {JOB_COLUMNS}\nFROM jobs\nORDER BY title")


def find_all_by_company(company_handle: str) -> List[dict]:
    """Jobs posted by one company, ordered by title."""
    return execute_sql(
        f"SELECT {JOB_COLUMNS}\nFROM jobs\nWHERE company_handle = $1\nORDER BY title",
        [company_handle],
    )


def find_by_criteria(
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
) -> List[dict]:
    """
    Jobs matching the given filters, ordered by title.

    - title: case-insensitive substring of the title
    - min_salary: inclusive lower bound on salary
    - has_equity: True for equity > 0, False for equity = 0, None for either
    """
    sql, values = build_filter_query(
        f"SELECT {JOB_COLUMNS}\nFROM jobs",
        JOB_FILTERS,
        {"title": title, "min_salary": min_salary, "has_equity": has_equity},
        order_by="title",
    )
    return execute_sql(sql, values)


def get(job_id: int) -> dict:
    """Raises NotFoundError if not found."""
    rows = execute_sql(f"SELECT {JOB_COLUMNS}\nFROM jobs\nWHERE id = $1", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    return rows[0]


def update(job_id: int, data: dict) -> dict:
    """
    Partial update; only the given fields change.

    Data can include: {title, salary, equity, companyHandle}

    Raises BadRequestError on empty data, NotFoundError if not found.
    """
    set_cols, values = sql_for_partial_update(data, UPDATE_COLUMNS)
    rows = execute_sql(
        f"""UPDATE jobs
            SET {set_cols}
            WHERE {where_key("id", values)}
            RETURNING {JOB_COLUMNS}""",
        [*values, job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    logger.info("Updated job %s: %s", job_id, ", ".join(data))
    return rows[0]


def remove(job_id: int) -> None:
    """Raises NotFoundError if not found."""
    rows = execute_sql("DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("Deleted job %s", job_id)
