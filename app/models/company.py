"""
Company data access.

Rows are returned as dicts keyed by API names:
    {handle, name, description, numEmployees, logoUrl}
"""

import logging
from typing import List, Optional

from app.core.errors import BadRequestError, NotFoundError
from app.db.postgres import execute_sql
from app.models import job as job_model
from app.utils.sql import FilterRule, build_filter_query, contains, sql_for_partial_update, where_key

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = '''handle,
       name,
       description,
       num_employees AS "numEmployees",
       logo_url AS "logoUrl"'''

UPDATE_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_FILTERS = (
    FilterRule("name", "name ILIKE {}", to_value=contains),
    FilterRule("min_employees", "num_employees >= {}"),
    FilterRule("max_employees", "num_employees <= {}"),
)


def create(data: dict) -> dict:
    """
    Create a company from {handle, name, description, numEmployees, logoUrl}.

    Raises BadRequestError if the handle is already taken.
    """
    duplicate = execute_sql("SELECT handle FROM companies WHERE handle = $1", [data["handle"]])
    if duplicate:
        raise BadRequestError(f"Duplicate company: {data['handle']}")

    rows = execute_sql(
        f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}""",
        [
            data["handle"],
            data["name"],
            data.get("description"),
            data.get("numEmployees"),
            data.get("logoUrl"),
        ],
    )
    logger.info("Created company %s", data["handle"])
    return rows[0]


def find_all() -> List[dict]:
    """All companies, ordered by name."""
    return execute_sql(f"SELECT {COMPANY_COLUMNS}\nFROM companies\nORDER BY name")


def find_by_criteria(
    name: Optional[str] = None,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None,
) -> List[dict]:
    """
    Companies matching the given filters, ordered by name.

    - name: case-insensitive substring of the company name
    - min_employees / max_employees: inclusive bounds on num_employees

    Raises BadRequestError if min_employees > max_employees.
    """
    if min_employees and max_employees and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    sql, values = build_filter_query(
        f"SELECT {COMPANY_COLUMNS}\nFROM companies",
        COMPANY_FILTERS,
        {"name": name, "min_employees": min_employees, "max_employees": max_employees},
        order_by="name",
    )
    return execute_sql(sql, values)


def get(handle: str) -> dict:
    """
    Company with its jobs: {handle, name, description, numEmployees, logoUrl, jobs}
    where jobs is [{id, title, salary, equity}, ...].

    Raises NotFoundError if not found.
    """
    rows = execute_sql(f"SELECT {COMPANY_COLUMNS}\nFROM companies\nWHERE handle = $1", [handle])
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    company = rows[0]
    company["jobs"] = [
        {key: job[key] for key in ("id", "title", "salary", "equity")}
        for job in job_model.find_all_by_company(handle)
    ]
    return company


def update(handle: str, data: dict) -> dict:
    """
    Partial update; only the given fields change.

    Data can include: {name, description, numEmployees, logoUrl}

    Raises BadRequestError on empty data, NotFoundError if not found.
    """
    set_cols, values = sql_for_partial_update(data, UPDATE_COLUMNS)
    rows = execute_sql(
        f"""UPDATE companies
            SET {set_cols}
            WHERE {where_key("handle", values)}
            RETURNING {COMPANY_COLUMNS}""",
        [*values, handle],
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    logger.info("Updated company %s: %s", handle, ", ".join(data))
    return rows[0]


def remove(handle: str) -> None:
    """Delete a company (its jobs cascade). Raises NotFoundError if not found."""
    rows = execute_sql("DELETE FROM companies WHERE handle = $1 RETURNING handle", [handle])
    if not rows:
        raise NotFoundError(f"No company: {handle}")
    logger.info("Deleted company %s", handle)
