"""
User data access.

Rows are returned as {username, firstName, lastName, email, isAdmin}.
The stored password hash never leaves this module.
"""

import logging
from typing import List

from app.core.auth import hash_password, verify_password
from app.core.errors import BadRequestError, NotFoundError, UnauthorizedError
from app.db.postgres import execute_sql
from app.utils.sql import sql_for_partial_update, where_key

logger = logging.getLogger(__name__)

USER_COLUMNS = '''username,
       first_name AS "firstName",
       last_name AS "lastName",
       email,
       is_admin AS "isAdmin"'''

UPDATE_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


def authenticate(username: str, password: str) -> dict:
    """
    Check a username/password pair.

    Returns the user (without password); raises UnauthorizedError otherwise.
    """
    rows = execute_sql(f"SELECT {USER_COLUMNS},\n       password\nFROM users\nWHERE username = $1", [username])
    if rows:
        user = rows[0]
        hashed = user.pop("password")
        if verify_password(password, hashed):
            return user

    logger.info("Failed login for %s", username)
    raise UnauthorizedError("Invalid username/password")


def register(data: dict) -> dict:
    """
    Create a user from {username, password, firstName, lastName, email, isAdmin}.

    Raises BadRequestError if the username is already taken.
    """
    duplicate = execute_sql("SELECT username FROM users WHERE username = $1", [data["username"]])
    if duplicate:
        raise BadRequestError(f"Duplicate username: {data['username']}")

    rows = execute_sql(
        f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {USER_COLUMNS}""",
        [
            data["username"],
            hash_password(data["password"]),
            data["firstName"],
            data["lastName"],
            data["email"],
            bool(data.get("isAdmin", False)),
        ],
    )
    logger.info("Registered user %s", data["username"])
    return rows[0]


def find_all() -> List[dict]:
    """All users, ordered by username."""
    return execute_sql(f"SELECT {USER_COLUMNS}\nFROM users\nORDER BY username")


def get(username: str) -> dict:
    """
    User with the ids of the jobs they applied to:
    {username, firstName, lastName, email, isAdmin, jobs}

    Raises NotFoundError if not found.
    """
    rows = execute_sql(f"SELECT {USER_COLUMNS}\nFROM users\nWHERE username = $1", [username])
    if not rows:
        raise NotFoundError(f"No user: {username}")

    user = rows[0]
    applications = execute_sql(
        "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
        [username],
    )
    user["jobs"] = [row["job_id"] for row in applications]
    return user


def update(username: str, data: dict) -> dict:
    """
    Partial update; only the given fields change. A new password is hashed.

    Data can include: {firstName, lastName, password, email, isAdmin}

    Raises BadRequestError on empty data, NotFoundError if not found.
    """
    data = dict(data)
    if "password" in data:
        data["password"] = hash_password(data["password"])

    set_cols, values = sql_for_partial_update(data, UPDATE_COLUMNS)
    rows = execute_sql(
        f"""UPDATE users
            SET {set_cols}
            WHERE {where_key("username", values)}
            RETURNING {USER_COLUMNS}""",
        [*values, username],
    )
    if not rows:
        raise NotFoundError(f"No user: {username}")

    logger.info("Updated user %s: %s", username, ", ".join(data))
    return rows[0]


def remove(username: str) -> None:
    """Raises NotFoundError if not found."""
    rows = execute_sql("DELETE FROM users WHERE username = $1 RETURNING username", [username])
    if not rows:
        raise NotFoundError(f"No user: {username}")
    logger.info("Deleted user %s", username)


def apply_to_job(username: str, job_id: int) -> int:
    """
    Record that a user applied to a job. Returns the job id.

    Raises NotFoundError if the job or user is missing,
    BadRequestError if the user already applied.
    """
    if not execute_sql("SELECT id FROM jobs WHERE id = $1", [job_id]):
        raise NotFoundError(f"No job: {job_id}")
    if not execute_sql("SELECT username FROM users WHERE username = $1", [username]):
        raise NotFoundError(f"No user: {username}")

    existing = execute_sql(
        "SELECT job_id FROM applications WHERE username = $1 AND job_id = $2",
        [username, job_id],
    )
    if existing:
        raise BadRequestError(f"{username} already applied to job {job_id}")

    execute_sql(
        "INSERT INTO applications (username, job_id) VALUES ($1, $2)",
        [username, job_id],
    )
    logger.info("User %s applied to job %s", username, job_id)
    return job_id
