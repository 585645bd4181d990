"""
SQL building helpers.

- sql_for_partial_update: SET clause + values for a PATCH-style update
- FilterRule / build_filter_query: optional WHERE/AND filters for list queries

Both emit positional $N placeholders; app.db.postgres.execute_sql binds them.
Column names and templates come from application code, never from user input.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from app.core.errors import BadRequestError


def sql_for_partial_update(data_to_update: Mapping[str, Any], field_to_column: Optional[Mapping[str, str]] = None) -> Tuple[str, List[Any]]:
    """
    Build the SET clause of a partial update.

    Args:
        data_to_update: external field name -> new value, in update order
        field_to_column: external field name -> SQL column; missing names are used as-is

    Returns:
        (set_cols, values), e.g. for ({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}):
        ('"first_name"=$1, "age"=$2', ["Aliya", 32])

    Raises:
        BadRequestError if data_to_update is empty
    """
    if not data_to_update:
        raise BadRequestError("No data")

    field_to_column = field_to_column or {}
    cols = [
        f'"{field_to_column.get(field, field)}"=${idx}'
        for idx, field in enumerate(data_to_update, start=1)
    ]
    return ", ".join(cols), list(data_to_update.values())


def is_provided(value: Any) -> bool:
    """Text and numeric filters: empty string, 0 and None mean 'not given'."""
    return bool(value)


def contains(value: Any) -> str:
    """Wrap a text filter for a substring ILIKE match."""
    return f"%{value}%"


@dataclass(frozen=True)
class FilterRule:
    """
    One optional filter of a list query.

    `clause` is the SQL condition; it contains a single `{}` marking where the
    bind placeholder goes when the rule consumes a value. Rules with
    `consumes_value=False` compare against a literal and take no placeholder.
    """
    param: str
    clause: str
    is_present: Callable[[Any], bool] = is_provided
    consumes_value: bool = True
    to_value: Callable[[Any], Any] = lambda value: value


def build_filter_query(
    base_query: str,
    rules: Sequence[FilterRule],
    criteria: Mapping[str, Any],
    order_by: str,
) -> Tuple[str, List[Any]]:
    """
    Compose `base_query [WHERE ... AND ...] ORDER BY order_by`.

    Rules are applied in their declared order. The first present filter opens
    the WHERE; each further one is joined with AND. Placeholders count only the
    rules that consumed a value.

    Returns:
        (sql, values) with values aligned to $1..$N
    """
    conditions: List[str] = []
    values: List[Any] = []

    for rule in rules:
        value = criteria.get(rule.param)
        if not rule.is_present(value):
            continue
        if rule.consumes_value:
            values.append(rule.to_value(value))
            conditions.append(rule.clause.format(f"${len(values)}"))
        else:
            conditions.append(rule.clause)

    lines = [base_query.strip()]
    for idx, condition in enumerate(conditions):
        lines.append(f"{'WHERE' if idx == 0 else 'AND'} {condition}")
    lines.append(f"ORDER BY {order_by}")

    return "\n".join(lines), values


def where_key(column: str, values: Sequence[Any]) -> str:
    """`column = $N` for the key that follows the SET values of an UPDATE."""
    return f"{column} = ${len(values) + 1}"
