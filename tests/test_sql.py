"""
Unit tests for the SQL builders.

Tests:
- Partial update SET clause and value alignment
- Filter query composition (WHERE/AND, placeholder numbering, ordering)
- $N -> named bind rewriting
"""

import re

import pytest

from app.core.errors import BadRequestError
from app.db.postgres import bind_positional
from app.models.company import COMPANY_FILTERS
from app.models.job import JOB_FILTERS
from app.utils.sql import FilterRule, build_filter_query, sql_for_partial_update, where_key


class TestSqlForPartialUpdate:
    """Test sql_for_partial_update"""

    def test_maps_field_names_to_columns(self):
        set_cols, values = sql_for_partial_update(
            {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"}
        )
        assert set_cols == '"first_name"=$1, "age"=$2'
        assert values == ["Aliya", 32]

    def test_empty_data_is_bad_request(self):
        with pytest.raises(BadRequestError):
            sql_for_partial_update({}, {"firstName": "first_name"})

    def test_empty_data_without_table(self):
        with pytest.raises(BadRequestError):
            sql_for_partial_update({})

    def test_untranslated_names_pass_through(self):
        set_cols, values = sql_for_partial_update({"title": "New", "salary": 5})
        assert set_cols == '"title"=$1, "salary"=$2'
        assert values == ["New", 5]

    @pytest.mark.parametrize("data", [
        {"name": "C1"},
        {"numEmployees": 10, "logoUrl": "http://c1.img", "description": None},
        {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5},
    ])
    def test_placeholders_align_with_values(self, data):
        set_cols, values = sql_for_partial_update(data, {"numEmployees": "num_employees", "logoUrl": "logo_url"})
        clauses = set_cols.split(", ")
        assert len(clauses) == len(values) == len(data)
        for position, clause in enumerate(clauses, start=1):
            assert clause.endswith(f"=${position}")
        assert values == list(data.values())

    def test_where_key_follows_values(self):
        _, values = sql_for_partial_update({"name": "x", "description": "y"})
        assert where_key("handle", values) == "handle = $3"


class TestBuildFilterQuery:
    """Test build_filter_query and the per-resource rule sets"""

    BASE = "SELECT * FROM jobs"

    def test_no_filters_only_orders(self):
        sql, values = build_filter_query(self.BASE, JOB_FILTERS, {}, order_by="title")
        assert sql == "SELECT * FROM jobs\nORDER BY title"
        assert values == []

    def test_all_job_filters(self):
        sql, values = build_filter_query(
            self.BASE, JOB_FILTERS,
            {"title": "J", "min_salary": 90000, "has_equity": True},
            order_by="title",
        )
        assert sql == (
            "SELECT * FROM jobs\n"
            "WHERE title ILIKE $1\n"
            "AND salary >= $2\n"
            "AND equity > 0\n"
            "ORDER BY title"
        )
        assert values == ["%J%", 90000]

    def test_has_equity_alone_opens_where(self):
        sql, values = build_filter_query(self.BASE, JOB_FILTERS, {"has_equity": True}, order_by="title")
        assert sql == "SELECT * FROM jobs\nWHERE equity > 0\nORDER BY title"
        assert values == []

    def test_has_equity_false_means_no_equity(self):
        sql, values = build_filter_query(
            self.BASE, JOB_FILTERS, {"title": "eng", "has_equity": False}, order_by="title"
        )
        assert sql == "SELECT * FROM jobs\nWHERE title ILIKE $1\nAND equity = 0\nORDER BY title"
        assert values == ["%eng%"]

    def test_has_equity_none_is_not_a_filter(self):
        sql, values = build_filter_query(self.BASE, JOB_FILTERS, {"has_equity": None}, order_by="title")
        assert "WHERE" not in sql
        assert values == []

    def test_zero_and_empty_are_not_provided(self):
        sql, values = build_filter_query(
            self.BASE, JOB_FILTERS, {"title": "", "min_salary": 0}, order_by="title"
        )
        assert "WHERE" not in sql
        assert values == []

    def test_min_salary_alone_is_first_placeholder(self):
        sql, values = build_filter_query(self.BASE, JOB_FILTERS, {"min_salary": 110000}, order_by="title")
        assert "WHERE salary >= $1" in sql
        assert values == [110000]

    def test_company_max_only(self):
        sql, values = build_filter_query(
            "SELECT * FROM companies", COMPANY_FILTERS, {"max_employees": 3}, order_by="name"
        )
        assert sql == "SELECT * FROM companies\nWHERE num_employees <= $1\nORDER BY name"
        assert values == [3]

    def test_company_all_filters(self):
        sql, values = build_filter_query(
            "SELECT * FROM companies", COMPANY_FILTERS,
            {"name": "net", "min_employees": 2, "max_employees": 300},
            order_by="name",
        )
        assert sql == (
            "SELECT * FROM companies\n"
            "WHERE name ILIKE $1\n"
            "AND num_employees >= $2\n"
            "AND num_employees <= $3\n"
            "ORDER BY name"
        )
        assert values == ["%net%", 2, 300]

    def test_literal_rules_do_not_advance_placeholders(self):
        rules = (
            FilterRule("active", "is_active = TRUE", is_present=lambda v: v is True, consumes_value=False),
            FilterRule("min_age", "age >= {}"),
            FilterRule("max_age", "age <= {}"),
        )
        sql, values = build_filter_query(
            "SELECT * FROM people", rules, {"active": True, "min_age": 18, "max_age": 65}, order_by="name"
        )
        assert sql == (
            "SELECT * FROM people\n"
            "WHERE is_active = TRUE\n"
            "AND age >= $1\n"
            "AND age <= $2\n"
            "ORDER BY name"
        )
        assert values == [18, 65]

    def test_placeholder_count_matches_values(self):
        sql, values = build_filter_query(
            self.BASE, JOB_FILTERS,
            {"title": "a", "has_equity": False, "min_salary": 1},
            order_by="title",
        )
        placeholders = [int(n) for n in re.findall(r"\$(\d+)", sql)]
        assert placeholders == list(range(1, len(values) + 1))


class TestBindPositional:
    """Test $N rewriting for SQLAlchemy text()"""

    def test_rewrites_placeholders(self):
        sql, params = bind_positional('UPDATE jobs SET "title"=$1 WHERE id = $2', ["New", 7])
        assert sql == 'UPDATE jobs SET "title"=:p1 WHERE id = :p2'
        assert params == {"p1": "New", "p2": 7}

    def test_double_digit_placeholders(self):
        values = list(range(12))
        sql, params = bind_positional("SELECT $1, $12", values)
        assert sql == "SELECT :p1, :p12"
        assert params["p12"] == 11

    def test_missing_value_raises(self):
        with pytest.raises(ValueError):
            bind_positional("SELECT $1, $2", ["only one"])
