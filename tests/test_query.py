"""UPDATE SET 절 / WHERE 조합 유틸 테스트"""
import pytest

from utils.errors import InvalidInputError
from utils.query import (
    build_set_clause,
    join_conditions,
    next_placeholder,
    quote_identifier,
    resolve_column,
    where_clause,
)


class TestBuildSetClause:

    def test_single_field(self):
        clause, values = build_set_clause({"a": "x"}, {"a": "col_a"})

        assert clause == '"col_a"=$1'
        assert values == ["x"]

    def test_multiple_fields_keep_payload_order(self):
        clause, values = build_set_clause({"a": "x", "b": 5}, {"a": "col_a", "b": "col_b"})

        assert clause == '"col_a"=$1, "col_b"=$2'
        assert values == ["x", 5]

    def test_swapped_payload_order_swaps_clause_and_values(self):
        clause, values = build_set_clause({"b": 5, "a": "x"}, {"a": "col_a", "b": "col_b"})

        assert clause == '"col_b"=$1, "col_a"=$2'
        assert values == [5, "x"]

    def test_unmapped_field_uses_own_name(self):
        clause, values = build_set_clause({"zzz": 1}, {})

        assert clause == '"zzz"=$1'
        assert values == [1]

    def test_camel_case_fields(self):
        """원래 예제: firstName -> first_name, age 는 그대로"""
        clause, values = build_set_clause(
            {"firstName": "Aliya", "age": 32},
            {"firstName": "first_name", "age": "age"},
        )

        assert clause == '"first_name"=$1, "age"=$2'
        assert values == ["Aliya", 32]

    def test_null_and_bool_values_are_bound(self):
        clause, values = build_set_clause({"logoUrl": None, "isAdmin": False},
                                          {"logoUrl": "logo_url", "isAdmin": "is_admin"})

        assert clause == '"logo_url"=$1, "is_admin"=$2'
        assert values == [None, False]

    def test_empty_payload_raises(self):
        with pytest.raises(InvalidInputError) as exc_info:
            build_set_clause({}, {"a": "col_a"})

        assert exc_info.value.message == "No data"
        assert exc_info.value.status_code == 400

    def test_caller_appends_key_at_next_index(self):
        clause, values = build_set_clause({"a": "x", "b": 5}, {})

        assert next_placeholder(values) == "$3"

    def test_same_input_same_output(self):
        payload = {"a": "x", "b": 5}

        assert build_set_clause(payload, {}) == build_set_clause(payload, {})

    def test_payload_not_mutated(self):
        payload = {"a": "x"}
        _, values = build_set_clause(payload, {})
        values.append("key")

        assert payload == {"a": "x"}


class TestHelpers:

    def test_quote_identifier(self):
        assert quote_identifier("num_employees") == '"num_employees"'

    def test_quote_identifier_escapes_quote(self):
        assert quote_identifier('we"ird') == '"we""ird"'

    def test_resolve_column_fallback(self):
        assert resolve_column("title", {"firstName": "first_name"}) == "title"
        assert resolve_column("firstName", {"firstName": "first_name"}) == "first_name"

    def test_next_placeholder_empty(self):
        assert next_placeholder([]) == "$1"

    def test_join_conditions(self):
        assert join_conditions(["a", "b"]) == "a AND b"
        assert join_conditions([]) == ""

    def test_where_clause_empty(self):
        assert where_clause("") == ""

    def test_where_clause(self):
        assert where_clause('"salary" >= $1') == ' WHERE "salary" >= $1'
