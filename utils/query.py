from decimal import Decimal
from typing import Mapping, Sequence

from utils.errors import InvalidInputError

SqlValue = str | int | float | Decimal | bool | None


def quote_identifier(name: str) -> str:
    """컬럼명을 큰따옴표 식별자로 감싼다 ("first_name")"""
    return '"' + name.replace('"', '""') + '"'


def placeholder(index: int) -> str:
    return f"${index}"


def next_placeholder(values: Sequence) -> str:
    """지금까지 바인딩된 값 다음 위치의 placeholder"""
    return placeholder(len(values) + 1)


def resolve_column(field_name: str, column_map: Mapping[str, str]) -> str:
    # 매핑에 없으면 필드명을 그대로 컬럼명으로 사용
    return column_map.get(field_name, field_name)


def build_set_clause(
    update_fields: Mapping[str, SqlValue],
    column_map: Mapping[str, str]
) -> tuple[str, list[SqlValue]]:
    """
    부분 수정(PATCH)용 UPDATE SET 절 생성.

    Args:
        update_fields: 수정할 필드와 값 {"firstName": "Aliya", "age": 32}
        column_map: 필드 -> DB 컬럼 매핑 {"firstName": "first_name"}
            (매핑에 없는 필드는 필드명을 그대로 사용)

    Returns:
        (set_clause, values) 튜플
        - set_clause: '"first_name"=$1, "age"=$2'
        - values: ["Aliya", 32]

    placeholder 번호는 1부터 연속이므로 호출 측은 WHERE 키를
    next_placeholder(values) 위치에 이어서 바인딩하면 된다.

    Raises:
        InvalidInputError: update_fields 가 비어 있는 경우

    Example:
        >>> clause, values = build_set_clause({"firstName": "Aliya"}, {"firstName": "first_name"})
        >>> clause
        '"first_name"=$1'
        >>> values
        ['Aliya']
    """
    if not update_fields:
        raise InvalidInputError("No data")

    set_parts = []
    values = []

    for field_name, value in update_fields.items():
        values.append(value)
        column_name = resolve_column(field_name, column_map)
        set_parts.append(f"{quote_identifier(column_name)}={placeholder(len(values))}")

    return ", ".join(set_parts), values


def join_conditions(clauses: Sequence[str]) -> str:
    return " AND ".join(clauses)


def where_clause(where_sql: str) -> str:
    """조건이 없으면 WHERE 키워드 자체를 붙이지 않는다"""
    if not where_sql:
        return ""
    return f" WHERE {where_sql}"
