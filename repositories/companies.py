"""companies 테이블 접근 + 회사 검색 필터"""
import logging
from types import MappingProxyType
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncConnection

from utils.database import fetch_all, fetch_one
from utils.errors import BadRequestError, InvalidRangeError, NotFoundError
from utils.query import (
    build_set_clause,
    join_conditions,
    next_placeholder,
    quote_identifier,
    where_clause,
)

logger = logging.getLogger(__name__)

# API 필드 -> DB 컬럼
COMPANY_COLUMN_MAP: Mapping[str, str] = MappingProxyType({
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
})

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

FIND_ALL_BASE_SQL = f"SELECT {COMPANY_COLUMNS} FROM companies"


def build_company_filter(
    min_employees: int | None = None,
    max_employees: int | None = None,
    name_like: str | None = None,
) -> tuple[str, list[Any]]:
    """
    회사 검색 조건 -> (WHERE 조건, 바인딩 값)

    조건 평가 순서는 항상 min_employees -> max_employees -> name_like.
    입력되지 않은 조건은 SQL 에 아무것도 추가하지 않는다
    (직원 수 필터가 없으면 num_employees 는 WHERE 에 나타나지 않음).

    Raises:
        InvalidRangeError: min_employees > max_employees
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidRangeError("minEmployees cannot be greater than maxEmployees")

    clauses = []
    values = []

    if min_employees is not None:
        clauses.append(f"{quote_identifier('num_employees')} >= {next_placeholder(values)}")
        values.append(min_employees)

    if max_employees is not None:
        clauses.append(f"{quote_identifier('num_employees')} <= {next_placeholder(values)}")
        values.append(max_employees)

    if name_like is not None:
        clauses.append(f"{quote_identifier('name')} ILIKE {next_placeholder(values)}")
        values.append(f"%{name_like}%")

    return join_conditions(clauses), values


async def create(conn: AsyncConnection, data: Mapping[str, Any]) -> dict:
    duplicate = await fetch_one(
        conn,
        "SELECT handle FROM companies WHERE handle = $1",
        [data["handle"]],
    )
    if duplicate:
        raise BadRequestError(f"Duplicate company: {data['handle']}")

    return await fetch_one(
        conn,
        f"""
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {COMPANY_COLUMNS}
        """,
        [
            data["handle"],
            data["name"],
            data["description"],
            data.get("numEmployees"),
            data.get("logoUrl"),
        ],
    )


async def find_all(
    conn: AsyncConnection,
    min_employees: int | None = None,
    max_employees: int | None = None,
    name_like: str | None = None,
) -> list[dict]:
    """회사 목록 (검색 조건 선택, 이름순 정렬)"""
    where_sql, values = build_company_filter(min_employees, max_employees, name_like)
    sql = FIND_ALL_BASE_SQL + where_clause(where_sql) + " ORDER BY name"
    return await fetch_all(conn, sql, values)


async def get(conn: AsyncConnection, handle: str) -> dict:
    """회사 상세 (채용공고 목록 포함)"""
    company = await fetch_one(
        conn,
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        [handle],
    )
    if not company:
        raise NotFoundError(f"No company: {handle}")

    company["jobs"] = await fetch_all(
        conn,
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        [handle],
    )
    return company


async def update(conn: AsyncConnection, handle: str, data: Mapping[str, Any]) -> dict:
    set_clause, values = build_set_clause(data, COMPANY_COLUMN_MAP)
    handle_placeholder = next_placeholder(values)

    company = await fetch_one(
        conn,
        f"""
        UPDATE companies
        SET {set_clause}
        WHERE handle = {handle_placeholder}
        RETURNING {COMPANY_COLUMNS}
        """,
        [*values, handle],
    )
    if not company:
        raise NotFoundError(f"No company: {handle}")
    return company


async def remove(conn: AsyncConnection, handle: str) -> None:
    deleted = await fetch_one(
        conn,
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        [handle],
    )
    if not deleted:
        raise NotFoundError(f"No company: {handle}")
    logger.info("Company deleted: %s", handle)
