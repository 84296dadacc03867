"""jobs 테이블 접근 + 채용공고 검색 필터"""
import logging
from types import MappingProxyType
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncConnection

from repositories.companies import COMPANY_COLUMNS
from utils.database import fetch_all, fetch_one
from utils.errors import NotFoundError
from utils.query import (
    build_set_clause,
    join_conditions,
    next_placeholder,
    quote_identifier,
    where_clause,
)

logger = logging.getLogger(__name__)

# title, salary, equity 는 컬럼명과 같아서 매핑 불필요
JOB_COLUMN_MAP: Mapping[str, str] = MappingProxyType({})

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# 회사 이름 표시용 LEFT JOIN
FIND_ALL_BASE_SQL = """
    SELECT j.id,
           j.title,
           j.salary,
           j.equity,
           j.company_handle AS "companyHandle",
           c.name AS "companyName"
    FROM jobs j
      LEFT JOIN companies AS c ON c.handle = j.company_handle"""


def build_job_filter(
    min_salary: int | None = None,
    has_equity: bool | None = None,
    title: str | None = None,
) -> tuple[str, list[Any]]:
    """
    채용공고 검색 조건 -> (WHERE 조건, 바인딩 값)

    조건 평가 순서는 항상 min_salary -> has_equity -> title.
    - min_salary: salary >= min_salary
    - has_equity: True 일 때만 equity > 0 (바인딩 값 없음), False/None 은 무시
    - title: 대소문자 무시 부분 일치 (%title% 를 값으로 바인딩)
    """
    clauses = []
    values = []

    if min_salary is not None:
        clauses.append(f"{quote_identifier('salary')} >= {next_placeholder(values)}")
        values.append(min_salary)

    if has_equity is True:
        clauses.append(f"{quote_identifier('equity')} > 0")

    if title is not None:
        clauses.append(f"{quote_identifier('title')} ILIKE {next_placeholder(values)}")
        values.append(f"%{title}%")

    return join_conditions(clauses), values


async def create(conn: AsyncConnection, data: Mapping[str, Any]) -> dict:
    return await fetch_one(
        conn,
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ($1, $2, $3, $4)
        RETURNING {JOB_COLUMNS}
        """,
        [
            data["title"],
            data.get("salary"),
            data.get("equity"),
            data["companyHandle"],
        ],
    )


async def find_all(
    conn: AsyncConnection,
    min_salary: int | None = None,
    has_equity: bool | None = None,
    title: str | None = None,
) -> list[dict]:
    """채용공고 목록 (회사 이름 포함, 제목순 정렬)"""
    where_sql, values = build_job_filter(min_salary, has_equity, title)
    sql = FIND_ALL_BASE_SQL + where_clause(where_sql) + " ORDER BY title"
    return await fetch_all(conn, sql, values)


async def get(conn: AsyncConnection, job_id: int) -> dict:
    """
    채용공고 상세.
    공고가 있을 때만 회사 정보를 한 번 더 조회해서 company 로 넣고
    companyHandle 은 응답에서 제거한다.
    """
    job = await fetch_one(
        conn,
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        [job_id],
    )
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    company_handle = job.pop("companyHandle")
    job["company"] = await fetch_one(
        conn,
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        [company_handle],
    )
    return job


async def update(conn: AsyncConnection, job_id: int, data: Mapping[str, Any]) -> dict:
    set_clause, values = build_set_clause(data, JOB_COLUMN_MAP)
    id_placeholder = next_placeholder(values)

    job = await fetch_one(
        conn,
        f"""
        UPDATE jobs
        SET {set_clause}
        WHERE id = {id_placeholder}
        RETURNING {JOB_COLUMNS}
        """,
        [*values, job_id],
    )
    if not job:
        raise NotFoundError(f"No job: {job_id}")
    return job


async def remove(conn: AsyncConnection, job_id: int) -> None:
    deleted = await fetch_one(
        conn,
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        [job_id],
    )
    if not deleted:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("Job deleted: %s", job_id)
