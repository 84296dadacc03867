"""users / applications 테이블 접근"""
import logging
from types import MappingProxyType
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncConnection

from utils.auth import DUMMY_HASH, hash_password, verify_password
from utils.database import fetch_all, fetch_one
from utils.errors import BadRequestError, NotFoundError, UnauthorizedError
from utils.query import build_set_clause, next_placeholder

logger = logging.getLogger(__name__)

USER_COLUMN_MAP: Mapping[str, str] = MappingProxyType({
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
})

USER_COLUMNS = 'username, first_name AS "firstName", last_name AS "lastName", email, is_admin AS "isAdmin"'


async def authenticate(conn: AsyncConnection, username: str, password: str) -> dict:
    """username/password 확인 후 유저 반환 (비밀번호 제외)"""
    user = await fetch_one(
        conn,
        f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
        [username],
    )

    # 타이밍 공격 방지: 유저 존재 여부와 관계없이 항상 해시 비교 수행
    hashed_password = user["password"] if user else DUMMY_HASH
    is_password_correct = verify_password(password, hashed_password)

    if user is None or not is_password_correct:
        logger.warning("Login failed: %s", username)
        raise UnauthorizedError("Invalid username/password")

    del user["password"]
    return user


async def register(conn: AsyncConnection, data: Mapping[str, Any]) -> dict:
    duplicate = await fetch_one(
        conn,
        "SELECT username FROM users WHERE username = $1",
        [data["username"]],
    )
    if duplicate:
        raise BadRequestError(f"Duplicate username: {data['username']}")

    return await fetch_one(
        conn,
        f"""
        INSERT INTO users (username, password, first_name, last_name, email, is_admin)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING {USER_COLUMNS}
        """,
        [
            data["username"],
            hash_password(data["password"]),
            data["firstName"],
            data["lastName"],
            data["email"],
            data.get("isAdmin", False),
        ],
    )


async def find_all(conn: AsyncConnection) -> list[dict]:
    return await fetch_all(conn, f"SELECT {USER_COLUMNS} FROM users ORDER BY username")


async def get(conn: AsyncConnection, username: str) -> dict:
    """유저 상세 (지원한 공고 ID 목록 포함)"""
    user = await fetch_one(
        conn,
        f"SELECT {USER_COLUMNS} FROM users WHERE username = $1",
        [username],
    )
    if not user:
        raise NotFoundError(f"No user: {username}")

    applications = await fetch_all(
        conn,
        "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
        [username],
    )
    user["jobs"] = [a["job_id"] for a in applications]
    return user


async def update(conn: AsyncConnection, username: str, data: Mapping[str, Any]) -> dict:
    """
    부분 수정. password 가 있으면 해시해서 저장한다.
    """
    data = dict(data)
    if "password" in data:
        data["password"] = hash_password(data["password"])

    set_clause, values = build_set_clause(data, USER_COLUMN_MAP)
    username_placeholder = next_placeholder(values)

    user = await fetch_one(
        conn,
        f"""
        UPDATE users
        SET {set_clause}
        WHERE username = {username_placeholder}
        RETURNING {USER_COLUMNS}
        """,
        [*values, username],
    )
    if not user:
        raise NotFoundError(f"No user: {username}")
    return user


async def remove(conn: AsyncConnection, username: str) -> None:
    deleted = await fetch_one(
        conn,
        "DELETE FROM users WHERE username = $1 RETURNING username",
        [username],
    )
    if not deleted:
        raise NotFoundError(f"No user: {username}")


async def apply_to_job(conn: AsyncConnection, username: str, job_id: int) -> None:
    job = await fetch_one(conn, "SELECT id FROM jobs WHERE id = $1", [job_id])
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    user = await fetch_one(conn, "SELECT username FROM users WHERE username = $1", [username])
    if not user:
        raise NotFoundError(f"No username: {username}")

    await fetch_all(
        conn,
        "INSERT INTO applications (job_id, username) VALUES ($1, $2) ON CONFLICT DO NOTHING",
        [job_id, username],
    )
