"""테스트 데이터 생성 스크립트

사용법:
    python scripts/seed.py

테이블을 새로 만들고(drop -> create) 테스트 데이터를 넣는다.

테스트 계정:
    - username: testadmin / password: Test1234!  (관리자)
    - username: testuser  / password: Test1234!
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.base import Base
import db.models  # noqa: F401  (테이블 메타데이터 등록)
from repositories import companies, jobs, users
from utils import database

TEST_USERS = [
    {
        "username": "testadmin",
        "password": "Test1234!",
        "firstName": "Test",
        "lastName": "Admin",
        "email": "admin@example.com",
        "isAdmin": True,
    },
    {
        "username": "testuser",
        "password": "Test1234!",
        "firstName": "Test",
        "lastName": "User",
        "email": "user@example.com",
        "isAdmin": False,
    },
]

TEST_COMPANIES = [
    {
        "handle": "arnold-berger-townsend",
        "name": "Arnold, Berger and Townsend",
        "description": "Kind crime at perhaps beat.",
        "numEmployees": 795,
        "logoUrl": None,
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "description": "Difficult ready trip question.",
        "numEmployees": 862,
        "logoUrl": None,
    },
    {
        "handle": "net-study",
        "name": "Study Networks",
        "description": "Network of study groups.",
        "numEmployees": 12,
        "logoUrl": None,
    },
]

TEST_JOBS = [
    {"title": "Software Engineer", "salary": 120000, "equity": Decimal("0.01"),
     "companyHandle": "net-study"},
    {"title": "Data Engineer", "salary": 110000, "equity": Decimal("0"),
     "companyHandle": "bauer-gallagher"},
    {"title": "Accountant", "salary": 70000, "equity": None,
     "companyHandle": "arnold-berger-townsend"},
]


async def seed():
    """모든 테스트 데이터 생성"""
    await database.init_engine()
    engine = database.get_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

        for user in TEST_USERS:
            await users.register(conn, user)
        for company in TEST_COMPANIES:
            await companies.create(conn, company)
        for job in TEST_JOBS:
            await jobs.create(conn, job)

    await database.close_engine()

    print("✅ 테스트 데이터 생성 완료!")
    print(f"\n🏢 회사 {len(TEST_COMPANIES)}개, 채용공고 {len(TEST_JOBS)}개")
    print("\n👤 테스트 계정:")
    for user in TEST_USERS:
        print(f"   - username: {user['username']}")
        print(f"     password: {user['password']}")
        print()


if __name__ == "__main__":
    asyncio.run(seed())
