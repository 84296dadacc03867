"""
공통 테스트 설정

실행 방법:
    pip install -e ".[dev]"
    pytest -v
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jobly-at-least-32-bytes")
os.environ.setdefault("PASSWORD_PEPPER", "test-pepper")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_token
from utils.database import get_connection


@pytest.fixture
def conn():
    """DB 커넥션 대역 (레포지토리 함수는 테스트마다 patch)"""
    return MagicMock(name="conn")


@pytest.fixture
def client(conn):
    """테스트용 FastAPI 클라이언트"""
    async def override_get_connection():
        yield conn

    app.dependency_overrides[get_connection] = override_get_connection
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_token({"username": "admin", "isAdmin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_token({"username": "u1", "isAdmin": False})
    return {"Authorization": f"Bearer {token}"}
