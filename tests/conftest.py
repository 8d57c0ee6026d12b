"""
공통 테스트 fixture

실행 방법:
    uv sync --all-extras  # dev 의존성 설치
    pytest -v

DB 커넥션(get_connection)은 AsyncMock 커넥션으로 교체하므로 PostgreSQL 없이 실행된다.
"""
import os

os.environ.setdefault("SECRET_KEY", "secret-test")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_token
from utils.database import get_connection


@pytest.fixture
def conn():
    """asyncpg 커넥션 대역"""
    connection = MagicMock()
    connection.fetch = AsyncMock(return_value=[])
    connection.fetchrow = AsyncMock(return_value=None)
    connection.fetchval = AsyncMock(return_value=None)
    connection.execute = AsyncMock(return_value="INSERT 0 1")
    return connection


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
    token = create_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def u1_headers():
    token = create_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def company_row():
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    }


@pytest.fixture
def user_row():
    return {
        "username": "u1",
        "first_name": "U1F",
        "last_name": "U1L",
        "email": "user1@user.com",
        "is_admin": False,
    }
