import logging

import asyncpg

from schemas.user import UserRegisterRequest
from utils.auth import hash_password, verify_password, DUMMY_HASH
from utils.errors import BadRequestError, NotFoundError, UnauthorizedError
from utils.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

USER_COLUMNS = "username, first_name, last_name, email, is_admin"

USER_COLUMN_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


async def authenticate(conn: asyncpg.Connection, username: str, password: str) -> dict:
    """로그인 확인 후 사용자 반환 (비밀번호 제외)"""
    row = await conn.fetchrow(
        f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
        username,
    )

    # 타이밍 공격 방지: 유저 존재 여부와 관계없이 항상 해시 비교 수행
    hashed_password = row["password"] if row else DUMMY_HASH
    is_password_correct = verify_password(password, hashed_password)

    if row is None or not is_password_correct:
        logger.warning("Failed login attempt: %s", username)
        raise UnauthorizedError("Invalid username/password")

    user = dict(row)
    del user["password"]
    return user


async def register(conn: asyncpg.Connection, data: UserRegisterRequest) -> dict:
    """
    사용자 생성
    - 회원가입(UserRegisterRequest)은 항상 일반 사용자
    - 관리자 생성(UserCreateRequest)은 is_admin 지정 가능
    """
    is_admin = getattr(data, "is_admin", False)
    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO users (username, password, first_name, last_name, email, is_admin)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {USER_COLUMNS}
            """,
            data.username,
            hash_password(data.password),
            data.first_name,
            data.last_name,
            data.email,
            is_admin,
        )
    except asyncpg.UniqueViolationError:
        raise BadRequestError(f"Duplicate username: {data.username}")

    logger.info("User registered: %s (admin=%s)", data.username, is_admin)
    return dict(row)


async def find_all(conn: asyncpg.Connection) -> list[dict]:
    rows = await conn.fetch(f"SELECT {USER_COLUMNS} FROM users ORDER BY username")
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, username: str) -> dict:
    """사용자 상세 (지원한 채용공고 ID 목록 포함)"""
    row = await conn.fetchrow(
        f"SELECT {USER_COLUMNS} FROM users WHERE username = $1",
        username,
    )
    if row is None:
        raise NotFoundError(f"No user: {username}")

    applications = await conn.fetch(
        "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
        username,
    )

    user = dict(row)
    user["jobs"] = [app["job_id"] for app in applications]
    return user


async def update(conn: asyncpg.Connection, username: str, data: dict) -> dict:
    """
    사용자 부분 수정 (firstName, lastName, password, email)
    password가 있으면 해싱 후 저장
    """
    if "password" in data:
        data = dict(data)
        data["password"] = hash_password(data["password"])

    set_cols, values = sql_for_partial_update(data, USER_COLUMN_MAP)
    username_idx = len(values) + 1

    row = await conn.fetchrow(
        f"UPDATE users SET {set_cols} WHERE username = ${username_idx} RETURNING {USER_COLUMNS}",
        *values,
        username,
    )
    if row is None:
        raise NotFoundError(f"No user: {username}")
    return dict(row)


async def remove(conn: asyncpg.Connection, username: str) -> None:
    row = await conn.fetchrow(
        "DELETE FROM users WHERE username = $1 RETURNING username",
        username,
    )
    if row is None:
        raise NotFoundError(f"No user: {username}")
    logger.info("User deleted: %s", username)


async def apply_to_job(conn: asyncpg.Connection, username: str, job_id: int) -> None:
    """채용공고 지원 (중복 지원 시 400)"""
    if await conn.fetchval("SELECT id FROM jobs WHERE id = $1", job_id) is None:
        raise NotFoundError(f"No job: {job_id}")

    if await conn.fetchval("SELECT username FROM users WHERE username = $1", username) is None:
        raise NotFoundError(f"No user: {username}")

    try:
        await conn.execute(
            "INSERT INTO applications (username, job_id) VALUES ($1, $2)",
            username,
            job_id,
        )
    except asyncpg.UniqueViolationError:
        raise BadRequestError(f"Already applied: {job_id}")
    except asyncpg.ForeignKeyViolationError:
        raise NotFoundError(f"No job or user: {job_id}, {username}")
