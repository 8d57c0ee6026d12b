"""
회사 데이터 접근 함수

모든 함수는 asyncpg 커넥션을 받아 파라미터화된 SQL($1, $2 ...)을 실행한다.
"""
import logging

import asyncpg

from schemas.company import CompanyCreateRequest
from utils.errors import BadRequestError, NotFoundError
from utils.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"

# 요청 필드(camelCase) -> DB 컬럼
COMPANY_COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


async def create(conn: asyncpg.Connection, data: CompanyCreateRequest) -> dict:
    """회사 생성 (handle/name 중복 시 400)"""
    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}
            """,
            data.handle,
            data.name,
            data.description,
            data.num_employees,
            data.logo_url,
        )
    except asyncpg.UniqueViolationError:
        raise BadRequestError(f"Duplicate company: {data.handle}")

    logger.info("Company created: %s", data.handle)
    return dict(row)


async def find_all(
    conn: asyncpg.Connection,
    name: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> list[dict]:
    """
    회사 목록 조회 (이름순)
    - name: 대소문자 구분 없는 부분 일치
    - min_employees / max_employees: 직원 수 범위
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    where_parts = []
    values = []

    if name is not None:
        values.append(f"%{name}%")
        where_parts.append(f"name ILIKE ${len(values)}")
    if min_employees is not None:
        values.append(min_employees)
        where_parts.append(f"num_employees >= ${len(values)}")
    if max_employees is not None:
        values.append(max_employees)
        where_parts.append(f"num_employees <= ${len(values)}")

    where_clause = f"WHERE {' AND '.join(where_parts)}" if where_parts else ""

    rows = await conn.fetch(
        f"SELECT {COMPANY_COLUMNS} FROM companies {where_clause} ORDER BY name",
        *values,
    )
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, handle: str) -> dict:
    """회사 상세 (소속 채용공고 포함)"""
    row = await conn.fetchrow(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    jobs = await conn.fetch(
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        handle,
    )

    company = dict(row)
    company["jobs"] = [dict(job) for job in jobs]
    return company


async def update(conn: asyncpg.Connection, handle: str, data: dict) -> dict:
    """
    회사 부분 수정

    data는 요청 스키마에서 exclude_unset + by_alias로 뽑은 값만 담는다.
    (name, description, numEmployees, logoUrl)
    """
    set_cols, values = sql_for_partial_update(data, COMPANY_COLUMN_MAP)
    handle_idx = len(values) + 1

    query = (
        f"UPDATE companies SET {set_cols} "
        f"WHERE handle = ${handle_idx} "
        f"RETURNING {COMPANY_COLUMNS}"
    )
    try:
        row = await conn.fetchrow(query, *values, handle)
    except asyncpg.UniqueViolationError:
        raise BadRequestError(f"Duplicate company name: {data.get('name')}")

    if row is None:
        raise NotFoundError(f"No company: {handle}")
    return dict(row)


async def remove(conn: asyncpg.Connection, handle: str) -> None:
    row = await conn.fetchrow(
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")
    logger.info("Company deleted: %s", handle)
