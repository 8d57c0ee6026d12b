import logging

import asyncpg

from schemas.job import JobCreateRequest
from utils.errors import BadRequestError, NotFoundError
from utils.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = "id, title, salary, equity, company_handle"


async def create(conn: asyncpg.Connection, data: JobCreateRequest) -> dict:
    """채용공고 생성 (존재하지 않는 회사면 400)"""
    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}
            """,
            data.title,
            data.salary,
            data.equity,
            data.company_handle,
        )
    except asyncpg.ForeignKeyViolationError:
        raise BadRequestError(f"No company: {data.company_handle}")

    logger.info("Job created: %s (%s)", row["id"], data.company_handle)
    return dict(row)


async def find_all(
    conn: asyncpg.Connection,
    title: str | None = None,
    min_salary: int | None = None,
    has_equity: bool | None = None,
) -> list[dict]:
    """
    채용공고 목록 조회 (제목순)
    - title: 대소문자 구분 없는 부분 일치
    - min_salary: 최소 연봉
    - has_equity: True면 지분이 0보다 큰 공고만, False/None이면 조건 없음
    """
    where_parts = []
    values = []

    if title is not None:
        values.append(f"%{title}%")
        where_parts.append(f"title ILIKE ${len(values)}")
    if min_salary is not None:
        values.append(min_salary)
        where_parts.append(f"salary >= ${len(values)}")
    if has_equity:
        where_parts.append("equity > 0")

    where_clause = f"WHERE {' AND '.join(where_parts)}" if where_parts else ""

    rows = await conn.fetch(
        f"SELECT {JOB_COLUMNS} FROM jobs {where_clause} ORDER BY title",
        *values,
    )
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, job_id: int) -> dict:
    """채용공고 상세 (회사 정보 포함)"""
    row = await conn.fetchrow(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    company = await conn.fetchrow(
        """
        SELECT handle, name, description, num_employees, logo_url
        FROM companies
        WHERE handle = $1
        """,
        row["company_handle"],
    )

    job = dict(row)
    job["company"] = dict(company)
    del job["company_handle"]
    return job


async def update(conn: asyncpg.Connection, job_id: int, data: dict) -> dict:
    """채용공고 부분 수정 (title, salary, equity는 컬럼명과 같아 매핑 없음)"""
    set_cols, values = sql_for_partial_update(data, {})
    id_idx = len(values) + 1

    row = await conn.fetchrow(
        f"UPDATE jobs SET {set_cols} WHERE id = ${id_idx} RETURNING {JOB_COLUMNS}",
        *values,
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    return dict(row)


async def remove(conn: asyncpg.Connection, job_id: int) -> None:
    row = await conn.fetchrow(
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("Job deleted: %s", job_id)
