"""테스트 데이터 생성 스크립트

사용법:
    python scripts/seed.py

스키마(companies, jobs, users, applications)를 새로 만들고 샘플 데이터를 넣는다.

테스트 계정:
    - admin / password1 (관리자)
    - testuser / password2
"""
import asyncio
import logging
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.base import Base
from db.models.company import Company
from db.models.job import Job
from db.models.user import User
from db.models.application import Application
from db.session import engine, AsyncSessionLocal
from utils.auth import hash_password

logger = logging.getLogger(__name__)

TEST_COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "num_employees": 245,
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "logo_url": None,
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "num_employees": 862,
        "description": "Difficult ready trip question produce produce someone.",
        "logo_url": None,
    },
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "num_employees": 819,
        "description": "Year join loss.",
        "logo_url": None,
    },
]

TEST_JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0"),
     "company_handle": "watson-davis"},
    {"title": "Information officer", "salary": 200000, "equity": None,
     "company_handle": "anderson-arias-morrow"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0.05"),
     "company_handle": "bauer-gallagher"},
]

# 테스트 계정 (평문 비밀번호)
TEST_USERS = [
    {
        "username": "admin",
        "password": "password1",
        "first_name": "Admin",
        "last_name": "User",
        "email": "admin@example.com",
        "is_admin": True,
    },
    {
        "username": "testuser",
        "password": "password2",
        "first_name": "Test",
        "last_name": "User",
        "email": "test@example.com",
        "is_admin": False,
    },
]


async def reset_schema():
    """기존 테이블 삭제 후 재생성"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def seed_data():
    async with AsyncSessionLocal() as db:
        db.add_all(Company(**company) for company in TEST_COMPANIES)
        await db.flush()

        jobs = [Job(**job) for job in TEST_JOBS]
        db.add_all(jobs)

        db.add_all(
            User(**{**user, "password": hash_password(user["password"])})
            for user in TEST_USERS
        )
        await db.flush()

        db.add(Application(username="testuser", job_id=jobs[0].id))
        await db.commit()


async def seed():
    """모든 테스트 데이터 생성"""
    await reset_schema()
    await seed_data()
    await engine.dispose()

    logger.info("Seed complete: %d companies, %d jobs, %d users",
                len(TEST_COMPANIES), len(TEST_JOBS), len(TEST_USERS))
    print("\n👤 테스트 계정:")
    for user in TEST_USERS:
        print(f"   - username: {user['username']}")
        print(f"     password: {user['password']}")
        print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
