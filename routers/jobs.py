from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from crud import job as job_crud
from schemas.commons import DBConnection, JobIdPath
from schemas.job import (
    Job,
    JobDetail,
    JobCreateRequest,
    JobUpdateRequest,
    JobResponse,
    JobDetailResponse,
    JobListResponse,
    JobDeleteResponse,
    JobFilterParams,
)
from utils.auth import ensure_admin, ensure_logged_in

router = APIRouter(
    tags=["JOBS"],
)


@router.post("/jobs", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED, dependencies=[Depends(ensure_admin)])
async def create_job(job: JobCreateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 생성 (관리자)"""
    new_job = await job_crud.create(conn, job)
    return JobResponse(job=Job.model_validate(new_job))


@router.get("/jobs", response_model=JobListResponse,
            dependencies=[Depends(ensure_logged_in)])
async def get_jobs(
        conn: DBConnection,
        filters: Annotated[JobFilterParams, Query()],
) -> JobListResponse:
    """
    채용공고 목록 조회
    - title: 제목 부분 검색
    - minSalary: 최소 연봉
    - hasEquity: true면 지분 있는 공고만
    """
    jobs = await job_crud.find_all(
        conn, title=filters.title, min_salary=filters.min_salary, has_equity=filters.has_equity
    )
    return JobListResponse(jobs=[Job.model_validate(j) for j in jobs])


@router.get("/jobs/{job_id}", response_model=JobDetailResponse,
            dependencies=[Depends(ensure_logged_in)])
async def get_job(job_id: JobIdPath, conn: DBConnection) -> JobDetailResponse:
    """채용공고 상세 조회 (회사 포함)"""
    job = await job_crud.get(conn, job_id)
    return JobDetailResponse(job=JobDetail.model_validate(job))


@router.patch("/jobs/{job_id}", response_model=JobResponse,
              dependencies=[Depends(ensure_admin)])
async def update_job(job_id: JobIdPath, update_data: JobUpdateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 수정 (관리자)"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    job = await job_crud.update(conn, job_id, update_fields)
    return JobResponse(job=Job.model_validate(job))


@router.delete("/jobs/{job_id}", response_model=JobDeleteResponse,
               dependencies=[Depends(ensure_admin)])
async def delete_job(job_id: JobIdPath, conn: DBConnection) -> JobDeleteResponse:
    """채용공고 삭제 (관리자)"""
    await job_crud.remove(conn, job_id)
    return JobDeleteResponse(deleted=job_id)
