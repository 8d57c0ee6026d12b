from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from crud import company as company_crud
from schemas.commons import DBConnection
from schemas.company import (
    Company,
    CompanyDetail,
    CompanyCreateRequest,
    CompanyUpdateRequest,
    CompanyResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyDeleteResponse,
    CompanyFilterParams,
)
from utils.auth import ensure_admin, ensure_logged_in

router = APIRouter(
    tags=["COMPANIES"],
)


@router.post("/companies", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED, dependencies=[Depends(ensure_admin)])
async def create_company(company: CompanyCreateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 생성 (관리자)"""
    new_company = await company_crud.create(conn, company)
    return CompanyResponse(company=Company.model_validate(new_company))


@router.get("/companies", response_model=CompanyListResponse,
            dependencies=[Depends(ensure_logged_in)])
async def get_companies(
        conn: DBConnection,
        filters: Annotated[CompanyFilterParams, Query()],
) -> CompanyListResponse:
    """
    회사 목록 조회
    - name: 이름 부분 검색
    - minEmployees / maxEmployees: 직원 수 범위
    """
    companies = await company_crud.find_all(
        conn,
        name=filters.name,
        min_employees=filters.min_employees,
        max_employees=filters.max_employees,
    )
    return CompanyListResponse(companies=[Company.model_validate(c) for c in companies])


@router.get("/companies/{handle}", response_model=CompanyDetailResponse,
            dependencies=[Depends(ensure_logged_in)])
async def get_company(handle: str, conn: DBConnection) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 포함)"""
    company = await company_crud.get(conn, handle)
    return CompanyDetailResponse(company=CompanyDetail.model_validate(company))


@router.patch("/companies/{handle}", response_model=CompanyResponse,
              dependencies=[Depends(ensure_admin)])
async def update_company(
        handle: str, update_data: CompanyUpdateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 수정 (관리자)"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    company = await company_crud.update(conn, handle, update_fields)
    return CompanyResponse(company=Company.model_validate(company))


@router.delete("/companies/{handle}", response_model=CompanyDeleteResponse,
               dependencies=[Depends(ensure_admin)])
async def delete_company(handle: str, conn: DBConnection) -> CompanyDeleteResponse:
    """회사 삭제 (관리자)"""
    await company_crud.remove(conn, handle)
    return CompanyDeleteResponse(deleted=handle)
