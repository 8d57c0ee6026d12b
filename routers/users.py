from fastapi import APIRouter, Depends, status

from crud import user as user_crud
from schemas.commons import DBConnection, JobIdPath
from schemas.user import (
    User,
    UserDetail,
    UserCreateRequest,
    UserUpdateRequest,
    UserCreateResponse,
    UserResponse,
    UserDetailResponse,
    UserListResponse,
    UserDeleteResponse,
    ApplicationResponse,
)
from utils.auth import create_token, ensure_admin, ensure_correct_user_or_admin

router = APIRouter(
    tags=["USERS"],
)


@router.post("/users", response_model=UserCreateResponse,
             status_code=status.HTTP_201_CREATED, dependencies=[Depends(ensure_admin)])
async def create_user(user: UserCreateRequest, conn: DBConnection) -> UserCreateResponse:
    """
    관리자가 사용자 생성
    - 일반 회원가입은 /auth/register
    - 관리자 계정 생성 가능
    """
    new_user = await user_crud.register(conn, user)
    token = create_token(new_user["username"], new_user["is_admin"])
    return UserCreateResponse(user=User.model_validate(new_user), token=token)


@router.get("/users", response_model=UserListResponse,
            dependencies=[Depends(ensure_admin)])
async def get_users(conn: DBConnection) -> UserListResponse:
    """전체 사용자 목록 (관리자)"""
    users = await user_crud.find_all(conn)
    return UserListResponse(users=[User.model_validate(u) for u in users])


@router.get("/users/{username}", response_model=UserDetailResponse,
            dependencies=[Depends(ensure_correct_user_or_admin)])
async def get_user(username: str, conn: DBConnection) -> UserDetailResponse:
    """사용자 상세 (본인 또는 관리자)"""
    user = await user_crud.get(conn, username)
    return UserDetailResponse(user=UserDetail.model_validate(user))


@router.patch("/users/{username}", response_model=UserResponse,
              dependencies=[Depends(ensure_correct_user_or_admin)])
async def update_user(username: str, update_data: UserUpdateRequest, conn: DBConnection) -> UserResponse:
    """사용자 정보 수정 (본인 또는 관리자)"""
    update_fields = update_data.model_dump(by_alias=True, exclude_unset=True)
    user = await user_crud.update(conn, username, update_fields)
    return UserResponse(user=User.model_validate(user))


@router.delete("/users/{username}", response_model=UserDeleteResponse,
               dependencies=[Depends(ensure_correct_user_or_admin)])
async def delete_user(username: str, conn: DBConnection) -> UserDeleteResponse:
    """회원 탈퇴 (본인 또는 관리자)"""
    await user_crud.remove(conn, username)
    return UserDeleteResponse(deleted=username)


@router.post("/users/{username}/jobs/{job_id}", response_model=ApplicationResponse,
             dependencies=[Depends(ensure_correct_user_or_admin)])
async def apply_to_job(username: str, job_id: JobIdPath, conn: DBConnection) -> ApplicationResponse:
    """채용공고 지원 (본인 또는 관리자)"""
    await user_crud.apply_to_job(conn, username, job_id)
    return ApplicationResponse(applied=job_id)
