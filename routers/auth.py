from fastapi import APIRouter, status

from crud import user as user_crud
from schemas.commons import DBConnection
from schemas.user import UserLoginRequest, UserRegisterRequest, TokenResponse
from utils.auth import create_token

router = APIRouter(
    tags=["AUTH"],
)


@router.post("/auth/token", response_model=TokenResponse)
async def get_auth_token(user: UserLoginRequest, conn: DBConnection) -> TokenResponse:
    """로그인"""
    db_user = await user_crud.authenticate(conn, user.username, user.password)
    return TokenResponse(token=create_token(db_user["username"], db_user["is_admin"]))


@router.post("/auth/register", response_model=TokenResponse,
             status_code=status.HTTP_201_CREATED)
async def register(user: UserRegisterRequest, conn: DBConnection) -> TokenResponse:
    """회원가입 (일반 사용자)"""
    new_user = await user_crud.register(conn, user)
    return TokenResponse(token=create_token(new_user["username"], new_user["is_admin"]))
