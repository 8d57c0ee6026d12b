import hmac
import logging
from datetime import datetime, UTC, timedelta
from typing import Annotated

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config import settings
from utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)

# Bearer 토큰은 선택 사항, 가드에서 직접 401 처리
security = HTTPBearer(auto_error=False)


class TokenUser(BaseModel):
    """토큰 payload에 담긴 사용자 정보"""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    is_admin: bool = Field(default=False, alias="isAdmin")


def _prehash(password: str) -> bytes:
    """
    HMAC-SHA256으로 사전 해싱
    - bcrypt 72바이트 제한 우회
    - PEPPER로 password shucking 공격 방지
    """
    return hmac.new(
        key=settings.password_pepper.encode(),
        msg=password.encode(),
        digestmod="sha256"
    ).hexdigest().encode()


def hash_password(password: str) -> str:
    prehashed = _prehash(password)
    return bcrypt.hashpw(prehashed, bcrypt.gensalt(rounds=settings.bcrypt_work_factor)).decode()


# 타이밍 공격 방지용 더미 해시
DUMMY_HASH = hash_password("dummy_password_for_timing_attack_prevention")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    prehashed = _prehash(plain_password)
    try:
        return bcrypt.checkpw(prehashed, hashed_password.encode())
    except ValueError:
        logger.warning("Invalid hash format detected")
        return False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def create_token(username: str, is_admin: bool = False) -> str:
    """사용자 토큰 발급 (payload: username, isAdmin)"""
    return create_access_token(data={"username": username, "isAdmin": is_admin})


def decode_access_token(token: str) -> dict:
    """token decoding"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("token is expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("invalid token")


def get_current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> TokenUser | None:
    """
    토큰이 유효하면 사용자 정보 반환, 없거나 유효하지 않으면 None
    - 여기서는 에러를 내지 않고 가드(ensure_*)가 판단
    """
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
        return TokenUser.model_validate(payload)
    except (UnauthorizedError, ValidationError):
        logger.debug("Ignoring invalid bearer token")
        return None


CurrentUser = Annotated[TokenUser | None, Depends(get_current_user)]


def ensure_logged_in(user: CurrentUser) -> TokenUser:
    """로그인 필수"""
    if user is None:
        raise UnauthorizedError()
    return user


def ensure_admin(user: CurrentUser) -> TokenUser:
    """관리자 전용"""
    if user is None or not user.is_admin:
        raise UnauthorizedError()
    return user


def ensure_correct_user_or_admin(username: str, user: CurrentUser) -> TokenUser:
    """본인 또는 관리자만 (username은 경로 파라미터)"""
    if user is None or not (user.is_admin or user.username == username):
        raise UnauthorizedError()
    return user
