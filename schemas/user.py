from typing import Annotated

from pydantic import ConfigDict, EmailStr, StringConstraints, model_validator

from schemas.commons import CamelModel, Username, Name, JobId

Password = Annotated[
    str,
    StringConstraints(
        min_length=5,
        max_length=64,
    ),
]


class UserRegisterRequest(CamelModel):
    """회원가입 (관리자 권한은 지정 불가)"""
    model_config = ConfigDict(extra='forbid')

    username: Username
    password: Password
    first_name: Name
    last_name: Name
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """관리자가 사용자 생성"""
    is_admin: bool = False


class UserLoginRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    username: Username
    password: str


class UserUpdateRequest(CamelModel):
    """username, isAdmin은 수정 불가"""
    model_config = ConfigDict(extra='forbid')

    first_name: Name | None = None
    last_name: Name | None = None
    password: Password | None = None
    email: EmailStr | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        """
        PATCH 요청에서 "미전송" vs "명시적 null 전송"을 구분하기 위해
        사용자가 실제로 보낸 필드 집합(model_fields_set)을 기준으로 검사
        """
        for field in self.model_fields_set:
            if getattr(self, field) is None:
                raise ValueError(f"{field}은 null로 설정할 수 없습니다.")
        return self


class User(CamelModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False


class UserDetail(User):
    jobs: list[JobId] = []


class TokenResponse(CamelModel):
    token: str


class UserCreateResponse(CamelModel):
    user: User
    token: str


class UserResponse(CamelModel):
    user: User


class UserDetailResponse(CamelModel):
    user: UserDetail


class UserListResponse(CamelModel):
    users: list[User]


class UserDeleteResponse(CamelModel):
    deleted: str


class ApplicationResponse(CamelModel):
    applied: JobId
