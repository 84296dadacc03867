import re

from pydantic import EmailStr, StringConstraints, AfterValidator
from typing import Annotated

from schemas.commons import CamelModel, CamelRequest, JobId, Username

SPECIAL_CHARS = r"!\"#$%&'()*+,\-./:;<=>?@\[₩\]\^_`{|}~"
_RE_UPPER = re.compile(r"[A-Z]")
_RE_LOWER = re.compile(r"[a-z]")
_RE_DIGIT = re.compile(r"\d")
_RE_SPECIAL = re.compile(rf"[{SPECIAL_CHARS}]")


def validate_password(password: str) -> str:
    if not _RE_UPPER.search(password):
        raise ValueError("비밀번호에 대문자가 포함되어야 합니다")
    if not _RE_LOWER.search(password):
        raise ValueError("비밀번호에 소문자가 포함되어야 합니다")
    if not _RE_DIGIT.search(password):
        raise ValueError("비밀번호에 숫자가 포함되어야 합니다")
    if not _RE_SPECIAL.search(password):
        raise ValueError("비밀번호에 특수문자가 포함되어야 합니다")
    return password


Password = Annotated[
    str,
    StringConstraints(
        min_length=8,
        max_length=20,
    ),
    AfterValidator(validate_password),
]

PersonName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=30),
]


class UserRegisterRequest(CamelRequest):
    """회원가입 (관리자 여부는 지정 불가)"""
    username: Username
    password: Password
    first_name: PersonName
    last_name: PersonName
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """관리자가 직접 추가하는 유저 (관리자 지정 가능)"""
    is_admin: bool = False


class UserLoginRequest(CamelRequest):
    username: Username
    password: str


class TokenResponse(CamelModel):
    token: str


class User(CamelModel):
    username: Username
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False


class UserDetail(User):
    jobs: list[JobId] = []


class UserUpdateRequest(CamelRequest):
    """username, is_admin 은 수정 불가"""
    first_name: PersonName = None
    last_name: PersonName = None
    password: Password = None
    email: EmailStr = None


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
    deleted: Username


class ApplicationResponse(CamelModel):
    applied: JobId
