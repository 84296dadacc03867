from fastapi import APIRouter, status

from repositories import users
from schemas.commons import AdminUser, CorrectUserOrAdmin, DBConnection, JobId, Username
from schemas.user import (
    ApplicationResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserDeleteResponse,
    UserDetailResponse,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from utils.auth import create_token

router = APIRouter(
    prefix="/users",
    tags=["USERS"],
)


@router.post("", response_model=UserCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_user(_: AdminUser, user: UserCreateRequest, conn: DBConnection) -> UserCreateResponse:
    """유저 추가 (관리자 전용, 회원가입은 /auth/register)"""
    new_user = await users.register(conn, user.model_dump(by_alias=True))
    return UserCreateResponse(user=new_user, token=create_token(new_user))


@router.get("", response_model=UserListResponse)
async def get_users(_: AdminUser, conn: DBConnection) -> UserListResponse:
    """전체 유저 목록 (관리자)"""
    return UserListResponse(users=await users.find_all(conn))


@router.get("/{username}", response_model=UserDetailResponse)
async def get_user(username: Username, _: CorrectUserOrAdmin, conn: DBConnection) -> UserDetailResponse:
    """유저 상세 (본인 또는 관리자)"""
    user = await users.get(conn, username)
    return UserDetailResponse(user=user)


@router.patch("/{username}", response_model=UserResponse)
async def update_user(
        username: Username, _: CorrectUserOrAdmin, update_data: UserUpdateRequest,
        conn: DBConnection) -> UserResponse:
    """유저 정보 수정 (본인 또는 관리자)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    user = await users.update(conn, username, update_fields)
    return UserResponse(user=user)


@router.delete("/{username}", response_model=UserDeleteResponse)
async def delete_user(username: Username, _: CorrectUserOrAdmin, conn: DBConnection) -> UserDeleteResponse:
    """회원 탈퇴 (본인 또는 관리자)"""
    await users.remove(conn, username)
    return UserDeleteResponse(deleted=username)


@router.post("/{username}/jobs/{job_id}", response_model=ApplicationResponse)
async def apply_to_job(
        username: Username, job_id: JobId, _: CorrectUserOrAdmin, conn: DBConnection) -> ApplicationResponse:
    """채용공고 지원 (본인 또는 관리자)"""
    await users.apply_to_job(conn, username, job_id)
    return ApplicationResponse(applied=job_id)
