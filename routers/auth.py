from fastapi import APIRouter, status

from repositories import users
from schemas.commons import DBConnection
from schemas.user import TokenResponse, UserLoginRequest, UserRegisterRequest
from utils.auth import create_token

router = APIRouter(
    prefix="/auth",
    tags=["AUTH"],
)


@router.post("/token", response_model=TokenResponse)
async def get_auth_token(user: UserLoginRequest, conn: DBConnection) -> TokenResponse:
    """로그인"""
    db_user = await users.authenticate(conn, user.username, user.password)
    return TokenResponse(token=create_token(db_user))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(user: UserRegisterRequest, conn: DBConnection) -> TokenResponse:
    """회원가입 (일반 유저로만 가입 가능)"""
    new_user = await users.register(conn, user.model_dump(by_alias=True))
    return TokenResponse(token=create_token(new_user))
