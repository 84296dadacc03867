import hmac
import logging
from datetime import datetime, UTC, timedelta
from typing import Annotated

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings
from utils.errors import UnauthorizedError, ForbiddenError

logger = logging.getLogger(__name__)

# Bearer 토큰 (없어도 익명 요청으로 통과)
security = HTTPBearer(auto_error=False)


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
    return bcrypt.hashpw(prehashed, bcrypt.gensalt()).decode()


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


def create_token(user: dict) -> str:
    """유저 정보로 토큰 발급 (username, isAdmin 포함)"""
    return create_access_token(
        data={"username": user["username"], "isAdmin": bool(user.get("isAdmin", False))}
    )


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
) -> dict | None:
    """토큰이 있으면 payload, 없으면 None (익명)"""
    if credentials is None:
        return None
    payload = decode_access_token(credentials.credentials)
    if not payload.get("username"):
        raise UnauthorizedError("invalid token")
    return payload


CurrentUser = Annotated[dict | None, Depends(get_current_user)]


def ensure_logged_in(user: CurrentUser) -> dict:
    if user is None:
        raise UnauthorizedError("Unauthorized")
    return user


def ensure_admin(user: CurrentUser) -> dict:
    """관리자만 허용 (로그인 안 했으면 401, 관리자가 아니면 403)"""
    user = ensure_logged_in(user)
    if not user.get("isAdmin"):
        logger.warning("Non-admin access denied: %s", user["username"])
        raise ForbiddenError("Admin only")
    return user


def ensure_correct_user_or_admin(username: str, user: CurrentUser) -> dict:
    """경로의 username 본인 또는 관리자만 허용"""
    user = ensure_logged_in(user)
    if not (user.get("isAdmin") or user["username"] == username):
        logger.warning("Access to %s denied for %s", username, user["username"])
        raise ForbiddenError("Not authorized")
    return user
