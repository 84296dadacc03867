"""애플리케이션 공통 예외

라우터/레포지토리에서 raise 하면 main.py 의 핸들러가
{"detail": message} 형태의 응답으로 변환한다.
"""
from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidInputError(BadRequestError):
    """수정할 데이터가 비어 있는 경우"""


class InvalidRangeError(BadRequestError):
    """최솟값이 최댓값보다 큰 필터 조건"""


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
