from fastapi import HTTPException, status
from typing import Any, Dict, Optional

class AppException(HTTPException):
    """애플리케이션 전용 예외 클래스"""
    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code

def create_error_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None
) -> Dict[str, Any]:
    """일관된 에러 응답 포맷 생성

    기존 클라이언트 호환을 위해 최상위 `message` 도 함께 내려준다.
    """
    return {
        "success": False,
        "message": message,
        "error": {
            "code": error_code or f"ERR_{status_code}",
            "message": message
        }
    }

# 자주 사용되는 에러들
class NotFoundException(AppException):
    def __init__(self, resource: str, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail or f"{resource} not found",
            error_code="NOT_FOUND"
        )

class BadRequestException(AppException):
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            error_code=error_code or "BAD_REQUEST"
        )

class InvalidIdException(BadRequestException):
    def __init__(self, value: str):
        super().__init__(
            message=f"Invalid id: {value}",
            error_code="INVALID_ID"
        )

class OwnJobApplicationException(BadRequestException):
    def __init__(self):
        super().__init__(
            message="You cannot apply for your own job",
            error_code="OWN_JOB"
        )

class InternalServerException(AppException):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
            error_code="INTERNAL_ERROR"
        )
