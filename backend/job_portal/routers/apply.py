from fastapi import APIRouter, Depends, status
from job_portal.database import get_gateway
from job_portal.database.gateway import StorageGateway
from job_portal.schemas.application import ApplyRequest, ApplicationCreatedResponse
from job_portal.services.application_service import ApplicationService
from job_portal.utils.exceptions import AppException, InternalServerException
from job_portal.utils.logger import application_logger

router = APIRouter(prefix="/apply", tags=["applications"])

@router.post(
    "/{job_id}",
    response_model=ApplicationCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="채용공고 지원",
    description="""
    채용공고에 지원하고 공고 등록자에게 알림을 생성합니다.\n
    - 본인이 등록한 공고에는 지원할 수 없습니다 (400).\n
    - 공고가 없으면 404 를 반환합니다.
    """
)
async def apply_for_job(
    job_id: str,
    request: ApplyRequest,
    gateway: StorageGateway = Depends(get_gateway)
):
    try:
        application_id = await ApplicationService(gateway).apply(
            job_id, request.user_id, request.resume_link
        )
        return ApplicationCreatedResponse(application_id=application_id)
    except AppException:
        raise
    except Exception as e:
        application_logger.error(f"지원 처리 실패: job_id={job_id}, 오류: {str(e)}")
        raise InternalServerException("Failed to apply for the job")
