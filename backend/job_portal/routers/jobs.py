from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from typing import List, Optional
from job_portal.database import get_gateway
from job_portal.database.gateway import StorageGateway
from job_portal.schemas.job import JobResponse, JobCreatedResponse
from job_portal.services.job_service import JobService
from job_portal.utils.exceptions import AppException, InternalServerException
from job_portal.utils.logger import job_logger
from job_portal.utils.uploads import save_upload

router = APIRouter(prefix="/jobs", tags=["jobs"])

# 폼 필드명 -> 서비스 필드명
JOB_FORM_FIELDS = {
    "companyName": "company_name",
    "designation": "designation",
    "salary": "salary",
    "location": "location",
    "hours": "hours",
    "responsibilities": "responsibilities",
    "userId": "user_id",
}

@router.post(
    "",
    response_model=JobCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="채용공고 등록",
    description="""
    multipart/form-data 로 채용공고를 등록합니다.\n
    - 텍스트 필드: `companyName`, `designation`, `salary`, `location`, `hours`, `responsibilities`, `userId`(선택)\n
    - `companyLogo` 파일은 선택이며, 업로드 시 `/uploads/<파일명>` 으로 제공됩니다.\n
    - `salary` 는 숫자로 변환되며 변환 실패 시 null 로 저장됩니다.\n
    - 필수값 검증은 하지 않습니다. 빈 문자열은 그대로, 누락된 필드는 null 로 저장됩니다.
    """
)
async def create_job(
    request: Request,
    company_logo: Optional[UploadFile] = File(None, alias="companyLogo"),
    gateway: StorageGateway = Depends(get_gateway)
):
    try:
        # Form() 파라미터는 빈 문자열을 기본값으로 바꾸므로 원본 폼 값을 직접 읽는다
        form = await request.form()
        fields = {}
        for key, name in JOB_FORM_FIELDS.items():
            value = form.get(key)
            fields[name] = value if isinstance(value, str) else None

        filename = await save_upload(company_logo)
        job_id = await JobService(gateway).create_job(fields, company_logo=filename)
        return JobCreatedResponse(job_id=job_id)
    except AppException:
        raise
    except Exception as e:
        job_logger.error(f"채용공고 등록 실패: {str(e)}")
        raise InternalServerException("Failed to post job")

@router.get(
    "",
    response_model=List[JobResponse],
    summary="전체 채용공고 조회",
    description="등록된 모든 채용공고를 조회합니다. 필터/페이징/정렬은 지원하지 않습니다."
)
async def list_jobs(gateway: StorageGateway = Depends(get_gateway)):
    try:
        jobs = await JobService(gateway).list_jobs()
        job_logger.info(f"채용공고 조회 완료: {len(jobs)}건")
        return jobs
    except Exception as e:
        job_logger.error(f"채용공고 조회 실패: {str(e)}")
        raise InternalServerException("Failed to fetch jobs")

@router.get(
    "/{job_id}",
    response_model=JobResponse,
    summary="채용공고 상세 조회",
    description="""
특정 채용공고의 상세 정보를 조회합니다.

- `job_id` 가 ObjectId 형식이 아니면 400 오류를 반환합니다.
- `job_id` 에 해당하는 채용공고가 존재하지 않으면 404 오류를 반환합니다.
"""
)
async def get_job(job_id: str, gateway: StorageGateway = Depends(get_gateway)):
    try:
        job = await JobService(gateway).get_job(job_id)
        job_logger.info(f"채용공고 상세 조회 완료: job_id={job_id}")
        return job
    except AppException:
        raise
    except Exception as e:
        job_logger.error(f"채용공고 상세 조회 실패: job_id={job_id}, 오류: {str(e)}")
        raise InternalServerException("Failed to get job")
