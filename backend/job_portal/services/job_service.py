from typing import List, Optional, Dict, Any

from job_portal.database.gateway import StorageGateway, InvalidIdentifier
from job_portal.schemas.job import JobCreate, JobResponse
from job_portal.utils.exceptions import NotFoundException, InvalidIdException
from job_portal.utils.logger import job_logger
from job_portal.utils.text_utils import parse_salary


class JobService:
    """채용공고 등록/조회 서비스"""

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    async def create_job(self, fields: Dict[str, Any], company_logo: Optional[str] = None) -> str:
        """
        채용공고를 저장하고 생성된 ID 를 반환합니다.

        필수값 검증은 하지 않으며, 누락된 필드는 null 로 저장됩니다.
        salary 는 숫자로 변환하고 실패 시 null 로 저장합니다.
        """
        job = JobCreate(
            company_name=fields.get("company_name"),
            designation=fields.get("designation"),
            salary=parse_salary(fields.get("salary")),
            location=fields.get("location"),
            hours=fields.get("hours"),
            responsibilities=fields.get("responsibilities"),
            company_logo=company_logo,
            user_id=fields.get("user_id"),
        )
        job_id = await self.gateway.insert_job(job)
        job_logger.info(f"채용공고 등록 완료: job_id={job_id}, logo={company_logo}")
        return job_id

    async def list_jobs(self) -> List[JobResponse]:
        return await self.gateway.find_jobs()

    async def get_job(self, job_id: str) -> JobResponse:
        """ID 로 채용공고 조회. 형식 오류는 400, 미존재는 404."""
        try:
            job = await self.gateway.find_job(job_id)
        except InvalidIdentifier:
            job_logger.warning(f"잘못된 채용공고 ID 형식: {job_id}")
            raise InvalidIdException(job_id)

        if job is None:
            job_logger.warning(f"채용공고를 찾을 수 없음: job_id={job_id}")
            raise NotFoundException("Job", "Job not found")
        return job
