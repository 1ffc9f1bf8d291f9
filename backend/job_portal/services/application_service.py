from datetime import datetime
from typing import Optional, Union

from job_portal.database.gateway import StorageGateway
from job_portal.schemas.application import ApplicationCreate
from job_portal.schemas.notification import NotificationCreate
from job_portal.services.job_service import JobService
from job_portal.utils.exceptions import OwnJobApplicationException
from job_portal.utils.logger import application_logger

NOTIFICATION_MESSAGE = "You have a new application for the job: {designation}"


class ApplicationService:
    """채용공고 지원 처리 및 공고 등록자 알림 생성"""

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway
        self.jobs = JobService(gateway)

    async def apply(self, job_id: str, user_id: Optional[Union[str, int]], resume_link: Optional[str]) -> str:
        # 1. 공고 조회 (형식 오류 400 / 미존재 404)
        job = await self.jobs.get_job(job_id)

        # 2. 본인 공고 지원 불가 (ID 값 비교, 타입이 다르면 다른 ID)
        if job.user_id == user_id:
            application_logger.warning(f"본인 공고 지원 시도: job_id={job_id}, user_id={user_id}")
            raise OwnJobApplicationException()

        now = datetime.utcnow()

        # 3. 지원서 저장
        application_id = await self.gateway.insert_application(
            ApplicationCreate(
                job_id=job_id,
                user_id=user_id,
                resume_link=resume_link,
                applied_at=now,
            )
        )

        # 4. 공고 등록자에게 알림 (트랜잭션 아님: 실패해도 지원서는 남음)
        await self.gateway.insert_notification(
            NotificationCreate(
                user_id=job.user_id,
                message=NOTIFICATION_MESSAGE.format(designation=job.designation),
                job_id=job_id,
                created_at=now,
            )
        )

        application_logger.info(
            f"지원 완료: application_id={application_id}, job_id={job_id}, 알림 대상={job.user_id}"
        )
        return application_id
