from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie

from job_portal.config import settings
from job_portal.database.gateway import StorageGateway, parse_object_id
from job_portal.models import JobDocument, ApplicationDocument, NotificationDocument, document_models
from job_portal.schemas.job import JobCreate, JobResponse
from job_portal.schemas.application import ApplicationCreate
from job_portal.schemas.notification import NotificationCreate, NotificationResponse
from job_portal.utils.logger import storage_logger

# 요청이 무한정 대기하지 않도록 서버 선택/소켓 타임아웃 지정
motor_client = AsyncIOMotorClient(
    settings.MONGODB_URI,
    serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
    socketTimeoutMS=settings.MONGO_TIMEOUT_MS,
)

async def init_mongo():
    await init_beanie(
        database=motor_client[settings.MONGO_DB_NAME],
        document_models=document_models,
    )
    storage_logger.info(f"MongoDB 초기화 완료: db={settings.MONGO_DB_NAME}")

async def close_mongo():
    """MongoDB 연결을 안전하게 종료합니다."""
    if motor_client:
        motor_client.close()


class MongoGateway(StorageGateway):
    """Beanie 문서 모델 기반 저장소 구현"""

    async def insert_job(self, job: JobCreate) -> str:
        doc = JobDocument(**job.model_dump())
        await doc.insert()
        return str(doc.id)

    async def find_jobs(self) -> List[JobResponse]:
        docs = await JobDocument.find_all().to_list()
        return [self._to_job(doc) for doc in docs]

    async def find_job(self, job_id: str) -> Optional[JobResponse]:
        doc = await JobDocument.get(parse_object_id(job_id))
        if doc is None:
            return None
        return self._to_job(doc)

    async def insert_application(self, application: ApplicationCreate) -> str:
        doc = ApplicationDocument(**application.model_dump())
        await doc.insert()
        return str(doc.id)

    async def insert_notification(self, notification: NotificationCreate) -> str:
        doc = NotificationDocument(**notification.model_dump())
        await doc.insert()
        return str(doc.id)

    async def find_notifications(self, user_id: str) -> List[NotificationResponse]:
        docs = await NotificationDocument.find(NotificationDocument.user_id == user_id).to_list()
        return [
            NotificationResponse(id=str(doc.id), **doc.model_dump(exclude={"id", "revision_id"}))
            for doc in docs
        ]

    @staticmethod
    def _to_job(doc: JobDocument) -> JobResponse:
        return JobResponse(id=str(doc.id), **doc.model_dump(exclude={"id", "revision_id"}))
