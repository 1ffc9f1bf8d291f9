from abc import ABC, abstractmethod
from typing import List, Optional

from bson import ObjectId

from job_portal.schemas.job import JobCreate, JobResponse
from job_portal.schemas.application import ApplicationCreate
from job_portal.schemas.notification import NotificationCreate, NotificationResponse


class InvalidIdentifier(ValueError):
    """ObjectId 형식이 아닌 식별자"""

    def __init__(self, value: str):
        super().__init__(f"'{value}' is not a valid ObjectId")
        self.value = value


def parse_object_id(value: str) -> ObjectId:
    """24자리 hex 문자열을 ObjectId 로 변환. 형식이 잘못되면 InvalidIdentifier."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifier(str(value))
    return ObjectId(value)


class StorageGateway(ABC):
    """jobs / applications / notifications 세 컬렉션에 대한 저장소 인터페이스"""

    @abstractmethod
    async def insert_job(self, job: JobCreate) -> str:
        ...

    @abstractmethod
    async def find_jobs(self) -> List[JobResponse]:
        ...

    @abstractmethod
    async def find_job(self, job_id: str) -> Optional[JobResponse]:
        """형식이 잘못된 ID 는 InvalidIdentifier, 없는 경우 None"""
        ...

    @abstractmethod
    async def insert_application(self, application: ApplicationCreate) -> str:
        ...

    @abstractmethod
    async def insert_notification(self, notification: NotificationCreate) -> str:
        ...

    @abstractmethod
    async def find_notifications(self, user_id: str) -> List[NotificationResponse]:
        ...
