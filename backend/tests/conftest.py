import os
import tempfile
from typing import List, Optional

# job_portal.config 를 import 하기 전에 업로드 경로를 임시 디렉터리로 지정
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="job_portal_uploads_"))

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from job_portal.database import get_gateway
from job_portal.database.gateway import StorageGateway, parse_object_id
from job_portal.main import app
from job_portal.schemas.job import JobCreate, JobResponse
from job_portal.schemas.application import ApplicationCreate
from job_portal.schemas.notification import NotificationCreate, NotificationResponse


class InMemoryGateway(StorageGateway):
    """테스트용 메모리 저장소. fail_on 에 메서드명을 넣으면 해당 호출이 실패한다."""

    def __init__(self):
        self.jobs = {}
        self.applications = {}
        self.notifications = {}
        self.fail_on = set()

    def _check(self, name: str):
        if name in self.fail_on:
            raise RuntimeError(f"{name} failed")

    async def insert_job(self, job: JobCreate) -> str:
        self._check("insert_job")
        oid = ObjectId()
        self.jobs[oid] = job
        return str(oid)

    async def find_jobs(self) -> List[JobResponse]:
        self._check("find_jobs")
        return [JobResponse(id=str(oid), **job.model_dump()) for oid, job in self.jobs.items()]

    async def find_job(self, job_id: str) -> Optional[JobResponse]:
        self._check("find_job")
        oid = parse_object_id(job_id)
        job = self.jobs.get(oid)
        if job is None:
            return None
        return JobResponse(id=str(oid), **job.model_dump())

    async def insert_application(self, application: ApplicationCreate) -> str:
        self._check("insert_application")
        oid = ObjectId()
        self.applications[oid] = application
        return str(oid)

    async def insert_notification(self, notification: NotificationCreate) -> str:
        self._check("insert_notification")
        oid = ObjectId()
        self.notifications[oid] = notification
        return str(oid)

    async def find_notifications(self, user_id: str) -> List[NotificationResponse]:
        self._check("find_notifications")
        return [
            NotificationResponse(id=str(oid), **n.model_dump())
            for oid, n in self.notifications.items()
            if n.user_id == user_id
        ]


@pytest.fixture
def gateway():
    return InMemoryGateway()


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def job_form():
    return {
        "companyName": "Acme",
        "designation": "Engineer",
        "salary": "50000",
        "location": "Remote",
        "hours": "40",
        "responsibilities": "Build things",
    }
