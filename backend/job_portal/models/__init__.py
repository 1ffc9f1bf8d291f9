from job_portal.models.job import JobDocument
from job_portal.models.application import ApplicationDocument
from job_portal.models.notification import NotificationDocument

# init_beanie 에 등록할 문서 모델 목록
document_models = [JobDocument, ApplicationDocument, NotificationDocument]
