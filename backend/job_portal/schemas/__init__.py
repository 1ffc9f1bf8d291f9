from .job import JobBase, JobCreate, JobResponse, JobCreatedResponse
from .application import ApplyRequest, ApplicationCreate, ApplicationCreatedResponse
from .notification import NotificationCreate, NotificationResponse

__all__ = [
    "JobBase",
    "JobCreate",
    "JobResponse",
    "JobCreatedResponse",
    "ApplyRequest",
    "ApplicationCreate",
    "ApplicationCreatedResponse",
    "NotificationCreate",
    "NotificationResponse",
]
