from typing import Optional
from datetime import datetime
from beanie import Document


class NotificationDocument(Document):
    user_id: Optional[str] = None  # 수신자 (공고 등록자)
    message: str
    job_id: str
    created_at: datetime

    class Settings:
        name = "notifications"
        indexes = ["user_id"]  # 사용자별 알림 조회
