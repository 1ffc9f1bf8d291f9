from typing import List

from job_portal.database.gateway import StorageGateway
from job_portal.schemas.notification import NotificationResponse


class NotificationService:
    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    async def list_notifications(self, user_id: str) -> List[NotificationResponse]:
        """해당 사용자에게 온 모든 알림 (읽음 여부 없음, 없으면 빈 리스트)"""
        return await self.gateway.find_notifications(user_id)
