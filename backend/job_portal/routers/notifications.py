from fastapi import APIRouter, Depends
from typing import List
from job_portal.database import get_gateway
from job_portal.database.gateway import StorageGateway
from job_portal.schemas.notification import NotificationResponse
from job_portal.services.notification_service import NotificationService
from job_portal.utils.exceptions import InternalServerException
from job_portal.utils.logger import notification_logger

router = APIRouter(prefix="/notifications", tags=["notifications"])

@router.get(
    "/{user_id}",
    response_model=List[NotificationResponse],
    summary="사용자 알림 조회",
    description="해당 사용자(공고 등록자)에게 온 알림을 모두 조회합니다. 알림이 없으면 빈 리스트를 반환합니다."
)
async def list_notifications(user_id: str, gateway: StorageGateway = Depends(get_gateway)):
    try:
        notifications = await NotificationService(gateway).list_notifications(user_id)
        notification_logger.info(f"알림 조회 완료: user_id={user_id}, {len(notifications)}건")
        return notifications
    except Exception as e:
        notification_logger.error(f"알림 조회 실패: user_id={user_id}, 오류: {str(e)}")
        raise InternalServerException("Failed to fetch notifications")
