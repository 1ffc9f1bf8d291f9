import logging
import sys
from typing import Optional

from job_portal.config import settings

def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """로거 설정 (레벨 미지정 시 설정값 LOG_LEVEL 사용)"""
    logger = logging.getLogger(name)

    if not logger.handlers:  # 중복 핸들러 방지
        logger.setLevel(level or logging.getLevelName(settings.LOG_LEVEL.upper()))

        # stdout 핸들러, 레벨은 로거에서만 거른다
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(console_handler)

    return logger

# 영역별 로거
app_logger = setup_logger("job_portal")
job_logger = setup_logger("jobs")
application_logger = setup_logger("applications")
notification_logger = setup_logger("notifications")
storage_logger = setup_logger("storage")
