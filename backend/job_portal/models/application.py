from typing import Optional, Union
from datetime import datetime
from beanie import Document
from pydantic import Field


class ApplicationDocument(Document):
    job_id: str = Field(..., description="지원한 채용공고 ID")
    user_id: Optional[Union[str, int]] = Field(None, description="지원자 ID (문자열 또는 숫자)")
    resume_link: Optional[str] = Field(None, description="이력서 링크")
    applied_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "applications"
