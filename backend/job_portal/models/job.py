from typing import Optional
from datetime import datetime
from beanie import Document
from pydantic import Field


class JobDocument(Document):

    company_name: Optional[str] = Field(None, description="회사명")
    designation: Optional[str] = Field(None, description="직무명")
    salary: Optional[float] = Field(None, description="급여 (숫자 변환 실패 시 null)")
    location: Optional[str] = Field(None, description="근무지")
    hours: Optional[str] = Field(None, description="근무 시간")
    responsibilities: Optional[str] = Field(None, description="주요 업무")
    company_logo: Optional[str] = Field(None, description="업로드된 로고 파일명")
    user_id: Optional[str] = Field(None, description="공고 등록자 ID")

    created_at: datetime = Field(default_factory=datetime.utcnow, description="문서 생성 시각")

    class Settings:
        name = "jobs"
