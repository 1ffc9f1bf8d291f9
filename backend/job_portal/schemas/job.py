from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

class JobBase(BaseModel):
    """채용공고 기본 필드 스키마 (응답은 camelCase 키 사용)"""
    company_name: Optional[str] = None
    designation: Optional[str] = None
    salary: Optional[float] = None
    location: Optional[str] = None
    hours: Optional[str] = None
    responsibilities: Optional[str] = None
    company_logo: Optional[str] = None
    user_id: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class JobCreate(JobBase):
    """저장용 채용공고 레코드"""
    created_at: datetime = Field(default_factory=datetime.utcnow)

class JobResponse(JobCreate):
    """채용공고 조회 응답"""
    id: str = Field(..., alias="_id")

class JobCreatedResponse(BaseModel):
    success: bool = True
    message: str = "Job posted successfully"
    job_id: str = Field(..., alias="jobId")

    model_config = ConfigDict(populate_by_name=True)
