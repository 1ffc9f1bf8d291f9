# 지원서 관련 스키마

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Union
from datetime import datetime

class ApplyRequest(BaseModel):
    user_id: Optional[Union[str, int]] = Field(None, description="지원자 ID (문자열 또는 숫자)")
    resume_link: Optional[str] = Field(None, description="이력서 링크")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ApplicationCreate(BaseModel):
    job_id: str
    user_id: Optional[Union[str, int]] = None
    resume_link: Optional[str] = None
    applied_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ApplicationCreatedResponse(BaseModel):
    success: bool = True
    message: str = "Application submitted successfully"
    application_id: str = Field(..., alias="applicationId")

    model_config = ConfigDict(populate_by_name=True)
