from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

class NotificationCreate(BaseModel):
    user_id: Optional[str] = None
    message: str
    job_id: str
    created_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class NotificationResponse(NotificationCreate):
    id: str = Field(..., alias="_id")
