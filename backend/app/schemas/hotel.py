"""호텔 프로필 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class HotelBase(BaseModel):
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    images: List[str] = Field(default_factory=list)


class HotelUpsert(HotelBase):
    pass


class HotelOut(HotelBase):
    hotel_id: int
    images: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
