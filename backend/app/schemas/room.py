"""Room 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class RoomBase(BaseModel):
    name: str
    description: Optional[str] = None
    price: Optional[float] = None
    currency: str = "INR"
    images: List[str] = Field(default_factory=list)
    amenities: List[str] = Field(default_factory=list)
    max_occupancy: Optional[int] = None
    room_size: Optional[str] = None


class RoomCreate(RoomBase):
    pass


class RoomUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    images: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    max_occupancy: Optional[int] = None
    room_size: Optional[str] = None


class RoomOut(BaseModel):
    room_id: int
    hotel_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    images: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    max_occupancy: Optional[int] = None
    room_size: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
