"""Gallery 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class GalleryItemsCreate(BaseModel):
    images: List[str] = Field(default_factory=list)
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


class GalleryItemUpdate(BaseModel):
    images: Optional[List[str]] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


class GalleryItemOut(BaseModel):
    item_id: int
    hotel_id: Optional[int] = None
    image_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
