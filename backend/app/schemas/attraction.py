from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class AttractionBase(BaseModel):
    name: str
    description: Optional[str] = None
    distance: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None


class AttractionCreate(AttractionBase):
    pass


class AttractionUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    distance: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None


class AttractionOut(AttractionBase):
    attraction_id: int
    hotel_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
