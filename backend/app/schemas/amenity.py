from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class AmenityBase(BaseModel):
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None


class AmenityCreate(AmenityBase):
    pass


class AmenityUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None


class AmenityOut(AmenityBase):
    amenity_id: int
    hotel_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
