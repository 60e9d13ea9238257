"""투숙객 후기 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class TestimonialBase(BaseModel):
    guest_name: str
    review_text: str
    guest_location: Optional[str] = None
    rating: Optional[int] = None
    guest_image_url: Optional[str] = None


class TestimonialCreate(TestimonialBase):
    pass


class TestimonialUpdate(BaseModel):
    guest_name: Optional[str] = None
    review_text: Optional[str] = None
    guest_location: Optional[str] = None
    rating: Optional[int] = None
    guest_image_url: Optional[str] = None


class TestimonialOut(TestimonialBase):
    testimonial_id: int
    hotel_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
