"""투숙객 후기 API 라우터입니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.testimonial import TestimonialCreate, TestimonialUpdate, TestimonialOut
from app.services import testimonial_service

router = APIRouter(prefix="/api/testimonials", tags=["testimonials"])


@router.get("", response_model=List[TestimonialOut])
def list_testimonials(db: Session = Depends(get_db)):
    return testimonial_service.get_testimonials(db)


@router.post("", response_model=TestimonialOut)
def create_testimonial(data: TestimonialCreate, db: Session = Depends(get_db)):
    return testimonial_service.create_testimonial(db, data)


@router.get("/{testimonial_id}", response_model=TestimonialOut)
def get_testimonial(testimonial_id: int, db: Session = Depends(get_db)):
    return testimonial_service.get_testimonial(db, testimonial_id)


@router.put("/{testimonial_id}", response_model=TestimonialOut)
def update_testimonial(testimonial_id: int, data: TestimonialUpdate, db: Session = Depends(get_db)):
    return testimonial_service.update_testimonial(db, testimonial_id, data)


@router.delete("/{testimonial_id}")
def delete_testimonial(testimonial_id: int, db: Session = Depends(get_db)):
    testimonial_service.delete_testimonial(db, testimonial_id)
    return {"message": "Testimonial deleted successfully"}
