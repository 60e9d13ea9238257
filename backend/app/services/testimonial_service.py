"""투숙객 후기 도메인 서비스 레이어입니다."""

from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.models.testimonial import Testimonial
from app.schemas.testimonial import TestimonialCreate, TestimonialUpdate
from app.services.hotel_service import current_hotel_id


def get_testimonials(db: Session):
    return (
        db.query(Testimonial)
        .order_by(Testimonial.created_at.desc(), Testimonial.testimonial_id.desc())
        .all()
    )


def get_testimonial(db: Session, testimonial_id: int) -> Testimonial:
    testimonial = db.query(Testimonial).filter(Testimonial.testimonial_id == testimonial_id).first()
    if not testimonial:
        raise HTTPException(status_code=404, detail="Testimonial not found.")
    return testimonial


def create_testimonial(db: Session, data: TestimonialCreate) -> Testimonial:
    testimonial = Testimonial(hotel_id=current_hotel_id(db), **data.model_dump())
    db.add(testimonial)
    db.commit()
    db.refresh(testimonial)
    return testimonial


def update_testimonial(db: Session, testimonial_id: int, data: TestimonialUpdate) -> Testimonial:
    testimonial = get_testimonial(db, testimonial_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(testimonial, k, v)
    db.commit()
    db.refresh(testimonial)
    return testimonial


def delete_testimonial(db: Session, testimonial_id: int):
    testimonial = get_testimonial(db, testimonial_id)
    db.delete(testimonial)
    db.commit()
