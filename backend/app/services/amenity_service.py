"""Amenity 도메인 서비스 레이어입니다."""

from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.models.amenity import Amenity
from app.schemas.amenity import AmenityCreate, AmenityUpdate
from app.services.hotel_service import current_hotel_id


def get_amenities(db: Session):
    return db.query(Amenity).order_by(Amenity.created_at.desc(), Amenity.amenity_id.desc()).all()


def get_amenity(db: Session, amenity_id: int) -> Amenity:
    amenity = db.query(Amenity).filter(Amenity.amenity_id == amenity_id).first()
    if not amenity:
        raise HTTPException(status_code=404, detail="Amenity not found.")
    return amenity


def create_amenity(db: Session, data: AmenityCreate) -> Amenity:
    amenity = Amenity(hotel_id=current_hotel_id(db), **data.model_dump())
    db.add(amenity)
    db.commit()
    db.refresh(amenity)
    return amenity


def update_amenity(db: Session, amenity_id: int, data: AmenityUpdate) -> Amenity:
    amenity = get_amenity(db, amenity_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(amenity, k, v)
    db.commit()
    db.refresh(amenity)
    return amenity


def delete_amenity(db: Session, amenity_id: int):
    amenity = get_amenity(db, amenity_id)
    db.delete(amenity)
    db.commit()
