"""호텔 프로필 서비스 레이어입니다. 관리 패널은 정확히 하나의 호텔만 다룹니다."""

from typing import Optional

from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.config import settings
from app.models.hotel import Hotel
from app.schemas.hotel import HotelUpsert


def get_hotel(db: Session) -> Optional[Hotel]:
    if settings.HOTEL_ID is not None:
        return db.query(Hotel).filter(Hotel.hotel_id == settings.HOTEL_ID).first()
    return db.query(Hotel).order_by(Hotel.hotel_id.asc()).first()


def get_hotel_or_404(db: Session) -> Hotel:
    hotel = get_hotel(db)
    if not hotel:
        raise HTTPException(status_code=404, detail="Hotel profile has not been created yet.")
    return hotel


def current_hotel_id(db: Session) -> Optional[int]:
    hotel = get_hotel(db)
    return hotel.hotel_id if hotel else None


def upsert_hotel(db: Session, data: HotelUpsert) -> Hotel:
    payload = data.model_dump()
    hotel = get_hotel(db)
    if hotel is None:
        hotel = Hotel(**payload)
        db.add(hotel)
    else:
        for k, v in payload.items():
            setattr(hotel, k, v)
    db.commit()
    db.refresh(hotel)
    return hotel
