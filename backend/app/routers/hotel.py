"""호텔 프로필 API 라우터입니다."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.hotel import HotelUpsert, HotelOut
from app.services import hotel_service

router = APIRouter(prefix="/api/hotel", tags=["hotel"])


@router.get("", response_model=Optional[HotelOut])
def get_hotel(db: Session = Depends(get_db)):
    return hotel_service.get_hotel(db)


@router.put("", response_model=HotelOut)
def upsert_hotel(data: HotelUpsert, db: Session = Depends(get_db)):
    return hotel_service.upsert_hotel(db, data)
