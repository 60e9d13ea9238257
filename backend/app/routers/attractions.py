"""주변 관광지 API 라우터입니다. 요청을 검증하고 서비스 레이어로 처리를 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.attraction import AttractionCreate, AttractionUpdate, AttractionOut
from app.services import attraction_service

router = APIRouter(prefix="/api/attractions", tags=["attractions"])


@router.get("", response_model=List[AttractionOut])
def list_attractions(db: Session = Depends(get_db)):
    return attraction_service.get_attractions(db)


@router.post("", response_model=AttractionOut)
def create_attraction(data: AttractionCreate, db: Session = Depends(get_db)):
    return attraction_service.create_attraction(db, data)


@router.get("/{attraction_id}", response_model=AttractionOut)
def get_attraction(attraction_id: int, db: Session = Depends(get_db)):
    return attraction_service.get_attraction(db, attraction_id)


@router.put("/{attraction_id}", response_model=AttractionOut)
def update_attraction(attraction_id: int, data: AttractionUpdate, db: Session = Depends(get_db)):
    return attraction_service.update_attraction(db, attraction_id, data)


@router.delete("/{attraction_id}")
def delete_attraction(attraction_id: int, db: Session = Depends(get_db)):
    attraction_service.delete_attraction(db, attraction_id)
    return {"message": "Attraction deleted successfully"}
