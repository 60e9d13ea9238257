"""객실 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 처리를 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.room import RoomCreate, RoomUpdate, RoomOut
from app.services import room_service

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get("", response_model=List[RoomOut])
def list_rooms(db: Session = Depends(get_db)):
    return room_service.get_rooms(db)


@router.post("", response_model=RoomOut)
def create_room(data: RoomCreate, db: Session = Depends(get_db)):
    return room_service.create_room(db, data)


@router.get("/{room_id}", response_model=RoomOut)
def get_room(room_id: int, db: Session = Depends(get_db)):
    return room_service.get_room(db, room_id)


@router.put("/{room_id}", response_model=RoomOut)
def update_room(room_id: int, data: RoomUpdate, db: Session = Depends(get_db)):
    return room_service.update_room(db, room_id, data)


@router.delete("/{room_id}")
def delete_room(room_id: int, db: Session = Depends(get_db)):
    room_service.delete_room(db, room_id)
    return {"message": "Room deleted successfully"}
