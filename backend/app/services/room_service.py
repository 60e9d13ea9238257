"""Room 도메인 서비스 레이어입니다."""

from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.models.room import Room
from app.schemas.room import RoomCreate, RoomUpdate
from app.services.hotel_service import current_hotel_id


def get_rooms(db: Session):
    return db.query(Room).order_by(Room.created_at.desc(), Room.room_id.desc()).all()


def get_room(db: Session, room_id: int) -> Room:
    room = db.query(Room).filter(Room.room_id == room_id).first()
    if not room:
        raise HTTPException(status_code=404, detail="Room not found.")
    return room


def _normalize_lists(payload: dict) -> dict:
    # 빈 목록은 손대지 않은 폼처럼 NULL로 저장한다.
    for key in ("images", "amenities"):
        if key in payload:
            values = [str(v).strip() for v in (payload[key] or []) if str(v).strip()]
            payload[key] = values or None
    return payload


def create_room(db: Session, data: RoomCreate) -> Room:
    payload = _normalize_lists(data.model_dump())
    room = Room(hotel_id=current_hotel_id(db), **payload)
    db.add(room)
    db.commit()
    db.refresh(room)
    return room


def update_room(db: Session, room_id: int, data: RoomUpdate) -> Room:
    room = get_room(db, room_id)
    payload = _normalize_lists(data.model_dump(exclude_unset=True))
    for k, v in payload.items():
        setattr(room, k, v)
    db.commit()
    db.refresh(room)
    return room


def delete_room(db: Session, room_id: int):
    room = get_room(db, room_id)
    db.delete(room)
    db.commit()
