from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.models.attraction import Attraction
from app.schemas.attraction import AttractionCreate, AttractionUpdate
from app.services.hotel_service import current_hotel_id


def get_attractions(db: Session):
    return db.query(Attraction).order_by(Attraction.created_at.desc(), Attraction.attraction_id.desc()).all()


def get_attraction(db: Session, attraction_id: int) -> Attraction:
    attraction = db.query(Attraction).filter(Attraction.attraction_id == attraction_id).first()
    if not attraction:
        raise HTTPException(status_code=404, detail="Attraction not found.")
    return attraction


def create_attraction(db: Session, data: AttractionCreate) -> Attraction:
    attraction = Attraction(hotel_id=current_hotel_id(db), **data.model_dump())
    db.add(attraction)
    db.commit()
    db.refresh(attraction)
    return attraction


def update_attraction(db: Session, attraction_id: int, data: AttractionUpdate) -> Attraction:
    attraction = get_attraction(db, attraction_id)
    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(attraction, k, v)
    db.commit()
    db.refresh(attraction)
    return attraction


def delete_attraction(db: Session, attraction_id: int):
    attraction = get_attraction(db, attraction_id)
    db.delete(attraction)
    db.commit()
