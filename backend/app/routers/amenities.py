from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.amenity import AmenityCreate, AmenityUpdate, AmenityOut
from app.services import amenity_service

router = APIRouter(prefix="/api/amenities", tags=["amenities"])


@router.get("", response_model=List[AmenityOut])
def list_amenities(db: Session = Depends(get_db)):
    return amenity_service.get_amenities(db)


@router.post("", response_model=AmenityOut)
def create_amenity(data: AmenityCreate, db: Session = Depends(get_db)):
    return amenity_service.create_amenity(db, data)


@router.get("/{amenity_id}", response_model=AmenityOut)
def get_amenity(amenity_id: int, db: Session = Depends(get_db)):
    return amenity_service.get_amenity(db, amenity_id)


@router.put("/{amenity_id}", response_model=AmenityOut)
def update_amenity(amenity_id: int, data: AmenityUpdate, db: Session = Depends(get_db)):
    return amenity_service.update_amenity(db, amenity_id, data)


@router.delete("/{amenity_id}")
def delete_amenity(amenity_id: int, db: Session = Depends(get_db)):
    amenity_service.delete_amenity(db, amenity_id)
    return {"message": "Amenity deleted successfully"}
