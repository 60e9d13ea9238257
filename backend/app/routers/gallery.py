"""Gallery 기능 API 라우터입니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.gallery import GalleryItemsCreate, GalleryItemUpdate, GalleryItemOut
from app.services import gallery_service

router = APIRouter(prefix="/api/gallery", tags=["gallery"])


@router.get("", response_model=List[GalleryItemOut])
def list_gallery_items(db: Session = Depends(get_db)):
    return gallery_service.get_gallery_items(db)


@router.post("", response_model=List[GalleryItemOut])
def create_gallery_items(data: GalleryItemsCreate, db: Session = Depends(get_db)):
    return gallery_service.create_gallery_items(db, data)


@router.get("/{item_id}", response_model=GalleryItemOut)
def get_gallery_item(item_id: int, db: Session = Depends(get_db)):
    return gallery_service.get_gallery_item(db, item_id)


@router.put("/{item_id}", response_model=List[GalleryItemOut])
def update_gallery_item(item_id: int, data: GalleryItemUpdate, db: Session = Depends(get_db)):
    return gallery_service.update_gallery_item(db, item_id, data)


@router.delete("/{item_id}")
def delete_gallery_item(item_id: int, db: Session = Depends(get_db)):
    gallery_service.delete_gallery_item(db, item_id)
    return {"message": "Gallery item deleted successfully"}
