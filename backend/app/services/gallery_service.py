"""Gallery 도메인 서비스 레이어입니다. 저장되는 한 행은 정확히 한 장의 이미지를 가집니다."""

from typing import List, Optional

from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.models.gallery import GalleryItem
from app.schemas.gallery import GalleryItemsCreate, GalleryItemUpdate
from app.services.hotel_service import current_hotel_id

TEXT_FIELDS = ("title", "description", "category")


def _require_images(images: Optional[List[str]]) -> List[str]:
    cleaned = [url.strip() for url in images or [] if url and url.strip()]
    if not cleaned:
        raise HTTPException(status_code=400, detail="Please upload at least one image for the gallery")
    return cleaned


def _build_items(hotel_id, images: List[str], title, description, category) -> List[GalleryItem]:
    return [
        GalleryItem(
            hotel_id=hotel_id,
            image_url=url,
            title=title or None,
            description=description or None,
            category=category or None,
        )
        for url in images
    ]


def get_gallery_items(db: Session):
    return db.query(GalleryItem).order_by(GalleryItem.created_at.desc(), GalleryItem.item_id.desc()).all()


def get_gallery_item(db: Session, item_id: int) -> GalleryItem:
    item = db.query(GalleryItem).filter(GalleryItem.item_id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Gallery item not found.")
    return item


def create_gallery_items(db: Session, data: GalleryItemsCreate) -> List[GalleryItem]:
    images = _require_images(data.images)
    items = _build_items(current_hotel_id(db), images, data.title, data.description, data.category)
    db.add_all(items)
    db.commit()
    for item in items:
        db.refresh(item)
    return items


def update_gallery_item(db: Session, item_id: int, data: GalleryItemUpdate) -> List[GalleryItem]:
    """보낸 필드만 반영한다. images가 오면 첫 장은 이 행에, 나머지는 새 행으로 추가한다."""
    item = get_gallery_item(db, item_id)
    payload = data.model_dump(exclude_unset=True)

    for field in TEXT_FIELDS:
        if field in payload:
            setattr(item, field, payload[field] or None)

    extra: List[GalleryItem] = []
    if "images" in payload:
        images = _require_images(payload["images"])
        item.hotel_id = current_hotel_id(db)
        item.image_url = images[0]
        extra = _build_items(item.hotel_id, images[1:], item.title, item.description, item.category)
        db.add_all(extra)

    db.commit()
    for row in [item, *extra]:
        db.refresh(row)
    return [item, *extra]


def delete_gallery_item(db: Session, item_id: int):
    item = get_gallery_item(db, item_id)
    db.delete(item)
    db.commit()
