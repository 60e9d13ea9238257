"""Gallery 도메인의 SQLAlchemy 모델 정의입니다. 한 행이 이미지 한 장입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class GalleryItem(Base):
    __tablename__ = "gallery"

    item_id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey("hotels.hotel_id"), nullable=True)
    image_url = Column(String(1000), nullable=False)
    title = Column(String(200))
    description = Column(Text)
    category = Column(String(50))  # exterior/lobby/rooms/amenities/dining/events
    created_at = Column(DateTime, server_default=func.now())

    hotel = relationship("Hotel", back_populates="gallery_items")

    __table_args__ = (
        Index("idx_gallery_hotel", "hotel_id", "created_at"),
    )
