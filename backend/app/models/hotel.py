"""호텔 프로필 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Hotel(Base):
    __tablename__ = "hotels"

    hotel_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    address = Column(String(500))
    phone = Column(String(50))
    email = Column(String(200))
    website = Column(String(500))
    images = Column(JSON)  # ordered list of public image URLs
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    rooms = relationship("Room", back_populates="hotel")
    amenities = relationship("Amenity", back_populates="hotel")
    attractions = relationship("Attraction", back_populates="hotel")
    testimonials = relationship("Testimonial", back_populates="hotel")
    gallery_items = relationship("GalleryItem", back_populates="hotel")
