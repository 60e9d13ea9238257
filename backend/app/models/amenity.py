from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Amenity(Base):
    __tablename__ = "amenities"

    amenity_id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey("hotels.hotel_id"), nullable=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    icon = Column(String(100))
    category = Column(String(50))
    created_at = Column(DateTime, server_default=func.now())

    hotel = relationship("Hotel", back_populates="amenities")
