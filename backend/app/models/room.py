from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Room(Base):
    __tablename__ = "rooms"

    room_id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey("hotels.hotel_id"), nullable=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    price = Column(Float)
    currency = Column(String(10), default="INR")
    images = Column(JSON)
    amenities = Column(JSON)
    max_occupancy = Column(Integer)
    room_size = Column(String(50))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    hotel = relationship("Hotel", back_populates="rooms")
