"""주변 관광지 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Attraction(Base):
    __tablename__ = "attractions"

    attraction_id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey("hotels.hotel_id"), nullable=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    distance = Column(String(50))
    category = Column(String(50))  # historical/religious/transport/shopping/natural/entertainment
    image_url = Column(String(1000))
    created_at = Column(DateTime, server_default=func.now())

    hotel = relationship("Hotel", back_populates="attractions")
