from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Testimonial(Base):
    __tablename__ = "testimonials"

    testimonial_id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey("hotels.hotel_id"), nullable=True)
    guest_name = Column(String(200), nullable=False)
    guest_location = Column(String(200))
    review_text = Column(Text, nullable=False)
    rating = Column(Integer)  # 1~5
    guest_image_url = Column(String(1000))
    created_at = Column(DateTime, server_default=func.now())

    hotel = relationship("Hotel", back_populates="testimonials")
