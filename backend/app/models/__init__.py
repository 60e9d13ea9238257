"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.hotel import Hotel
from app.models.room import Room
from app.models.amenity import Amenity
from app.models.attraction import Attraction
from app.models.testimonial import Testimonial
from app.models.gallery import GalleryItem

__all__ = [
    "Hotel",
    "Room",
    "Amenity",
    "Attraction",
    "Testimonial",
    "GalleryItem",
]
