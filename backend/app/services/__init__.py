"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    notification_service,
    storage_service,
    image_upload_service,
    hotel_service,
    room_service,
    amenity_service,
    attraction_service,
    testimonial_service,
    gallery_service,
)
