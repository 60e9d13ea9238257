"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 업로드 정적 경로를 등록합니다."""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.database import Base, engine
import app.models  # noqa: F401 - registers model metadata
from app.routers import (
    hotel, rooms, amenities, attractions, testimonials, gallery, uploads,
)

logging.basicConfig(
    level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Hotel Content Admin",
    description="Admin API for the hotel website: profile, rooms, amenities, attractions, testimonials and gallery",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(hotel.router)
app.include_router(rooms.router)
app.include_router(amenities.router)
app.include_router(attractions.router)
app.include_router(testimonials.router)
app.include_router(gallery.router)
app.include_router(uploads.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Hotel Content Admin", "storage_backend": settings.STORAGE_BACKEND}


# 로컬 저장 이미지 정적 서빙
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
