"""이미지 업로드 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import List, Literal


class ToastOut(BaseModel):
    message: str
    severity: Literal["info", "success", "warning", "error"]


class ImageBatchUploadOut(BaseModel):
    images: List[str]
    uploaded_count: int
    failed_count: int
    notifications: List[ToastOut]


class ImageRemoveRequest(BaseModel):
    images: List[str]
    index: int


class ImageListOut(BaseModel):
    images: List[str]
