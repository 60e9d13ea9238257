"""이미지 업로드 API 라우터입니다. 요청을 검증하고 배치 업로더로 처리를 위임합니다."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from app.config import settings
from app.schemas.upload import ImageBatchUploadOut, ImageListOut, ImageRemoveRequest
from app.services.image_upload_service import (
    CapacityExceeded,
    IndexOutOfRange,
    MultiImageUploader,
    UploaderBusy,
    admit_selection,
    remove_at,
    uploader_registry,
)
from app.services.notification_service import ToastCollector
from app.services.storage_service import ObjectStore, get_object_store
from app.utils.helpers import read_image_uploads, validate_container

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/uploads", tags=["uploads"])


@router.post("/images/batch", response_model=ImageBatchUploadOut)
async def upload_images(
    container: str = Form(...),
    files: Optional[List[UploadFile]] = File(None),
    images: List[str] = Form([]),
    max_images: Optional[int] = Form(None),
    widget_id: Optional[str] = Form(None),
    label: str = Form("Images"),
    store: ObjectStore = Depends(get_object_store),
):
    container = validate_container(container)
    files = files or []
    if max_images is None:
        max_images = settings.DEFAULT_MAX_IMAGES
    if max_images <= 0:
        raise HTTPException(status_code=400, detail="max_images must be a positive integer.")

    # 첫 await 이전에 위젯을 점유한다.
    if widget_id:
        try:
            uploader = uploader_registry.claim(widget_id, store, container, max_images, label=label)
        except UploaderBusy:
            raise HTTPException(status_code=409, detail="An upload is already in progress for this form.")
    else:
        uploader = MultiImageUploader(store, container, max_images=max_images, label=label)

    toasts = ToastCollector()
    try:
        # 용량 검사는 본문을 읽거나 저장소로 보내기 전에 수행한다.
        admit_selection(images, files, max_images)
        requests = await read_image_uploads(files)
        merged = await uploader.select_files(images, requests, notifier=toasts)
    except CapacityExceeded as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except UploaderBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    finally:
        if widget_id:
            uploader_registry.release(widget_id, uploader)

    result = uploader.last_result if requests else None
    return {
        "images": merged,
        "uploaded_count": result.success_count if result else 0,
        "failed_count": result.failure_count if result else 0,
        "notifications": toasts.as_dicts(),
    }


@router.post("/images/remove", response_model=ImageListOut)
def remove_image(data: ImageRemoveRequest):
    try:
        return {"images": remove_at(data.images, data.index)}
    except IndexOutOfRange as exc:
        logger.warning("[upload] rejected remove: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
