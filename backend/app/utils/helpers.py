from typing import List

from fastapi import UploadFile, HTTPException
from app.config import settings
from app.services.image_upload_service import UploadRequest


def validate_image_file(file: UploadFile) -> None:
    filename = file.filename or ""
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    allowed = {e.lower() for e in settings.ALLOWED_IMAGE_EXTENSIONS}
    if ext not in allowed:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{ext}' not allowed. Allowed: {', '.join(sorted(allowed))}",
        )


def validate_container(container: str) -> str:
    name = (container or "").strip()
    if name not in settings.IMAGE_CONTAINERS:
        raise HTTPException(status_code=400, detail=f"Unknown image container '{name}'.")
    return name


async def read_image_uploads(files: List[UploadFile]) -> List[UploadRequest]:
    """저장소로 보내기 전에 모든 파일을 검증하고 읽어 둡니다."""
    for file in files:
        validate_image_file(file)

    limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
    requests: List[UploadRequest] = []
    for file in files:
        content = await file.read()
        if len(content) > settings.MAX_UPLOAD_SIZE:
            raise HTTPException(status_code=400, detail=f"'{file.filename}' exceeds {limit_mb} MB limit")
        requests.append(UploadRequest(filename=file.filename, content=content, content_type=file.content_type))
    return requests
