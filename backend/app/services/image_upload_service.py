"""관리자 패널의 모든 다중 이미지 폼이 사용하는 배치 이미지 업로더입니다.

위젯 하나의 흐름은 ``max_images`` 기준 허용 검사, 선택한 파일 전체의 동시 업로드,
생성된 URL을 순서대로 기존 이미지 목록에 병합하는 단계로 이루어집니다.
목록 연산은 모두 새 목록을 반환하며 전달받은 목록은 변경하지 않습니다.
"""

import asyncio
import enum
import logging
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from app.services.notification_service import Notifier
from app.services.storage_service import ObjectStore

logger = logging.getLogger(__name__)


class CapacityExceeded(Exception):
    def __init__(self, current_count: int, selected_count: int, max_images: int):
        self.current_count = current_count
        self.selected_count = selected_count
        self.max_images = max_images
        super().__init__(f"Maximum {max_images} images allowed")


class IndexOutOfRange(IndexError):
    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Image index {index} is out of range for a list of {length}")


class UploaderBusy(Exception):
    """해당 위젯에서 이미 배치 업로드가 진행 중입니다."""


class UploaderState(str, enum.Enum):
    IDLE = "idle"
    UPLOADING = "uploading"


@dataclass(frozen=True)
class UploadRequest:
    filename: str
    content: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class UploadOutcome:
    index: int
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.url is not None


@dataclass(frozen=True)
class AdmissionResult:
    current_count: int
    selected_count: int
    max_images: int

    @property
    def remaining(self) -> int:
        return self.max_images - self.current_count - self.selected_count


@dataclass
class UploadBatchResult:
    outcomes: List[UploadOutcome]

    @property
    def total_count(self) -> int:
        return len(self.outcomes)

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failure_count(self) -> int:
        return self.total_count - self.success_count


def build_storage_key(filename: str) -> str:
    name = (filename or "").rsplit("/", 1)[-1]
    ext = name.rsplit(".", 1)[-1].lower() if "." in name else ""
    return f"{uuid.uuid4().hex}.{ext or 'bin'}"


def admit_selection(current: Sequence[str], selected: Sequence, max_images: int) -> AdmissionResult:
    if max_images <= 0:
        raise ValueError("max_images must be a positive integer")
    if len(current) + len(selected) > max_images:
        raise CapacityExceeded(len(current), len(selected), max_images)
    return AdmissionResult(
        current_count=len(current),
        selected_count=len(selected),
        max_images=max_images,
    )


async def _upload_one(store: ObjectStore, container: str, index: int, request: UploadRequest) -> UploadOutcome:
    key = build_storage_key(request.filename)
    await store.upload(container, key, request.content, request.content_type)
    return UploadOutcome(index=index, url=store.public_url(container, key))


def _report_batch(notifier: Optional[Notifier], result: UploadBatchResult) -> None:
    if notifier is None or result.total_count == 0:
        return
    if result.success_count == 0:
        notifier.notify("Failed to upload images", "error")
    elif result.failure_count:
        notifier.notify(
            f"Uploaded {result.success_count} of {result.total_count} images; "
            f"{result.failure_count} failed",
            "warning",
        )
    else:
        notifier.notify(f"{result.success_count} image(s) uploaded successfully", "success")


async def upload_all(
    store: ObjectStore,
    container: str,
    selected: Sequence[UploadRequest],
    notifier: Optional[Notifier] = None,
) -> UploadBatchResult:
    """모든 파일을 동시에 업로드하고 제출 순서대로 결과를 반환합니다.

    한 업로드의 실패가 나머지를 취소하지 않도록 ``return_exceptions=True``로
    수집하며, 각 예외는 실패 결과로 변환됩니다.
    """
    settled = await asyncio.gather(
        *(_upload_one(store, container, i, req) for i, req in enumerate(selected)),
        return_exceptions=True,
    )

    outcomes: List[UploadOutcome] = []
    for index, item in enumerate(settled):
        if isinstance(item, BaseException):
            if not isinstance(item, Exception):
                raise item
            logger.warning(
                "[upload] %s failed for %s: %s",
                container, selected[index].filename, item,
            )
            outcomes.append(UploadOutcome(index=index, error=str(item) or type(item).__name__))
        else:
            outcomes.append(item)
    outcomes.sort(key=lambda o: o.index)

    result = UploadBatchResult(outcomes=outcomes)
    logger.info(
        "[upload] container=%s total=%d succeeded=%d failed=%d",
        container, result.total_count, result.success_count, result.failure_count,
    )
    _report_batch(notifier, result)
    return result


def merge_outcomes(current: Sequence[str], outcomes: Sequence[UploadOutcome]) -> List[str]:
    merged = list(current)
    merged.extend(o.url for o in outcomes if o.ok)
    return merged


def remove_at(current: Sequence[str], index: int) -> List[str]:
    if index < 0 or index >= len(current):
        raise IndexOutOfRange(index, len(current))
    return [url for i, url in enumerate(current) if i != index]


class MultiImageUploader:
    """위젯별 업로더입니다. ``Idle -> Uploading -> Idle`` 상태를 오가며 한 번에 한 배치만 처리합니다."""

    def __init__(
        self,
        store: ObjectStore,
        container: str,
        max_images: int = 10,
        label: str = "Images",
        notifier: Optional[Notifier] = None,
    ):
        if max_images <= 0:
            raise ValueError("max_images must be a positive integer")
        self.store = store
        self.container = container
        self.max_images = max_images
        self.label = label
        self.notifier = notifier
        self.state = UploaderState.IDLE
        self.last_result: Optional[UploadBatchResult] = None

    @property
    def is_uploading(self) -> bool:
        return self.state == UploaderState.UPLOADING

    def can_add_more(self, current: Sequence[str]) -> bool:
        return not self.is_uploading and len(current) < self.max_images

    async def select_files(
        self,
        current: Sequence[str],
        selected: Sequence[UploadRequest],
        notifier: Optional[Notifier] = None,
    ) -> List[str]:
        notifier = notifier or self.notifier
        if self.is_uploading:
            raise UploaderBusy(f"{self.label}: an upload is already in progress")
        if not selected:
            return list(current)

        try:
            admit_selection(current, selected, self.max_images)
        except CapacityExceeded as exc:
            if notifier is not None:
                notifier.notify(str(exc), "error")
            raise

        self.state = UploaderState.UPLOADING
        try:
            self.last_result = await upload_all(self.store, self.container, selected, notifier)
            return merge_outcomes(current, self.last_result.outcomes)
        finally:
            self.state = UploaderState.IDLE

    def remove(self, current: Sequence[str], index: int) -> List[str]:
        return remove_at(current, index)


class UploaderRegistry:
    """위젯(폼)별 업로드 점유를 관리합니다. 한 위젯에는 한 번에 하나의 배치만 허용합니다."""

    def __init__(self):
        self._uploaders: Dict[str, MultiImageUploader] = {}

    def claim(
        self,
        widget_id: str,
        store: ObjectStore,
        container: str,
        max_images: int,
        label: str = "Images",
    ) -> MultiImageUploader:
        # await 없이 동기적으로 점유해야 같은 위젯의 요청끼리 끼어들 수 없다.
        if widget_id in self._uploaders:
            raise UploaderBusy(f"{label}: an upload is already in progress")
        uploader = MultiImageUploader(store, container, max_images=max_images, label=label)
        self._uploaders[widget_id] = uploader
        return uploader

    def release(self, widget_id: str, uploader: MultiImageUploader) -> None:
        if self._uploaders.get(widget_id) is uploader:
            del self._uploaders[widget_id]

    def is_claimed(self, widget_id: str) -> bool:
        return widget_id in self._uploaders

    def __len__(self) -> int:
        return len(self._uploaders)


uploader_registry = UploaderRegistry()
