"""Batch image uploader: admission, concurrent ordered upload, merge and removal."""

import asyncio

import pytest

from app.services.image_upload_service import (
    CapacityExceeded,
    IndexOutOfRange,
    MultiImageUploader,
    UploadOutcome,
    UploadRequest,
    UploaderBusy,
    UploaderRegistry,
    UploaderState,
    admit_selection,
    build_storage_key,
    merge_outcomes,
    remove_at,
    upload_all,
)
from app.services.notification_service import ToastCollector
from tests.fakes import BlockingObjectStore, ScriptedObjectStore


def _files(*names):
    return [UploadRequest(filename=f"{name}.png", content=name.encode(), content_type="image/png") for name in names]


def test_build_storage_key_keeps_extension_and_is_unique():
    first = build_storage_key("Lobby Photo.JPG")
    second = build_storage_key("Lobby Photo.JPG")
    assert first.endswith(".jpg")
    assert first != second
    assert build_storage_key("no-extension").endswith(".bin")


def test_admit_selection_rejects_when_capacity_exceeded():
    with pytest.raises(CapacityExceeded) as exc_info:
        admit_selection(["a.png", "b.png"], _files("f1", "f2"), max_images=3)
    assert exc_info.value.max_images == 3
    assert str(exc_info.value) == "Maximum 3 images allowed"


def test_admit_selection_allows_exact_capacity_and_empty_selection():
    result = admit_selection(["a.png"], _files("f1", "f2"), max_images=3)
    assert result.remaining == 0
    assert admit_selection([], [], max_images=1).selected_count == 0


def test_admit_selection_requires_positive_capacity():
    with pytest.raises(ValueError):
        admit_selection([], [], max_images=0)


def test_upload_all_returns_outcomes_in_submission_order_not_completion_order():
    store = ScriptedObjectStore(delays={b"f1": 0.05, b"f2": 0})

    result = asyncio.run(upload_all(store, "room-images", _files("f1", "f2")))

    assert store.completed == [b"f2", b"f1"]
    assert [o.index for o in result.outcomes] == [0, 1]
    assert [store.content_for(o.url) for o in result.outcomes] == [b"f1", b"f2"]


def test_upload_all_dispatches_concurrently():
    async def scenario():
        store = BlockingObjectStore()
        task = asyncio.create_task(upload_all(store, "gallery-images", _files("f1", "f2", "f3")))
        await asyncio.sleep(0.01)
        started = store.started
        store.release.set()
        await task
        return started

    assert asyncio.run(scenario()) == 3


def test_upload_all_partial_failure_keeps_successes_and_warns():
    store = ScriptedObjectStore(delays={b"f1": 0.02}, failures={b"f2"})
    toasts = ToastCollector()

    result = asyncio.run(upload_all(store, "room-images", _files("f1", "f2", "f3"), notifier=toasts))

    assert result.success_count == 2
    assert result.failure_count == 1
    assert result.outcomes[1].ok is False
    assert result.outcomes[1].error
    assert [store.content_for(o.url) for o in result.outcomes if o.ok] == [b"f1", b"f3"]
    assert [t.severity for t in toasts.toasts] == ["warning"]


def test_upload_all_total_failure_reports_error():
    store = ScriptedObjectStore(failures={b"f1", b"f2"})
    toasts = ToastCollector()

    result = asyncio.run(upload_all(store, "room-images", _files("f1", "f2"), notifier=toasts))

    assert result.success_count == 0
    assert toasts.toasts[0].severity == "error"
    assert merge_outcomes(["a.png"], result.outcomes) == ["a.png"]


def test_merge_outcomes_appends_successes_without_mutating_input():
    current = ["a.png"]
    outcomes = [
        UploadOutcome(index=0, url="b.png"),
        UploadOutcome(index=1, error="boom"),
        UploadOutcome(index=2, url="c.png"),
    ]

    merged = merge_outcomes(current, outcomes)

    assert merged == ["a.png", "b.png", "c.png"]
    assert current == ["a.png"]
    assert merged is not current


def test_remove_at_is_position_based():
    images = ["a.png", "b.png", "c.png", "d.png"]

    once = remove_at(images, 1)
    twice = remove_at(once, 1)

    assert once == ["a.png", "c.png", "d.png"]
    assert twice == ["a.png", "d.png"]
    assert images == ["a.png", "b.png", "c.png", "d.png"]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_at_rejects_out_of_range_index(index):
    with pytest.raises(IndexOutOfRange):
        remove_at(["a.png", "b.png", "c.png"], index)


def test_remove_at_on_empty_list_fails():
    with pytest.raises(IndexOutOfRange):
        remove_at([], 0)


def test_uploader_merges_in_submission_order():
    store = ScriptedObjectStore(delays={b"f1": 0.05})
    uploader = MultiImageUploader(store, "room-images", max_images=5)

    images = asyncio.run(uploader.select_files(["a.png"], _files("f1", "f2")))

    assert images[0] == "a.png"
    assert [store.content_for(url) for url in images[1:]] == [b"f1", b"f2"]
    assert uploader.state == UploaderState.IDLE


def test_uploader_capacity_exceeded_makes_no_network_calls():
    store = ScriptedObjectStore()
    toasts = ToastCollector()
    uploader = MultiImageUploader(store, "gallery-images", max_images=10, notifier=toasts)
    files = _files(*[f"f{i}" for i in range(1, 12)])

    with pytest.raises(CapacityExceeded):
        asyncio.run(uploader.select_files([], files))

    assert store.calls == []
    assert toasts.toasts[0].message == "Maximum 10 images allowed"
    assert uploader.state == UploaderState.IDLE


def test_uploader_partial_failure_returns_to_idle():
    store = ScriptedObjectStore(failures={b"f2"})
    toasts = ToastCollector()
    uploader = MultiImageUploader(store, "room-images", max_images=5, notifier=toasts)

    images = asyncio.run(uploader.select_files([], _files("f1", "f2")))

    assert len(images) == 1
    assert store.content_for(images[0]) == b"f1"
    assert toasts.toasts[-1].severity == "warning"
    assert uploader.state == UploaderState.IDLE


def test_uploader_empty_selection_is_noop():
    store = ScriptedObjectStore()
    uploader = MultiImageUploader(store, "room-images", max_images=1)
    current = ["a.png"]

    images = asyncio.run(uploader.select_files(current, []))

    assert images == ["a.png"]
    assert images is not current
    assert store.calls == []


def test_uploader_rejects_overlapping_batches_but_allows_remove():
    async def scenario():
        store = BlockingObjectStore()
        uploader = MultiImageUploader(store, "hotel-images", max_images=5)
        task = asyncio.create_task(uploader.select_files(["a.png", "b.png"], _files("f1")))
        await asyncio.sleep(0.01)
        assert uploader.is_uploading
        assert not uploader.can_add_more(["a.png"])

        with pytest.raises(UploaderBusy):
            await uploader.select_files(["a.png", "b.png"], _files("f2"))
        assert uploader.remove(["a.png", "b.png"], 0) == ["b.png"]

        store.release.set()
        images = await task
        return uploader, images

    uploader, images = asyncio.run(scenario())
    assert uploader.state == UploaderState.IDLE
    assert images[:2] == ["a.png", "b.png"]
    assert len(images) == 3


def test_registry_claim_is_exclusive_per_widget():
    registry = UploaderRegistry()
    store = ScriptedObjectStore()

    first = registry.claim("room-form", store, "room-images", 5)
    with pytest.raises(UploaderBusy):
        registry.claim("room-form", store, "gallery-images", 1)

    assert first.container == "room-images"
    assert first.max_images == 5
    assert registry.is_claimed("room-form")
    other = registry.claim("hotel-form", store, "hotel-images", 3)
    assert other is not first
    assert len(registry) == 2


def test_registry_release_only_by_claiming_uploader():
    registry = UploaderRegistry()
    store = ScriptedObjectStore()
    owner = registry.claim("room-form", store, "room-images", 5)
    stranger = MultiImageUploader(store, "gallery-images", max_images=1)

    registry.release("room-form", stranger)
    assert registry.is_claimed("room-form")

    registry.release("room-form", owner)
    assert not registry.is_claimed("room-form")
    assert registry.claim("room-form", store, "gallery-images", 1).container == "gallery-images"
