import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from kram.api.deps.dependencies import get_gallery_service
from kram.core.exceptions import (
    DatabaseUnavailableError,
    GalleryItemNotFoundError,
    ValidationError,
)
from kram.models.gallery import GalleryItem, GalleryQuery, PaginatedGallery, Pagination


def _item(prompt="ลายคราม"):
    return GalleryItem(
        id=uuid.uuid4(),
        prompt_message=prompt,
        create_at=datetime(2024, 5, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_gallery_service(client):
    service = MagicMock()
    service.build_query.side_effect = lambda *args: GalleryQuery.from_params(*args)
    service.list_gallery = AsyncMock()
    service.get_item = AsyncMock()
    client.app.dependency_overrides[get_gallery_service] = lambda: service
    return service


def test_list_gallery(client, mock_gallery_service):
    mock_gallery_service.list_gallery.return_value = PaginatedGallery(
        data=[_item()],
        pagination=Pagination.build(page=1, limit=10, total_items=1),
    )

    response = client.get("/api/v1/kram/gallery")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Found 1 gallery items"
    assert body["data"]["pagination"]["totalPages"] == 1
    item = body["data"]["data"][0]
    assert item["tag"] is None
    assert item["output_logs"] == []


def test_list_gallery_passes_raw_params(client, mock_gallery_service):
    mock_gallery_service.list_gallery.return_value = PaginatedGallery(
        data=[],
        pagination=Pagination.build(page=2, limit=5, total_items=0),
    )

    response = client.get(
        "/api/v1/kram/gallery",
        params={"search": " คราม ", "page": "2", "limit": "5", "sortBy": "prompt_message", "sortOrder": "asc"},
    )

    assert response.status_code == 200
    assert response.json()["message"] == 'Found 0 gallery items matching "คราม"'
    mock_gallery_service.build_query.assert_called_once_with(" คราม ", "2", "5", "prompt_message", "asc")
    query = mock_gallery_service.list_gallery.await_args.args[0]
    assert (query.page, query.limit, query.sort_by, query.sort_order) == (2, 5, "prompt_message", "asc")


def test_list_gallery_bad_params_do_not_fail(client, mock_gallery_service):
    mock_gallery_service.list_gallery.return_value = PaginatedGallery(
        data=[],
        pagination=Pagination.build(page=1, limit=10, total_items=0),
    )

    response = client.get("/api/v1/kram/gallery", params={"page": "x", "limit": "-1", "sortBy": "id"})

    assert response.status_code == 200
    query = mock_gallery_service.list_gallery.await_args.args[0]
    assert (query.page, query.limit, query.sort_by) == (1, 1, "create_at")


def test_list_gallery_database_unavailable(client, mock_gallery_service):
    mock_gallery_service.list_gallery.side_effect = DatabaseUnavailableError(
        "Database connection failed. Please try again later. (Failed after 3 attempts)",
        attempts=3,
    )

    response = client.get("/api/v1/kram/gallery")

    assert response.status_code == 503
    body = response.json()
    assert body["error"] == "Database unavailable"
    assert "Failed after 3 attempts" in body["message"]


def test_get_gallery_item(client, mock_gallery_service):
    item = _item()
    mock_gallery_service.get_item.return_value = item

    response = client.get(f"/api/v1/kram/gallery/{item.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["id"] == str(item.id)
    assert body["message"] == "Gallery item retrieved successfully"


def test_get_gallery_item_bad_id(client, mock_gallery_service):
    mock_gallery_service.get_item.side_effect = ValidationError(
        "The provided ID is not a valid UUID", field="id", label="Invalid ID format"
    )

    response = client.get("/api/v1/kram/gallery/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid ID format"


def test_get_gallery_item_missing(client, mock_gallery_service):
    missing = str(uuid.uuid4())
    mock_gallery_service.get_item.side_effect = GalleryItemNotFoundError(missing)

    response = client.get(f"/api/v1/kram/gallery/{missing}")

    assert response.status_code == 404
    assert response.json()["error"] == "Gallery item not found"
