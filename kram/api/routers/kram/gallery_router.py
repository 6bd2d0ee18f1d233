"""
Gallery API endpoints.

Routes:
- GET /kram/gallery - Search and paginate generation history
- GET /kram/gallery/{id} - Get one history record

Dependencies: kram.application.services, kram.models
System role: Gallery HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from kram.api.deps.dependencies import get_gallery_service
from kram.application.services.gallery_service import GalleryService
from kram.models.common import ApiResponse
from kram.models.gallery import GalleryItem, PaginatedGallery

from .kram_error_handling import handle_kram_errors
from .kram_responses import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("", response_model=ApiResponse[PaginatedGallery])
@handle_kram_errors("Failed to fetch gallery")
async def list_gallery(
    search: str | None = Query(None, description="Case-insensitive substring"),
    page: str | None = Query(None, description="Page number, from 1"),
    limit: str | None = Query(None, description="Page size, 1 to 100"),
    sort_by: str | None = Query(None, alias="sortBy", description="create_at or prompt_message"),
    sort_order: str | None = Query(None, alias="sortOrder", description="asc or desc"),
    gallery_service: GalleryService = Depends(get_gallery_service),
) -> JSONResponse:
    """
    Search and paginate gallery items.

    Unparseable or out-of-range parameters fall back to defaults rather
    than failing.

    Returns:
        JSONResponse: Envelope with ``{data, pagination}``

    Errors:
        503: Database unreachable after retries
    """
    query = gallery_service.build_query(search, page, limit, sort_by, sort_order)
    result = await gallery_service.list_gallery(query)

    message = f"Found {result.pagination.totalItems} gallery items"
    if query.search:
        message += f' matching "{query.search}"'
    return success_response(result, message)


@router.get("/{item_id}", response_model=ApiResponse[GalleryItem])
@handle_kram_errors("Failed to fetch gallery item")
async def get_gallery_item(
    item_id: str,
    gallery_service: GalleryService = Depends(get_gallery_service),
) -> JSONResponse:
    """
    Get one gallery item.

    Args:
        item_id: History UUID
        gallery_service: Injected GalleryService

    Returns:
        JSONResponse: Envelope with the item

    Errors:
        400: Malformed ID
        404: No such item
    """
    item = await gallery_service.get_item(item_id)
    return success_response(item, "Gallery item retrieved successfully")
