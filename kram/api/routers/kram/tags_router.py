"""
Tag API endpoints.

Routes:
- GET /kram/tags - List tags ordered by name
- POST /kram/tags - Create a tag

Dependencies: kram.application.services, kram.models
System role: Style tag catalog HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from kram.api.deps.dependencies import get_tag_service
from kram.application.services.tag_service import TagService
from kram.models.common import ApiResponse
from kram.models.tag import CreateTagRequest, TagResponse

from .kram_error_handling import handle_kram_errors
from .kram_responses import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=ApiResponse[list[TagResponse]])
@handle_kram_errors("Failed to fetch tags")
async def list_tags(
    tag_service: TagService = Depends(get_tag_service),
) -> JSONResponse:
    """
    List every tag ordered by name.

    Args:
        tag_service: Injected TagService

    Returns:
        JSONResponse: Envelope with the tag list
    """
    tags = await tag_service.list_tags()
    return success_response(
        [TagResponse(**tag) for tag in tags],
        "Tags retrieved successfully",
    )


@router.post("", response_model=ApiResponse[TagResponse], status_code=201)
@handle_kram_errors("Failed to create tag")
async def create_tag(
    request: CreateTagRequest,
    tag_service: TagService = Depends(get_tag_service),
) -> JSONResponse:
    """
    Create a tag.

    Args:
        request: CreateTagRequest with name, image_url, description
        tag_service: Injected TagService

    Returns:
        JSONResponse: Envelope with the created tag (201)

    Errors:
        400: A field is missing or blank
        409: A tag with the same name exists (case-insensitive)
    """
    logger.info("Creating new tag", extra={"tag_name": request.name})
    tag = await tag_service.create_tag(
        name=request.name,
        image_url=request.image_url,
        description=request.description,
    )
    return success_response(TagResponse(**tag), "Tag created successfully", status_code=201)
