"""
Kram pattern generation endpoint.

Routes:
- POST /kram/generate/kram-pattern - Generate, describe and tag an image

Dependencies: kram.application.services, kram.models
System role: Generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from kram.api.deps.dependencies import get_generation_service
from kram.application.services.generation_service import GenerationService
from kram.models.common import ApiResponse
from kram.models.generation import KramPatternRequest, KramPatternResponse

from .kram_error_handling import handle_kram_errors
from .kram_responses import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post(
    "/kram-pattern",
    response_model=ApiResponse[KramPatternResponse],
    status_code=201,
)
@handle_kram_errors("Failed to generate Kram pattern")
async def generate_kram_pattern(
    request: KramPatternRequest,
    generation_service: GenerationService = Depends(get_generation_service),
) -> JSONResponse:
    """
    Generate a Kram pattern image with description and tags.

    The first selected tag is stored as the history row's primary tag;
    every selected tag is returned in the response.

    Args:
        request: Prompt, optional tag IDs and image/chat options
        generation_service: Injected GenerationService

    Returns:
        JSONResponse: Envelope with the stored result (201)

    Errors:
        400: Invalid request, tags missing image URLs, content policy
        404: Unknown tag IDs
        429: Upstream rate limit or quota
        502: Upstream generation failure
        503: AI client not configured
    """
    result, debug = await generation_service.generate(request)
    return success_response(
        result,
        "Kram pattern generated successfully",
        status_code=201,
        debug=debug,
    )
