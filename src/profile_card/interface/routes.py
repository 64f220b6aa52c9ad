"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from profile_card.infrastructure.config import Settings, get_settings
from profile_card.interface.dependencies import get_use_case
from profile_card.services.render_card import RenderProfileCardUseCase

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get(
    "/",
    response_class=Response,
    responses={
        200: {"content": {SVG_MEDIA_TYPE: {}}, "description": "The profile card"},
        500: {"description": "Upstream fetch or rendering failed"},
    },
)
@router.get("/api/github-readme", response_class=Response, include_in_schema=False)
async def profile_card(
    use_case: RenderProfileCardUseCase = Depends(get_use_case),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Render the configured account's profile card as SVG."""
    result = await use_case.execute()
    return Response(
        content=result.svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": settings.cache_control},
    )
