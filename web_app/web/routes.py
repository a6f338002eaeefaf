"""Root-level short link redirects."""

from fastapi import APIRouter, Request

from ..responses import redirect_to

router = APIRouter()


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL. Unknown codes surface as a JSON 404."""
    service = request.app.state.service

    original_url = await service.resolve_short_link(short_code)

    # 302 so browsers keep asking us rather than caching the target
    return redirect_to(original_url)
