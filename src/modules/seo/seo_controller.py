# src/modules/seo/seo_controller.py

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["seo"])

SITEMAP_INDEX_PATH = "/sitemap-index.xml"


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap_redirect(request: Request):
    """Point crawlers at the generated sitemap index."""
    origin = f"{request.url.scheme}://{request.url.netloc}"
    return RedirectResponse(
        url=f"{origin}{SITEMAP_INDEX_PATH}",
        status_code=status.HTTP_301_MOVED_PERMANENTLY,
        headers={"Cache-Control": "public, max-age=3600"},
    )
