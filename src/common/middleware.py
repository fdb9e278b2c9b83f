# src/common/middleware.py

from fastapi import Request, status
from fastapi.responses import RedirectResponse

WWW_PREFIX = "www."


async def redirect_www(request: Request, call_next):
    """Permanently redirect ``www.`` hosts to the bare domain over https."""
    hostname = request.url.hostname or ""
    if hostname.startswith(WWW_PREFIX):
        target = f"https://{hostname[len(WWW_PREFIX):]}{request.url.path}"
        if request.url.query:
            target = f"{target}?{request.url.query}"
        return RedirectResponse(
            url=target,
            status_code=status.HTTP_301_MOVED_PERMANENTLY,
            headers={"Cache-Control": "public, max-age=31536000, immutable"},
        )
    return await call_next(request)
