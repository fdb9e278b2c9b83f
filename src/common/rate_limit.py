# src/common/rate_limit.py

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address


def get_client_ip(request: Request) -> str:
    """Prefer the visitor address Cloudflare forwards over the socket peer."""
    return request.headers.get("cf-connecting-ip") or get_remote_address(request)


# In-memory storage (resets on restart).
# For production with multiple workers, switch to Redis:
#   limiter = Limiter(key_func=get_client_ip, storage_uri="redis://localhost:6379")
limiter = Limiter(key_func=get_client_ip, default_limits=["60/minute"])
