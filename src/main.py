# src/main.py

import logging

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.middleware import SlowAPIMiddleware
from slowapi.errors import RateLimitExceeded
from src.common.config import settings
from src.common.middleware import redirect_www
from src.common.rate_limit import get_client_ip, limiter
from src.common.utils.global_messages import GlobalMessages
from src.modules.contact.schemas import ContactFormResponse
from src.router.routers import include_routers

# Centralized logging configuration
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting in %s mode with email provider '%s'", settings.APP_ENV, settings.EMAIL_PROVIDER)
    if not settings.captcha_enabled:
        logger.warning("Turnstile verification is disabled for contact submissions")
    yield

async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning("Rate limit exceeded for %s on %s: %s", get_client_ip(request), request.url.path, exc.detail)
    body = ContactFormResponse(success=False, error=GlobalMessages.RATE_LIMIT_EXCEEDED)
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=body.model_dump(exclude_none=True),
    )

# Initialize FastAPI app with lifespan manager
app = FastAPI(
    title="Portfolio API",
    description="Server side of the portfolio site: contact form relay and host redirects.",
    version="1.0.0",
    lifespan=lifespan
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Middleware for CORS using allowed origins from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Host canonicalization runs before everything else
app.middleware("http")(redirect_www)

# Include routers from a separate file
include_routers(app)

# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok", "message": "API is running"}
