# src/modules/contact/contact_controller.py

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from src.common.config import settings
from src.common.rate_limit import get_client_ip, limiter
from src.common.utils.global_messages import GlobalMessages
from src.modules.contact import contact_service, schemas
from src.modules.contact.exceptions import ContactError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])


def _json_response(status_code: int, body: schemas.ContactFormResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post("", response_model=schemas.ContactFormResponse)
@limiter.limit(settings.CONTACT_RATE_LIMIT)
async def submit_contact_form(request: Request):
    """
    Relay a contact form submission to the site owner by email.

    The body is read raw so that empty and malformed payloads map to 400
    responses with the same JSON shape as every other outcome.
    """
    try:
        raw_body = await request.body()
        result = await contact_service.process_contact_form(raw_body, get_client_ip(request))
        return _json_response(
            status.HTTP_200_OK,
            schemas.ContactFormResponse(
                success=True,
                message=GlobalMessages.MESSAGE_SENT,
                id=result.message_id,
            ),
        )
    except ContactError as e:
        return _json_response(
            e.status_code,
            schemas.ContactFormResponse(success=False, error=e.message),
        )
    except Exception as e:
        logger.exception("Unexpected error while processing contact form")
        return _json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            schemas.ContactFormResponse(
                success=False,
                error=GlobalMessages.UNEXPECTED_ERROR,
                details=str(e) if settings.is_development else None,
            ),
        )


@router.get("/config", response_model=schemas.ContactConfigResponse)
async def get_contact_config():
    """Public settings the contact form needs to render the Turnstile widget."""
    return schemas.ContactConfigResponse(
        site_key=settings.PUBLIC_TURNSTILE_SITE_KEY,
        captcha_enabled=settings.captcha_enabled,
    )
