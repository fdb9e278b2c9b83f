# src/modules/contact/schemas.py

import re
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_NAME_LENGTH = 200
MAX_MESSAGE_LENGTH = 5000


class ContactFormRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr = Field(max_length=MAX_NAME_LENGTH)
    email: StrictStr
    message: StrictStr = Field(max_length=MAX_MESSAGE_LENGTH)
    turnstile_token: Optional[StrictStr] = Field(default=None, alias="turnstileToken")

    @field_validator("name", "message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("must look like local@domain.tld")
        return value


class ContactFormResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    id: Optional[str] = None
    error: Optional[str] = None
    details: Optional[str] = None


class ContactConfigResponse(BaseModel):
    site_key: str = Field(serialization_alias="siteKey")
    captcha_enabled: bool = Field(serialization_alias="captchaEnabled")
