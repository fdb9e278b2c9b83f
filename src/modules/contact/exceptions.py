from fastapi import status

from src.common.utils.global_messages import GlobalMessages


class ContactError(Exception):
    """Base error for the contact pipeline, carrying the HTTP status and a user-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = GlobalMessages.UNEXPECTED_ERROR

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidSubmissionError(ContactError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = GlobalMessages.INVALID_FORM_DATA


class CaptchaError(ContactError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = GlobalMessages.SECURITY_VERIFICATION_FAILED


class ConfigurationError(ContactError):
    default_message = GlobalMessages.SERVER_CONFIGURATION_ERROR


class EmailDeliveryError(ContactError):
    default_message = GlobalMessages.MESSAGE_SEND_FAILED
