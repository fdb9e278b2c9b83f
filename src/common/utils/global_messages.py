class GlobalMessages:
    # Contact Messages
    MESSAGE_SENT = "Message sent successfully!"
    EMPTY_REQUEST_BODY = "Request body is empty. Please fill out the form."
    INVALID_REQUEST_FORMAT = "Invalid request format. Please try again."
    INVALID_FORM_DATA = "Invalid form data. Please check your inputs and try again."
    SECURITY_VERIFICATION_REQUIRED = "Security verification is required. Please try again."
    SECURITY_VERIFICATION_FAILED = "Security verification failed. Please try again."
    MESSAGE_SEND_FAILED = "Failed to send message. Please try again later."

    # Server Messages
    SERVER_CONFIGURATION_ERROR = "Server configuration error. Please try again later."
    UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."
    RATE_LIMIT_EXCEEDED = "Too many requests. Please wait a minute and try again."

    # Contact Form (client side)
    COMPLETE_SECURITY_VERIFICATION = "Please complete the security verification."
    GENERIC_SUBMIT_ERROR = "Something went wrong. Please try again or email me directly."
