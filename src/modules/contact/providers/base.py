"""
Abstract base class for email providers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


@dataclass
class OutgoingEmail:
    """A fully rendered email ready to hand to a provider."""
    sender: str
    recipients: List[str]
    subject: str
    text: str
    html: str
    reply_to: Optional[str] = None


@dataclass
class EmailSendResult:
    """Result of sending an email."""
    success: bool
    message_id: Optional[str] = None
    error_message: Optional[str] = None
    raw_response: Optional[Dict[str, Any]] = field(default=None, repr=False)


class BaseEmailProvider(ABC):
    """Abstract base class for email providers."""

    name: str

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the provider has the credentials it needs to send."""
        pass

    @abstractmethod
    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        """
        Send an email.

        Args:
            email: Rendered message with sender and recipients

        Returns:
            EmailSendResult with the provider's message id if successful
        """
        pass
