import asyncio
import os
import sys

# Add project root to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.common.config import settings
from src.modules.contact import contact_service
from src.modules.contact.schemas import ContactFormRequest

async def send_test_contact():
    print(f"Sending a sample contact message via '{settings.EMAIL_PROVIDER}' to {settings.CONTACT_RECIPIENT}...")
    provider = contact_service.get_email_provider()
    form = ContactFormRequest(
        name="Test Sender <script>",
        email="test.sender@example.com",
        message="This is a test message from scripts/send_test_contact.py.\nMarkup like <b>this</b> should arrive escaped.",
    )
    result = await provider.send(contact_service.build_contact_email(form))
    if result.success:
        print(f"Sent. Provider message id: {result.message_id}")
    else:
        print(f"Failed: {result.error_message}")

if __name__ == "__main__":
    # Use real settings from .env
    asyncio.run(send_test_contact())
