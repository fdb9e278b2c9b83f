from src.common.utils.email_service import render_contact_email
from src.modules.contact import contact_service
from src.modules.contact.schemas import ContactFormRequest


def test_html_special_characters_become_entities():
    bodies = render_contact_email("Tom & Jerry", "t@example.com", "<a href=\"x\">it's</a>")

    assert "Tom &amp; Jerry" in bodies["html"]
    assert "&lt;a href=&#34;x&#34;&gt;it&#39;s&lt;/a&gt;" in bodies["html"]
    assert "<a href=\"x\">" not in bodies["html"]


def test_plain_text_body_is_not_escaped():
    bodies = render_contact_email("Tom & Jerry", "t@example.com", "1 < 2")

    assert "Name: Tom & Jerry" in bodies["text"]
    assert "1 < 2" in bodies["text"]
    assert "Reply directly to this email to respond to Tom & Jerry." in bodies["text"]


def test_subject_collapses_line_breaks():
    form = ContactFormRequest.model_validate(
        {"name": "Ada\r\nBcc: victim@example.com", "email": "ada@example.com", "message": "Hi"}
    )

    email = contact_service.build_contact_email(form)

    assert "\n" not in email.subject
    assert email.subject == "Portfolio Contact Form: Message from Ada Bcc: victim@example.com"
