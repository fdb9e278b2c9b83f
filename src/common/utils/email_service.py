import os
import jinja2
from typing import Any, Dict

# src/common/utils/email_service.py -> src/templates/emails
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
TEMPLATE_DIR = os.path.join(BASE_DIR, "templates", "emails")

# HTML templates are autoescaped, plain text templates are rendered verbatim.
template_loader = jinja2.FileSystemLoader(searchpath=TEMPLATE_DIR)
template_env = jinja2.Environment(
    loader=template_loader,
    autoescape=jinja2.select_autoescape(enabled_extensions=("html",), default_for_string=True),
    undefined=jinja2.StrictUndefined,
)

def render_template(template_name: str, context: Dict[str, Any]) -> str:
    template = template_env.get_template(template_name)
    return template.render(**context)

def render_contact_email(name: str, email: str, message: str) -> Dict[str, str]:
    """
    Renders both bodies of a contact form notification.

    Args:
        name (str): The submitter's name.
        email (str): The submitter's email address.
        message (str): The message text.

    Returns:
        Dict[str, str]: ``{"html": ..., "text": ...}``. Every user-supplied value
        in the HTML body is escaped.
    """
    context = {"name": name, "email": email, "message": message}
    return {
        "html": render_template("contact_message.html", context),
        "text": render_template("contact_message.txt", context),
    }
