"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from dataclasses import dataclass

import resend

from src.portfolio.core.config import get_settings
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="email_sender")

_BODY_STYLE = (
    "margin: 0; padding: 0; background-color: #f9f7f4; "
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;"
)
_CARD_STYLE = (
    "max-width: 600px; margin: 40px auto; background-color: #ffffff; "
    "border-radius: 8px; padding: 40px;"
)
_LABEL_STYLE = (
    "margin: 0 0 4px; font-size: 12px; text-transform: uppercase; "
    "letter-spacing: 0.5px; color: #7a7774;"
)
_VALUE_STYLE = "margin: 0 0 20px; font-size: 16px; color: #1a1916;"
_MESSAGE_STYLE = (
    "padding: 20px; font-size: 16px; line-height: 1.6; color: #4a4845; "
    "background-color: #f9f7f4; border-radius: 4px;"
)
_FOOTER_STYLE = "margin-top: 32px; font-size: 12px; color: #7a7774; text-align: center;"


@dataclass(frozen=True)
class ContactNotification:
    """A stored contact message, as forwarded to the site owner."""

    name: str
    email: str
    subject: str
    message: str


def send_contact_email(notification: ContactNotification) -> bool:
    """Forward a contact form submission to the site owner.

    Replies go straight to the visitor via reply-to.

    Returns:
        True if email was sent (or logged in dev mode), False on error
    """
    settings = get_settings()

    if not settings.resend_api_key or not settings.contact_email:
        # Dev mode: log instead of sending
        logger.warning(
            "RESEND_API_KEY or CONTACT_EMAIL not set - contact email not sent",
            reply_to=notification.email,
            email_type="contact",
        )
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [settings.contact_email],
                "reply_to": notification.email,
                "subject": f"[Portfolio] {notification.subject}",
                "html": _get_contact_email_html(notification),
                "text": _get_contact_email_text(notification),
            }
        )

    try:
        # Use thread pool with timeout to prevent hanging on slow API responses
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("Contact email sent", reply_to=notification.email)
        return True
    except FuturesTimeoutError:
        logger.error(
            "Email send timed out",
            reply_to=notification.email,
            timeout=settings.email_send_timeout_seconds,
        )
        return False
    except Exception as e:
        logger.error("Failed to send contact email", reply_to=notification.email, error=str(e))
        return False


def _get_contact_email_text(notification: ContactNotification) -> str:
    """Generate plain-text content for contact email."""
    return (
        "New contact form submission:\n\n"
        f"Name: {notification.name}\n"
        f"Email: {notification.email}\n"
        f"Subject: {notification.subject}\n\n"
        f"Message:\n{notification.message}\n\n"
        "---\n"
        "Sent from portfolio contact form"
    )


def _get_contact_email_html(notification: ContactNotification) -> str:
    """Generate HTML content for contact email."""
    safe_name = html.escape(notification.name)
    safe_email = html.escape(notification.email)
    safe_subject = html.escape(notification.subject)
    safe_message = html.escape(notification.message).replace("\n", "<br>")
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>New Contact Form Submission</title>
</head>
<body style="{_BODY_STYLE}">
    <div style="{_CARD_STYLE}">
        <h1 style="margin: 0 0 32px; font-size: 24px; font-weight: 500; color: #1a1916;">
            New Contact Submission
        </h1>
        <p style="{_LABEL_STYLE}">Name</p>
        <p style="{_VALUE_STYLE}">{safe_name}</p>
        <p style="{_LABEL_STYLE}">Email</p>
        <p style="{_VALUE_STYLE}">
            <a href="mailto:{safe_email}" style="color: #c4956a; text-decoration: none;">{safe_email}</a>
        </p>
        <p style="{_LABEL_STYLE}">Subject</p>
        <p style="{_VALUE_STYLE}">{safe_subject}</p>
        <p style="{_LABEL_STYLE}">Message</p>
        <div style="{_MESSAGE_STYLE}">{safe_message}</div>
        <p style="{_FOOTER_STYLE}">This email was sent from your portfolio contact form</p>
    </div>
</body>
</html>"""
