"""Notification utilities - email.

Re-exports all notification-related functions.
"""

from src.portfolio.core.notifications.email import ContactNotification, send_contact_email

__all__ = [
    "ContactNotification",
    "send_contact_email",
]
