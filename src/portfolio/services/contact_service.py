"""Contact message service."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.logging import get_logger
from src.portfolio.core.notifications import ContactNotification
from src.portfolio.models import Contact
from src.portfolio.repositories import ContactRepository
from src.portfolio.schemas.contact import DEFAULT_SUBJECT, ContactCreate

logger = get_logger(__name__)


class ContactService:
    def __init__(self, contact_repo: ContactRepository, session: AsyncSession):
        self.contact_repo = contact_repo
        self.session = session

    async def submit(self, data: ContactCreate) -> tuple[Contact, ContactNotification]:
        """Store a visitor's message.

        Returns:
            The stored message and the notification to send to the operator.
        """
        subject = (data.subject or "").strip() or DEFAULT_SUBJECT
        contact = Contact(
            name=data.name,
            email=str(data.email),
            subject=subject,
            message=data.message,
        )
        self.contact_repo.add(contact)
        await self.session.commit()
        await self.session.refresh(contact)

        logger.info("Contact message received", contact_id=str(contact.id))
        notification = ContactNotification(
            name=contact.name,
            email=contact.email,
            subject=subject,
            message=contact.message,
        )
        return contact, notification

    async def list_messages(self, unread_only: bool = False) -> list[Contact]:
        return await self.contact_repo.list_messages(unread_only=unread_only)

    async def get(self, contact_id: UUID) -> Contact:
        contact = await self.contact_repo.get_by_id(contact_id)
        if contact is None:
            raise ApiError.not_found("Message")
        return contact

    async def open(self, contact_id: UUID) -> Contact:
        """Fetch a message for reading, marking it read."""
        return await self.set_read(contact_id, True)

    async def set_read(self, contact_id: UUID, read: bool) -> Contact:
        contact = await self.get(contact_id)
        if contact.read != read:
            contact.read = read
            await self.session.commit()
            await self.session.refresh(contact)
        return contact

    async def delete(self, contact_id: UUID) -> None:
        contact = await self.get(contact_id)
        await self.contact_repo.delete(contact)
        await self.session.commit()
        logger.info("Contact message deleted", contact_id=str(contact_id))
