"""Repository for Contact entity."""

from sqlmodel import col, select

from src.portfolio.models import Contact
from src.portfolio.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    model = Contact

    async def list_messages(self, unread_only: bool = False) -> list[Contact]:
        """List messages, newest first."""
        query = select(Contact)
        if unread_only:
            query = query.where(Contact.read == False)  # noqa: E712
        result = await self.session.execute(query.order_by(col(Contact.created_at).desc()))
        return list(result.scalars().all())

    async def list_recent(self, limit: int = 5) -> list[Contact]:
        result = await self.session.execute(
            select(Contact).order_by(col(Contact.created_at).desc()).limit(limit)
        )
        return list(result.scalars().all())
