"""Repository for Admin entity."""

from sqlmodel import select

from src.portfolio.models import Admin
from src.portfolio.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    model = Admin

    async def get_by_email(self, email: str) -> Admin | None:
        """Get admin by email address."""
        result = await self.session.execute(select(Admin).where(Admin.email == email))
        return result.scalar_one_or_none()
