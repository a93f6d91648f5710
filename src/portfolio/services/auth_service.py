"""Authentication service - admin login and password changes."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.logging import get_logger
from src.portfolio.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password,
    verify_password,
)
from src.portfolio.models import Admin
from src.portfolio.models.base import utc_now
from src.portfolio.repositories import AdminRepository
from src.portfolio.schemas.auth import AdminRead, LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Authentication service for the single site admin.

    Tokens are stateless JWTs; logout is handled client-side by
    discarding the token.
    """

    def __init__(self, admin_repo: AdminRepository, session: AsyncSession):
        self.admin_repo = admin_repo
        self.session = session

    async def authenticate(self, email: str, password: str) -> LoginResponse | None:
        """Authenticate admin and issue an access token.

        Returns None if the email is unknown or the password is wrong.
        """
        admin = await self.admin_repo.get_by_email(email.lower())

        # Always verify a hash so unknown emails take as long as wrong passwords
        password_hash = admin.hashed_password if admin else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if admin is None or not password_valid:
            logger.info("Login failed", email=email)
            return None

        token = create_access_token(admin.id, admin.email)
        logger.info("Admin logged in", admin_id=str(admin.id))
        return LoginResponse(token=token, admin=AdminRead.model_validate(admin))

    async def change_password(
        self, admin: Admin, current_password: str, new_password: str
    ) -> None:
        """Replace the admin's password after checking the current one.

        Raises:
            ApiError: 401 if the current password is incorrect.
        """
        if not verify_password(current_password, admin.hashed_password):
            raise ApiError.unauthorized("Current password is incorrect")

        admin.hashed_password = hash_password(new_password)
        admin.updated_at = utc_now()
        await self.session.commit()
        logger.info("Admin password changed", admin_id=str(admin.id))
