"""Authentication endpoints for the site admin."""

from fastapi import APIRouter
from starlette.requests import Request

from src.portfolio.api.dependencies import AuthServiceDep, CurrentAdmin, OptionalAdmin
from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.logging import get_logger
from src.portfolio.core.rate_limit import limiter, login_rate_limit
from src.portfolio.schemas import (
    AdminRead,
    ApiResponse,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=ApiResponse[LoginResponse],
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Login successful",
                        "data": {
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "admin": {
                                "id": "6f1c2b9e-3d4a-4c5b-8e7f-0a1b2c3d4e5f",
                                "email": "admin@example.com",
                                "name": "Site Owner",
                            },
                        },
                    }
                }
            },
        },
        401: {"description": "Invalid email or password"},
        429: {"description": "Too many login attempts"},
    },
)
@limiter.limit(login_rate_limit)
async def login(
    request: Request, login_data: LoginRequest, service: AuthServiceDep
) -> ApiResponse[LoginResponse]:
    """Authenticate the admin and return a bearer token."""
    result = await service.authenticate(login_data.email, login_data.password)
    if result is None:
        raise ApiError.unauthorized("Invalid email or password")

    return ApiResponse[LoginResponse](message="Login successful", data=result)


@router.post("/logout", response_model=MessageResponse)
async def logout(admin: OptionalAdmin) -> MessageResponse:
    """Tokens are stateless; the client discards its copy."""
    if admin is not None:
        logger.info("Admin logged out", admin_id=str(admin.id))
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/me",
    response_model=ApiResponse[AdminRead],
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def me(admin: CurrentAdmin) -> ApiResponse[AdminRead]:
    return ApiResponse[AdminRead](data=AdminRead.model_validate(admin))


@router.post(
    "/change-password",
    response_model=MessageResponse,
    responses={
        400: {"description": "New password too short or too weak"},
        401: {"description": "Current password is incorrect"},
    },
)
async def change_password(
    data: ChangePasswordRequest, admin: CurrentAdmin, service: AuthServiceDep
) -> MessageResponse:
    await service.change_password(admin, data.current_password, data.new_password)
    return MessageResponse(message="Password changed successfully")
