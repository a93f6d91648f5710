"""Public contact form endpoint."""

from fastapi import APIRouter, BackgroundTasks, status
from starlette.requests import Request

from src.portfolio.api.dependencies import ContactServiceDep
from src.portfolio.core.notifications import send_contact_email
from src.portfolio.core.rate_limit import contact_rate_limit, limiter
from src.portfolio.schemas import ApiResponse, ContactCreate, ContactReceipt

router = APIRouter(prefix="/contact", tags=["contact"])

SUBMITTED_MESSAGE = "Your message has been sent successfully! I will get back to you soon."


@router.post(
    "",
    response_model=ApiResponse[ContactReceipt],
    status_code=status.HTTP_201_CREATED,
    summary="Send a message",
    description="Stores the message and notifies the site owner by email.",
    responses={
        400: {"description": "Validation failed"},
        429: {"description": "Too many messages from this address"},
    },
)
@limiter.limit(contact_rate_limit)
async def submit_contact(
    request: Request,
    data: ContactCreate,
    service: ContactServiceDep,
    background_tasks: BackgroundTasks,
) -> ApiResponse[ContactReceipt]:
    contact, notification = await service.submit(data)

    # Email failures are logged by the sender and never reach the visitor
    background_tasks.add_task(send_contact_email, notification)

    return ApiResponse[ContactReceipt](
        message=SUBMITTED_MESSAGE,
        data=ContactReceipt.model_validate(contact),
    )
