"""
Support Ticket Endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import SupportTicket
from vendorlink.core.database.repositories import SupportTicketRepository
from vendorlink.core.models.io import TicketCreate, TicketRead, TicketStatusUpdate
from vendorlink.server.services.deps import CurrentUserDep, SessionDep
from vendorlink.server.services.errors import NotFoundError

router = APIRouter(prefix="/support-tickets", tags=["support"])


@router.post(
    "",
    response_model=TicketRead,
    status_code=status.HTTP_201_CREATED,
    summary="Open Support Ticket",
    responses={400: {"description": "Invalid support ticket data"}},
)
async def create_ticket(payload: TicketCreate, user: CurrentUserDep, session: SessionDep) -> TicketRead:
    ticket = SupportTicket(
        user_id=user.id,
        subject=payload.subject,
        description=payload.description,
        priority=payload.priority.value,
        category=payload.category.value,
    )
    ticket = await SupportTicketRepository(session).create(ticket)
    return TicketRead.model_validate(ticket)


@router.get("", response_model=List[TicketRead], summary="List Support Tickets")
async def list_tickets(user: CurrentUserDep, session: SessionDep) -> List[TicketRead]:
    tickets = await SupportTicketRepository(session).list_for_user(user.id)
    return [TicketRead.model_validate(t) for t in tickets]


@router.patch(
    "/{ticket_id}/status",
    response_model=TicketRead,
    summary="Update Ticket Status",
    responses={400: {"description": "Unknown status"}, 404: {"description": "Ticket not found"}},
)
async def update_ticket_status(
    ticket_id: str, payload: TicketStatusUpdate, user: CurrentUserDep, session: SessionDep
) -> TicketRead:
    tickets = SupportTicketRepository(session)
    ticket = await tickets.get_owned(ticket_id, user.id)
    if ticket is None:
        raise NotFoundError("Ticket not found")
    ticket.status = payload.status.value
    if payload.resolution is not None:
        ticket.resolution = payload.resolution
    ticket.updated_at = utc_now_naive()
    ticket = await tickets.update(ticket)
    return TicketRead.model_validate(ticket)
