"""Ticket selection API endpoints."""

from fastapi import APIRouter, Depends

from powerball_watch.api.deps import get_store
from powerball_watch.schemas.draw import TicketSchema, TicketUpdate
from powerball_watch.services.preference_store import PreferenceStore

router = APIRouter()


@router.get("", response_model=TicketSchema)
async def get_ticket(store: PreferenceStore = Depends(get_store)):
    """Current saved selection and whether it is complete."""
    ticket = await store.read_ticket()
    return TicketSchema.from_ticket(ticket)


@router.put("", response_model=TicketSchema)
async def save_ticket(request: TicketUpdate, store: PreferenceStore = Depends(get_store)):
    """Replace the saved selection. Partial tickets are allowed."""
    ticket = request.to_ticket()
    await store.write_ticket(ticket)
    return TicketSchema.from_ticket(ticket)
