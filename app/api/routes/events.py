from fastapi import APIRouter, Depends, HTTPException
from app.schemas import EventCreate, EventOut, CurrentUser
from app.db.session import get_session
from app.services.event_service import EventService
from app.auth import get_current_user
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(session: AsyncSession = Depends(get_session)) -> EventService:
    return EventService(session)


@router.post("", response_model=EventOut)
async def create_event_endpoint(
    payload: EventCreate,
    user: CurrentUser = Depends(get_current_user),
    event_service: EventService = Depends(get_event_service)
):
    return await event_service.create_event(payload, user)


@router.get("", response_model=List[EventOut])
async def get_events(event_service: EventService = Depends(get_event_service)):
    """List every event, earliest date first."""
    return await event_service.list_events()


@router.get("/{event_id}", response_model=EventOut)
async def get_event_detail(
    event_id: str,
    event_service: EventService = Depends(get_event_service)
):
    ev = await event_service.get_event(event_id)
    if not ev:
        raise HTTPException(status_code=404, detail="Event not found")
    return ev
