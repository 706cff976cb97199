from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas import EventCreate, CurrentUser
from app.db.repositories import (
    create_event as db_create_event,
    get_event as db_get_event,
    get_user as db_get_user,
    list_events as db_list_events,
)
from app.core.logging import logger
from fastapi import HTTPException, status
from typing import List, Optional


class EventService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_event(self, payload: EventCreate, current_user: CurrentUser) -> dict:
        host = await db_get_user(self.session, current_user.id)
        if not host:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token is not valid")

        event = await db_create_event(self.session, payload, host)
        logger.info(f"Event {event['id']} created by {host.id}")
        return event

    async def get_event(self, event_id: str) -> Optional[dict]:
        return await db_get_event(self.session, event_id)

    async def list_events(self) -> List[dict]:
        return await db_list_events(self.session)
