"""
Repository layer for database operations.

Provides async functions for creating and reading User, Event and Question
records. Events are returned as nested dictionaries shaped like the API
response.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models.user import User
from app.db.models.event import Event
from app.db.models.question import Question
from app.schemas import UserCreate, EventCreate, QuestionCreate
from typing import Optional, List
from app.core.security import hash_password
import uuid


def parse_id(value) -> Optional[uuid.UUID]:
    """Return ``value`` as a UUID, or None if it is not a valid identifier."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        return None


async def create_user(db: AsyncSession, user_in: UserCreate):
    """
    Create a new user with hashed password.

    Args:
        db: Database session
        user_in: User registration data

    Returns:
        Created User object
    """
    hashed = hash_password(user_in.password)
    user = User(name=user_in.name, email=user_in.email, hashed_password=hashed)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Retrieve user by email address.

    Args:
        db: Database session
        email: User's email address

    Returns:
        User object if found, None otherwise
    """
    q = select(User).where(User.email == email)
    res = await db.execute(q)
    return res.scalars().first()


async def get_user(db: AsyncSession, user_id) -> Optional[User]:
    """Retrieve user by ID; None for unknown or malformed ids."""
    user_uuid = parse_id(user_id)
    if user_uuid is None:
        return None
    q = select(User).where(User.id == user_uuid)
    res = await db.execute(q)
    return res.scalars().first()


def event_to_dict(ev: Event) -> dict:
    return {
        'id': ev.id,
        'title': ev.title,
        'description': ev.description,
        'date': ev.date,
        'location': {
            'venue_name': ev.venue_name,
            'address': ev.address,
        },
        'capacity': {
            'maximum': ev.capacity_maximum,
            'current_registrations': ev.current_registrations or 0,
        },
        'pricing': {
            'amount': ev.price_amount,
            'currency': ev.currency,
        },
        'host': {
            'user_id': ev.host_user_id,
            'name': ev.host_name,
        },
        'status': ev.status.value,
        'participants': [
            {'user_id': p.user_id, 'name': p.name, 'status': p.status.value}
            for p in ev.participants
        ],
    }


async def create_event(db: AsyncSession, payload: EventCreate, host: User) -> dict:
    """
    Create a new event hosted by ``host``.

    The host's name is copied onto the event as it is at creation time.

    Args:
        db: Database session
        payload: Event creation data
        host: User creating the event

    Returns:
        Created event as a dict
    """
    location = payload.location
    capacity = payload.capacity
    pricing = payload.pricing

    ev = Event(
        title=payload.title,
        description=payload.description,
        date=payload.date,
        venue_name=location.venue_name if location else None,
        address=location.address if location else None,
        capacity_maximum=capacity.maximum if capacity else None,
        current_registrations=capacity.current_registrations if capacity else 0,
        price_amount=pricing.amount if pricing else None,
        currency=pricing.currency if pricing else "TRY",
        host_user_id=host.id,
        host_name=host.name,
        participants=[],
    )
    db.add(ev)
    await db.commit()

    return await get_event(db, ev.id)


async def list_events(db: AsyncSession) -> List[dict]:
    """List all events, earliest date first."""
    q = select(Event).order_by(Event.date.asc()).execution_options(populate_existing=True)
    res = await db.execute(q)
    return [event_to_dict(ev) for ev in res.scalars().all()]


async def get_event(db: AsyncSession, event_id) -> Optional[dict]:
    """Retrieve an event by ID; None for unknown or malformed ids."""
    event_uuid = parse_id(event_id)
    if event_uuid is None:
        return None
    q = select(Event).where(Event.id == event_uuid).execution_options(populate_existing=True)
    res = await db.execute(q)
    ev = res.scalars().first()
    if ev:
        return event_to_dict(ev)
    return None


async def create_question(db: AsyncSession, payload: QuestionCreate, author_id) -> Question:
    """
    Store a question written by ``author_id``.

    ``payload.event_id`` is stored as given; it is not checked against the
    events table.
    """
    question = Question(
        question=payload.question,
        category=payload.category,
        difficulty=payload.difficulty,
        follow_up=payload.follow_up,
        event_id=payload.event_id,
        created_by=parse_id(author_id),
    )
    db.add(question)
    await db.commit()
    await db.refresh(question)
    return question


async def list_questions_for_event(db: AsyncSession, event_id) -> List[Question]:
    event_uuid = parse_id(event_id)
    if event_uuid is None:
        return []
    q = select(Question).where(Question.event_id == event_uuid).order_by(Question.created_at.asc())
    res = await db.execute(q)
    return res.scalars().all()
