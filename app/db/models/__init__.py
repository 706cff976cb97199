"""Database models package."""
from app.db.models.user import User, RoleEnum
from app.db.models.event import Event, EventParticipant, EventStatusEnum, ParticipantStatusEnum
from app.db.models.question import Question

__all__ = [
    "User",
    "RoleEnum",
    "Event",
    "EventParticipant",
    "EventStatusEnum",
    "ParticipantStatusEnum",
    "Question",
]
