from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from uuid import UUID
from datetime import datetime, timezone
from enum import Enum


class RoleEnum(str, Enum):
    user = "user"
    organizer = "organizer"
    admin = "admin"


class EventStatus(str, Enum):
    draft = "draft"
    open = "open"
    full = "full"
    cancelled = "cancelled"
    completed = "completed"


class ParticipantStatus(str, Enum):
    registered = "registered"
    attended = "attended"
    cancelled = "cancelled"


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys; accepts either case on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class TokenResponse(BaseModel):
    token: str


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Schema for user login request."""
    email: EmailStr
    password: str


class UserOut(CamelModel):
    id: UUID
    name: str
    email: EmailStr
    role: RoleEnum
    date_joined: datetime


class CurrentUser(BaseModel):
    """Identity decoded from a session token."""
    id: UUID
    role: RoleEnum = RoleEnum.user


class Location(CamelModel):
    venue_name: Optional[str] = None
    address: Optional[str] = None


class Capacity(CamelModel):
    maximum: Optional[int] = None
    current_registrations: int = 0


class Pricing(CamelModel):
    amount: Optional[float] = None
    currency: str = "TRY"


class Host(CamelModel):
    user_id: Optional[UUID] = None
    name: Optional[str] = None


def as_utc(value: datetime) -> datetime:
    """Normalize to UTC; naive datetimes are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Participant(CamelModel):
    user_id: Optional[UUID] = None
    name: Optional[str] = None
    status: ParticipantStatus = ParticipantStatus.registered


class EventCreate(CamelModel):
    title: str
    description: str
    date: datetime
    location: Optional[Location] = None
    capacity: Optional[Capacity] = None
    pricing: Optional[Pricing] = None

    @field_validator("date")
    @classmethod
    def date_as_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class EventOut(CamelModel):
    id: UUID
    title: str
    description: str
    date: datetime
    location: Location
    capacity: Capacity
    pricing: Pricing
    host: Host
    status: EventStatus
    participants: List[Participant] = []

    @field_validator("date")
    @classmethod
    def date_as_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class QuestionCandidate(CamelModel):
    """A suggested question that has not been stored."""
    question: str
    category: str
    difficulty: int
    follow_up: Optional[str] = None


class QuestionGenerateRequest(CamelModel):
    topic: Optional[str] = None
    difficulty: Optional[int] = Field(None, ge=1, le=5)
    count: Optional[int] = Field(None, ge=1)


class QuestionGenerateResponse(CamelModel):
    success: bool = True
    questions: List[QuestionCandidate]


class QuestionCreate(CamelModel):
    question: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    difficulty: int = Field(3, ge=1, le=5)
    follow_up: Optional[str] = None
    event_id: Optional[UUID] = None


class QuestionOut(CamelModel):
    id: UUID
    question: str
    category: str
    difficulty: int
    follow_up: Optional[str] = None
    event_id: Optional[UUID] = None
    created_by: UUID
    created_at: datetime
