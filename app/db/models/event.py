from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey, Enum, Index, Uuid
import uuid
from sqlalchemy.orm import relationship
from app.db.session import Base
from app.db.models.user import utcnow
import enum


class EventStatusEnum(str, enum.Enum):
    draft = "draft"
    open = "open"
    full = "full"
    cancelled = "cancelled"
    completed = "completed"


class ParticipantStatusEnum(str, enum.Enum):
    registered = "registered"
    attended = "attended"
    cancelled = "cancelled"


class Event(Base):
    """
    An event. Location, capacity, pricing and host are stored as flat columns
    and nested again when serialized. ``host_name`` is a copy of the host's
    name at creation time.
    """
    __tablename__ = "events"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False)

    venue_name = Column(String(255), nullable=True)
    address = Column(String(500), nullable=True)

    capacity_maximum = Column(Integer, nullable=True)
    current_registrations = Column(Integer, nullable=False, default=0)

    price_amount = Column(Float, nullable=True)
    currency = Column(String(8), nullable=False, default="TRY")

    host_user_id = Column(Uuid, ForeignKey("users.id"), nullable=True)
    host_name = Column(String(255), nullable=True)

    status = Column(Enum(EventStatusEnum), nullable=False, default=EventStatusEnum.open)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    participants = relationship(
        "EventParticipant",
        order_by="EventParticipant.position",
        lazy="selectin",
    )

    __table_args__ = (
        Index('idx_event_date', 'date'),
        Index('idx_event_host', 'host_user_id'),
    )


class EventParticipant(Base):
    __tablename__ = "event_participants"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    event_id = Column(Uuid, ForeignKey("events.id"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=True)
    name = Column(String(255), nullable=True)
    status = Column(Enum(ParticipantStatusEnum), nullable=False, default=ParticipantStatusEnum.registered)

    __table_args__ = (
        Index('idx_participant_event', 'event_id'),
    )
