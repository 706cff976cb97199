from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Enum, Uuid
import uuid
from app.db.session import Base
import enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RoleEnum(str, enum.Enum):
    user = "user"
    organizer = "organizer"
    admin = "admin"


class User(Base):
    __tablename__ = "users"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(Enum(RoleEnum), default=RoleEnum.user, nullable=False)
    date_joined = Column(DateTime(timezone=True), default=utcnow, nullable=False)
