from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, CheckConstraint, Uuid
import uuid
from app.db.session import Base
from app.db.models.user import utcnow


class Question(Base):
    __tablename__ = "questions"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    question = Column(Text, nullable=False)
    category = Column(String(255), nullable=False)
    difficulty = Column(Integer, nullable=False, default=3)
    follow_up = Column(Text, nullable=True)
    # weak reference: questions may point at events that do not exist
    event_id = Column(Uuid, nullable=True)
    created_by = Column(Uuid, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint('difficulty >= 1 AND difficulty <= 5', name='ck_question_difficulty'),
        Index('idx_question_event', 'event_id'),
    )
