from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas import QuestionCreate, CurrentUser
from app.db.repositories import (
    create_question as db_create_question,
    list_questions_for_event as db_list_questions_for_event,
)
from app.core.logging import logger


class QuestionService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_question(self, payload: QuestionCreate, current_user: CurrentUser):
        question = await db_create_question(self.session, payload, current_user.id)
        logger.info(f"Question {question.id} saved by {current_user.id} for event {question.event_id}")
        return question

    async def list_for_event(self, event_id: str):
        return await db_list_questions_for_event(self.session, event_id)
