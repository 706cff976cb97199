from fastapi import APIRouter, Depends
from app.schemas import (
    CurrentUser,
    QuestionCreate,
    QuestionGenerateRequest,
    QuestionGenerateResponse,
    QuestionOut,
)
from app.db.session import get_session
from app.services.question_service import QuestionService
from app.services.question_generator import QuestionGenerator, get_question_generator
from app.auth import get_current_user
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

router = APIRouter(prefix="/questions", tags=["questions"])


def get_question_service(session: AsyncSession = Depends(get_session)) -> QuestionService:
    return QuestionService(session)


@router.post("/generate", response_model=QuestionGenerateResponse)
async def generate_questions(
    payload: QuestionGenerateRequest,
    user: CurrentUser = Depends(get_current_user),
    generator: QuestionGenerator = Depends(get_question_generator)
):
    """
    Suggest discussion questions. Nothing is stored.

    - topic: replaces each suggestion's category
    - difficulty: replaces each suggestion's difficulty (1-5)
    - count: number of suggestions (default 3, capped by the available pool)
    """
    questions = await generator.generate(
        topic=payload.topic,
        difficulty=payload.difficulty,
        count=payload.count,
    )
    return QuestionGenerateResponse(success=True, questions=questions)


@router.post("", response_model=QuestionOut)
async def save_question(
    payload: QuestionCreate,
    user: CurrentUser = Depends(get_current_user),
    question_service: QuestionService = Depends(get_question_service)
):
    return await question_service.save_question(payload, user)


@router.get("/event/{event_id}", response_model=List[QuestionOut])
async def get_event_questions(
    event_id: str,
    user: CurrentUser = Depends(get_current_user),
    question_service: QuestionService = Depends(get_question_service)
):
    return await question_service.list_for_event(event_id)
