"""
Question suggestions for events.

``QuestionGenerator`` is the seam the questions API depends on. The only
implementation today, ``MockQuestionGenerator``, serves a fixed list of
language-learning prompts.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.schemas import QuestionCandidate

DEFAULT_CATEGORY = "Language Learning"
DEFAULT_COUNT = 3

# (question, default difficulty, follow-up)
MOCK_QUESTIONS = [
    (
        "What's your favorite way to practice a new language?",
        3,
        "How often do you practice this way?",
    ),
    (
        "Do you think it's better to learn grammar rules first or just start speaking?",
        3,
        "Why do you prefer that approach?",
    ),
    (
        "What's the most challenging aspect of learning English for you?",
        3,
        "How do you overcome this challenge?",
    ),
    (
        "If you could speak any language fluently instantly, which would you choose?",
        2,
        "What would you do with this new skill?",
    ),
    (
        "How has learning English changed your perspective on the world?",
        4,
        "Can you give a specific example?",
    ),
]


class QuestionGenerator(ABC):
    """Produces up to ``count`` question candidates for a topic and difficulty."""

    @abstractmethod
    async def generate(
        self,
        topic: Optional[str] = None,
        difficulty: Optional[int] = None,
        count: Optional[int] = None,
    ) -> List[QuestionCandidate]:
        ...


class MockQuestionGenerator(QuestionGenerator):
    """Deterministic stand-in: the first ``count`` entries of ``MOCK_QUESTIONS``."""

    async def generate(
        self,
        topic: Optional[str] = None,
        difficulty: Optional[int] = None,
        count: Optional[int] = None,
    ) -> List[QuestionCandidate]:
        limit = min(count or DEFAULT_COUNT, len(MOCK_QUESTIONS))
        return [
            QuestionCandidate(
                question=text,
                category=topic or DEFAULT_CATEGORY,
                difficulty=difficulty or default_difficulty,
                follow_up=follow_up,
            )
            for text, default_difficulty, follow_up in MOCK_QUESTIONS[:limit]
        ]


def get_question_generator() -> QuestionGenerator:
    return MockQuestionGenerator()
