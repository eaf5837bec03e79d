from fastapi import APIRouter

from app.core.config import settings
from app.engine.content import QUESTION_TEXT, TEMPLATE_TEXT
from app.engine.rubric import MIN_WORDS_GATE, TARGET_WORDS_LABEL
from app.schemas.marking import ConfigResponse

router = APIRouter(tags=["Task"])


@router.get("/config", response_model=ConfigResponse)
def get_task_config():
    """
    FRONTEND-SAFE TASK CONFIG

    Question, answer template and word targets only. The rubric and the
    model answer are never exposed here.
    """
    return ConfigResponse(
        course_back_url=settings.COURSE_BACK_URL,
        next_lesson_url=settings.NEXT_LESSON_URL,
        question_text=QUESTION_TEXT,
        template_text=TEMPLATE_TEXT,
        target_words=TARGET_WORDS_LABEL,
        min_words_gate=MIN_WORDS_GATE,
    )
