from io import BytesIO
from typing import Any, Optional
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from app.core.config import settings
from app.core.session import require_session
from app.engine.marker import create_rubric_evaluator
from app.reports.report_builder import generate_feedback_report
from app.reports.report_docx import DOCX_MEDIA_TYPE, generate_report_docx
from app.schemas.marking import MarkRequest, MarkResponse

router = APIRouter(
    prefix="/mark",
    tags=["Marking"],
    dependencies=[Depends(require_session)],
)

logger = logging.getLogger(__name__)

engine = create_rubric_evaluator()


def clamp_answer(raw: Any, max_chars: int) -> str:
    """Coerce the submitted value to text and cap its length."""
    if not raw:
        return ""
    return str(raw)[:max_chars]


# -------------------------------------------------
# POST: Mark answer
# -------------------------------------------------

@router.post("", response_model=MarkResponse)
def mark_answer(submission: Optional[MarkRequest] = None):
    submission = submission or MarkRequest()
    answer_text = clamp_answer(submission.answer_text, settings.MAX_ANSWER_CHARS)
    result = engine.evaluate(answer_text)

    logger.info(
        f"Marked answer: words={result.word_count} gated={result.gated} score={result.score}"
    )
    return MarkResponse(result=result)


# -------------------------------------------------
# POST: Download feedback as DOCX
# -------------------------------------------------

@router.post("/report")
def download_feedback_report(submission: Optional[MarkRequest] = None):
    submission = submission or MarkRequest()
    answer_text = clamp_answer(submission.answer_text, settings.MAX_ANSWER_CHARS)
    result = engine.evaluate(answer_text)

    report = generate_feedback_report(result)

    buffer = BytesIO()
    generate_report_docx(report, buffer)
    buffer.seek(0)

    return StreamingResponse(
        buffer,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="ethics_feedback.docx"'},
    )
