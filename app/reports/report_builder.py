from datetime import datetime, timezone
from typing import Dict, Any, List

from app.engine.content import QUESTION_TEXT
from app.engine.marker import RubricEvaluator
from app.engine.rubric import MAX_SCORE, TARGET_WORDS_LABEL
from app.schemas.marking import GatedResult, MarkedResult

GRID_LABELS = {
    "ethical": "Ethical or legal failures",
    "impact": "Impact on people and trust",
    "legal": "Ethical and legal terminology",
    "recs": "Practical recommendations",
    "structure": "Structure and clarity",
}


def generate_feedback_report(result: Any) -> Dict[str, Any]:
    """
    Turn an assessment result into a plain report dict for rendering.

    Gated results only ever produce the instructional message.
    """
    if isinstance(result, GatedResult):
        return {
            "question": QUESTION_TEXT,
            "gated": True,
            "word_count": result.word_count,
            "summary": result.message.split("\n"),
            "engine_version": RubricEvaluator.ENGINE_VERSION,
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }

    if not isinstance(result, MarkedResult):
        raise TypeError(f"Unsupported result type: {type(result).__name__}")

    # -------------------------
    # SUMMARY
    # -------------------------
    summary: List[str] = [
        f"Your answer scored {result.score} out of {MAX_SCORE}.",
        f"It contains {result.word_count} words (target {TARGET_WORDS_LABEL}).",
    ]
    if not result.notes:
        summary.append(result.feedback)

    # -------------------------
    # DIAGNOSTICS
    # -------------------------
    grid = result.grid.model_dump(mode="json")
    diagnostics = [
        {"area": GRID_LABELS[key], "status": grid[key]}
        for key in GRID_LABELS
    ]

    return {
        "question": QUESTION_TEXT,
        "gated": False,
        "word_count": result.word_count,
        "summary": summary,
        "scores": {
            "total_score": result.score,
            "max_score": MAX_SCORE,
        },
        "strengths": list(result.strengths),
        "improvements": list(result.notes),
        "tags": [tag.model_dump(mode="json") for tag in result.tags],
        "diagnostics": diagnostics,
        "framework": {
            name: note.model_dump() for name, note in result.framework.items()
        },
        "model_answer": result.model_answer,
        "engine_version": RubricEvaluator.ENGINE_VERSION,
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }
