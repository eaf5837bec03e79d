# app/schemas/marking.py

from enum import Enum, IntEnum
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CriterionLevel(IntEnum):
    """Coarse tier for each scored dimension."""
    MISSING = 0
    DEVELOPING = 1
    SECURE = 2


class TagStatus(str, Enum):
    OK = "ok"
    MID = "mid"
    BAD = "bad"


class GridStatus(str, Enum):
    SECURE = "Secure"
    DEVELOPING = "Developing"
    MISSING = "Missing"


class _CamelModel(BaseModel):
    """Serialises to the camelCase keys the frontend reads."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Tag(_CamelModel):
    name: str
    status: TagStatus


class DiagnosticGrid(_CamelModel):
    ethical: GridStatus
    impact: GridStatus
    legal: GridStatus
    recs: GridStatus
    structure: GridStatus


class FrameworkNote(_CamelModel):
    expectation: str
    case: str


# =========================
# Assessment results
# =========================
class GatedResult(_CamelModel):
    """
    Returned for answers under the word gate.

    Only the word count and the instructional message are disclosed; every
    other field is pinned to None so a gated result can never carry a
    score or the model answer.
    """
    gated: Literal[True] = True
    word_count: int
    message: str

    score: None = None
    feedback: None = None
    notes: None = None
    strengths: None = None
    tags: None = None
    grid: None = None
    framework: None = None
    model_answer: None = None


class MarkedResult(_CamelModel):
    gated: Literal[False] = False
    word_count: int
    score: int = Field(..., ge=0, le=10)
    feedback: str
    notes: List[str]
    strengths: List[str] = Field(..., max_length=3)
    tags: List[Tag]
    grid: DiagnosticGrid
    framework: Dict[str, FrameworkNote]
    model_answer: str


AssessmentResult = Union[GatedResult, MarkedResult]


# =========================
# HTTP payloads
# =========================
class UnlockRequest(BaseModel):
    code: Any = None


class MarkRequest(_CamelModel):
    answer_text: Any = None


class MarkResponse(_CamelModel):
    ok: bool = True
    result: AssessmentResult


class ConfigResponse(_CamelModel):
    ok: bool = True
    course_back_url: str
    next_lesson_url: str
    question_text: str
    template_text: str
    target_words: str
    min_words_gate: int
