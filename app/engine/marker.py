# app/engine/marker.py

"""
ETHICS RUBRIC EVALUATOR (10 marks).

Deterministic, rule-based marking of a single free-text answer.

GATE:
- < 50 words: "Please add..." only. No score, no rubric detail,
  no framework notes, no model answer.
- >= 50 words: score + feedback + strengths + tags + grid,
  framework notes and the model answer.

The gate is enforced here rather than in the API layer so that no
caller can obtain the model answer for a short submission.
"""

from typing import Dict, List
import logging

from app.engine import content
from app.engine.criteria import (
    ImpactSignals,
    RubricBreakdown,
    apply_rubric,
    word_count,
)
from app.engine.rubric import MAX_SCORE, MIN_WORDS_GATE
from app.schemas.marking import (
    AssessmentResult,
    CriterionLevel,
    DiagnosticGrid,
    FrameworkNote,
    GatedResult,
    GridStatus,
    MarkedResult,
    Tag,
    TagStatus,
)

logger = logging.getLogger(__name__)


TAG_ETHICAL = "Ethical awareness"
TAG_LEGAL = "Legal awareness"
TAG_IMPACT = "Impact evaluation"
TAG_PRACTICAL = "Practical judgement"
TAG_STRUCTURE = "Structure & clarity"

_GRID_STATUS = {
    CriterionLevel.SECURE: GridStatus.SECURE,
    CriterionLevel.DEVELOPING: GridStatus.DEVELOPING,
    CriterionLevel.MISSING: GridStatus.MISSING,
}


# -------------------------------------------------
# Level -> presentation helpers
# -------------------------------------------------

def tag_status(level: int) -> TagStatus:
    if level >= CriterionLevel.SECURE:
        return TagStatus.OK
    if level == CriterionLevel.DEVELOPING:
        return TagStatus.MID
    return TagStatus.BAD


def grid_status(level: int) -> GridStatus:
    return _GRID_STATUS[CriterionLevel(level)]


def legal_tag_level(breakdown: RubricBreakdown) -> CriterionLevel:
    """Legal awareness tag: follows the language criterion level."""
    return breakdown.language.level


def legal_grid_level(uses_terms: bool) -> CriterionLevel:
    """Legal grid row: read straight from the key-term detector."""
    return CriterionLevel.SECURE if uses_terms else CriterionLevel.MISSING


def impact_tag_level(breakdown: RubricBreakdown) -> CriterionLevel:
    """Impact evaluation tag: follows the scored impact level."""
    return breakdown.impact.level


def impact_grid_level(signals: ImpactSignals) -> CriterionLevel:
    """
    Impact grid row: counts the three impact detectors.

    All three present is SECURE, none is MISSING, anything in between is
    DEVELOPING. This can disagree with the tag (a lone mention of people
    shows as Developing here but "bad" on the tag).
    """
    detected = sum((signals.individuals, signals.harm, signals.trust_or_fairness))
    if detected == 3:
        return CriterionLevel.SECURE
    if detected == 0:
        return CriterionLevel.MISSING
    return CriterionLevel.DEVELOPING


def build_strengths(breakdown: RubricBreakdown) -> List[str]:
    checks = (
        (breakdown.failures.level == CriterionLevel.SECURE, content.STRENGTH_FAILURES),
        (breakdown.impact.level >= CriterionLevel.DEVELOPING, content.STRENGTH_IMPACT),
        (breakdown.recommendations.level >= CriterionLevel.DEVELOPING, content.STRENGTH_RECOMMENDATIONS),
        (breakdown.uses_terms, content.STRENGTH_LANGUAGE),
        (breakdown.structure.points > 0, content.STRENGTH_STRUCTURE),
    )
    strengths = [sentence for passed, sentence in checks if passed]
    return strengths[:content.MAX_STRENGTHS]


def build_tags(breakdown: RubricBreakdown) -> List[Tag]:
    ethical_level = max(breakdown.failures.level, breakdown.impact.level)
    return [
        Tag(name=TAG_ETHICAL, status=tag_status(ethical_level)),
        Tag(name=TAG_LEGAL, status=tag_status(legal_tag_level(breakdown))),
        Tag(name=TAG_IMPACT, status=tag_status(impact_tag_level(breakdown))),
        Tag(name=TAG_PRACTICAL, status=tag_status(breakdown.recommendations.level)),
        Tag(name=TAG_STRUCTURE, status=tag_status(breakdown.structure.level)),
    ]


def build_grid(breakdown: RubricBreakdown) -> DiagnosticGrid:
    return DiagnosticGrid(
        ethical=grid_status(breakdown.failures.level),
        impact=grid_status(impact_grid_level(breakdown.impact_signals)),
        legal=grid_status(legal_grid_level(breakdown.uses_terms)),
        recs=grid_status(breakdown.recommendations.level),
        structure=grid_status(breakdown.structure.level),
    )


def build_feedback(notes: List[str]) -> str:
    if not notes:
        return content.STRONG_FEEDBACK
    return content.FEEDBACK_HEADER + "\n- " + "\n- ".join(notes)


def build_framework() -> Dict[str, FrameworkNote]:
    return {
        name: FrameworkNote(**note)
        for name, note in content.FRAMEWORK_NOTES.items()
    }


class RubricEvaluator:
    """
    PURE RULE-BASED ETHICS MARKER.

    Holds no per-request state; one instance is shared across requests.
    """

    ENGINE_VERSION = "ethics_rubric_v1"

    def __init__(self, min_words_gate: int = MIN_WORDS_GATE, max_score: int = MAX_SCORE):
        self.min_words_gate = min_words_gate
        self.max_score = max_score

    def evaluate(self, answer_text: str) -> AssessmentResult:
        """
        Mark one answer.

        Args:
            answer_text: Learner's answer, already length-capped by the caller

        Returns:
            GatedResult below the word gate, otherwise MarkedResult
        """
        text = answer_text or ""
        words = word_count(text)

        # HARD GATE: nothing else is computed under the threshold
        if words < self.min_words_gate:
            logger.debug(f"Answer gated at {words} words (< {self.min_words_gate})")
            return GatedResult(word_count=words, message=content.GATED_MESSAGE)

        breakdown = apply_rubric(text, words)
        score = max(0, min(self.max_score, breakdown.total))

        logger.debug(
            f"Marked {words} words: failures={breakdown.failures.points} "
            f"impact={breakdown.impact.points} recs={breakdown.recommendations.points} "
            f"language={breakdown.language.points} structure={breakdown.structure.points} "
            f"total={score}"
        )

        return MarkedResult(
            word_count=words,
            score=score,
            feedback=build_feedback(breakdown.notes),
            notes=list(breakdown.notes),
            strengths=build_strengths(breakdown),
            tags=build_tags(breakdown),
            grid=build_grid(breakdown),
            framework=build_framework(),
            model_answer=content.MODEL_ANSWER,
        )


def create_rubric_evaluator(min_words_gate: int = MIN_WORDS_GATE) -> RubricEvaluator:
    """Create a configured RubricEvaluator."""
    return RubricEvaluator(min_words_gate=min_words_gate)


_default_evaluator = RubricEvaluator()


def evaluate(answer_text: str) -> AssessmentResult:
    """Mark an answer with the default evaluator."""
    return _default_evaluator.evaluate(answer_text)
