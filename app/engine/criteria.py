# app/engine/criteria.py

"""
Criterion scorers for the ethics rubric.

Each scorer takes the lower-cased answer text and returns a CriterionScore.
They are independent of one another; the evaluator simply runs them in
order and sums the points.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional
import re

from app.engine import content
from app.engine.rubric import (
    ACTION_INDICATORS,
    FAILURE_THEMES,
    IMPACT_FAIRNESS,
    IMPACT_HARM,
    IMPACT_INDIVIDUALS,
    IMPACT_TRUST,
    KEY_TERMS,
    MIN_ACTION_INDICATORS,
    MIN_RECOMMENDATION_THEMES,
    RECOMMENDATION_THEMES,
    STRUCTURE_THEMES,
    TARGET_MAX_WORDS,
    TARGET_MIN_WORDS,
    Theme,
)
from app.schemas.marking import CriterionLevel


_WHITESPACE = re.compile(r"\s+")

_ACTION_PATTERN = re.compile(
    "|".join(r"\b" + re.escape(word) + r"\b" for word in ACTION_INDICATORS),
    re.IGNORECASE,
)


@dataclass(frozen=True)
class CriterionScore:
    """Outcome of one rubric criterion."""
    points: int
    level: CriterionLevel
    note: Optional[str] = None


@dataclass(frozen=True)
class ImpactSignals:
    individuals: bool
    harm: bool
    trust: bool
    fairness: bool

    @property
    def trust_or_fairness(self) -> bool:
        return self.trust or self.fairness


@dataclass(frozen=True)
class RubricBreakdown:
    """All five criterion outcomes plus the raw signals the views need."""
    failures: CriterionScore
    impact: CriterionScore
    recommendations: CriterionScore
    language: CriterionScore
    structure: CriterionScore
    impact_signals: ImpactSignals
    uses_terms: bool
    notes: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(
            c.points for c in (
                self.failures, self.impact, self.recommendations,
                self.language, self.structure,
            )
        )


# -------------------------------------------------
# Text helpers
# -------------------------------------------------

def word_count(text: Optional[str]) -> int:
    """Count whitespace-separated tokens; blank input counts as 0."""
    stripped = (text or "").strip()
    if not stripped:
        return 0
    return len([token for token in _WHITESPACE.split(stripped) if token])


def count_matching_themes(lowered_text: str, themes: Iterable[Theme]) -> int:
    return sum(1 for theme in themes if theme.matches(lowered_text))


def count_action_indicators(text: str) -> int:
    """Whole-word, case-insensitive occurrences of action words."""
    return len(_ACTION_PATTERN.findall(text or ""))


# -------------------------------------------------
# Criteria
# -------------------------------------------------

def score_failures(lowered_text: str) -> CriterionScore:
    """Failures identified (3 marks): two or more distinct themes."""
    themes_found = count_matching_themes(lowered_text, FAILURE_THEMES)

    if themes_found >= 2:
        return CriterionScore(3, CriterionLevel.SECURE)
    if themes_found == 1:
        return CriterionScore(1, CriterionLevel.DEVELOPING, content.NOTE_FAILURES_ONE)
    return CriterionScore(0, CriterionLevel.MISSING, content.NOTE_FAILURES_NONE)


def detect_impact(lowered_text: str) -> ImpactSignals:
    return ImpactSignals(
        individuals=IMPACT_INDIVIDUALS.matches(lowered_text),
        harm=IMPACT_HARM.matches(lowered_text),
        trust=IMPACT_TRUST.matches(lowered_text),
        fairness=IMPACT_FAIRNESS.matches(lowered_text),
    )


def score_impact(signals: ImpactSignals) -> CriterionScore:
    """
    Impact explained (3 marks).

    Never drops below 1 point: even an answer with no impact language
    gets the floor mark alongside the improvement note.
    """
    people_harmed = signals.individuals and signals.harm

    if people_harmed and signals.trust_or_fairness:
        return CriterionScore(3, CriterionLevel.SECURE)
    if people_harmed or signals.trust_or_fairness:
        return CriterionScore(2, CriterionLevel.DEVELOPING)
    return CriterionScore(1, CriterionLevel.MISSING, content.NOTE_IMPACT)


def score_recommendations(lowered_text: str, original_text: str) -> CriterionScore:
    """Recommendations (2 marks): two themes phrased as actions."""
    rec_hits = count_matching_themes(lowered_text, RECOMMENDATION_THEMES)
    action_markers = count_action_indicators(original_text)

    if rec_hits >= MIN_RECOMMENDATION_THEMES and action_markers >= MIN_ACTION_INDICATORS:
        return CriterionScore(2, CriterionLevel.SECURE)
    if rec_hits >= 1:
        return CriterionScore(1, CriterionLevel.DEVELOPING, content.NOTE_RECS_VAGUE)
    return CriterionScore(0, CriterionLevel.MISSING, content.NOTE_RECS_NONE)


def score_language(uses_terms: bool) -> CriterionScore:
    if uses_terms:
        return CriterionScore(1, CriterionLevel.SECURE)
    return CriterionScore(0, CriterionLevel.MISSING, content.NOTE_LANGUAGE)


def score_structure(lowered_text: str) -> CriterionScore:
    # Absent structure still reports DEVELOPING, not MISSING.
    if count_matching_themes(lowered_text, STRUCTURE_THEMES) > 0:
        return CriterionScore(1, CriterionLevel.SECURE)
    return CriterionScore(0, CriterionLevel.DEVELOPING, content.NOTE_STRUCTURE)


def length_notes(words: int) -> List[str]:
    """Word-range guidance; not scored."""
    notes = []
    if words < TARGET_MIN_WORDS:
        notes.append(content.NOTE_TOO_SHORT)
    if words > TARGET_MAX_WORDS:
        notes.append(content.NOTE_TOO_LONG)
    return notes


def apply_rubric(answer_text: str, words: int) -> RubricBreakdown:
    """Run all five criteria in order and collect notes in the same order."""
    lowered = answer_text.lower()

    signals = detect_impact(lowered)
    uses_terms = KEY_TERMS.matches(lowered)

    failures = score_failures(lowered)
    impact = score_impact(signals)
    recommendations = score_recommendations(lowered, answer_text)
    language = score_language(uses_terms)
    structure = score_structure(lowered)

    notes = [
        c.note for c in (failures, impact, recommendations, language, structure)
        if c.note
    ]
    notes.extend(length_notes(words))

    return RubricBreakdown(
        failures=failures,
        impact=impact,
        recommendations=recommendations,
        language=language,
        structure=structure,
        impact_signals=signals,
        uses_terms=uses_terms,
        notes=notes,
    )
