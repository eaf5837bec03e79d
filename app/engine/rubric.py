# app/engine/rubric.py

"""
STATIC RUBRIC TABLES for the SmartTown Council ethics question.

Every detection rule is plain data: a theme name plus the lower-case
substrings that trigger it. The scoring functions iterate over these
tables generically, so a theme can be tested (or replaced) on its own.

Tables are tuples of frozen dataclasses and are never mutated at request
time; they are shared by every concurrent evaluation.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Theme:
    """A named cluster of alternative trigger substrings."""
    name: str
    triggers: Tuple[str, ...]

    def matches(self, lowered_text: str) -> bool:
        return any(trigger in lowered_text for trigger in self.triggers)


# --------------------------------------------------
# GATE & LENGTH GUIDANCE
# --------------------------------------------------
MIN_WORDS_GATE = 50
TARGET_MIN_WORDS = 100
TARGET_MAX_WORDS = 250
TARGET_WORDS_LABEL = "100–250"
MAX_SCORE = 10


# --------------------------------------------------
# 1) FAILURES IDENTIFIED (3 marks)
# --------------------------------------------------
FAILURE_THEMES: Tuple[Theme, ...] = (
    Theme("consent/transparency", ("consent", "transparent", "transparency", "informed", "notice", "public informed")),
    Theme("gdpr/lawful basis", ("gdpr", "lawful", "lawful basis", "data protection", "dpa", "privacy")),
    Theme("bias/fairness", ("bias", "biased", "fair", "fairness", "discrimin", "equal")),
    Theme("accuracy/misidentification", ("accur", "misidentif", "false positive", "false negative", "wrongly")),
    Theme("security/storage", ("secure", "security", "stored", "storage", "breach", "access control")),
    Theme("dpia/governance", ("dpia", "impact assessment", "governance", "oversight", "audit")),
)


# --------------------------------------------------
# 2) IMPACT EXPLAINED (3 marks)
# --------------------------------------------------
IMPACT_INDIVIDUALS = Theme("individuals", ("individual", "people", "resident", "person", "community"))
IMPACT_HARM = Theme("harm", ("harm", "stress", "wrongly", "misidentif", "discrimin", "unfair", "rights"))
IMPACT_TRUST = Theme("trust", ("trust", "confidence", "public trust", "reputation", "legitimacy"))
IMPACT_FAIRNESS = Theme("fairness", ("fairness", "discrimin", "unfair"))


# --------------------------------------------------
# 3) RECOMMENDATIONS (2 marks)
# --------------------------------------------------
RECOMMENDATION_THEMES: Tuple[Theme, ...] = (
    Theme("impact assessment", ("dpia", "impact assessment")),
    Theme("consent/notice", ("consent", "transparen", "public notice")),
    Theme("bias testing", ("bias", "fairness testing", "independent testing")),
    Theme("accuracy testing", ("accuracy testing", "pilot", "validate")),
    Theme("data minimisation", ("data minim", "retention", "delete")),
    Theme("security controls", ("security", "access control", "encryption")),
    Theme("usage limits", ("limits", "where", "when", "policy", "governance")),
)

# Matched as whole words/phrases against the original (not lower-cased) text.
ACTION_INDICATORS: Tuple[str, ...] = ("action", "should", "must", "need to", "recommend")
MIN_RECOMMENDATION_THEMES = 2
MIN_ACTION_INDICATORS = 2


# --------------------------------------------------
# 4) ETHICAL / LEGAL LANGUAGE (1 mark)
# --------------------------------------------------
KEY_TERMS = Theme(
    "key terms",
    ("gdpr", "dpia", "data protection", "privacy", "consent", "bias", "fairness", "transparency"),
)


# --------------------------------------------------
# 5) CLARITY & STRUCTURE (1 mark)
# --------------------------------------------------
STRUCTURE_THEMES: Tuple[Theme, ...] = (
    Theme("template headings", ("failure 1", "failure 2")),
    Theme("numbered parts", ("1)", "2)", "3)")),
    Theme("section phrases", ("key ethical", "why these failures", "what should have")),
)
