# app/engine/content.py

"""
Fixed task content: question, answer template, model answer and the
framework reference notes disclosed after the word gate.

QUESTION_TEXT and TEMPLATE_TEXT are served to the UI and never
interpreted by the engine.
"""

from types import MappingProxyType
from typing import Mapping


QUESTION_TEXT = """Evaluate the SmartTown Council AI system.

In your response, explain:
1) Two ethical or legal failures in how the AI system was designed or used
2) Why these failures mattered for individuals or the public
3) Two actions the council should have taken to use AI more responsibly

Aim for 100–250 words."""

TEMPLATE_TEXT = """1) Key ethical or legal failures
- Failure 1:
- Failure 2:

2) Why these failures mattered
- Impact on individuals:
- Impact on trust or fairness:

3) What should have been done differently
- Action 1:
- Action 2:"""

MODEL_ANSWER = """1. Key ethical or legal failures

One major failure was the use of facial recognition without clear public consent or transparency. Residents were not properly informed about how their data would be collected or used. A second failure was the lack of sufficient testing for bias and accuracy before deployment, which increased the risk of misidentification.

2. Why these failures mattered

These failures mattered because facial recognition can directly affect people’s rights and wellbeing. Individuals could be wrongly identified, questioned, or monitored, causing stress and harm. The lack of transparency also damaged public trust, as people felt watched rather than protected. When AI systems are introduced without openness or safeguards, they risk reinforcing unfairness and discrimination, particularly for certain groups.

3. What should have been done differently

First, the council should have completed a Data Protection Impact Assessment (DPIA) and clearly explained the system to the public, including how data would be stored and protected. Second, the system should have been independently tested for bias and accuracy before use, with clear limits on where and when it could operate. These steps would have supported fairer, more responsible use of AI."""


# Read-only views so a caller cannot edit the shared reference data.
FRAMEWORK_NOTES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "UK GDPR & Data Protection Act 2018": MappingProxyType({
        "expectation": (
            "Personal data, and especially biometric data, must be processed "
            "lawfully, fairly and transparently, with a clear lawful basis."
        ),
        "case": (
            "Residents were not told their faces were being captured or how "
            "the images would be used, stored or shared."
        ),
    }),
    "Data Protection Impact Assessment (DPIA)": MappingProxyType({
        "expectation": (
            "High-risk processing such as public facial recognition requires a "
            "DPIA before deployment, identifying risks and mitigations."
        ),
        "case": (
            "The council deployed the system without assessing privacy, "
            "accuracy or security risks in advance."
        ),
    }),
    "Equality Act 2010": MappingProxyType({
        "expectation": (
            "Public bodies must avoid discrimination and consider the impact "
            "of their decisions on people with protected characteristics."
        ),
        "case": (
            "The system was not tested for bias, so some groups faced a higher "
            "risk of being wrongly identified."
        ),
    }),
    "Responsible AI principles": MappingProxyType({
        "expectation": (
            "AI systems should be accurate, accountable and subject to human "
            "oversight, with clear limits on where and when they operate."
        ),
        "case": (
            "There was no independent testing, no governance process and no "
            "published policy on how alerts would be acted on."
        ),
    }),
})


# --------------------------------------------------
# CANNED MESSAGES
# --------------------------------------------------
GATED_MESSAGE = (
    "Please add to your answer.\n"
    "This response is too short to demonstrate evaluation.\n"
    "Aim for 100–250 words and address all parts of the question."
)

STRONG_FEEDBACK = (
    "Strong response — you identified key issues, explained impact, "
    "and gave practical improvements."
)

FEEDBACK_HEADER = "To improve:"

NOTE_FAILURES_ONE = "Failures: Identify two clear ethical/legal failures (not just one)."
NOTE_FAILURES_NONE = "Failures: Identify two clear ethical/legal failures."
NOTE_IMPACT = "Impact: Explain why the failures mattered (harm to people and/or trust/fairness)."
NOTE_RECS_VAGUE = "Recommendations: Give two practical actions the council should take (not vague)."
NOTE_RECS_NONE = "Recommendations: Provide two practical actions the council should take."
NOTE_LANGUAGE = "Language: Use at least one key term (e.g., GDPR, consent, bias, transparency, DPIA)."
NOTE_STRUCTURE = "Structure: Use the template headings so your evaluation is easy to follow."
NOTE_TOO_SHORT = "Length: Aim for 100–250 words (yours is a bit short)."
NOTE_TOO_LONG = "Length: Aim for 100–250 words (yours is a bit long)."

STRENGTH_FAILURES = "You identified more than one distinct ethical or legal failure."
STRENGTH_IMPACT = "You explained why the failures mattered for people or public trust."
STRENGTH_RECOMMENDATIONS = "You suggested practical actions the council could take."
STRENGTH_LANGUAGE = "You used relevant ethical and legal terminology."
STRENGTH_STRUCTURE = "Your answer follows a clear structure."
MAX_STRENGTHS = 3
