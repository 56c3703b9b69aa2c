# src/kastenator/validator.py
"""Rule-based validation of candidate explanations.

Gates run in order and the first failing gate decides the result:
length, hedging language, repetition of the concept, atomicity.
"""

import re

from kastenator.models import ValidationResult

MIN_EXPLANATION_LENGTH = 20

HEDGING_MARKERS = (
    "something like",
    "kind of",
    "sort of",
    "basically",
    "generally",
    "usually",
    "i think maybe",
)

# Share of concept words (longer than 3 chars) allowed to reappear in the explanation
REPETITION_THRESHOLD = 0.7
MIN_SIGNIFICANT_WORD_LENGTH = 3

CONJUNCTIONS = ("and", "also", "additionally", "furthermore", "moreover")
_MULTI_CONCEPT_PATTERNS = [
    re.compile(rf"\b{conj}\b.*\b(is|are|means|implies)\b", re.IGNORECASE)
    for conj in CONJUNCTIONS
]

TOO_BRIEF = ValidationResult(
    valid=False,
    feedback="Too brief. An atomic concept requires a substantive explanation.",
    suggestions=[
        "What is the core claim or idea?",
        "Why does this matter?",
        "How would you explain this to someone unfamiliar with the source?",
    ],
)

HEDGING = ValidationResult(
    valid=False,
    feedback="The explanation contains hedging language. Be precise.",
    suggestions=[
        "Remove qualifiers and state the concept directly",
        "If uncertain, identify what specifically is unclear",
    ],
)

REPEATS_CONCEPT = ValidationResult(
    valid=False,
    feedback="The explanation largely repeats the concept rather than explaining it.",
    suggestions=[
        "Explain what the concept means, not just what it is",
        "Add context or implications",
    ],
)

MULTIPLE_CONCEPTS = ValidationResult(
    valid=False,
    feedback="This may contain multiple concepts. Each atom should express one idea.",
    suggestions=[
        "Consider splitting into separate atoms",
        "Identify the primary concept and extract secondary ideas",
    ],
)

ACCEPTABLE = ValidationResult(
    valid=True,
    feedback="Explanation is acceptable. Consider: does this stand alone without the source?",
)


def is_too_brief(explanation: str) -> bool:
    return len(explanation) < MIN_EXPLANATION_LENGTH


def has_hedging(explanation: str) -> bool:
    lowered = explanation.lower()
    return any(marker in lowered for marker in HEDGING_MARKERS)


def repeats_concept(concept: str, explanation: str) -> bool:
    """True when most of the concept's significant words recur in the explanation."""
    concept_words = concept.lower().split()
    explanation_words = set(explanation.lower().split())
    overlap = [
        word
        for word in concept_words
        if word in explanation_words and len(word) > MIN_SIGNIFICANT_WORD_LENGTH
    ]
    return len(overlap) > len(concept_words) * REPETITION_THRESHOLD


def has_multiple_concepts(explanation: str) -> bool:
    # `.` stops at newlines, so the conjunction and verb must share a line
    return any(pattern.search(explanation) for pattern in _MULTI_CONCEPT_PATTERNS)


def validate_explanation(concept: str, explanation: str) -> ValidationResult:
    """Validate a user's explanation of a concept.

    Args:
        concept: The short concept the candidate was identified with.
        explanation: The user's explanation of it.

    Returns:
        A fresh ValidationResult. Invalid results carry suggestions;
        the valid result carries a reflective prompt and no suggestions.
    """
    if is_too_brief(explanation):
        return TOO_BRIEF.model_copy(deep=True)
    if has_hedging(explanation):
        return HEDGING.model_copy(deep=True)
    if repeats_concept(concept, explanation):
        return REPEATS_CONCEPT.model_copy(deep=True)
    if has_multiple_concepts(explanation):
        return MULTIPLE_CONCEPTS.model_copy(deep=True)
    return ACCEPTABLE.model_copy(deep=True)
