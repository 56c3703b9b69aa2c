# src/kastenator/critique.py
"""Critique generation for atom candidates.

Rule-based critique collects every issue it finds (unlike validation,
which stops at the first failing gate). Generated critique goes through
an LLMService and falls back to the rules on any failure.
"""

from __future__ import annotations

import logging

from kastenator.models import AtomCandidate
from kastenator.prompts import build_critique_prompt
from kastenator.providers import LLMService
from kastenator.validator import validate_explanation

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 10
MAX_TITLE_LENGTH = 80
MIN_EVIDENCE_LENGTH = 30

TITLE_TOO_SHORT = "Title is too short to be descriptive."
TITLE_TOO_LONG = "Title is too long. Aim for concise but complete."
NO_EVIDENCE = "No supporting evidence provided. Atoms should trace to sources."
SPARSE_EVIDENCE = "Evidence is sparse. Include enough context to verify the claim."
NO_RELATED_ATOMS = "No related atoms linked. Consider connections to existing knowledge."
NO_ISSUES = "No significant issues identified. Ready for creation."


def critique_issues(candidate: AtomCandidate) -> list[str]:
    """List every rule-based issue with a candidate, in a fixed order."""
    issues: list[str] = []

    title = candidate.suggested_title
    if len(title) < MIN_TITLE_LENGTH:
        issues.append(TITLE_TOO_SHORT)
    if len(title) > MAX_TITLE_LENGTH:
        issues.append(TITLE_TOO_LONG)

    if not candidate.evidence:
        issues.append(NO_EVIDENCE)
    elif len(candidate.evidence) < MIN_EVIDENCE_LENGTH:
        issues.append(SPARSE_EVIDENCE)

    validation = validate_explanation(candidate.concept, candidate.explanation)
    if not validation.valid:
        issues.append(validation.feedback)

    if not candidate.related_atoms:
        issues.append(NO_RELATED_ATOMS)

    return issues


def generate_rule_based_critique(candidate: AtomCandidate) -> str:
    """Critique a candidate with heuristics only."""
    issues = critique_issues(candidate)
    if not issues:
        return NO_ISSUES
    return "\n\n".join(issues)


class CritiqueGenerator:
    """Chooses between generated and rule-based critique.

    Args:
        llm_service: Service wrapping the configured provider (may hold no client).
        use_llm: Whether generated critique is enabled at all.
    """

    def __init__(self, llm_service: LLMService, use_llm: bool = True) -> None:
        self.llm_service = llm_service
        self.use_llm = use_llm

    def generate_critique(self, candidate: AtomCandidate) -> str:
        """Synchronous critique, always rule-based."""
        return generate_rule_based_critique(candidate)

    def should_use_llm(self) -> bool:
        return self.use_llm and self.llm_service.is_available()

    async def agenerate_critique(self, candidate: AtomCandidate, source_content: str = "") -> str:
        """Critique using the LLM when enabled and available, else the rules."""
        if not self.should_use_llm():
            return generate_rule_based_critique(candidate)

        prompt = build_critique_prompt(
            candidate.concept,
            candidate.explanation,
            candidate.evidence,
            source_content,
        )
        result = await self.llm_service.complete(prompt)
        if result.success:
            return result.content

        logger.warning("LLM critique failed: %s. Falling back to rules.", result.error)
        return generate_rule_based_critique(candidate)
