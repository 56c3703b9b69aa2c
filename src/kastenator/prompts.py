# src/kastenator/prompts.py
"""Prompt templates for generated critique."""

SOURCE_EXCERPT_LIMIT = 2000

CRITIQUE_PROMPT = """You are a rigorous knowledge management assistant helping to atomise notes into discrete concepts.

Evaluate the following atomic note candidate. Be direct and objective -- no praise, encouragement, or emotional padding. Focus only on issues that need addressing.

## Source Note Context
{source_excerpt}

## Candidate Atom
**Concept:** {concept}
**Explanation:** {explanation}
**Evidence:** {evidence}

## Evaluation Criteria
1. **Atomicity**: Does this express exactly one idea? Flag if multiple concepts are bundled
2. **Clarity**: Is the explanation clear and self-contained without the source?
3. **Substance**: Does it go beyond restating the concept?
4. **Evidence**: Is the supporting evidence sufficient and relevant?
5. **Accuracy**: Does the explanation faithfully represent the source material?

Provide a concise critique (2-4 sentences) identifying any issues. If the candidate is acceptable, state "No significant issues identified." Do not use bullet points or numbered lists."""


def build_critique_prompt(
    concept: str,
    explanation: str,
    evidence: str,
    source_content: str,
) -> str:
    """Build the critique prompt, including the start of the source note."""
    return CRITIQUE_PROMPT.format(
        source_excerpt=source_content[:SOURCE_EXCERPT_LIMIT],
        concept=concept,
        explanation=explanation,
        evidence=evidence,
    )
