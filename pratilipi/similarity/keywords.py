"""
Keyword weighting tables.

Matches on these terms count for more than generic word overlap, which keeps
the score focused on shared business vocabulary.
"""

from typing import List, Sequence

IMPORTANT_KEYWORDS = (
    "customer", "service", "support", "chat", "communication", "mobile", "platform",
    "payment", "fraud", "detection", "analytics", "marketplace", "rental", "accommodation",
)

INDUSTRY_KEYWORDS = (
    "customer service", "customer support", "communication", "chat", "helpdesk",
    "payment", "fintech", "marketplace", "travel", "rental", "accommodation",
    "fraud", "security", "analytics", "e-commerce", "retail",
)


def keyword_similarity(keywords: Sequence[str], text_a: str, text_b: str) -> float:
    """
    Share of keywords present in both texts among those present in either.

    Args:
        keywords: Keyword table to check, matched as case-insensitive substrings
        text_a: First text
        text_b: Second text

    Returns:
        matches / total, or 0.0 when neither text mentions any keyword
    """
    text_a = text_a.lower()
    text_b = text_b.lower()
    matches = 0
    total = 0
    for keyword in keywords:
        in_a = keyword in text_a
        in_b = keyword in text_b
        if in_a or in_b:
            total += 1
            if in_a and in_b:
                matches += 1
    return matches / total if total else 0.0


def shared_keywords(keywords: Sequence[str], text_a: str, text_b: str) -> List[str]:
    """Keywords found in both texts, in table order."""
    text_a = text_a.lower()
    text_b = text_b.lower()
    return [keyword for keyword in keywords if keyword in text_a and keyword in text_b]
