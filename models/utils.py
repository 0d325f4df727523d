"""Shared string helpers used for typo suggestions and fuzzy lookups."""

from difflib import SequenceMatcher


def similarity_score(s1: str, s2: str) -> float:
    """Calculate similarity between two strings.

    Substring matches score highly so that partial names ("kit" for
    "kitchen") are still suggested.

    Returns:
        Score between 0.0 and 1.0
    """
    if not s1 or not s2:
        return 0.0
    if s1 == s2:
        return 1.0
    if s1 in s2 or s2 in s1:
        return max(0.8, SequenceMatcher(None, s1, s2).ratio())
    return SequenceMatcher(None, s1, s2).ratio()


def find_similar_strings(needle: str, candidates: list[str], threshold: float = 0.6,
                         limit: int = 3) -> list[str]:
    """Find candidates similar to needle, best match first.

    Args:
        needle: String to look for
        candidates: Strings to compare against
        threshold: Minimum similarity score to include
        limit: Maximum number of results

    Returns:
        List of matching candidates sorted by descending score
    """
    needle_lower = needle.lower()
    scored = []
    for candidate in candidates:
        score = similarity_score(needle_lower, candidate.lower())
        if score >= threshold:
            scored.append((score, candidate))

    scored.sort(key=lambda x: x[0], reverse=True)
    return [candidate for _, candidate in scored[:limit]]
