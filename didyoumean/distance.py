# DidYouMean - Distance
# =====================
"""
Levenshtein edit distance backed by RapidFuzz.

RapidFuzz compares Python strings by code point, so accented and
non-latin characters count as a single edit.
"""

from rapidfuzz.distance import Levenshtein

# Default tolerance for is_similar when no threshold is given
DEFAULT_SIMILARITY_THRESHOLD = 2


def distance(a: str, b: str) -> int:
    """Minimum number of insertions, deletions or substitutions turning a into b."""
    return Levenshtein.distance(a, b)


def is_similar(a: str, b: str, threshold: int = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
    """
    Check whether two strings are within ``threshold`` edits of each other.

    A negative threshold never matches.
    """
    if threshold < 0:
        return False
    # score_cutoff lets RapidFuzz bail out once the bound is exceeded
    return Levenshtein.distance(a, b, score_cutoff=threshold) <= threshold
