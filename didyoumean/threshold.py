# DidYouMean - Threshold
# ======================
"""
Picks the edit-distance tolerance for a search word.

Short words get a single edit; longer words get one edit per three
characters.
"""

from typing import Optional

# Words up to this length always get SHORT_WORD_THRESHOLD
SHORT_WORD_LENGTH = 4
SHORT_WORD_THRESHOLD = 1

# Longer words: one allowed edit per LENGTH_DIVISOR characters
LENGTH_DIVISOR = 3


def resolve_threshold(word: str, explicit: Optional[int] = None) -> int:
    """
    Resolve the similarity threshold for ``word``.

    Args:
        word: The searched value
        explicit: Caller-supplied threshold; returned unchanged when given (zero included)

    Returns:
        Maximum edit distance a suggestion may have
    """
    if explicit is not None:
        return explicit

    if len(word) <= SHORT_WORD_LENGTH:
        return SHORT_WORD_THRESHOLD
    return len(word) // LENGTH_DIVISOR
