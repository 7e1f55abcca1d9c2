"""
Mood scale shared by both backup formats.

Both apps use five moods. Daylio numbers them 1 (best) to 5 (worst), Year in
Pixels 1 (worst) to 5 (best), so converting either way is ``6 - x``.
"""
import math

MIN_MOOD = 1
MAX_MOOD = 5
MOOD_POLARITY_PIVOT = MAX_MOOD + 1


def clamp(value: int, minimum: int = MIN_MOOD, maximum: int = MAX_MOOD) -> int:
    return min(max(value, minimum), maximum)


def invert_mood(value: int) -> int:
    """Translate between Daylio ``mood`` and Pixels ``value``."""
    return MOOD_POLARITY_PIVOT - value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
