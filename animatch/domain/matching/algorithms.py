"""Pure string similarity algorithms for title matching.

Strings are compared per character (Unicode code point), never per byte,
so titles in non-Latin scripts are scored correctly.
"""

from rapidfuzz.distance import Jaro, Prefix

# Winkler prefix bonus bounds; a scale above 0.25 can push the score past 1.0
DEFAULT_PREFIX_SCALE = 0.1
MAX_PREFIX_SCALE = 0.25
MAX_PREFIX_LENGTH = 4


def jaro_similarity(s1: str, s2: str) -> float:
    """Calculate the plain Jaro similarity between two strings."""
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0
    return Jaro.similarity(s1, s2)


def common_prefix_length(s1: str, s2: str, limit: int = MAX_PREFIX_LENGTH) -> int:
    """Count leading characters shared by both strings, up to ``limit``."""
    return int(Prefix.similarity(s1[:limit], s2[:limit]))


def jaro_winkler_distance(s1: str, s2: str, p: float | None = None) -> float:
    """Calculate the Jaro-Winkler similarity between two strings.

    The Winkler bonus is applied to every non-zero Jaro score, not only
    above a boost threshold.

    Args:
        s1: First string, usually an already-sanitized title
        s2: Second string
        p: Prefix scaling factor, defaults to 0.1 and is clamped to [0, 0.25]

    Returns:
        Similarity in [0, 1]; 1.0 for identical strings (including two empty
        strings) and 0.0 when exactly one string is empty.
    """
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    scale = DEFAULT_PREFIX_SCALE if p is None else p
    scale = min(max(scale, 0.0), MAX_PREFIX_SCALE)

    jaro = jaro_similarity(s1, s2)
    if jaro == 0.0:
        return 0.0

    prefix = common_prefix_length(s1, s2)
    return jaro + prefix * scale * (1.0 - jaro)
