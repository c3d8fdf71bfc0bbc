from functools import cmp_to_key
from typing import Iterable, List

from selection.models import ScoredTrack


# Differences at or below these thresholds fall through to the next criterion.
SCORE_EPSILON = 0.1
QUALITY_EPSILON = 0.05
RELEVANCE_EPSILON = 0.05


def _descending(left: float, right: float) -> int:
    if left > right:
        return -1
    if left < right:
        return 1
    return 0


def compare_tracks(left: ScoredTrack, right: ScoredTrack) -> int:
    if abs(left.score - right.score) > SCORE_EPSILON:
        return _descending(left.score, right.score)
    if abs(left.quality_score - right.quality_score) > QUALITY_EPSILON:
        return _descending(left.quality_score, right.quality_score)
    if abs(left.relevance_score - right.relevance_score) > RELEVANCE_EPSILON:
        return _descending(left.relevance_score, right.relevance_score)
    return _descending(left.diversity_score, right.diversity_score)


def sort_tracks(tracks: Iterable[ScoredTrack]) -> List[ScoredTrack]:
    """Order scored tracks best first.

    Near-ties on the total score are settled by quality, then relevance, then
    diversity. ``sorted`` is stable, so full ties keep their input order.
    """
    return sorted(tracks, key=cmp_to_key(compare_tracks))
