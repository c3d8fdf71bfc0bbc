import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, List, Optional

from selection.models import RawTrack, ScoredTrack, SelectionConfig
from selection.ordering import sort_tracks
from selection.scorer import combine_scores, diversity_score, score_track
from selection.selector import select_best_tracks
from selection.validate import deduplicate

logger = logging.getLogger(__name__)


def rescore_diversity(ranked: List[ScoredTrack], prioritize_popularity: bool) -> List[ScoredTrack]:
    """Recompute diversity for each track against the tracks ranked above it."""
    pool = [s.track for s in ranked]
    rescored = []
    for index, scored in enumerate(ranked):
        diversity = diversity_score(scored.track, pool[:index], pool)
        rescored.append(replace(
            scored,
            diversity_score=diversity,
            score=combine_scores(
                scored.quality_score,
                scored.relevance_score,
                diversity,
                prioritize_popularity,
            ),
        ))
    return rescored


def rank_tracks(
    tracks: Iterable[RawTrack],
    query: str = "",
    config: Optional[SelectionConfig] = None,
    *,
    now: Optional[datetime] = None,
) -> List[ScoredTrack]:
    config = config or SelectionConfig()
    valid = deduplicate(tracks or [])
    if not valid:
        return []

    first_pass = sort_tracks(
        score_track(t, query, config.prioritize_popularity, now) for t in valid
    )
    ranked = sort_tracks(rescore_diversity(first_pass, config.prioritize_popularity))
    logger.debug("Ranked %d tracks for query %r", len(ranked), query)
    return ranked


def select_tracks(
    tracks: Iterable[RawTrack],
    query: str = "",
    config: Optional[SelectionConfig] = None,
    *,
    now: Optional[datetime] = None,
) -> List[RawTrack]:
    """Turn a raw catalog response into a short, diverse list of tracks.

    Deterministic for a given input, query, config and ``now``: malformed and
    duplicate records are dropped, the rest are scored, ranked twice (the second
    time with diversity measured against higher-ranked tracks) and picked
    greedily under per-artist, per-genre and per-album caps.
    """
    config = config or SelectionConfig()
    if config.max_results <= 0:
        return []

    ranked = rank_tracks(tracks, query, config, now=now)
    selected = select_best_tracks(ranked, config)
    logger.debug("Selected %d of %d ranked tracks", len(selected), len(ranked))
    return [s.track for s in selected]
