from collections import Counter
from typing import List

from selection.models import ScoredTrack, SelectionConfig


GUARANTEED_PICKS = 3
MAX_PER_ARTIST = 2
MAX_PER_GENRE = 3
MAX_PER_ALBUM = 2


def select_best_tracks(scored: List[ScoredTrack], config: SelectionConfig) -> List[ScoredTrack]:
    """Greedily pick up to ``config.max_results`` tracks from a ranked list."""
    top_k = config.max_results
    if top_k <= 0:
        return []

    remaining = [t for t in scored if t.quality_score >= config.min_quality_score]

    if not config.ensure_genre_diversity:
        return remaining[:top_k]

    selected = []
    taken = set()
    artists = Counter()
    genres = Counter()
    albums = Counter()

    for i, cand in enumerate(remaining):
        if len(selected) >= top_k:
            break

        artist_key = (cand.track.artist or "").lower()
        genre_key = (cand.track.genre or "").lower()
        album_key = (cand.track.album or "").lower()

        is_diverse = (
            artists[artist_key] < MAX_PER_ARTIST and
            (not genre_key or genres[genre_key] < MAX_PER_GENRE) and
            (not album_key or albums[album_key] < MAX_PER_ALBUM)
        )

        if is_diverse or len(selected) < GUARANTEED_PICKS:
            selected.append(cand)
            taken.add(i)
            artists[artist_key] += 1
            if genre_key:
                genres[genre_key] += 1
            if album_key:
                albums[album_key] += 1

    # Relax the caps when too few tracks survived them
    if len(selected) < top_k:
        for i, cand in enumerate(remaining):
            if len(selected) >= top_k:
                break
            if i not in taken:
                selected.append(cand)

    return selected[:top_k]
