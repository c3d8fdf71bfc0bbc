from datetime import datetime, timezone
from typing import Optional, Sequence

from selection.models import RawTrack, ScoredTrack


WEIGHTS = {
    "popularity": {"quality": 0.4, "relevance": 0.4, "diversity": 0.2},
    "relevance": {"quality": 0.3, "relevance": 0.5, "diversity": 0.2},
}

MAX_QUALITY_POINTS = 100
MAX_RELEVANCE_POINTS = 100
MIN_TOKEN_LENGTH = 3
SECONDS_PER_YEAR = 60 * 60 * 24 * 365

ARTIST_PENALTY = 0.3
GENRE_PENALTY = 0.2
ALBUM_PENALTY = 0.25
GENRE_RARITY_BONUS = 0.2


def parse_release_date(value) -> Optional[datetime]:
    if not value:
        return None
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in ("%Y", "%Y-%m"):
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def duration_points(duration_ms) -> int:
    if not duration_ms:
        return 0
    minutes = duration_ms / 60000
    if 2 <= minutes <= 6:
        return 15
    if 1 <= minutes <= 10:
        return 10
    return 5


def release_points(release_date, now: Optional[datetime] = None) -> int:
    released = parse_release_date(release_date)
    if released is None:
        return 0
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    age = (now - released).total_seconds() / SECONDS_PER_YEAR
    if not 0 <= age <= 50:
        return 0
    # Classic era
    if 5 <= age <= 30:
        return 15
    return 10


def quality_score(track: RawTrack, now: Optional[datetime] = None) -> float:
    """Metadata completeness of a track, in [0, 1]."""
    points = 0
    if track.preview_url:
        points += 20
    if track.title and track.artist:
        points += 15
    if track.album:
        points += 10
    if track.genre:
        points += 10
    points += duration_points(track.duration_ms)
    if track.artwork_url:
        points += 10
    if track.track_number and track.track_number > 0:
        points += 5
    points += release_points(track.release_date, now)
    return min(points / MAX_QUALITY_POINTS, 1.0)


def _field_points(field_text: str, query: str, tokens: Sequence[str], whole: int, per_token: int) -> int:
    if query in field_text:
        return whole
    return per_token * sum(1 for token in tokens if token in field_text)


def relevance_score(track: RawTrack, query: str) -> float:
    """Textual match strength between the query and the track, in [0, 1].

    An empty query is neutral (0.5). Otherwise each field earns points when it
    contains the whole query, or a smaller amount per query word (longer than
    two characters) it contains. Album matches only ever count per word.
    """
    if not query:
        return 0.5

    query_lower = query.lower()
    tokens = [w for w in query_lower.split() if len(w) >= MIN_TOKEN_LENGTH]
    title = (track.title or "").lower()
    artist = (track.artist or "").lower()
    genre = (track.genre or "").lower()
    album = (track.album or "").lower()

    points = 0
    points += _field_points(title, query_lower, tokens, whole=40, per_token=15)
    points += _field_points(artist, query_lower, tokens, whole=20, per_token=10)
    points += _field_points(genre, query_lower, tokens, whole=15, per_token=5)
    points += 3 * sum(1 for token in tokens if token in album)
    return min(points / MAX_RELEVANCE_POINTS, 1.0)


def _same(left: Optional[str], right: Optional[str]) -> bool:
    return (left or "").lower() == (right or "").lower()


def diversity_score(
    track: RawTrack,
    selected: Sequence[RawTrack],
    pool: Sequence[RawTrack],
) -> float:
    """How little a track repeats the artist, genre and album of ``selected``."""
    if not selected:
        return 1.0

    score = 1.0
    score -= ARTIST_PENALTY * sum(1 for t in selected if _same(t.artist, track.artist))
    if track.genre:
        score -= GENRE_PENALTY * sum(1 for t in selected if _same(t.genre, track.genre))
    if track.album:
        score -= ALBUM_PENALTY * sum(1 for t in selected if _same(t.album, track.album))

    if track.genre and pool:
        frequency = sum(1 for t in pool if _same(t.genre, track.genre))
        score += GENRE_RARITY_BONUS * (1 - frequency / len(pool))

    return max(0.0, min(1.0, score))


def combine_scores(quality: float, relevance: float, diversity: float, prioritize_popularity: bool) -> float:
    weights = WEIGHTS["popularity" if prioritize_popularity else "relevance"]
    return (
        weights["quality"] * quality +
        weights["relevance"] * relevance +
        weights["diversity"] * diversity
    )


def score_track(
    track: RawTrack,
    query: str,
    prioritize_popularity: bool,
    now: Optional[datetime] = None,
) -> ScoredTrack:
    quality = quality_score(track, now)
    relevance = relevance_score(track, query)
    diversity = 1.0
    return ScoredTrack(
        track=track,
        quality_score=quality,
        relevance_score=relevance,
        diversity_score=diversity,
        score=combine_scores(quality, relevance, diversity, prioritize_popularity),
    )
