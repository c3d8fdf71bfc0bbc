from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional


# iTunes field name -> RawTrack attribute
CATALOG_FIELDS = {
    "trackId": "track_id",
    "trackName": "title",
    "artistName": "artist",
    "collectionName": "album",
    "primaryGenreName": "genre",
    "trackTimeMillis": "duration_ms",
    "releaseDate": "release_date",
    "artworkUrl100": "artwork_url_100",
    "artworkUrl60": "artwork_url_60",
    "previewUrl": "preview_url",
    "trackNumber": "track_number",
}


@dataclass(frozen=True)
class RawTrack:
    """One catalog search hit.

    Only the enumerated fields are read by the ranking code. Everything else the
    catalog sent along is kept untouched in ``extra`` so it can be handed back to
    the caller.
    """

    track_id: Any
    title: str
    artist: str
    album: Optional[str] = None
    genre: Optional[str] = None
    duration_ms: Optional[int] = None
    release_date: Optional[str] = None
    artwork_url_100: Optional[str] = None
    artwork_url_60: Optional[str] = None
    preview_url: Optional[str] = None
    track_number: Optional[int] = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def artwork_url(self) -> Optional[str]:
        return self.artwork_url_100 or self.artwork_url_60

    @classmethod
    def from_catalog(cls, payload: Mapping[str, Any]) -> "RawTrack":
        values = {}
        extra = {}
        for key, value in payload.items():
            if key in CATALOG_FIELDS:
                values[CATALOG_FIELDS[key]] = value
            else:
                extra[key] = value
        values.setdefault("track_id", None)
        values.setdefault("title", "")
        values.setdefault("artist", "")
        return cls(extra=extra, **values)

    def to_catalog(self) -> Dict[str, Any]:
        payload = dict(self.extra)
        for key, attr in CATALOG_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                payload[key] = value
        return payload


@dataclass(frozen=True)
class ScoredTrack:
    track: RawTrack
    quality_score: float
    relevance_score: float
    diversity_score: float
    score: float


@dataclass(frozen=True)
class SelectionConfig:
    max_results: int = 6
    min_quality_score: float = 0.3
    prioritize_popularity: bool = True
    ensure_genre_diversity: bool = True
    # Reserved: not used by the scoring formula yet.
    prefer_recent_releases: bool = False

    def with_overrides(self, **overrides) -> "SelectionConfig":
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
