from typing import Iterable, List, Tuple

from selection.models import RawTrack


def normalize_text(text) -> str:
    if text is None:
        return ""
    return str(text).lower().strip()


def is_valid(track: RawTrack) -> bool:
    return bool(
        normalize_text(track.title)
        and normalize_text(track.artist)
        and track.preview_url
    )


def identity_key(track: RawTrack) -> Tuple[str, str]:
    return normalize_text(track.title), normalize_text(track.artist)


def deduplicate(tracks: Iterable[RawTrack]) -> List[RawTrack]:
    """Drop malformed records and repeated (title, artist) pairs, keeping the first."""
    seen = set()
    unique = []
    for track in tracks:
        if not is_valid(track):
            continue
        key = identity_key(track)
        if key in seen:
            continue
        seen.add(key)
        unique.append(track)
    return unique
