import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from selection.models import RawTrack


# Filler phrases that show up across many catalog "mood music" titles
GENERIC_PHRASES = [
    "Jazz Classics",
    "Background for",
    "Music for",
    "Ambiance for",
    "Mood for",
    "Vibe for",
    "Soundtrack for",
    "Backdrops for",
    "Ambience for",
    "Moods for",
    "Music for Cooking",
    "Background Music",
    "Chilled Music",
    "Relaxed Music",
    "Lively Music",
    "Sophisticated",
    "Charming",
    "Delightful",
    "Sensational",
    "Bright",
    "Sprightly",
    "Pulsating",
    "Inspiring",
    "Happy",
    "Simplistic",
    "Sultry",
    "Stylish",
    "No Drums Jazz",
    "for Lockdowns",
    "for Quarantine",
    "for Work from Home",
    "for Preparing Dinner",
    "for Cooking Dinner",
    "for Cooking",
    " - ",
]

GENERIC_PATTERNS = [re.compile(re.escape(p), re.IGNORECASE) for p in GENERIC_PHRASES]

LOWERCASE_WORDS = {"a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}

PAPER_TONES = [
    "#f8fafc",
    "#fffbeb",
    "#f0f9ff",
    "#fff1f2",
    "#f0fdf4",
    "#fafafa",
    "#fdf4ff",
    "#ecfeff",
]

PREVIEW_DURATION = "0:30"


@dataclass
class Song:
    id: str
    title: str
    artist: str
    color: str
    accent_color: str
    duration: str = PREVIEW_DURATION
    audio_url: Optional[str] = None


def clean_title(title: str) -> str:
    if not title:
        return title

    cleaned = title.strip()
    for pattern in GENERIC_PATTERNS:
        cleaned = pattern.sub("", cleaned).strip()

    if len(cleaned) < 3:
        cleaned = title.strip()

    words = re.sub(r"\s+", " ", cleaned).strip().split(" ")
    words = [w[:1].upper() + w[1:].lower() for w in words]
    words = [
        w.lower() if i > 0 and w.lower() in LOWERCASE_WORDS else w
        for i, w in enumerate(words)
    ]
    return " ".join(words) or title


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def string_hash(text: str) -> int:
    """Classic ``hash * 31 + char`` string hash with JavaScript int32 shift semantics."""
    data = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = unit + (_to_int32(_to_int32(h) << 5) - h)
    return h


def _round_half_up(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    l /= 100
    a = s * min(l, 1 - l) / 100

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        color = l - a * max(min(k - 3, 9 - k, 1), -1)
        return format(_round_half_up(255 * color), "02x")

    return f"#{channel(0)}{channel(8)}{channel(4)}"


def string_to_color(text: str, label: bool = False) -> str:
    h = abs(string_hash(text))
    if label:
        return PAPER_TONES[h % len(PAPER_TONES)]

    hue = h % 360
    # Saturated enough to read as plastic, mid lightness so it stands out from labels
    saturation = 60 + h % 31
    lightness = 25 + h % 31
    return hsl_to_hex(hue, saturation, lightness)


def unique_by_display_title(tracks: Iterable[RawTrack]) -> List[RawTrack]:
    seen = set()
    unique = []
    for track in tracks:
        key = clean_title(track.title or "").lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(track)
    return unique


def to_song(track: RawTrack, suffix: str) -> Song:
    return Song(
        id=f"itunes-{track.track_id}-{suffix}",
        title=clean_title(track.title),
        artist=(track.artist or "").strip(),
        color=string_to_color(f"{track.genre or ''}{track.artist}v2"),
        accent_color=string_to_color(track.title or "", label=True),
        audio_url=track.preview_url,
    )
