from selection.models import RawTrack, ScoredTrack, SelectionConfig
from selection.validate import deduplicate
from selection.pipeline import rank_tracks, select_tracks

__all__ = [
    "RawTrack", "ScoredTrack", "SelectionConfig",
    "deduplicate",
    "rank_tracks", "select_tracks",
]
