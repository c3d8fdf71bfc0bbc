from selection.models import ScoredTrack, SelectionConfig
from selection.selector import select_best_tracks


def ranked(make_track, rows, quality=0.9):
    """Build an already-sorted list from (title, artist, genre, album) tuples."""
    return [
        ScoredTrack(
            track=make_track(title, artist, genre=genre, album=album),
            quality_score=quality,
            relevance_score=0.5,
            diversity_score=1.0,
            score=0.8,
        )
        for title, artist, genre, album in rows
    ]


def titles(selected):
    return [s.track.title for s in selected]


class TestSimpleSelection:
    def test_prefix_take_after_quality_floor(self, make_track):
        tracks = ranked(make_track, [(f"t{i}", "A", "Pop", "X") for i in range(5)])
        tracks[1] = ScoredTrack(tracks[1].track, 0.1, 0.5, 1.0, 0.9)
        config = SelectionConfig(max_results=3, ensure_genre_diversity=False)

        assert titles(select_best_tracks(tracks, config)) == ["t0", "t2", "t3"]


class TestDiverseSelection:
    def test_caps_skip_repeats_after_the_first_three(self, make_track):
        rows = [
            ("a1", "A", "Pop", "A-1"),
            ("a2", "A", "Pop", "A-2"),
            ("b1", "B", "Rock", "B-1"),
            ("a3", "A", "Rock", "A-3"),
            ("c1", "C", "Pop", "C-1"),
            ("d1", "D", "Jazz", "D-1"),
            ("e1", "E", "Pop", "E-1"),
        ]
        config = SelectionConfig(max_results=6)

        # a3 breaks the artist cap and e1 the genre cap; a3 comes back as backfill
        assert titles(select_best_tracks(ranked(make_track, rows), config)) == [
            "a1", "a2", "b1", "c1", "d1", "a3",
        ]

    def test_backfill_relaxes_caps_in_ranked_order(self, make_track):
        rows = [
            ("a1", "A", "Pop", "X"),
            ("a2", "A", "Pop", "X"),
            ("a3", "A", "Pop", "X"),
            ("a4", "A", "Pop", "X"),
            ("b1", "B", "Rock", "Y"),
            ("a5", "A", "Pop", "X"),
        ]
        config = SelectionConfig(max_results=5)

        assert titles(select_best_tracks(ranked(make_track, rows), config)) == [
            "a1", "a2", "a3", "b1", "a4",
        ]

    def test_album_cap(self, make_track):
        rows = [
            ("s1", "A", None, None),
            ("s2", "B", None, None),
            ("s3", "C", None, "Hits"),
            ("s4", "D", None, "Hits"),
            ("s5", "E", None, "Hits"),
            ("s6", "F", None, None),
        ]
        config = SelectionConfig(max_results=5)

        assert titles(select_best_tracks(ranked(make_track, rows), config)) == [
            "s1", "s2", "s3", "s4", "s6",
        ]

    def test_missing_genre_is_not_capped(self, make_track):
        rows = [(f"t{i}", f"Artist {i}", None, None) for i in range(6)]
        config = SelectionConfig(max_results=6)
        assert len(select_best_tracks(ranked(make_track, rows), config)) == 6


class TestEdgeCases:
    def test_nothing_passes_quality_floor(self, make_track):
        tracks = ranked(make_track, [("t", "A", None, None)], quality=0.1)
        assert select_best_tracks(tracks, SelectionConfig()) == []

    def test_non_positive_max_results(self, make_track):
        tracks = ranked(make_track, [("t", "A", None, None)])
        assert select_best_tracks(tracks, SelectionConfig(max_results=0)) == []
        assert select_best_tracks(tracks, SelectionConfig(max_results=-2)) == []

    def test_fewer_candidates_than_slots(self, make_track):
        tracks = ranked(make_track, [("t1", "A", None, None), ("t2", "A", None, None)])
        assert titles(select_best_tracks(tracks, SelectionConfig(max_results=6))) == ["t1", "t2"]
