import re

import pytest

from catalog.presentation import (
    PAPER_TONES,
    clean_title,
    hsl_to_hex,
    string_hash,
    string_to_color,
    to_song,
    unique_by_display_title,
)


class TestCleanTitle:
    @pytest.mark.parametrize("raw, cleaned", [
        ("Smooth Jazz Classics for Cooking", "Smooth"),
        ("the sound of silence", "The Sound of Silence"),
        ("WALK ON THE WILD SIDE", "Walk on the Wild Side"),
        ("  lots   of   space  ", "Lots of Space"),
        ("Happy", "Happy"),
        ("", ""),
    ])
    def test_clean_title(self, raw, cleaned):
        assert clean_title(raw) == cleaned


class TestColors:
    def test_string_hash_matches_the_31x_hash(self):
        assert string_hash("") == 0
        assert string_hash("a") == 97
        assert string_hash("ab") == 97 * 31 + 98

    def test_hsl_to_hex(self):
        assert hsl_to_hex(0, 100, 50) == "#ff0000"
        assert hsl_to_hex(120, 100, 25) == "#008000"

    def test_body_color_is_stable_hex(self):
        color = string_to_color("Electronic" + "Massive Attack" + "v2")
        assert re.fullmatch(r"#[0-9a-f]{6}", color)
        assert color == string_to_color("ElectronicMassive Attackv2")

    def test_label_color_is_a_paper_tone(self):
        assert string_to_color("Teardrop", label=True) in PAPER_TONES


class TestSongMapping:
    def test_to_song(self, make_track):
        track = make_track(
            "smooth jazz classics for cooking", " Cafe Trio ",
            track_id=77, genre="Jazz",
        )

        song = to_song(track, "ab12c")

        assert song.id == "itunes-77-ab12c"
        assert song.title == "Smooth"
        assert song.artist == "Cafe Trio"
        assert song.duration == "0:30"
        assert song.audio_url == track.preview_url
        assert song.accent_color in PAPER_TONES
        assert not hasattr(song, "x") and not hasattr(song, "rotation")

    def test_unique_by_display_title_keeps_first(self, make_track):
        first = make_track("Smooth Jazz Classics for Cooking", "A")
        second = make_track("smooth", "B")
        third = make_track("Other", "C")
        assert unique_by_display_title([first, second, third]) == [first, third]
