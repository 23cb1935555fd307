"""Unit tests for trailing-number filename ordering."""

from __future__ import annotations

import pytest

from frd_analyzer.ingest.ordering import (
    polar_sort_key,
    sort_sources,
    trailing_number,
    trailing_number_less,
)


class TestTrailingNumber:
    """Key extraction from filenames."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("speaker_10.txt", 10.0),
            ("speaker_2.txt", 2.0),
            ("10.txt", 10.0),
            ("10", 10.0),
            ("hor-30.frd", -30.0),
            ("hor_7.5.frd", 7.5),
            ("meas/dir.v2/speaker_45.txt", 45.0),
            ("C:\\meas\\speaker_90.txt", 90.0),
            ("a\\b/c_3.frd", 3.0),
            ("angle.5.txt", 0.5),
            ("angle_5..txt", 5.0),
        ],
    )
    def test_extracts_key(self, name: str, expected: float) -> None:
        assert trailing_number(name) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "readme.txt",
            "speaker.txt",
            "speaker_10deg.txt",
            "speaker_-.txt",
            "speaker_1.2.3.txt",
            "speaker_5-.txt",
            "speaker_1-2.txt",
            "",
            ".hidden",
            "dir_10/notes.txt",
        ],
    )
    def test_no_key(self, name: str) -> None:
        assert trailing_number(name) is None

    def test_only_last_extension_is_stripped(self) -> None:
        # "speaker_3.frd" is the basename once ".txt" is removed; "3.frd" is not numeric
        assert trailing_number("speaker_3.frd.txt") is None


class TestOrderingPolicy:
    """Comparator and key agree on the documented policy."""

    def test_keyless_sorts_first(self) -> None:
        assert trailing_number_less("notes.txt", "speaker_-90.txt")
        assert not trailing_number_less("speaker_-90.txt", "notes.txt")

    def test_two_keyless_are_equivalent(self) -> None:
        assert not trailing_number_less("a.txt", "b.txt")
        assert not trailing_number_less("b.txt", "a.txt")

    def test_numeric_not_lexical(self) -> None:
        assert trailing_number_less("s_2.txt", "s_10.txt")
        assert not trailing_number_less("s_10.txt", "s_2.txt")

    def test_irreflexive(self) -> None:
        for name in ["s_1.txt", "plain.txt", "s_-3.txt"]:
            assert not trailing_number_less(name, name)

    def test_key_matches_predicate(self) -> None:
        names = ["s_10.txt", "x.txt", "s_2.txt", "s_-5.txt", "y.txt", "s_2.0.txt"]
        for a in names:
            for b in names:
                assert trailing_number_less(a, b) == (polar_sort_key(a) < polar_sort_key(b))


class TestSortSources:
    def test_numeric_order(self) -> None:
        names = ["speaker_2.txt", "speaker_10.txt", "speaker_1.txt"]
        assert sort_sources(names, name_of=lambda n: n) == ["speaker_1.txt", "speaker_2.txt", "speaker_10.txt"]

    def test_stable_for_ties_and_keyless(self) -> None:
        items = [
            ("b_3.txt", "first 3"),
            ("zeta.txt", "first keyless"),
            ("a_3.txt", "second 3"),
            ("alpha.txt", "second keyless"),
            ("c_1.txt", "one"),
        ]
        out = [tag for _, tag in sort_sources(items)]
        assert out == ["first keyless", "second keyless", "one", "first 3", "second 3"]

    def test_negative_angles(self) -> None:
        names = ["hor_30.frd", "hor_-30.frd", "hor_0.frd", "hor_-180.frd"]
        assert sort_sources(names, name_of=lambda n: n) == ["hor_-180.frd", "hor_-30.frd", "hor_0.frd", "hor_30.frd"]
