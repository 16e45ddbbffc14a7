"""Unit tests for the edit-distance similarity scorer."""

import pytest

from jobsearch.matching.similarity import edit_distance, similarity


class TestEditDistance:
    """Test suite for edit_distance."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("kitten", "sitting", 3),
            ("intrn", "intern", 1),
            ("pyhton", "python", 2),
            ("", "abc", 3),
            ("same", "same", 0),
        ],
    )
    def test_known_distances(self, a, b, expected):
        assert edit_distance(a, b) == expected


class TestSimilarity:
    """Test suite for similarity."""

    def test_identical_strings(self):
        assert similarity("developer", "developer") == 1.0

    def test_both_empty(self):
        """Test that two empty strings count as identical."""
        assert similarity("", "") == 1.0

    def test_one_empty(self):
        assert similarity("abc", "") == 0.0

    def test_normalized_by_longer_string(self):
        """Test the score is (longest - distance) / longest."""
        assert similarity("developr", "developer") == pytest.approx(8 / 9)
        assert similarity("intrn", "intern") == pytest.approx(5 / 6)
        assert similarity("pyhton develper", "python developer") == pytest.approx(13 / 16)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("sr eng", "senior engineer"),
            ("ux designer", "ui designer"),
            ("underwater", "underwriter"),
        ],
    )
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("a", "zzzzzz"),
            ("python developer", "intern"),
            ("ml", "machine learning"),
        ],
    )
    def test_bounded(self, a, b):
        assert 0.0 <= similarity(a, b) <= 1.0

    def test_completely_different(self):
        assert similarity("abc", "xyz") == 0.0

    def test_case_sensitive(self):
        """Test that callers are responsible for lower-casing."""
        assert similarity("Python", "python") < 1.0
