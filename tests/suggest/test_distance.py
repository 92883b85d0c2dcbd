# Tests for the distance helpers
# ==============================

from didyoumean.distance import distance, is_similar


class TestDistance:
    """Levenshtein distance properties."""

    def test_identity(self):
        """A string is zero edits from itself."""
        assert distance("honolulu", "honolulu") == 0
        assert distance("", "") == 0

    def test_known_distances(self):
        """Single and multiple edits are counted."""
        assert distance("Rom", "Rome") == 1
        assert distance("Rome", "Roma") == 1
        assert distance("kitten", "sitting") == 3
        assert distance("", "abc") == 3

    def test_symmetry(self):
        """Distance does not depend on argument order."""
        assert distance("honnolullu", "honolulu") == distance("honolulu", "honnolullu")

    def test_triangle_inequality(self):
        """d(a, c) <= d(a, b) + d(b, c)."""
        a, b, c = "Paris", "Parma", "Palma"
        assert distance(a, c) <= distance(a, b) + distance(b, c)

    def test_unicode_characters_count_once(self):
        """Accented characters are one edit, not one per byte."""
        assert distance("Zurich", "Zürich") == 1
        assert distance("東京", "京都") == 2


class TestIsSimilar:
    """Threshold checks."""

    def test_within_threshold(self):
        """Values at or under the threshold are similar."""
        assert is_similar("Rome", "Rom", 1)
        assert is_similar("kitten", "sitting", 3)

    def test_outside_threshold(self):
        """Values over the threshold are not similar."""
        assert not is_similar("kitten", "sitting", 2)
        assert not is_similar("Paris", "Vancouver", 1)

    def test_default_threshold_is_two(self):
        """Two edits are tolerated by default."""
        assert is_similar("honolulu", "honnolullu")
        assert not is_similar("honolulu", "honnollullu")

    def test_zero_threshold_means_equal(self):
        """A zero threshold only accepts identical strings."""
        assert is_similar("Rome", "Rome", 0)
        assert not is_similar("Rome", "Roma", 0)

    def test_negative_threshold_never_matches(self):
        """A negative threshold accepts nothing."""
        assert not is_similar("Rome", "Rome", -1)
