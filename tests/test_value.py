"""
Tests for the value module.
"""

import pytest
from biobytes.charsets import QualityEncoding
from biobytes.errors import EmptyInputError, OutOfRangeError, ScoreOutOfRangeError
from biobytes.value import PercentValue, QualityScoreValue, round_half_up_percent


class TestPercentValue:
    """Tests for PercentValue."""

    def test_valid_range(self):
        """Test that 0-100 are accepted."""
        assert PercentValue.new(0).value == 0
        assert PercentValue.new(100).value == 100

    def test_above_range(self):
        """Test that 101 is rejected."""
        with pytest.raises(OutOfRangeError) as exc_info:
            PercentValue.new(101)
        assert exc_info.value.given == 101
        assert exc_info.value.expected_min == 0
        assert exc_info.value.expected_max == 100

    def test_below_range(self):
        """Test that -1 is rejected."""
        with pytest.raises(OutOfRangeError):
            PercentValue(-1)

    def test_rejects_non_integers(self):
        """Test that bools and floats are rejected."""
        with pytest.raises(TypeError):
            PercentValue(True)
        with pytest.raises(TypeError):
            PercentValue(50.0)

    def test_from_fraction(self):
        """Test round-half-up percentages."""
        assert PercentValue.from_fraction(3, 5) == 60
        assert PercentValue.from_fraction(1, 3) == 33
        assert PercentValue.from_fraction(2, 3) == 67

    def test_from_fraction_half_boundary(self):
        """Test that exact halves round up."""
        assert PercentValue.from_fraction(1, 8) == 13
        assert PercentValue.from_fraction(1, 200) == 1
        assert round_half_up_percent(1, 8) == 13

    def test_from_fraction_zero_denominator(self):
        """Test that zero elements raise EmptyInputError."""
        with pytest.raises(EmptyInputError):
            PercentValue.from_fraction(0, 0)

    def test_from_fraction_numerator_too_large(self):
        """Test that a count above the total is rejected."""
        with pytest.raises(OutOfRangeError):
            PercentValue.from_fraction(3, 2)

    def test_comparisons(self):
        """Test ordering against values and integers."""
        assert PercentValue(50) < PercentValue(60)
        assert PercentValue(60) >= 60
        assert PercentValue(60) == PercentValue(60)
        assert hash(PercentValue(60)) == hash(60)
        assert int(PercentValue(42)) == 42

    def test_str(self):
        """Test string representation."""
        assert str(PercentValue(60)) == "60%"


class TestQualityScoreValue:
    """Tests for QualityScoreValue."""

    def test_default_encoding(self):
        """Test that scores default to Phred+33."""
        q = QualityScoreValue(40)
        assert q.encoding is QualityEncoding.PHRED33
        assert q.char == ord('I')
        assert int(q) == 40

    def test_score_out_of_range(self):
        """Test that scores outside the encoding window are rejected."""
        with pytest.raises(ScoreOutOfRangeError) as exc_info:
            QualityScoreValue(94)
        assert exc_info.value.score == 94
        assert exc_info.value.encoding == "Phred+33"

    def test_phred64_score_window(self):
        """Test the narrower Phred+64 score window."""
        assert QualityScoreValue(62, QualityEncoding.PHRED64).char == ord('~')
        with pytest.raises(ScoreOutOfRangeError):
            QualityScoreValue(63, QualityEncoding.PHRED64)

    def test_new_phred33(self):
        """Test creating from a Phred+33 character."""
        assert QualityScoreValue.new_phred33(ord('I')).score == 40
        assert QualityScoreValue.new_phred33(ord('!')).score == 0

    def test_new_phred33_out_of_range(self):
        """Test that characters below '!' are rejected."""
        with pytest.raises(OutOfRangeError) as exc_info:
            QualityScoreValue.new_phred33(32)
        assert exc_info.value.given == 32
        assert exc_info.value.expected_min == 33

    def test_new_phred64(self):
        """Test creating from a Phred+64 character."""
        assert QualityScoreValue.new_phred64(ord('h')).score == 40
        with pytest.raises(OutOfRangeError):
            QualityScoreValue.new_phred64(ord('?'))

    def test_from_score(self):
        """Test the explicit score constructor."""
        q = QualityScoreValue.from_score(-5, QualityEncoding.SOLEXA)
        assert q.char == ord(';')
