"""
Tests for the check module.
"""

import pytest
from biobytes.charsets import CharSet, QualityEncoding
from biobytes.errors import EmptyInputError, NotInDomainError, OutOfRangeError
from biobytes.value import PercentValue
from biobytes.check import (
    is_all, has_any, check_all, is_quality, has_gap, has_n, has_mixed_case,
    is_homopolymer, is_homopolymer_of, is_homopolymer_n, is_homopolymer_not_n,
    percent_homopolymer_passing, is_length, is_at_least_length, is_at_most_length,
    is_palindrome, ensure_bytearray, check_byte,
)


class TestMembership:
    """Tests for charset membership."""

    def test_is_all(self):
        """Test that every byte must be in the charset."""
        assert is_all(b"ACGT", CharSet.DNA)
        assert not is_all(b"ACGN", CharSet.DNA)
        assert is_all(b"ACGN", CharSet.DNAN)

    def test_is_all_empty(self):
        """Test that empty input is vacuously all."""
        assert is_all(b"", CharSet.DNA)

    def test_is_all_repeatable(self):
        """Test that repeated calls give the same answer."""
        seq = bytearray(b"ACGTX")
        results = {is_all(seq, CharSet.DNA) for _ in range(3)}
        assert results == {False}

    def test_has_any(self):
        """Test that one matching byte is enough."""
        assert has_any(b"XXGXX", CharSet.GC)
        assert not has_any(b"ATAT", CharSet.GC)
        assert not has_any(b"", CharSet.GC)

    def test_accepts_memoryview(self):
        """Test that memoryviews are accepted."""
        assert is_all(memoryview(b"ACGT"), CharSet.DNA)

    def test_rejects_str(self):
        """Test that text is rejected."""
        with pytest.raises(TypeError):
            is_all("ACGT", CharSet.DNA)

    def test_check_all_reports_position(self):
        """Test that the first offending byte is reported."""
        with pytest.raises(NotInDomainError) as exc_info:
            check_all(b"ACXTY", CharSet.DNA)
        assert exc_info.value.position == 2
        assert exc_info.value.found == ord('X')
        assert exc_info.value.domain == "DNA"

    def test_check_all_passes(self):
        """Test that a valid sequence returns None."""
        assert check_all(b"acgu", CharSet.RNA_LOWERCASE) is None

    def test_is_quality(self):
        """Test quality windows with all-byte semantics."""
        assert is_quality(b"!!II~")
        assert not is_quality(b"II I")
        assert not is_quality(b"@@!", QualityEncoding.PHRED64)
        assert is_quality(b"@@h", QualityEncoding.PHRED64)

    def test_has_gap_and_n(self):
        """Test gap and N detection."""
        assert has_gap(b"AC-G")
        assert has_gap(b"AC.G")
        assert not has_gap(b"ACGT")
        assert has_n(b"ACnT")
        assert not has_n(b"ACGT")

    def test_has_mixed_case(self):
        """Test mixed-case detection."""
        assert has_mixed_case(b"ACgt")
        assert not has_mixed_case(b"ACGT")


class TestHomopolymer:
    """Tests for homopolymer predicates."""

    def test_boundary(self):
        """Test empty, single-byte and two-byte sequences."""
        assert is_homopolymer(b"")
        assert is_homopolymer(b"A")
        assert is_homopolymer(b"AA")
        assert not is_homopolymer(b"AT")

    def test_gaps_are_homopolymers(self):
        """Test that no charset is applied."""
        assert is_homopolymer(b"----")

    def test_homopolymer_of(self):
        """Test homopolymer of a specific byte."""
        assert is_homopolymer_of(b"GGG", ord('G'))
        assert not is_homopolymer_of(b"GGG", ord('A'))
        assert not is_homopolymer_of(b"", ord('A'))

    def test_homopolymer_n(self):
        """Test N runs, case-sensitive."""
        assert is_homopolymer_n(b"NNNN")
        assert is_homopolymer_n(b"nnnn")
        assert not is_homopolymer_n(b"NnNn")

    def test_homopolymer_not_n(self):
        """Test non-N runs."""
        assert is_homopolymer_not_n(b"AAAA")
        assert not is_homopolymer_not_n(b"NNNN")
        assert not is_homopolymer_not_n(b"")

    def test_percent_homopolymer_passing(self):
        """Test the rounded mode share against a threshold."""
        assert percent_homopolymer_passing(b"AAT", PercentValue(67))
        assert not percent_homopolymer_passing(b"AAT", PercentValue(68))
        assert percent_homopolymer_passing(b"ACGT", PercentValue(25))

    def test_percent_homopolymer_empty(self):
        """Test that empty input raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            percent_homopolymer_passing(b"", PercentValue(50))

    def test_percent_homopolymer_requires_percent_value(self):
        """Test that bare integers are rejected."""
        with pytest.raises(TypeError):
            percent_homopolymer_passing(b"AAA", 50)


class TestLength:
    """Tests for length predicates."""

    def test_lengths(self):
        """Test exact, minimum and maximum length."""
        assert is_length(b"ACGT", 4)
        assert is_at_least_length(b"ACGT", 4)
        assert not is_at_least_length(b"ACGT", 5)
        assert is_at_most_length(b"ACGT", 4)
        assert not is_at_most_length(b"ACGT", 3)
        assert is_length(b"", 0)

    def test_negative_length(self):
        """Test that negative lengths are rejected."""
        with pytest.raises(ValueError):
            is_length(b"", -1)


class TestMisc:
    """Tests for remaining helpers."""

    def test_is_palindrome(self):
        """Test byte-wise palindromes."""
        assert is_palindrome(b"ACCA")
        assert not is_palindrome(b"ACGT")

    def test_ensure_bytearray(self):
        """Test that only bytearrays pass."""
        buf = bytearray(b"AC")
        assert ensure_bytearray(buf) is buf
        with pytest.raises(TypeError):
            ensure_bytearray(b"AC")

    def test_check_byte(self):
        """Test byte value validation."""
        assert check_byte(0) == 0
        assert check_byte(255) == 255
        with pytest.raises(OutOfRangeError) as exc_info:
            check_byte(-1)
        assert exc_info.value.given == -1


class TestHomopolymerByte:
    """Tests for the byte argument of is_homopolymer_of."""

    def test_out_of_range_byte(self):
        """Test that a non-byte value raises OutOfRangeError."""
        with pytest.raises(OutOfRangeError) as exc_info:
            is_homopolymer_of(b"AAA", 256)
        assert exc_info.value.given == 256
        assert exc_info.value.expected_min == 0
        assert exc_info.value.expected_max == 255
