"""
BioBytes - Statistics

Aggregates over byte sequences and quality strings: mean, mode, threshold
counts, percent passing and Hamming distance.

Rules shared by every function here:

    mean        floor division of the byte sum by the length
    mode        most frequent byte; ties go to the one seen first
    percent     (100 * count + len // 2) // len  (round half up)

Aggregates that divide by the length raise ``EmptyInputError`` on empty
input.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from . import config
from .charsets import QualityEncoding
from .check import BytesLike, check_byte, ensure_bytes
from .errors import EmptyInputError, LengthMismatchError
from .recode import check_quality
from .value import PercentValue, QualityScoreValue


def _as_array(seq: BytesLike) -> np.ndarray:
    return np.frombuffer(ensure_bytes(seq), dtype=np.uint8)


def _require_non_empty(seq: BytesLike, what: str) -> None:
    if len(seq) == 0:
        raise EmptyInputError(f"Cannot compute the {what} of an empty sequence")


def mean(seq: BytesLike) -> int:
    """
    Arithmetic mean of the byte values, floored.

    Example:
        mean(b"AC")  ->  (65 + 67) // 2  ->  66
    """
    _require_non_empty(seq, "mean")
    return int(_as_array(seq).sum(dtype=np.uint64)) // len(seq)


def mode(seq: BytesLike) -> int:
    """
    Most frequent byte value.

    Ties are broken by first occurrence: ``mode(b"ABAB")`` is ``A`` and
    ``mode(b"BABA")`` is ``B``.
    """
    _require_non_empty(seq, "mode")
    # Counter keeps first-seen order and most_common is stable
    return Counter(ensure_bytes(seq)).most_common(1)[0][0]


def count_mode(seq: BytesLike) -> int:
    """Number of occurrences of the mode."""
    _require_non_empty(seq, "mode")
    return Counter(ensure_bytes(seq)).most_common(1)[0][1]


def count_byte(seq: BytesLike, byte: int) -> int:
    return ensure_bytes(seq).count(check_byte(byte))


def count_at_least(seq: BytesLike, threshold: int) -> int:
    """Number of bytes ``>= threshold``."""
    _require_non_empty(seq, "count")
    return int(np.count_nonzero(_as_array(seq) >= check_byte(threshold)))


def count_at_most(seq: BytesLike, threshold: int) -> int:
    """Number of bytes ``<= threshold``."""
    _require_non_empty(seq, "count")
    return int(np.count_nonzero(_as_array(seq) <= check_byte(threshold)))


def percent_at_least(seq: BytesLike, threshold: int) -> PercentValue:
    """
    Percent of bytes ``>= threshold``, rounded half up.

    Example:
        3 of 5 bytes qualify  ->  60
        1 of 3 bytes qualify  ->  33
    """
    _require_non_empty(seq, "percent")
    return PercentValue.from_fraction(count_at_least(seq, threshold), len(seq))


def is_percent_at_least(seq: BytesLike, threshold: int, percent: PercentValue) -> bool:
    """Check if at least ``percent`` of the bytes are ``>= threshold``."""
    if not isinstance(percent, PercentValue):
        raise TypeError("percent must be a PercentValue")
    return percent_at_least(seq, threshold) >= percent


def hamming_distance(a: BytesLike, b: BytesLike) -> int:
    """
    Number of positions at which two equal-length sequences differ.

    Raises:
        LengthMismatchError: if the lengths differ
        EmptyInputError: if both sequences are empty
    """
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    _require_non_empty(a, "Hamming distance")
    return int(np.count_nonzero(_as_array(a) != _as_array(b)))


def mean_quality(quality: BytesLike, encoding: QualityEncoding = QualityEncoding.PHRED33) -> int:
    """Floored mean score of an encoded quality string."""
    _require_non_empty(quality, "mean quality")
    check_quality(quality, encoding)
    # floor(sum / n) - offset == floor((sum - n * offset) / n) for integer offsets
    return mean(quality) - encoding.offset


def quality_percent_at_least(quality: BytesLike, threshold: QualityScoreValue) -> PercentValue:
    """
    Percent of positions whose score is at least ``threshold``.

    The quality string is checked against the threshold's encoding first.

    Example:
        quality_percent_at_least(b"!!!!", QualityScoreValue(0))  ->  100
        quality_percent_at_least(b"!!!!", QualityScoreValue(1))  ->  0
    """
    if not isinstance(threshold, QualityScoreValue):
        raise TypeError("threshold must be a QualityScoreValue")
    check_quality(quality, threshold.encoding)
    return percent_at_least(quality, threshold.char)


def is_quality_passing(
    quality: BytesLike,
    threshold: QualityScoreValue,
    percent: PercentValue
) -> bool:
    """Check if at least ``percent`` of the scores reach ``threshold``."""
    if not isinstance(percent, PercentValue):
        raise TypeError("percent must be a PercentValue")
    return quality_percent_at_least(quality, threshold) >= percent


class QualityCategory(Enum):
    """Quality category enumeration."""
    POOR = "Poor"           # Q < 10
    LOW = "Low"             # 10 <= Q < 20
    MEDIUM = "Medium"       # 20 <= Q < 30
    HIGH = "High"           # 30 <= Q < 40
    EXCELLENT = "Excellent"  # Q >= 40


def categorize(score: int) -> QualityCategory:
    """Categorize a (mean) quality score."""
    if score >= config.Q_EXCELLENT:
        return QualityCategory.EXCELLENT
    elif score >= config.Q_HIGH:
        return QualityCategory.HIGH
    elif score >= config.Q_MEDIUM:
        return QualityCategory.MEDIUM
    elif score >= config.Q_LOW:
        return QualityCategory.LOW
    else:
        return QualityCategory.POOR


@dataclass
class QualitySummary:
    """Summary of one encoded quality string, in scores."""
    length: int
    min_score: int
    max_score: int
    mean: int
    mode: int
    percent_q20: PercentValue
    percent_q30: PercentValue
    category: QualityCategory

    @classmethod
    def from_quality(
        cls,
        quality: BytesLike,
        encoding: QualityEncoding = QualityEncoding.PHRED33
    ) -> 'QualitySummary':
        """Summarize a quality string. Raises ``EmptyInputError`` on empty input."""
        _require_non_empty(quality, "summary")
        check_quality(quality, encoding)
        quality = ensure_bytes(quality)
        mean_score = mean(quality) - encoding.offset

        def percent_q(score: int) -> PercentValue:
            # encodings that cannot represent the score have no passing bases
            if score > encoding.max_score:
                return PercentValue(0)
            return quality_percent_at_least(quality, QualityScoreValue(score, encoding))

        return cls(
            length=len(quality),
            min_score=min(quality) - encoding.offset,
            max_score=max(quality) - encoding.offset,
            mean=mean_score,
            mode=mode(quality) - encoding.offset,
            percent_q20=percent_q(config.Q_MEDIUM),
            percent_q30=percent_q(config.Q_HIGH),
            category=categorize(mean_score),
        )

    def __str__(self) -> str:
        return (
            f"QualitySummary {{ length: {self.length}, "
            f"min: {self.min_score}, max: {self.max_score}, "
            f"mean: {self.mean}, mode: {self.mode}, "
            f"Q20: {self.percent_q20}, Q30: {self.percent_q30}, "
            f"category: {self.category.value} }}"
        )


@dataclass
class ReadSetStats:
    """
    Statistics for a collection of reads.

    A read passes when at least ``cutoff_percent`` of its scores reach
    ``cutoff_score`` (defaults from ``config``).
    """
    count: int
    total_bases: int
    min_length: int
    max_length: int
    mean_length: float
    mean_quality: float
    passing_count: int

    @classmethod
    def from_reads(
        cls,
        reads: Iterable,
        cutoff_score: Optional[QualityScoreValue] = None,
        cutoff_percent: Optional[PercentValue] = None
    ) -> 'ReadSetStats':
        """
        Calculate statistics for ``Read`` objects.

        Raises:
            EmptyInputError: if there are no reads or a read is empty
        """
        reads = list(reads)
        if len(reads) == 0:
            raise EmptyInputError("Read list cannot be empty")
        if cutoff_percent is None:
            cutoff_percent = PercentValue(config.DEFAULT_CUTOFF_PERCENT)

        lengths = [len(read) for read in reads]
        qualities = [read.mean_quality() for read in reads]
        passing = 0
        for read in reads:
            score = cutoff_score
            if score is None:
                score = QualityScoreValue(config.DEFAULT_CUTOFF_SCORE, read.encoding)
            if read.quality_percent_at_least(score) >= cutoff_percent:
                passing += 1

        return cls(
            count=len(reads),
            total_bases=sum(lengths),
            min_length=min(lengths),
            max_length=max(lengths),
            mean_length=sum(lengths) / len(reads),
            mean_quality=sum(qualities) / len(reads),
            passing_count=passing,
        )

    def passing_ratio(self) -> float:
        """Return proportion of reads passing the quality cutoff."""
        return self.passing_count / self.count if self.count > 0 else 0.0

    def __str__(self) -> str:
        return (
            f"ReadSetStats {{\n"
            f"  count: {self.count}\n"
            f"  total_bases: {self.total_bases}\n"
            f"  length range: {self.min_length} - {self.max_length}\n"
            f"  mean length: {self.mean_length:.1f}\n"
            f"  mean quality: {self.mean_quality:.1f}\n"
            f"  passing reads: {self.passing_count} ({self.passing_ratio() * 100:.1f}%)\n"
            f"}}"
        )
