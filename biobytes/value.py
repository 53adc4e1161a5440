"""
BioBytes - Value Objects

Validated wrappers for percentages and quality scores.

A function that consumes a percent threshold or a quality cutoff takes one of
these objects instead of a bare integer, so an out-of-range value is rejected
once, at construction:

    @dataclass(frozen=True)
    class PercentValue:
        value: int

        def __post_init__(self):
            if self.value not in PERCENT_RANGE:
                raise OutOfRangeError(...)
"""

from dataclasses import dataclass, field
from functools import total_ordering

from . import config
from .charsets import PERCENT_RANGE, QualityEncoding
from .errors import EmptyInputError, OutOfRangeError, ScoreOutOfRangeError


def _require_int(raw: object, what: str) -> int:
    # bool is an int subclass but never a meaningful percent or score
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"{what} must be an integer, got {type(raw).__name__}")
    return raw


def round_half_up_percent(numerator: int, denominator: int) -> int:
    """
    Integer percentage of ``numerator / denominator`` rounded half up.

    Uses ``(100 * numerator + denominator // 2) // denominator`` so ties
    (e.g. 1 of 8 = 12.5%) round up to 13, and 1 of 3 (33.3%) gives 33.
    """
    if denominator == 0:
        raise EmptyInputError("Cannot compute a percentage of zero elements")
    return (100 * numerator + denominator // 2) // denominator


@total_ordering
@dataclass(frozen=True, eq=False)
class PercentValue:
    """
    An integer percentage in the inclusive range 0-100.

    Compares equal to, and orders against, both other ``PercentValue``s and
    plain integers.
    """
    value: int

    def __post_init__(self):
        _require_int(self.value, "Percent")
        if self.value not in PERCENT_RANGE:
            raise OutOfRangeError(self.value, config.PERCENT_MIN, config.PERCENT_MAX)

    @classmethod
    def new(cls, raw: int) -> 'PercentValue':
        """Create a percent, raising ``OutOfRangeError`` outside 0-100."""
        return cls(raw)

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> 'PercentValue':
        """
        Create the round-half-up percentage of ``numerator`` out of ``denominator``.

        Raises:
            EmptyInputError: if ``denominator`` is zero
            OutOfRangeError: if ``numerator`` is negative or exceeds ``denominator``
        """
        if denominator == 0:
            raise EmptyInputError("Cannot compute a percentage of zero elements")
        if numerator < 0 or numerator > denominator:
            raise OutOfRangeError(numerator, 0, denominator)
        return cls(round_half_up_percent(numerator, denominator))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def _other(self, other: object):
        if isinstance(other, PercentValue):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        other_value = self._other(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value == other_value

    def __lt__(self, other: object) -> bool:
        other_value = self._other(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value < other_value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"{self.value}%"


@dataclass(frozen=True)
class QualityScoreValue:
    """
    A quality score guaranteed to fit its encoding.

    Holds the score; the encoded character is derived. Both windows are
    checked on construction:

        Phred+33: characters 33-126, scores 0-93
        Phred+64: characters 64-126, scores 0-62
    """
    score: int
    encoding: QualityEncoding = field(default=QualityEncoding.PHRED33)

    def __post_init__(self):
        _require_int(self.score, "Score")
        if not self.encoding.min_score <= self.score <= self.encoding.max_score:
            raise ScoreOutOfRangeError(
                self.score, self.encoding.label,
                self.encoding.min_score, self.encoding.max_score,
            )

    @classmethod
    def from_score(
        cls,
        score: int,
        encoding: QualityEncoding = QualityEncoding.PHRED33
    ) -> 'QualityScoreValue':
        """Create from a score, raising ``ScoreOutOfRangeError`` if it does not fit."""
        return cls(score=score, encoding=encoding)

    @classmethod
    def from_char(
        cls,
        raw: int,
        encoding: QualityEncoding = QualityEncoding.PHRED33
    ) -> 'QualityScoreValue':
        """Create from an encoded character byte, raising ``OutOfRangeError`` outside the window."""
        _require_int(raw, "Quality character")
        if not encoding.min_char <= raw <= encoding.max_char:
            raise OutOfRangeError(raw, encoding.min_char, encoding.max_char)
        return cls(score=raw - encoding.offset, encoding=encoding)

    @classmethod
    def new_phred33(cls, raw: int) -> 'QualityScoreValue':
        return cls.from_char(raw, QualityEncoding.PHRED33)

    @classmethod
    def new_phred64(cls, raw: int) -> 'QualityScoreValue':
        return cls.from_char(raw, QualityEncoding.PHRED64)

    @property
    def char(self) -> int:
        """The encoded character as a byte value."""
        return self.score + self.encoding.offset

    def __int__(self) -> int:
        return self.score

    def __str__(self) -> str:
        return f"Q{self.score} ({self.encoding.label} {chr(self.char)!r})"

