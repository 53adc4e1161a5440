"""
BioBytes - Read Record

A sequencing read: bases paired with their quality string.

    read = Read(b"ACGTN", b"IIII#", name="read1")
    read.is_passing(QualityScoreValue(20), PercentValue(80))
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from . import config
from .charsets import QualityEncoding
from .check import BytesLike, ensure_bytes, has_n, percent_homopolymer_passing
from .errors import LengthMismatchError
from .recode import check_quality, convert_score, reverse_complement
from .stats import mean_quality, quality_percent_at_least
from .value import PercentValue, QualityScoreValue

logger = logging.getLogger(__name__)


@dataclass
class Read:
    """
    A read with a quality string of the same length.

    Attributes:
        sequence: Bases, copied into a ``bytearray``
        quality: Encoded quality characters, copied into a ``bytearray``
        name: Optional read identifier
        encoding: Quality encoding of ``quality``
    """
    sequence: bytearray
    quality: bytearray
    name: Optional[str] = None
    encoding: QualityEncoding = field(default=QualityEncoding.PHRED33)

    def __post_init__(self):
        self.sequence = bytearray(ensure_bytes(self.sequence))
        self.quality = bytearray(ensure_bytes(self.quality))
        if len(self.sequence) != len(self.quality):
            raise LengthMismatchError(len(self.sequence), len(self.quality))
        check_quality(self.quality, self.encoding)

    @classmethod
    def new(
        cls,
        sequence: BytesLike,
        quality: BytesLike,
        name: Optional[str] = None,
        encoding: QualityEncoding = QualityEncoding.PHRED33
    ) -> 'Read':
        return cls(sequence=sequence, quality=quality, name=name, encoding=encoding)

    def __len__(self) -> int:
        return len(self.sequence)

    def mean_quality(self) -> int:
        """Floored mean score. Raises ``EmptyInputError`` for an empty read."""
        return mean_quality(self.quality, self.encoding)

    def quality_percent_at_least(self, score: QualityScoreValue) -> PercentValue:
        """
        Percent of positions scoring at least ``score``.

        A threshold given in another encoding is mapped onto this read's
        scale first (Phred Q1 is Solexa -5).
        """
        if score.encoding is not self.encoding:
            score = QualityScoreValue(
                convert_score(score.score, score.encoding, self.encoding), self.encoding
            )
        return quality_percent_at_least(self.quality, score)

    def is_passing(
        self,
        score: Optional[QualityScoreValue] = None,
        percent: Optional[PercentValue] = None,
        max_homopolymer: Optional[PercentValue] = None
    ) -> bool:
        """
        Check if the read passes a quality filter.

        At least ``percent`` of positions must reach ``score`` (defaults from
        ``config``). With ``max_homopolymer`` set, reads whose most frequent
        base reaches that share are rejected as low complexity.
        """
        if score is None:
            score = QualityScoreValue(config.DEFAULT_CUTOFF_SCORE, self.encoding)
        if percent is None:
            percent = PercentValue(config.DEFAULT_CUTOFF_PERCENT)

        if self.quality_percent_at_least(score) < percent:
            logger.debug("Read %s failed the quality cutoff", self.name)
            return False
        if max_homopolymer is not None and percent_homopolymer_passing(self.sequence, max_homopolymer):
            logger.debug("Read %s rejected as homopolymer", self.name)
            return False
        return True

    def reverse_complement(self, rna: bool = False) -> 'Read':
        """Return a new read on the opposite strand, with the quality reversed."""
        return Read(
            sequence=reverse_complement(self.sequence, rna=rna),
            quality=self.quality[::-1],
            name=self.name,
            encoding=self.encoding,
        )

    def has_n(self) -> bool:
        return has_n(self.sequence)

    def __str__(self) -> str:
        name = self.name or "read"
        return f"{name} ({len(self)} bp, {self.encoding.label})"
