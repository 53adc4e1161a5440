"""
BioBytes - Byte-level Sequence & Quality Toolkit

Validation, recoding and statistics over raw byte sequences: DNA, RNA,
amino acids and FASTQ quality strings.

Modules:
    - charsets: named byte alphabets and quality encodings
    - value: validated percent and quality score values
    - check: membership, homopolymer and length predicates
    - recode: quality encode/decode, conversion and complementing
    - stats: mean, mode, threshold counts and quality summaries
    - generate: seeded random sequences and ambiguity replacement
    - read: sequence/quality read record
"""

import logging

from .charsets import CharSet, QualityEncoding
from .errors import (
    BioBytesError,
    OutOfRangeError,
    NotInDomainError,
    EmptyInputError,
    LengthMismatchError,
    ScoreOutOfRangeError,
)
from .value import PercentValue, QualityScoreValue
from .check import (
    is_all,
    has_any,
    check_all,
    is_quality,
    has_gap,
    has_n,
    is_homopolymer,
    is_homopolymer_of,
    is_homopolymer_n,
    is_homopolymer_not_n,
    percent_homopolymer_passing,
    is_length,
    is_at_least_length,
    is_at_most_length,
)
from .recode import (
    decode,
    encode,
    decode_quality,
    encode_quality,
    convert_quality,
    complement,
    reverse_complement,
    reverse_complement_in_place,
    to_upper_basic,
    to_lower_basic,
)
from .stats import (
    mean,
    mode,
    count_at_least,
    count_at_most,
    percent_at_least,
    hamming_distance,
    mean_quality,
    quality_percent_at_least,
    is_quality_passing,
    QualityCategory,
    QualitySummary,
    ReadSetStats,
)
from .generate import (
    random_sequence,
    random_dna,
    random_rna,
    random_amino_acid,
    random_quality,
    random_replace_n,
    random_replace_gap,
    random_replace_iupac,
    random_replace_non_basic,
)
from .read import Read

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "CharSet",
    "QualityEncoding",
    "BioBytesError",
    "OutOfRangeError",
    "NotInDomainError",
    "EmptyInputError",
    "LengthMismatchError",
    "ScoreOutOfRangeError",
    "PercentValue",
    "QualityScoreValue",
    "is_all",
    "has_any",
    "check_all",
    "is_quality",
    "has_gap",
    "has_n",
    "is_homopolymer",
    "is_homopolymer_of",
    "is_homopolymer_n",
    "is_homopolymer_not_n",
    "percent_homopolymer_passing",
    "is_length",
    "is_at_least_length",
    "is_at_most_length",
    "decode",
    "encode",
    "decode_quality",
    "encode_quality",
    "convert_quality",
    "complement",
    "reverse_complement",
    "reverse_complement_in_place",
    "to_upper_basic",
    "to_lower_basic",
    "mean",
    "mode",
    "count_at_least",
    "count_at_most",
    "percent_at_least",
    "hamming_distance",
    "mean_quality",
    "quality_percent_at_least",
    "is_quality_passing",
    "QualityCategory",
    "QualitySummary",
    "ReadSetStats",
    "random_sequence",
    "random_dna",
    "random_rna",
    "random_amino_acid",
    "random_quality",
    "random_replace_n",
    "random_replace_gap",
    "random_replace_iupac",
    "random_replace_non_basic",
    "Read",
]
