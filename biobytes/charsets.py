"""
BioBytes - Charsets

Fixed, named byte alphabets for sequences and quality strings.

Every alphabet is an immutable ``bytes`` object reachable only through the
closed ``CharSet`` enumeration, so an unknown charset name is an
``AttributeError`` at the call site rather than a runtime "invalid option"
branch deep inside a check.

Quality encodings (Illumina 1.8+/Sanger, Illumina 1.3+, Solexa):

    Encoding   Offset   Characters   Scores
    PHRED33    33       33-126       0-93
    SANGER     33       33-126       0-93
    PHRED64    64       64-126       0-62
    SOLEXA     64       59-126       -5-62
"""

from enum import Enum, unique
from typing import Dict, FrozenSet, Tuple

from . import config


def _span(first: str, last: str) -> bytes:
    """Inclusive byte range between two characters."""
    return bytes(range(ord(first), ord(last) + 1))


_UPPER = _span('A', 'Z')
_LOWER = _span('a', 'z')

# IUPAC nucleotide codes including ambiguity codes, N and gaps
_NUCLEOTIDE = b"AaCcGgTtUuRrYySsWwKkMmBbDdHhVvNn-."
_AMINO_ACID = b"AaCcDdEeFfGgHhIiKkLlMmNnPpQqRrSsTtUuVvWwYy"
_BASIC_AMINO_ACID = b"ACDEFGHIKLMNPQRSTUVWY"
# nucleotide codes followed by the amino acid letters they do not cover
_IUPAC = _NUCLEOTIDE + b"EeFfIiLlPpQq"

_DNA = b"ACGT"
_DNA_LOWER = b"acgt"
_RNA = b"ACGU"
_RNA_LOWER = b"acgu"
_GAP = b"-."

PERCENT_RANGE = range(config.PERCENT_MIN, config.PERCENT_MAX + 1)


@unique
class CharSet(Enum):
    """Closed set of named alphabets. ``value`` is the ordered byte set."""
    LETTERS = _UPPER + _LOWER
    LETTERS_UPPERCASE = _UPPER
    LETTERS_LOWERCASE = _LOWER
    IUPAC = _IUPAC
    NUCLEOTIDE = _NUCLEOTIDE
    AMINO_ACID = _AMINO_ACID
    BASIC_AMINO_ACID = _BASIC_AMINO_ACID
    DNA = _DNA
    DNA_LOWERCASE = _DNA_LOWER
    DNA_MIX_CASE = _DNA + _DNA_LOWER
    DNAN = _DNA + b"N"
    DNAN_MIX_CASE = _DNA + b"N" + _DNA_LOWER + b"n"
    RNA = _RNA
    RNA_LOWERCASE = _RNA_LOWER
    RNA_MIX_CASE = _RNA + _RNA_LOWER
    RNAN = _RNA + b"N"
    RNAN_MIX_CASE = _RNA + b"N" + _RNA_LOWER + b"n"
    GAP = _GAP
    N = b"N"
    N_MIX_CASE = b"Nn"
    GC = b"GC"
    GC_MIX_CASE = b"GCgc"
    PHRED33 = _span('!', 'I')
    PHRED64 = _span('@', '~')
    SOLEXA = _span(';', '~')
    SANGER = _span('!', '~')
    PERCENT = bytes(PERCENT_RANGE)

    @property
    def members(self) -> FrozenSet[int]:
        """Byte values of the alphabet as a set for O(1) membership."""
        return _MEMBERS[self]

    @property
    def strings(self) -> Tuple[str, ...]:
        """The alphabet as single-character strings."""
        return tuple(chr(b) for b in self.value)

    def __contains__(self, byte: int) -> bool:
        return byte in _MEMBERS[self]

    def __len__(self) -> int:
        return len(self.value)


_MEMBERS: Dict[CharSet, FrozenSet[int]] = {cs: frozenset(cs.value) for cs in CharSet}


class QualityEncoding(Enum):
    """
    ASCII encodings of quality scores.

    A score is stored as ``score + offset``. ``min_char``/``max_char`` bound the
    legal character window; the score window follows from the offset.
    """
    PHRED33 = ("Phred+33", 33, 33, 126)
    SANGER = ("Sanger", 33, 33, 126)
    PHRED64 = ("Phred+64", 64, 64, 126)
    SOLEXA = ("Solexa", 64, 59, 126)

    def __init__(self, label: str, offset: int, min_char: int, max_char: int):
        self.label = label
        self.offset = offset
        self.min_char = min_char
        self.max_char = max_char

    @property
    def min_score(self) -> int:
        return self.min_char - self.offset

    @property
    def max_score(self) -> int:
        return self.max_char - self.offset

    @property
    def charset(self) -> CharSet:
        """The charset covering the full character window."""
        return _ENCODING_WINDOWS[self]

    @classmethod
    def default(cls) -> 'QualityEncoding':
        return cls[config.DEFAULT_QUALITY_ENCODING]


_ENCODING_WINDOWS = {
    QualityEncoding.PHRED33: CharSet.SANGER,
    QualityEncoding.SANGER: CharSet.SANGER,
    QualityEncoding.PHRED64: CharSet.PHRED64,
    QualityEncoding.SOLEXA: CharSet.SOLEXA,
}


def _with_lowercase(table: Dict[str, str]) -> Dict[int, bytes]:
    expanded = {}
    for code, bases in table.items():
        expanded[ord(code)] = bases.encode('ascii')
        expanded[ord(code.lower())] = bases.lower().encode('ascii')
    return expanded


# Concrete bases each IUPAC ambiguity code may stand for
IUPAC_DNA_EXPANSION: Dict[int, bytes] = _with_lowercase({
    'R': 'AG', 'Y': 'CT', 'S': 'CG', 'W': 'AT', 'K': 'GT', 'M': 'AC',
    'B': 'CGT', 'D': 'AGT', 'H': 'ACT', 'V': 'ACG', 'N': 'ACGT',
})
IUPAC_RNA_EXPANSION: Dict[int, bytes] = {
    code: bases.replace(b'T', b'U').replace(b't', b'u')
    for code, bases in IUPAC_DNA_EXPANSION.items()
}
