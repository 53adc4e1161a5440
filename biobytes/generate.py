"""
BioBytes - Random Generators

Seeded random sequences and in-place cleanup of ambiguous bases.

Every function takes an explicit ``numpy.random.Generator`` so results are
reproducible:

    rng = np.random.default_rng(42)
    dna = random_dna(100, rng)
    random_replace_n(read_bases, rng)

Replacement functions modify a caller-owned ``bytearray`` and return the
number of bytes replaced.
"""

import logging
from typing import Dict

import numpy as np

from .charsets import CharSet, IUPAC_DNA_EXPANSION, IUPAC_RNA_EXPANSION, QualityEncoding
from .check import ensure_bytearray

logger = logging.getLogger(__name__)

_QUALITY_ALPHABETS = {
    QualityEncoding.PHRED33: CharSet.PHRED33,
    QualityEncoding.SANGER: CharSet.SANGER,
    QualityEncoding.PHRED64: CharSet.PHRED64,
    QualityEncoding.SOLEXA: CharSet.SOLEXA,
}


def _alphabet(charset: CharSet) -> np.ndarray:
    return np.frombuffer(charset.value, dtype=np.uint8)


def _bases(rna: bool, lowercase: bool = False) -> np.ndarray:
    if rna:
        return _alphabet(CharSet.RNA_LOWERCASE if lowercase else CharSet.RNA)
    return _alphabet(CharSet.DNA_LOWERCASE if lowercase else CharSet.DNA)


def _draw(alphabet: np.ndarray, count: int, rng: np.random.Generator) -> np.ndarray:
    return alphabet[rng.integers(0, len(alphabet), size=count)]


def random_sequence(charset: CharSet, length: int, rng: np.random.Generator) -> bytearray:
    """
    Draw ``length`` bytes uniformly from ``charset``.

    Raises:
        ValueError: if ``length`` is negative
    """
    if length < 0:
        raise ValueError("Length must be non-negative")
    return bytearray(_draw(_alphabet(charset), length, rng).tobytes())


def random_dna(length: int, rng: np.random.Generator) -> bytearray:
    """Random uppercase ``ACGT`` sequence."""
    return random_sequence(CharSet.DNA, length, rng)


def random_rna(length: int, rng: np.random.Generator) -> bytearray:
    """Random uppercase ``ACGU`` sequence."""
    return random_sequence(CharSet.RNA, length, rng)


def random_amino_acid(length: int, rng: np.random.Generator) -> bytearray:
    """Random sequence over the 21 uppercase amino acid letters."""
    return random_sequence(CharSet.BASIC_AMINO_ACID, length, rng)


def random_quality(
    length: int,
    rng: np.random.Generator,
    encoding: QualityEncoding = QualityEncoding.PHRED33
) -> bytearray:
    """
    Random quality string.

    Phred+33 draws from the Illumina 1.8+ characters (``!`` to ``I``, Q0-Q40);
    the other encodings draw from their full character window.
    """
    return random_sequence(_QUALITY_ALPHABETS[encoding], length, rng)


def _replace(buf: bytearray, rng: np.random.Generator, choices: Dict[int, np.ndarray]) -> int:
    """Replace every byte that has an entry in ``choices`` with a random pick."""
    arr = np.frombuffer(bytes(buf), dtype=np.uint8).copy()
    replaced = 0
    for byte, alphabet in choices.items():
        mask = arr == byte
        count = int(np.count_nonzero(mask))
        if count:
            arr[mask] = _draw(alphabet, count, rng)
            replaced += count
    if replaced:
        buf[:] = arr.tobytes()
    return replaced


def random_replace_n(buf: bytearray, rng: np.random.Generator, rna: bool = False) -> int:
    """Replace ``N`` with a random uppercase base and ``n`` with a lowercase one."""
    ensure_bytearray(buf)
    replaced = _replace(buf, rng, {
        ord('N'): _bases(rna),
        ord('n'): _bases(rna, lowercase=True),
    })
    logger.debug("Replaced %d N bases", replaced)
    return replaced


def random_replace_gap(buf: bytearray, rng: np.random.Generator, rna: bool = False) -> int:
    """Replace gap characters (``-`` and ``.``) with random uppercase bases."""
    ensure_bytearray(buf)
    bases = _bases(rna)
    replaced = _replace(buf, rng, {gap: bases for gap in CharSet.GAP.value})
    logger.debug("Replaced %d gaps", replaced)
    return replaced


def random_replace_iupac(buf: bytearray, rng: np.random.Generator, rna: bool = False) -> int:
    """
    Replace IUPAC ambiguity codes with one of the bases they stand for.

    Case is preserved: ``R`` becomes ``A`` or ``G``, ``r`` becomes ``a`` or
    ``g``. ``N``/``n`` count as ambiguity codes here.
    """
    ensure_bytearray(buf)
    expansion = IUPAC_RNA_EXPANSION if rna else IUPAC_DNA_EXPANSION
    replaced = _replace(buf, rng, {
        code: np.frombuffer(bases, dtype=np.uint8) for code, bases in expansion.items()
    })
    logger.debug("Replaced %d ambiguity codes", replaced)
    return replaced


def random_replace_non_basic(buf: bytearray, rng: np.random.Generator, rna: bool = False) -> int:
    """
    Replace every byte outside ``ACGT``/``acgt`` (``ACGU``/``acgu`` with
    ``rna=True``) with a random uppercase base.
    """
    ensure_bytearray(buf)
    allowed = CharSet.RNA_MIX_CASE if rna else CharSet.DNA_MIX_CASE
    arr = np.frombuffer(bytes(buf), dtype=np.uint8).copy()
    mask = ~np.isin(arr, _alphabet(allowed))
    replaced = int(np.count_nonzero(mask))
    if replaced:
        arr[mask] = _draw(_bases(rna), replaced, rng)
        buf[:] = arr.tobytes()
    logger.debug("Replaced %d non-basic bytes", replaced)
    return replaced
