"""
BioBytes - Recode

Quality score encoding/decoding and nucleotide complementing.

Quality characters are scores shifted by a fixed offset:

    Q = ord(char) - offset      (offset 33 for Phred+33/Sanger, 64 for Phred+64)

Phred error probabilities are logarithmic in the score:

    Q = -10 * log10(P_error)

Every byte is checked against the encoding window before any arithmetic or
translation, so a stray byte raises ``NotInDomainError`` instead of producing
a wrong score.
"""

import logging
import math
from typing import Iterable, List

from .charsets import CharSet, QualityEncoding
from .check import BytesLike, check_all, ensure_bytearray, ensure_bytes
from .errors import NotInDomainError, ScoreOutOfRangeError

logger = logging.getLogger(__name__)

# Complements for the IUPAC nucleotide alphabet, case preserved
_DNA_COMPLEMENT = bytes.maketrans(
    b"ACGTURYKMBVDHSWN-.acgturykmbvdhswn",
    b"TGCAAYRMKVBHDSWN-.tgcaayrmkvbhdswn",
)
_RNA_COMPLEMENT = bytes.maketrans(
    b"ACGTURYKMBVDHSWN-.acgturykmbvdhswn",
    b"UGCAAYRMKVBHDSWN-.ugcaayrmkvbhdswn",
)
_TO_UPPER_BASIC = bytes.maketrans(b"acgtu", b"ACGTU")
_TO_LOWER_BASIC = bytes.maketrans(b"ACGTU", b"acgtu")
_TRANSCRIBE = bytes.maketrans(b"Tt", b"Uu")
_BACK_TRANSCRIBE = bytes.maketrans(b"Uu", b"Tt")


def check_quality(seq: BytesLike, encoding: QualityEncoding) -> None:
    seq = ensure_bytes(seq)
    try:
        check_all(seq, encoding.charset)
    except NotInDomainError as e:
        raise NotInDomainError(e.position, e.found, encoding.label) from None


def decode(byte: int, encoding: QualityEncoding = QualityEncoding.PHRED33) -> int:
    """
    Return the score encoded by one quality character.

    Example:
        decode(ord('#'))  ->  2

    Raises:
        NotInDomainError: if ``byte`` is outside the encoding's character window
    """
    if not encoding.min_char <= byte <= encoding.max_char:
        raise NotInDomainError(None, byte, encoding.label)
    return byte - encoding.offset


def encode(score: int, encoding: QualityEncoding = QualityEncoding.PHRED33) -> int:
    """
    Return the quality character (as a byte value) for a score.

    Raises:
        ScoreOutOfRangeError: if ``score`` is outside the encoding's score window
    """
    if not encoding.min_score <= score <= encoding.max_score:
        raise ScoreOutOfRangeError(score, encoding.label, encoding.min_score, encoding.max_score)
    return score + encoding.offset


def decode_quality(seq: BytesLike, encoding: QualityEncoding = QualityEncoding.PHRED33) -> List[int]:
    """Decode a whole quality string into a list of scores."""
    seq = ensure_bytes(seq)
    check_quality(seq, encoding)
    offset = encoding.offset
    return [b - offset for b in seq]


def encode_quality(
    scores: Iterable[int],
    encoding: QualityEncoding = QualityEncoding.PHRED33
) -> bytearray:
    """Encode scores into a quality string."""
    return bytearray(encode(s, encoding) for s in scores)


def phred_from_solexa(score: int) -> int:
    """Convert a Solexa score to the nearest Phred score."""
    return int(round(10 * math.log10(10 ** (score / 10.0) + 1)))


def solexa_from_phred(score: int) -> int:
    """Convert a Phred score to the nearest Solexa score (floored at -5)."""
    if score == 0:
        return QualityEncoding.SOLEXA.min_score
    solexa = 10 * math.log10(10 ** (score / 10.0) - 1)
    return max(QualityEncoding.SOLEXA.min_score, int(round(solexa)))


def convert_score(score: int, source: QualityEncoding, target: QualityEncoding) -> int:
    """Map a score between encodings; only Solexa and Phred scales differ."""
    source_solexa = source is QualityEncoding.SOLEXA
    target_solexa = target is QualityEncoding.SOLEXA
    if source_solexa and not target_solexa:
        return phred_from_solexa(score)
    if target_solexa and not source_solexa:
        return solexa_from_phred(score)
    return score


def convert_quality(buf: bytearray, source: QualityEncoding, target: QualityEncoding) -> None:
    """
    Re-encode a quality string in place, e.g. Phred+64 to Phred+33.

    Solexa scores are mapped onto the Phred scale (and back) rather than just
    shifted. The buffer is left untouched when any byte is outside the source
    window or any converted score does not fit the target.
    """
    ensure_bytearray(buf)
    check_quality(buf, source)
    if source is target:
        return

    table = bytearray(range(256))
    for char in set(buf):
        table[char] = encode(convert_score(char - source.offset, source, target), target)
    buf[:] = buf.translate(table)
    logger.debug("Converted %d quality characters from %s to %s",
                 len(buf), source.label, target.label)


def score_to_probability(score: int) -> float:
    """
    Convert a Phred score to an error probability, P = 10^(-Q/10).

    Example:
        score_to_probability(30)  ->  0.001
    """
    encoding = QualityEncoding.PHRED33
    if not encoding.min_score <= score <= encoding.max_score:
        raise ScoreOutOfRangeError(score, encoding.label, encoding.min_score, encoding.max_score)
    return 10.0 ** (-score / 10.0)


def probability_to_score(prob: float) -> int:
    """Convert an error probability in (0, 1] to a Phred score, clamped to 0-93."""
    if prob <= 0.0 or prob > 1.0:
        raise ValueError(f"Probability {prob} must be in (0, 1]")

    q = -10.0 * math.log10(prob)
    return min(max(round(q), QualityEncoding.PHRED33.min_score), QualityEncoding.PHRED33.max_score)


def complement(seq: BytesLike, rna: bool = False) -> bytearray:
    """
    Complement a nucleotide sequence (A<->T, C<->G, R<->Y, ...), keeping case.

    With ``rna=True`` adenine pairs with U instead of T.

    Raises:
        NotInDomainError: at the first byte that is not an IUPAC nucleotide code
    """
    seq = ensure_bytes(seq)
    check_all(seq, CharSet.NUCLEOTIDE)
    return bytearray(seq.translate(_RNA_COMPLEMENT if rna else _DNA_COMPLEMENT))


def reverse_complement(seq: BytesLike, rna: bool = False) -> bytearray:
    """
    Return the reverse complement of a nucleotide sequence.

    Example:
        reverse_complement(b"AACG")  ->  bytearray(b"CGTT")
    """
    result = complement(seq, rna=rna)
    result.reverse()
    return result


def reverse_complement_in_place(buf: bytearray, rna: bool = False) -> None:
    """Reverse complement ``buf`` in place; it is unchanged if validation fails."""
    ensure_bytearray(buf)
    check_all(buf, CharSet.NUCLEOTIDE)
    buf[:] = buf.translate(_RNA_COMPLEMENT if rna else _DNA_COMPLEMENT)
    buf.reverse()


def to_upper_basic(buf: bytearray) -> None:
    """Uppercase only ``acgtu`` in place; every other byte is left intact."""
    ensure_bytearray(buf)
    buf[:] = buf.translate(_TO_UPPER_BASIC)


def to_lower_basic(buf: bytearray) -> None:
    """Lowercase only ``ACGTU`` in place; every other byte is left intact."""
    ensure_bytearray(buf)
    buf[:] = buf.translate(_TO_LOWER_BASIC)


def transcribe(seq: BytesLike) -> bytearray:
    """DNA to RNA (T -> U, keeping case)."""
    return bytearray(ensure_bytes(seq).translate(_TRANSCRIBE))


def back_transcribe(seq: BytesLike) -> bytearray:
    """RNA to DNA (U -> T, keeping case)."""
    return bytearray(ensure_bytes(seq).translate(_BACK_TRANSCRIBE))
