"""
BioBytes - Membership & Classification

Predicates over byte sequences: charset membership, homopolymers, gaps and
ambiguous bases.

Empty input is handled deliberately rather than by accident:

    is_all(b"", cs)       -> True   (vacuously, nothing is outside cs)
    has_any(b"", cs)      -> False
    is_homopolymer(b"")   -> True
    is_homopolymer(b"A")  -> True

Operations that divide by the length (percent checks) raise
``EmptyInputError`` instead.
"""

from collections import Counter
from typing import Union

from .charsets import CharSet, QualityEncoding
from .errors import EmptyInputError, NotInDomainError, OutOfRangeError
from .value import PercentValue

BytesLike = Union[bytes, bytearray, memoryview]


def ensure_bytes(seq: BytesLike) -> Union[bytes, bytearray]:
    """Return ``seq`` as ``bytes``/``bytearray``, rejecting text."""
    if isinstance(seq, (bytes, bytearray)):
        return seq
    if isinstance(seq, memoryview):
        return seq.tobytes()
    raise TypeError(
        f"Expected a bytes-like sequence, got {type(seq).__name__}; "
        f"encode text with .encode('ascii') first"
    )


def ensure_bytearray(buf: object) -> bytearray:
    if not isinstance(buf, bytearray):
        raise TypeError(f"In-place operations need a bytearray, got {type(buf).__name__}")
    return buf


def check_byte(byte: int) -> int:
    """Return ``byte`` if it is a byte value (0-255), else raise ``OutOfRangeError``."""
    if not 0 <= byte <= 255:
        raise OutOfRangeError(byte, 0, 255)
    return byte


def is_all(seq: BytesLike, charset: CharSet) -> bool:
    """Check if every byte of ``seq`` is in ``charset``. True for empty input."""
    seq = ensure_bytes(seq)
    return not seq.translate(None, charset.value)


def has_any(seq: BytesLike, charset: CharSet) -> bool:
    """Check if at least one byte of ``seq`` is in ``charset``. False for empty input."""
    seq = ensure_bytes(seq)
    return len(seq.translate(None, charset.value)) < len(seq)


def check_all(seq: BytesLike, charset: CharSet) -> None:
    """
    Raise ``NotInDomainError`` at the first byte of ``seq`` outside ``charset``.

    ``check_all(b"ACXT", CharSet.DNA)`` reports position 2, byte ``X``.
    """
    seq = ensure_bytes(seq)
    if is_all(seq, charset):
        return
    members = charset.members
    for i, byte in enumerate(seq):
        if byte not in members:
            raise NotInDomainError(i, byte, charset.name)


def is_quality(seq: BytesLike, encoding: QualityEncoding = QualityEncoding.PHRED33) -> bool:
    """Check if every byte is inside the encoding's character window."""
    return is_all(seq, encoding.charset)


def has_gap(seq: BytesLike) -> bool:
    """Check if ``seq`` contains gap punctuation (``-`` or ``.``)."""
    return has_any(seq, CharSet.GAP)


def has_n(seq: BytesLike) -> bool:
    """Check if ``seq`` contains ``N`` or ``n``."""
    return has_any(seq, CharSet.N_MIX_CASE)


def has_mixed_case(seq: BytesLike) -> bool:
    return has_any(seq, CharSet.LETTERS_UPPERCASE) and has_any(seq, CharSet.LETTERS_LOWERCASE)


def is_homopolymer(seq: BytesLike) -> bool:
    """
    Check if every byte of ``seq`` is the same byte.

    Uses no charset, so a run of gaps is a homopolymer too. Empty and
    single-byte sequences are homopolymers.
    """
    seq = ensure_bytes(seq)
    if len(seq) < 2:
        return True
    return seq.count(seq[0]) == len(seq)


def is_homopolymer_of(seq: BytesLike, byte: int) -> bool:
    """Check if ``seq`` is a homopolymer of ``byte``. False for empty input."""
    check_byte(byte)
    seq = ensure_bytes(seq)
    return len(seq) > 0 and seq.count(byte) == len(seq)


def is_homopolymer_n(seq: BytesLike) -> bool:
    """Check if ``seq`` is all ``N`` or all ``n`` (mixed case does not count)."""
    return is_homopolymer_of(seq, ord('N')) or is_homopolymer_of(seq, ord('n'))


def is_homopolymer_not_n(seq: BytesLike) -> bool:
    """Check if ``seq`` is a non-empty homopolymer of anything other than ``N``/``n``."""
    seq = ensure_bytes(seq)
    return len(seq) > 0 and is_homopolymer(seq) and not is_homopolymer_n(seq)


def percent_homopolymer_passing(seq: BytesLike, threshold: PercentValue) -> bool:
    """
    Check if the most frequent byte makes up at least ``threshold`` percent.

    The share is rounded half up: 2 of 3 is 67%, 1 of 8 is 13%.

    Raises:
        EmptyInputError: if ``seq`` is empty
        TypeError: if ``threshold`` is not a ``PercentValue``
    """
    if not isinstance(threshold, PercentValue):
        raise TypeError("threshold must be a PercentValue")
    seq = ensure_bytes(seq)
    if len(seq) == 0:
        raise EmptyInputError("Cannot compute homopolymer percent of an empty sequence")

    _, mode_count = Counter(seq).most_common(1)[0]
    return PercentValue.from_fraction(mode_count, len(seq)) >= threshold


def _check_length(length: int) -> int:
    if length < 0:
        raise ValueError("Length must be non-negative")
    return length


def is_length(seq: BytesLike, length: int) -> bool:
    return len(ensure_bytes(seq)) == _check_length(length)


def is_at_least_length(seq: BytesLike, length: int) -> bool:
    """Check if ``seq`` has at least ``length`` bytes, e.g. a minimum read length."""
    return len(ensure_bytes(seq)) >= _check_length(length)


def is_at_most_length(seq: BytesLike, length: int) -> bool:
    return len(ensure_bytes(seq)) <= _check_length(length)


def is_palindrome(seq: BytesLike) -> bool:
    """Check if ``seq`` reads the same forwards and backwards (byte-wise)."""
    seq = ensure_bytes(seq)
    return seq == seq[::-1]
