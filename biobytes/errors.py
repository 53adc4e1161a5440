"""
BioBytes - Errors

Exception types shared by every module.

Each condition is raised at the point where it is detected and carries the
values needed to report it. Nothing in the library swallows these; a caller
processing many reads decides whether to skip, log or abort.
"""

from typing import Optional


class BioBytesError(Exception):
    """Base class for all library errors."""
    pass


class OutOfRangeError(BioBytesError):
    """Raised when a raw value fails a value-object constructor."""
    def __init__(self, given: int, expected_min: int, expected_max: int):
        self.given = given
        self.expected_min = expected_min
        self.expected_max = expected_max
        super().__init__(
            f"Value {given} is out of range [{expected_min}, {expected_max}]"
        )


class NotInDomainError(BioBytesError):
    """Raised when a byte is not a member of the required charset."""
    def __init__(self, position: Optional[int], found: int, domain: str):
        self.position = position
        self.found = found
        self.domain = domain
        where = f" at position {position}" if position is not None else ""
        shown = f" ({chr(found)!r})" if 0 <= found < 256 else ""
        super().__init__(f"Byte {found!r}{shown}{where} is not in {domain}")


class EmptyInputError(BioBytesError):
    """Raised when an operation requires a non-empty sequence."""
    pass


class LengthMismatchError(BioBytesError):
    """Raised when two sequences must have the same length."""
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected length {expected}, got {actual}")


class ScoreOutOfRangeError(BioBytesError):
    """Raised when a quality score does not fit its encoding."""
    def __init__(self, score: int, encoding: str, min_score: int, max_score: int):
        self.score = score
        self.encoding = encoding
        super().__init__(
            f"Score {score} is out of range [{min_score}, {max_score}] for {encoding}"
        )
