"""error types raised by sequence operations"""


class SequenceError(Exception):
    """base class for all errors raised by seqy."""
    pass


class InvalidCastError(SequenceError, TypeError):
    """an element could not be converted to the requested type."""

    def __init__(self, message: str, index: int = -1, source_type: type = None, target_type: type = None):
        super().__init__(message)
        self.index = index
        self.source_type = source_type
        self.target_type = target_type


class DivisionByZeroError(SequenceError, ZeroDivisionError):
    """integer average over an empty sequence."""
    pass


class IndexOutOfRangeError(SequenceError, IndexError):
    """an integer index fell outside the sequence bounds."""

    def __init__(self, index: int, length: int):
        super().__init__(f"index {index} out of range for sequence of length {length}")
        self.index = index
        self.length = length
