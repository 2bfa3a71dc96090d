r"""
'     ____  ___  ___  _  _
'    / ___)(  _)/ _ \( \/ )
'    \___ \ ) _)\_  / \  /
'    (____/(___)(__)  (__/
"""

import logging

# expose the main class
from .sequence import Sequence

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    seqy,
    S
)

# expose the error types
from .errors import (
    SequenceError,
    InvalidCastError,
    DivisionByZeroError,
    IndexOutOfRangeError
)

from .types import NUMERIC_KINDS

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sequence",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "seqy",
    "S",
    "SequenceError",
    "InvalidCastError",
    "DivisionByZeroError",
    "IndexOutOfRangeError",
    "NUMERIC_KINDS"
]
