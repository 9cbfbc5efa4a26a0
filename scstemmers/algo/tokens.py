"""
Applying a word-level function to every token of a line, leaving everything between tokens intact.

Two ways of finding tokens are used:

* split by every word boundary (``\\b``), so that the line is a sequence of alternating "words"
  and "separators", and the function is applied to both (stemmers should leave separators as is);
* find only tokens matching some pattern (for example, only words of 4-30 ASCII letters), the rest
  of the line is copied.

.. autofunction:: map_tokens
"""

import re

from typing import Callable, Optional

WORD_BOUNDARY = re.compile(r'\b')


def map_tokens(line: str, func: Callable[[str], str], pattern: Optional[re.Pattern] = None) -> str:
    """
    ::

        >>> map_tokens('ab, cd', str.upper)
        'AB, CD'
        >>> map_tokens('ab, cdef', str.upper, re.compile(r'\\b[a-z]{4}\\b'))
        'ab, CDEF'

    Args:
        line: Text to process
        func: Function to apply to each token
        pattern: If passed, only what matches it is passed to ``func``, otherwise all pieces between
            word boundaries are
    """
    if pattern is None:
        return ''.join(func(piece) for piece in WORD_BOUNDARY.split(line))
    return pattern.sub(lambda m: func(m.group(0)), line)
