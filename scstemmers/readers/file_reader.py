"""
.. autoclass:: FileReader
    :members:
"""

import io

from typing import Iterator, TextIO, Tuple, Union

BOM = '\ufeff'


class FileReader:
    """
    A very thin wrapper around ``IO``-alike object, to read it line by line and:

    * strip line ends (but not other whitespace, and not empty lines: stemmed file should have
      the same number of lines as the source one)
    * ignore BOM (byte-order mark) at the beginning
    * yield line with its number (1-based)

    ::

        for line_no, line in FileReader('text.txt'):
            ...

    Can be created with path (the file is opened as UTF-8) or with already opened text stream
    (like ``io.StringIO``).
    """

    def __init__(self, source: Union[str, TextIO], encoding: str = 'utf-8'):
        self.line_no = 0
        if isinstance(source, io.TextIOBase):
            self.path = None
            self.io = source
        else:
            self.path = source
            self.io = open(source, 'r', encoding=encoding, newline='')

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return self.readlines()

    def readlines(self) -> Iterator[Tuple[int, str]]:
        for ln in self.io:
            self.line_no += 1
            if self.line_no == 1 and ln.startswith(BOM):
                ln = ln[len(BOM):]
            yield (self.line_no, ln.rstrip('\r\n'))

    def close(self):
        if self.path is not None:
            self.io.close()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()
