"""
File-level wrappers around :class:`Stemmer <scstemmers.stemmer.Stemmer>`. All files are read and
written as UTF-8; each input line produces exactly one output line (except for
:func:`tokens_per_line`).

Errors of reading and writing (missing file, no permissions, file not in UTF-8) are not handled
here, so the caller can tell them apart from successfully processed empty file. The target file is
replaced only when the whole source was processed (see :func:`output_file`).

.. autofunction:: stem_file
.. autofunction:: stem_dual_coded_file
.. autofunction:: encode_file
.. autofunction:: decode_file
.. autofunction:: tokens_per_line
.. autofunction:: output_file
"""

import os
import re
import logging
import contextlib

from typing import Callable, Iterator, TextIO

from scstemmers.stemmer import Stemmer
from scstemmers.readers import FileReader

logger = logging.getLogger(__name__)

TOKEN = re.compile(r'\w+')


@contextlib.contextmanager
def output_file(target: str) -> Iterator[TextIO]:
    """
    Opens ``<target>.part`` for writing, and moves it to ``target`` only when the block finishes
    without errors, so a failed conversion never leaves a truncated ``target`` (an existing one is
    kept as is).
    """
    partial = f'{target}.part'
    try:
        with open(partial, 'w', encoding='utf-8') as output:
            yield output
    except BaseException:
        if os.path.exists(partial):
            os.remove(partial)
        raise
    os.replace(partial, target)


def convert_file(source: str, target: str, func: Callable[[str], str]) -> int:
    """
    Writes ``func(line)`` for each line of ``source`` into ``target``. Returns number of lines processed.
    """
    count = 0
    with FileReader(source) as reader, output_file(target) as output:
        for _, line in reader:
            output.write(func(line) + '\n')
            count += 1

    logger.info('%s => %s: %d lines', source, target, count)
    return count


def stem_file(stemmer: Stemmer, source: str, target: str) -> int:
    return convert_file(source, target, stemmer.stem_line)


def stem_dual_coded_file(stemmer: Stemmer, source: str, target: str) -> int:
    """
    Stems the file already converted to dual coding (with :func:`encode_file`), the result is
    dual-coded, too.

    Raises:
        ValueError: if the stemmer doesn't use dual coding
    """
    if stemmer.transliterator is None:
        raise ValueError(f'{stemmer.algorithm.name} stemmer does not use dual coding')
    return convert_file(source, target, stemmer.stem_dual_coded_line)


def encode_file(stemmer: Stemmer, source: str, target: str) -> int:
    return convert_file(source, target, stemmer.encode)


def decode_file(stemmer: Stemmer, source: str, target: str) -> int:
    return convert_file(source, target, stemmer.decode)


def tokens_per_line(source: str, target: str) -> int:
    """
    Rewrites the file so each word is on a separate line, and everything else (punctuation,
    whitespace) is dropped. Convenient for comparing the results of different stemmers word by word.
    Returns number of tokens written.
    """
    count = 0
    with FileReader(source) as reader, output_file(target) as output:
        for _, line in reader:
            for token in TOKEN.findall(line):
                output.write(token + '\n')
                count += 1

    logger.info('%s => %s: %d tokens', source, target, count)
    return count
