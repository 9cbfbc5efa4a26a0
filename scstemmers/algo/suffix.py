"""
The suffix-stripping algorithm shared by the Kešelj–Šipka and Milošević stemmers.

The word (already in dual coding) is checked against the suffix :class:`RuleTable
<scstemmers.data.tables.RuleTable>`, and the **longest** suffix present in the table is replaced
with the table's value, provided that what is left of the word (the stem) is not too short. How
short is too short, is defined by the :class:`StemPolicy`.

The Milošević stemmer additionally has an :class:`IrregularDictionary
<scstemmers.data.tables.IrregularDictionary>` of word forms which are replaced with the lemma as a
whole (``mogu => mocyi``), before any suffix rules are tried.

.. autoclass:: StemPolicy
    :members:

.. autoclass:: SuffixStemmer
"""

import re

from dataclasses import dataclass
from typing import Optional

from scstemmers.data.tables import RuleTable, IrregularDictionary
from scstemmers.algo.tokens import map_tokens

#: The dual codes a word might start with, when the first letter had a diacritic
DIGRAPH_START = re.compile(r'(cx|cy|zx|dx|dy|sx|Cx|Cy|Zx|Dx|Dy|Sx)')


@dataclass(frozen=True)
class StemPolicy:
    """
    Everything that makes suffix stemmers different from each other: their rules, and the
    constraints on applying them.
    """

    rules: RuleTable

    #: Words shorter than this are returned as is.
    min_word_length: int = 0
    #: Minimal length of the remaining stem when the suffix is removed.
    min_stem_length: int = 0
    #: If set, used instead of ``min_stem_length`` for words starting with a dual code (like
    #: "cxovek"), so the code itself is not considered to be the whole stem.
    digraph_stem_length: Optional[int] = None

    #: Irregular forms, replaced before suffix rules are even tried.
    irregular: Optional[IrregularDictionary] = None

    #: When stemming a line, only tokens matching this are stemmed (if not set, every piece
    #: between word boundaries is).
    token_pattern: Optional[re.Pattern] = None


class SuffixStemmer:
    """
    Stemmer for dual-coded words. Typically, you would not use it directly, but rather through
    :class:`Stemmer <scstemmers.stemmer.Stemmer>`, which also converts text to and from dual coding::

        >>> stemmer = SuffixStemmer(milosevic.policy())
        >>> stemmer('pevali')
        'pev'
        >>> stemmer('Mogu')
        'Mocyi'

    .. automethod:: __call__
    .. automethod:: stem_length_limit
    .. automethod:: longest_suffix
    .. automethod:: stem_line
    """

    def __init__(self, policy: StemPolicy):
        self.policy = policy
        self.rules = policy.rules

    def __call__(self, word: str) -> str:
        """
        Stems one dual-coded word. The case of the stem is preserved from the word, but
        replacement parts of the rules (and irregular lemmas) are added as they are in the table.

        Args:
            word: Word to stem
        """

        if self.policy.irregular is not None:
            lemma = self.policy.irregular.lookup(word)
            if lemma is not None:
                return lemma

        if len(word) < self.policy.min_word_length:
            return word

        suffix = self.longest_suffix(word, self.stem_length_limit(word))
        if not suffix:
            return word

        return word[:len(word) - len(suffix)] + self.rules[suffix]

    def stem_length_limit(self, word: str) -> int:
        """
        Minimal stem length allowed for this word.
        """
        if self.policy.digraph_stem_length is not None and DIGRAPH_START.match(word):
            return self.policy.digraph_stem_length
        return self.policy.min_stem_length

    def longest_suffix(self, word: str, min_stem_length: int) -> str:
        """
        Finds the longest ending of the word which is present in rules and leaves at least
        ``min_stem_length`` chars of stem. Returns empty string if there is none.

        Note that it is not the same as "first matching rule": if the table has suffixes "ama" and
        "a", the word "zenama" is stemmed to "zen", even if the "a" was declared first.
        """
        lowered = word.lower()
        for start in range(len(lowered)):
            suffix = lowered[start:]
            if len(suffix) > self.rules.max_suffix_length:
                continue
            if len(word) - len(suffix) < min_stem_length:
                continue
            if suffix in self.rules:
                return suffix
        return ''

    def stem_line(self, line: str) -> str:
        """
        Stems all words of a dual-coded line (see :attr:`StemPolicy.token_pattern` for what is a word).
        """
        return map_tokens(line, self, self.policy.token_pattern).strip()
