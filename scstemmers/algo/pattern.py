"""
The Ljubešić–Pandžić stemmer for Croatian. Unlike the suffix stemmers, it works on the standard
Latin spelling directly (no dual coding), and instead of a plain suffix table uses an ordered list
of :class:`PatternRule <scstemmers.data.tables.PatternRule>`: "the word is something like
``.+(s|š)k`` followed by one of these endings".

Algorithm, in short:

* stop words (forms of *biti*, *htjeti*, *moći*...) are returned as is;
* the word is *transformed*: the first of the transformation suffixes it ends with is replaced
  (``vojci => vojka``, ``centara => centra``), making alternations regular;
* rules are tried in order, and the first one which matches **and** produces a good stem (longer
  than one letter, containing a vowel) decides the result;
* if no rule gives a good stem, the transformed word is the result.

Note that transformation and rules are both "first wins" (not "longest wins", as in :mod:`suffix
<scstemmers.algo.suffix>`), so their order is meaningful.

.. autoclass:: PatternStemmer
"""

import re

from scstemmers.data.tables import PatternSet
from scstemmers.algo.tokens import map_tokens

VOWEL = re.compile(r'[aeiouR]')
SYLLABIC_R = re.compile(r'(^|[^aeiou])r($|[^aeiou])')


class PatternStemmer:
    """
    ::

        >>> stemmer = PatternStemmer(ljubesic_pandzic.pattern_set())
        >>> stemmer('djevojčica')
        'djevojčic'
        >>> stemmer('sam')
        'sam'
        >>> stemmer('krvi')
        'krv'

    .. automethod:: __call__
    .. automethod:: transform
    .. automethod:: has_vowel
    .. automethod:: stem_line
    """

    def __init__(self, patterns: PatternSet):
        self.patterns = patterns

    def __call__(self, word: str) -> str:
        """
        Stems one word.

        Args:
            word: Word to stem
        """

        if word.lower() in self.patterns.stop_words:
            return word

        transformed = self.transform(word)
        for rule in self.patterns.rules:
            stem = rule.candidate(transformed)
            if stem is not None and len(stem) > 1 and self.has_vowel(stem):
                return stem

        return transformed

    def transform(self, word: str) -> str:
        """
        Replaces the word's suffix with the first applicable transformation::

            >>> stemmer.transform('pjesnici')
            'pjesnik'

        (Here, transformations "snici" => "snik" is the first found.)
        """
        for suffix, replacement in self.patterns.transformations:
            if word.endswith(suffix):
                return word[:len(word) - len(suffix)] + replacement
        return word

    def has_vowel(self, stem: str) -> bool:     # pylint: disable=no-self-use
        """
        Whether the stem has a vowel, considering the syllabic R ("r" between consonants, like in
        "krv" or "prst") a vowel too.
        """
        return VOWEL.search(SYLLABIC_R.sub(r'\1R\2', stem)) is not None

    def stem_line(self, line: str) -> str:
        """
        Stems every word of the line.
        """
        return map_tokens(line, self).strip()
