from __future__ import annotations

import logging

from enum import IntEnum
from typing import List, Optional, Union

from scstemmers.algo.transliteration import Transliterator, TransliterationPolicy
from scstemmers.algo.suffix import SuffixStemmer
from scstemmers.algo.pattern import PatternStemmer
from scstemmers.data import keselj_sipka, milosevic, ljubesic_pandzic

logger = logging.getLogger(__name__)


class Algorithm(IntEnum):
    """
    Stemming algorithms available, numbered the same way as in the command line interface.
    """

    KESELJ_SIPKA_GREEDY = 1
    KESELJ_SIPKA_OPTIMAL = 2
    MILOSEVIC = 3
    LJUBESIC_PANDZIC = 4

    @classmethod
    def parse(cls, value: Union[Algorithm, int, str]) -> Algorithm:
        """
        Algorithm by its number (``3`` or ``"3"``) or name (``"milosevic"``, ``"keselj-sipka-greedy"``,
        case-insensitive).
        """
        if isinstance(value, str):
            name = value.strip().upper().replace('-', '_')
            if name.isdigit():
                value = int(name)
            elif name in cls.__members__:
                return cls[name]
        if isinstance(value, int) and not isinstance(value, bool) and value in {a.value for a in cls}:
            return cls(value)

        known = ', '.join(f'{a.value} ({a.name.lower()})' for a in cls)
        raise ValueError(f'Unknown stemming algorithm {value!r}, expected one of: {known}')


class Stemmer:
    """
    The main interface to ``scstemmers`` as a library.

    Usage::

        from scstemmers import Stemmer

        stemmer = Stemmer.for_algorithm('milosevic')   # or Stemmer.for_algorithm(3)

        print(stemmer.stem_word('pevali'))
        # pev
        print(stemmer.stem_line('Мој отац је певао.'))
        # Mo ot jesam pev.

    Serbian stemmers (Kešelj–Šipka and Milošević) accept both Cyrillic and Latin, convert the text
    into dual coding (see :mod:`transliteration <scstemmers.algo.transliteration>`), stem it and
    convert it back into Latin, so the output is always Latin. The Croatian stemmer (Ljubešić–Pandžić)
    expects Latin text and works on it directly.

    All the data stemmers use is immutable, so one stemmer can be safely used from several threads.

    **Stemmer creation**

    .. automethod:: for_algorithm
    .. automethod:: algorithms

    **Stemming**

    .. automethod:: stem_word
    .. automethod:: stem_line
    .. automethod:: stem_text

    **Dual coding**

    .. automethod:: encode
    .. automethod:: decode
    .. automethod:: stem_dual_coded_word
    .. automethod:: stem_dual_coded_line

    **Algorithms**

    .. autoattribute:: stemmer
    .. autoattribute:: transliterator
    """

    #: Algorithm implementation: :class:`SuffixStemmer <scstemmers.algo.suffix.SuffixStemmer>` or
    #: :class:`PatternStemmer <scstemmers.algo.pattern.PatternStemmer>`.
    stemmer: Union[SuffixStemmer, PatternStemmer]
    #: Dual coding converter; ``None`` for the stemmers working with standard spelling.
    transliterator: Optional[Transliterator]

    @classmethod
    def for_algorithm(cls, algorithm: Union[Algorithm, int, str]) -> Stemmer:
        """
        Creates a stemmer.

        Args:
            algorithm: :class:`Algorithm`, its number or name
        """

        algorithm = Algorithm.parse(algorithm)

        if algorithm == Algorithm.KESELJ_SIPKA_GREEDY:
            stemmer = cls(algorithm, SuffixStemmer(keselj_sipka.greedy_policy()), TransliterationPolicy.KESELJ_SIPKA)
        elif algorithm == Algorithm.KESELJ_SIPKA_OPTIMAL:
            stemmer = cls(algorithm, SuffixStemmer(keselj_sipka.optimal_policy()), TransliterationPolicy.KESELJ_SIPKA)
        elif algorithm == Algorithm.MILOSEVIC:
            stemmer = cls(algorithm, SuffixStemmer(milosevic.policy()), TransliterationPolicy.MILOSEVIC)
        else:
            stemmer = cls(algorithm, PatternStemmer(ljubesic_pandzic.pattern_set()))

        return stemmer

    @staticmethod
    def algorithms() -> List[Algorithm]:
        return list(Algorithm)

    def __init__(self, algorithm: Algorithm,
                 stemmer: Union[SuffixStemmer, PatternStemmer],
                 transliteration: Optional[TransliterationPolicy] = None):
        self.algorithm = algorithm
        self.stemmer = stemmer
        self.transliterator = Transliterator(transliteration) if transliteration else None

        if isinstance(stemmer, SuffixStemmer):
            irregular = stemmer.policy.irregular
            logger.debug('%s: %d suffix rules (longest %d), %d irregular forms',
                         algorithm.name, len(stemmer.rules), stemmer.rules.max_suffix_length,
                         len(irregular) if irregular else 0)
        else:
            logger.debug('%s: %d rules, %d transformations, %d stop words',
                         algorithm.name, len(stemmer.patterns.rules),
                         len(stemmer.patterns.transformations), len(stemmer.patterns.stop_words))

    def __repr__(self):
        return f'Stemmer({self.algorithm.name})'

    def stem_word(self, word: str) -> str:
        """
        Stems one word::

            >>> Stemmer.for_algorithm('milosevic').stem_word('Nisam')
            'NE_jesam'
            >>> Stemmer.for_algorithm('ljubesic-pandzic').stem_word('djevojčica')
            'djevojčic'

        Args:
            word: Word to stem
        """

        if self.transliterator is None:
            return self.stemmer(word)
        return self.decode(self.stemmer(self.encode(word)))

    def stem_line(self, line: str) -> str:
        """
        Stems each word of the line, keeping everything between words as is (except for the
        whitespace at the beginning and end of the line, which is removed).

        Args:
            line: Line of text
        """

        if self.transliterator is None:
            return self.stemmer.stem_line(line)
        return self.decode(self.stemmer.stem_line(self.encode(line)))

    def stem_text(self, text: str) -> str:
        """
        Stems each line of the (multi-line) text with :meth:`stem_line`.

        Args:
            text: Text to stem
        """

        return '\n'.join(self.stem_line(line) for line in text.split('\n')).strip()

    def encode(self, text: str) -> str:
        """
        Converts the text into this stemmer's dual coding. Stemmers without dual coding return the
        text unchanged.
        """
        if self.transliterator is None:
            return text
        return self.transliterator.encode(text)

    def decode(self, text: str) -> str:
        """
        Converts the dual-coded text into Latin. Stemmers without dual coding return the text unchanged.
        """
        if self.transliterator is None:
            return text
        return self.transliterator.decode(text)

    def stem_dual_coded_word(self, word: str) -> str:
        """
        Stems the word which is already in dual coding, producing the dual-coded result.

        Raises:
            ValueError: if the stemmer doesn't use dual coding
        """
        self._require_dual_coding()
        return self.stemmer(word)

    def stem_dual_coded_line(self, line: str) -> str:
        """
        Stems the line which is already in dual coding, producing the dual-coded result.

        Raises:
            ValueError: if the stemmer doesn't use dual coding
        """
        self._require_dual_coding()
        return self.stemmer.stem_line(line)

    def _require_dual_coding(self):
        if self.transliterator is None:
            raise ValueError(f'{self.algorithm.name} stemmer does not use dual coding')
