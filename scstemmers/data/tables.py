"""
Immutable tables the stemmers are built from. All of them are produced once, by builder functions
in the sibling modules (:mod:`keselj_sipka <scstemmers.data.keselj_sipka>`,
:mod:`milosevic <scstemmers.data.milosevic>`, :mod:`ljubesic_pandzic <scstemmers.data.ljubesic_pandzic>`),
and are never changed afterwards: the mappings are wrapped in ``MappingProxyType``, the sequences
are tuples, and the classes themselves are frozen dataclasses.

``RuleTable``
-------------

.. autoclass:: RuleTable
    :members:

``IrregularDictionary``
-----------------------

.. autoclass:: IrregularDictionary
    :members:

Pattern rules
-------------

.. autoclass:: PatternRule
    :members:
.. autoclass:: PatternSet
    :members:
"""

import re

from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple

from scstemmers.algo.capitalization import Casing


def freeze(pairs: Iterable[Tuple[str, str]]) -> Mapping[str, str]:
    """
    Turns a sequence of ``(key, value)`` pairs into a read-only mapping. If the key is repeated,
    the last value wins, while the key keeps the position of its first occurrence.
    """
    return MappingProxyType(dict(pairs))


@dataclass(frozen=True)
class RuleTable:
    """
    Suffix rules of one algorithm: ``suffix => replacement``. All suffixes are ASCII strings in the
    dual-coded alphabet. The most common replacement is an empty string (suffix is just cut off), but
    some rules add something back, like ``"acxe" => "ak"`` (and therefore can make the word longer).

    ::

        >>> table = RuleTable.build([('ama', ''), ('a', ''), ('acxe', 'ak')])
        >>> table.max_suffix_length
        4
        >>> table['acxe']
        'ak'
        >>> 'ima' in table
        False
    """

    rules: Mapping[str, str]
    #: Length of the longest suffix in the table, used to skip hopeless candidates.
    max_suffix_length: int = 0

    @classmethod
    def build(cls, pairs: Iterable[Tuple[str, str]]) -> 'RuleTable':
        rules = freeze(pairs)
        return cls(rules=rules, max_suffix_length=max((len(key) for key in rules), default=0))

    def __contains__(self, suffix: str) -> bool:
        return suffix in self.rules

    def __getitem__(self, suffix: str) -> str:
        return self.rules[suffix]

    def __len__(self):
        return len(self.rules)


@dataclass(frozen=True)
class IrregularDictionary:
    """
    Irregular word forms that can't be handled by suffix rules (forms of *biti*, *jesam*, *hteti*,
    *moći*...), mapped to their lemma tag. Keys are lowercase dual-coded forms, values are dual-coded
    too, and may carry the ``NE_`` negation marker (``nisam => NE_jesam``).

    The result follows the capitalization of the first letter of the looked up word::

        >>> irregular = IrregularDictionary.build([('mogu', 'mocyi'), ('nisam', 'NE_jesam')])
        >>> irregular.lookup('Mogu')
        'Mocyi'
        >>> irregular.lookup('mogu')
        'mocyi'
        >>> irregular.lookup('Nisam')
        'NE_jesam'
        >>> irregular.lookup('pevali') is None
        True
    """

    forms: Mapping[str, str]
    casing: Casing = field(default_factory=Casing)

    @classmethod
    def build(cls, pairs: Iterable[Tuple[str, str]]) -> 'IrregularDictionary':
        return cls(forms=freeze(pairs))

    def lookup(self, word: str) -> Optional[str]:
        lemma = self.forms.get(word.lower())
        if lemma is None:
            return None
        return self.casing.copy_initial(word, lemma)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self.forms

    def __len__(self):
        return len(self.forms)


@dataclass(frozen=True)
class PatternRule:
    """
    One rule of the pattern stemmer: the word should consist of something matching ``start``
    (regexp, which also defines what stays as a stem) followed by one of the ``endings`` (empty
    ending allowed, and means "the word can be the stem itself").

    Both halves are compiled into one anchored regexp ``^(start)(ending1|ending2|...)$``, the stem
    candidate is always the first group::

        >>> rule = PatternRule('.+(s|š)k', ('ijima', 'ijega', 'i', 'e', 'o', 'a', 'u'))
        >>> rule.candidate('srpskoga') is None
        True
        >>> rule.candidate('srpski')
        'srpsk'
    """

    start: str
    endings: Tuple[str, ...]

    regexp: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'regexp', re.compile('^(' + self.start + ')(' + '|'.join(self.endings) + ')$'))

    @classmethod
    def parse(cls, start: str, endings: str) -> 'PatternRule':
        """
        Builds the rule from the alternation written as a single string, like ``"ima|om|a|u|"``
        (trailing ``|`` means the empty ending is allowed).
        """
        return cls(start, tuple(endings.split('|')))

    def candidate(self, word: str) -> Optional[str]:
        match = self.regexp.fullmatch(word)
        return match.group(1) if match else None


@dataclass(frozen=True)
class PatternSet:
    """
    Everything the pattern stemmer needs:

    * ``stop_words``: forms that are never stemmed;
    * ``transformations``: ``suffix => replacement`` rules normalizing the word before matching,
      checked **in order**, first suffix found wins;
    * ``rules``: :class:`PatternRule` list, checked **in order**, first acceptable stem wins.
    """

    stop_words: frozenset
    transformations: Tuple[Tuple[str, str], ...]
    rules: Tuple[PatternRule, ...]

    @classmethod
    def build(cls, stop_words: Iterable[str],
              transformations: Iterable[Tuple[str, str]],
              rules: Iterable[Tuple[str, str]]) -> 'PatternSet':
        return cls(
            stop_words=frozenset(stop_words),
            transformations=tuple(freeze(transformations).items()),
            rules=tuple(PatternRule.parse(start, endings) for start, endings in rules)
        )
