"""
Conversion between the standard spelling (Cyrillic, or Latin with diacritics) and the ASCII-only
*dual-coded* alphabet the Serbian stemmers' rules are written in.

In dual coding, every Cyrillic letter is replaced by its Latin counterpart, and every Latin letter
with a diacritic is written as two plain letters:

.. code-block:: text

    č => cx    ć => cy    š => sx    ž => zx    đ => dy    dž => dx

Additionally, depending on the stemmer, ``lj``/``nj`` become ``ly``/``ny`` (Kešelj–Šipka), or ``dj``
becomes ``dy`` (Milošević). Cyrillic ``ђ`` and ``џ`` always produce the two-letter codes, while ``љ``
and ``њ`` are encoded the same way as Latin ``lj`` and ``nj`` are in the given coding (``ly``/``ny``
for Kešelj–Šipka, ``lj``/``nj`` for Milošević), so that both scripts produce the same dual-coded text.

Encoding is done char-by-char, and needs to know the *previous* char of the source text: to decide
whether ``j`` is the second half of ``lj``/``nj``/``dj``, and whether ``ž`` is the second half of
``dž`` (then it becomes just ``x``, so ``dž`` => ``dx``).

Decoding just replaces the two-letter codes back, so the result is always Latin::

    >>> transliterator = Transliterator(TransliterationPolicy.KESELJ_SIPKA)
    >>> transliterator.encode('Ljubičasta džungla')
    'Lyubicxasta dxungla'
    >>> transliterator.encode('Љубичаста џунгла')
    'Lyubicxasta dxungla'
    >>> transliterator.decode('Lyubicxasta dxungla')
    'Ljubičasta džungla'

.. autoclass:: TransliterationPolicy
    :members:

.. autoclass:: Transliterator
    :members:
"""

import string

from dataclasses import dataclass
from typing import ClassVar, Tuple


#: Letters that are copied as is. ``j``/``J`` are handled separately.
PLAIN_LETTERS = frozenset(string.ascii_letters) - {'j', 'J'}

LATIN_DIACRITICS = {
    'ć': 'cy', 'č': 'cx', 'š': 'sx', 'ž': 'zx', 'đ': 'dy',
    'Ć': 'Cy', 'Č': 'Cx', 'Š': 'Sx', 'Ž': 'Zx', 'Đ': 'Dy',
}

# NB: uppercase Ш produces "Sy", not "Sx" (and therefore is not decoded back into "Š")
CYRILLIC = {
    'а': 'a', 'А': 'A',
    'б': 'b', 'Б': 'B',
    'в': 'v', 'В': 'V',
    'г': 'g', 'Г': 'G',
    'д': 'd', 'Д': 'D',
    'ђ': 'dy', 'Ђ': 'Dy',
    'е': 'e', 'Е': 'E',
    'ж': 'zx', 'Ж': 'Zx',
    'з': 'z', 'З': 'Z',
    'и': 'i', 'И': 'I',
    'ј': 'j', 'Ј': 'J',
    'к': 'k', 'К': 'K',
    'л': 'l', 'Л': 'L',
    'љ': 'ly', 'Љ': 'Ly',
    'м': 'm', 'М': 'M',
    'н': 'n', 'Н': 'N',
    'њ': 'ny', 'Њ': 'Ny',
    'о': 'o', 'О': 'O',
    'п': 'p', 'П': 'P',
    'р': 'r', 'Р': 'R',
    'с': 's', 'С': 'S',
    'т': 't', 'Т': 'T',
    'ћ': 'cy', 'Ћ': 'Cy',
    'у': 'u', 'У': 'U',
    'ф': 'f', 'Ф': 'F',
    'х': 'h', 'Х': 'H',
    'ц': 'c', 'Ц': 'C',
    'ч': 'cx', 'Ч': 'Cx',
    'џ': 'dx', 'Џ': 'Dx',
    'ш': 'sx', 'Ш': 'Sy',
}

#: Decoding replacements; the order matters, as each one is applied to the result of the previous.
DECODING = (
    ('cy', 'ć'), ('Cy', 'Ć'),
    ('cx', 'č'), ('Cx', 'Č'),
    ('sx', 'š'), ('Sx', 'Š'),
    ('dx', 'dž'), ('Dx', 'Dž'),
    ('dy', 'đ'), ('Dy', 'Đ'),
    ('ly', 'lj'), ('Ly', 'Lj'),
    ('ny', 'nj'), ('Ny', 'Nj'),
    ('zx', 'ž'), ('Zx', 'Ž'),
)


@dataclass(frozen=True)
class TransliterationPolicy:
    """
    What differs between dual codings of different stemmers. Two predefined policies are available
    as ``TransliterationPolicy.KESELJ_SIPKA`` and ``TransliterationPolicy.MILOSEVIC``.
    """

    #: After which letters ``j``/``J`` is considered part of a digraph and encoded as ``y``
    #: (``lj`` => ``ly``).
    j_triggers: frozenset
    #: After which letters ``ž`` is considered part of ``dž`` and encoded as ``x``.
    dz_triggers: frozenset = frozenset('dD')
    #: ``(letter, code)`` pairs replacing the default encoding of some Cyrillic letters.
    cyrillic_overrides: Tuple[Tuple[str, str], ...] = ()

    KESELJ_SIPKA: ClassVar['TransliterationPolicy']
    MILOSEVIC: ClassVar['TransliterationPolicy']


TransliterationPolicy.KESELJ_SIPKA = TransliterationPolicy(j_triggers=frozenset('lLnN'))
TransliterationPolicy.MILOSEVIC = TransliterationPolicy(
    j_triggers=frozenset('dD'),
    # Milošević's rules are written with "lj"/"nj", as they are spelled in Latin
    cyrillic_overrides=(('љ', 'lj'), ('Љ', 'Lj'), ('њ', 'nj'), ('Њ', 'Nj'))
)


class Transliterator:
    """
    Encodes text into the dual-coded alphabet and back. Both operations are total: chars that are
    not letters, and letters that are neither Latin nor Serbian Cyrillic, are copied unchanged.

    .. automethod:: encode
    .. automethod:: encode_char
    .. automethod:: decode
    """

    decoding: Tuple[Tuple[str, str], ...] = DECODING

    def __init__(self, policy: TransliterationPolicy):
        self.policy = policy
        self.cyrillic = {**CYRILLIC, **dict(policy.cyrillic_overrides)}

    def encode(self, text: str) -> str:
        """
        Converts text (word or line, any script) into dual coding.
        """
        result = []
        previous = ' '
        for char in text:
            result.append(self.encode_char(char, previous))
            previous = char
        return ''.join(result)

    def encode_char(self, char: str, previous: str) -> str:
        """
        Converts one char, knowing the char that preceded it in the *source* text::

            >>> transliterator.encode_char('j', 'n')
            'y'
            >>> transliterator.encode_char('ž', 'd')
            'x'
            >>> transliterator.encode_char('ž', 'a')
            'zx'

        Args:
            char: Char to convert
            previous: Previous char of the source text (space at the beginning of the text)
        """
        if not char.isalpha() or char in PLAIN_LETTERS:
            return char
        if char in ('j', 'J'):
            return 'y' if previous in self.policy.j_triggers else char
        if char == 'ž' and previous in self.policy.dz_triggers:
            return 'x'
        if char in LATIN_DIACRITICS:
            return LATIN_DIACRITICS[char]
        return self.cyrillic.get(char, char)

    def decode(self, text: str) -> str:
        """
        Converts dual-coded text into standard Latin spelling.
        """
        for code, letter in self.decoding:
            text = text.replace(code, letter)
        return text
