"""
.. autoclass:: Casing
    :members:
"""


class Casing:
    """
    Casing-related operations the stemmers need. Dual-coded words are mostly ASCII, so there is
    nothing language-specific here, but the digraph codes (``Cx``, ``Ly``...) and the negation
    marker of irregular lemmas (``NE_jesam``) make "is it capitalized?" a question about the
    first letter only: ``Cxovek`` is capitalized, and so is ``CxOVEK``.
    """

    def is_capitalized(self, word: str) -> bool:    # pylint: disable=no-self-use
        return word[:1].isupper()

    def upper(self, word: str) -> str:   # pylint: disable=no-self-use
        return word.upper()

    def copy_initial(self, source: str, word: str) -> str:
        """
        Makes the first letter of ``word`` uppercase if the first letter of ``source`` is uppercase;
        otherwise returns ``word`` as is (its own case is never lowered)::

            >>> Casing().copy_initial('Mogu', 'mocyi')
            'Mocyi'
            >>> Casing().copy_initial('NISAM', 'NE_jesam')
            'NE_jesam'
            >>> Casing().copy_initial('mogu', 'Mocyi')
            'Mocyi'

        Args:
            source: The word which capitalization is copied
            word: The word to capitalize
        """
        if not word or not self.is_capitalized(source):
            return word
        return self.upper(word[0]) + word[1:]
