from .stemmer import Stemmer, Algorithm

__all__ = [
    "Stemmer",
    "Algorithm",
]
