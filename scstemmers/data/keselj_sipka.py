"""
Suffix sets for the stemmers after Vlado Kešelj and Danko Šipka (*A Suffix Subsumption-Based
Approach to Building Stemmers and Lemmatizers for Highly Inflectional Languages with Sparse
Resources*, Infotheca 9(1-2), 2008).

**These are not the published tables.** The greedy and optimal suffix sets the paper derives from
a corpus are not reproduced here; instead, two approximate sets are compiled by hand from Serbian
grammar, and only the mechanics of the stemmer (dual coding, longest suffix removed, word length
limits) follow the paper. The results will differ from those of the original Kešelj–Šipka stemmers:

* **optimal**: only inflectional endings of nouns, adjectives and verbs, which remove the word's
  grammatical form but keep the derivation (*pesnika* => *pesnik*);
* **greedy**: everything from the optimal set, plus derivational and short ambiguous suffixes, so
  that more related words are conflated, at the price of over-stemming (*pesnika* => *pes*).

Both sets are written in Kešelj–Šipka flavor of dual coding, where ``lj``/``nj`` are ``ly``/``ny``.
Every suffix is just removed, so the tables are defined as plain suffix lists.

Both stemmers don't touch words shorter than 4 letters, and, when stemming a line, only process
words 4-30 letters long (hyphens are considered letters, so *crno-beli* is one word).

.. autodata:: INFLECTIONAL
    :annotation:
.. autodata:: DERIVATIONAL
    :annotation:
.. autofunction:: optimal_policy
.. autofunction:: greedy_policy
"""

import re
import functools

from scstemmers.data.tables import RuleTable
from scstemmers.algo.suffix import StemPolicy

#: Which tokens of a line are considered words
TOKEN = re.compile(r'\b[a-zA-Z-]{4,30}\b')

#: Endings of inflected forms.
INFLECTIONAL = (
    # nouns
    'a', 'e', 'i', 'o', 'u',
    'om', 'em', 'ama', 'ima', 'ju',
    'ovi', 'ova', 'ove', 'ovima', 'evi', 'eva', 'eve', 'evima',
    # adjectives
    'og', 'oga', 'ome', 'omu', 'oj', 'ih', 'im',
    'eg', 'ega', 'emu',
    'iji', 'ija', 'ije', 'iju', 'ijeg', 'ijega', 'ijem', 'ijemu', 'ijim', 'ijima', 'ijih', 'ijoj',
    # verbs: infinitive
    'ti', 'ati', 'iti', 'eti', 'uti',
    # verbs: present
    'am', 'asx', 'amo', 'ate', 'aju',
    'esx', 'emo', 'ete',
    'isx', 'imo', 'ite',
    'ujem', 'ujesx', 'uje', 'ujemo', 'ujete', 'uju',
    'jem', 'jesx', 'jemo', 'jete',
    # verbs: imperative
    'aj', 'ajte', 'ajmo', 'uj', 'ujte', 'ujmo', 'ij', 'ijte', 'ijmo',
    # verbs: active past participle
    'ao', 'ala', 'alo', 'ali', 'ale',
    'io', 'ila', 'ilo', 'ili', 'ile',
    'eo', 'ela', 'elo', 'eli', 'ele',
    'uo', 'ula', 'ulo', 'uli', 'ule',
    # verbs: aorist and imperfect
    'ah', 'asmo', 'aste', 'asxe', 'ahu',
    'isxe', 'ismo', 'iste', 'ihu',
    'oh', 'osmo', 'oste', 'osxe', 'ohu',
    'ijah', 'ijasxe', 'ijasmo', 'ijaste', 'ijahu',
    # verbs: adverbial participles
    'ajucyi', 'ucyi', 'ecyi', 'avsxi', 'ivsxi', 'evsxi', 'uvsxi', 'vsxi',
    # verbs: passive participle
    'en', 'ena', 'eno', 'eni', 'ene', 'enog', 'enom', 'enoj', 'enih', 'enim', 'enima',
    'jen', 'jena', 'jeno', 'jeni', 'jene',
)

#: Derivational and short ambiguous suffixes, used by the greedy stemmer only.
DERIVATIONAL = (
    # agent nouns
    'nik', 'nika', 'niku', 'nikom', 'nici', 'nike', 'nicima',
    'ik', 'ika', 'iku', 'ikom', 'ici', 'ike', 'icima',
    'tely', 'telya', 'telyu', 'telyem', 'telyi', 'telye', 'telyima',
    # feminine and diminutive
    'ica', 'ice', 'icu', 'icom', 'icama',
    'ak', 'ka', 'ku', 'kom', 'ke', 'ki', 'kama',
    'ac', 'ca', 'cu', 'cem', 'ci', 'ce', 'cima',
    'ina', 'ine', 'inu', 'inom', 'inama',
    # abstract nouns
    'ost', 'osti', 'ostima', 'osxcyu',
    'stvo', 'stva', 'stvu', 'stvom', 'stvima',
    'anye', 'anya', 'anyu', 'anyem', 'anyima',
    'enye', 'enya', 'enyu', 'enyem', 'enyima',
    # relational adjectives
    'ski', 'ska', 'sko', 'ske', 'sku', 'skog', 'skoga', 'skom', 'skome', 'skomu', 'skoj', 'skih', 'skim', 'skima',
    'cxki', 'cxka', 'cxko', 'cxke', 'cxku', 'cxkog', 'cxkom', 'cxkoj', 'cxkih', 'cxkim', 'cxkima',
    'lyiv', 'lyiva', 'lyivo', 'lyivi', 'lyive', 'lyivog', 'lyivom', 'lyivih', 'lyivim',
    'nog', 'nom', 'noj', 'nih', 'nim', 'nima', 'ni', 'na', 'no', 'ne', 'nu',
    # possessive adjectives
    'ov', 'ev', 'in',
    # verb derivation
    'ovati', 'ivati', 'avati',
    'ovan', 'ovana', 'ovano', 'ovani', 'ovane',
    'ivan', 'ivana', 'ivano', 'ivani', 'ivane',
    'ovao', 'ovala', 'ovalo', 'ovali', 'ovale',
    'ivao', 'ivala', 'ivalo', 'ivali', 'ivale',
    'ovanye', 'ivanye',
    'an', 'ana', 'ano', 'ani', 'ane',
)


def build(suffixes) -> RuleTable:
    return RuleTable.build((suffix, '') for suffix in suffixes)


def policy(rules: RuleTable) -> StemPolicy:
    return StemPolicy(rules=rules, min_word_length=4, min_stem_length=1, token_pattern=TOKEN)


@functools.lru_cache(maxsize=None)
def optimal_policy() -> StemPolicy:
    return policy(build(INFLECTIONAL))


@functools.lru_cache(maxsize=None)
def greedy_policy() -> StemPolicy:
    return policy(build(INFLECTIONAL + DERIVATIONAL))
