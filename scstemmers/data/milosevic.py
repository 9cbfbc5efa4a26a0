"""
Data of the stemmer by Nikola Milošević (*Stemmer for Serbian language*, arXiv:1209.4471, 2012):
suffix rules and the dictionary of irregular forms.

All entries are dual-coded (see :mod:`transliteration <scstemmers.algo.transliteration>`), with
the Milošević's flavor of it: ``lj``/``nj`` stay as is, but ``dj`` becomes ``dy``.

Unlike Kešelj–Šipka rules, some of these replace the suffix with something non-empty, restoring the
stem's consonant (``"acxe" => "ak"``: *junacxe* => *junak*).

The rule list is kept in the order rules were stated by the author, repetitions included (they are
all harmless: same suffix, same replacement, and the last one wins anyway). The order itself does
not affect stemming, as the longest matching suffix is always chosen.

.. autodata:: RULES
    :annotation:
.. autodata:: IRREGULAR
    :annotation:
.. autofunction:: policy
"""

import functools

from scstemmers.data.tables import RuleTable, IrregularDictionary
from scstemmers.algo.suffix import StemPolicy

#: Suffix rules, ``(suffix, replacement)``
RULES = (
    ('ovnicxki', ''), ('ovnicxka', ''), ('ovnika', ''), ('ovniku', ''), ('ovnicxe', ''),
    ('kujemo', ''), ('ovacyu', ''), ('ivacyu', ''), ('isacyu', ''), ('dosmo', ''),
    ('ujemo', ''), ('ijemo', ''), ('ovski', ''), ('ajucxi', ''), ('icizma', ''),
    ('ovima', ''), ('ovnik', ''), ('ognu', ''), ('inju', ''), ('enju', ''),
    ('cxicyu', ''), ('sxtva', ''), ('ivao', ''), ('ivala', ''), ('ivalo', ''),
    ('skog', ''), ('ucxit', ''), ('ujesx', ''), ('ucyesx', ''), ('ocyesx', ''),
    ('osmo', ''), ('ovao', ''), ('ovala', ''), ('ovali', ''), ('ismo', ''),
    ('ujem', ''), ('esmo', ''), ('asmo', ''), ('zxemo', ''), ('cyemo', ''),
    ('cyemo', ''), ('bemo', ''), ('ovan', ''), ('ivan', ''), ('isan', ''),
    ('uvsxi', ''), ('ivsxi', ''), ('evsxi', ''), ('avsxi', ''), ('sxucyi', ''),
    ('uste', ''), ('icxe', 'i'), ('acxe', 'ak'), ('uzxe', 'ug'), ('azxe', 'ag'),
    ('aci', 'ak'), ('oste', ''), ('aca', ''), ('enu', ''), ('enom', ''),
    ('enima', ''), ('eta', ''), ('etu', ''), ('etom', ''), ('adi', ''),
    ('alja', ''), ('nju', 'nj'), ('lju', ''), ('lja', ''), ('lji', ''),
    ('lje', ''), ('ljom', ''), ('ljama', ''), ('zi', 'g'), ('etima', ''),
    ('ac', ''), ('becyi', 'beg'), ('nem', ''), ('nesx', ''), ('ne', ''),
    ('nemo', ''), ('nimo', ''), ('nite', ''), ('nete', ''), ('nu', ''),
    ('ce', ''), ('ci', ''), ('cu', ''), ('ca', ''), ('cem', ''),
    ('cima', ''), ('sxcyu', 's'), ('ara', 'r'), ('iste', ''), ('este', ''),
    ('aste', ''), ('ujte', ''), ('jete', ''), ('jemo', ''), ('jem', ''),
    ('jesx', ''), ('ijte', ''), ('inje', ''), ('anje', ''), ('acxki', ''),
    ('anje', ''), ('inja', ''), ('cima', ''), ('alja', ''), ('etu', ''),
    ('nog', ''), ('omu', ''), ('emu', ''), ('uju', ''), ('iju', ''),
    ('sko', ''), ('eju', ''), ('ahu', ''), ('ucyu', ''), ('icyu', ''),
    ('ecyu', ''), ('acyu', ''), ('ocu', ''), ('izi', 'ig'), ('ici', 'ik'),
    ('tko', 'd'), ('tka', 'd'), ('ast', ''), ('tit', ''), ('nusx', ''),
    ('cyesx', ''), ('cxno', ''), ('cxni', ''), ('cxna', ''), ('uto', ''),
    ('oro', ''), ('eno', ''), ('ano', ''), ('umo', ''), ('smo', ''),
    ('imo', ''), ('emo', ''), ('ulo', ''), ('sxlo', ''), ('slo', ''),
    ('ila', ''), ('ilo', ''), ('ski', ''), ('ska', ''), ('elo', ''),
    ('njo', ''), ('ovi', ''), ('evi', ''), ('uti', ''), ('iti', ''),
    ('eti', ''), ('ati', ''), ('vsxi', ''), ('vsxi', ''), ('ili', ''),
    ('eli', ''), ('ali', ''), ('uji', ''), ('nji', ''), ('ucyi', ''),
    ('sxcyi', ''), ('ecyi', ''), ('ucxi', ''), ('oci', ''), ('ove', ''),
    ('eve', ''), ('ute', ''), ('ste', ''), ('nte', ''), ('kte', ''),
    ('jte', ''), ('ite', ''), ('ete', ''), ('cyi', ''), ('usxe', ''),
    ('esxe', ''), ('asxe', ''), ('une', ''), ('ene', ''), ('ule', ''),
    ('ile', ''), ('ele', ''), ('ale', ''), ('uke', ''), ('tke', ''),
    ('ske', ''), ('uje', ''), ('tje', ''), ('ucye', ''), ('sxcye', ''),
    ('icye', ''), ('ecye', ''), ('ucxe', ''), ('oce', ''), ('ova', ''),
    ('eva', ''), ('ava', 'av'), ('uta', ''), ('ata', ''), ('ena', ''),
    ('ima', ''), ('ama', ''), ('ela', ''), ('ala', ''), ('aka', ''),
    ('aja', ''), ('jmo', ''), ('oga', ''), ('ega', ''), ('acya', ''),
    ('oca', ''), ('aba', ''), ('cxki', ''), ('ju', ''), ('hu', ''),
    ('cyu', ''), ('cu', ''), ('ut', ''), ('it', ''), ('et', ''),
    ('at', ''), ('usx', ''), ('isx', ''), ('esx', ''), ('esx', ''),
    ('uo', ''), ('no', ''), ('mo', ''), ('mo', ''), ('lo', ''),
    ('ko', ''), ('io', ''), ('eo', ''), ('ao', ''), ('un', ''),
    ('an', ''), ('om', ''), ('ni', ''), ('im', ''), ('em', ''),
    ('uk', ''), ('uj', ''), ('oj', ''), ('li', ''), ('ci', ''),
    ('uh', ''), ('oh', ''), ('ih', ''), ('eh', ''), ('ah', ''),
    ('og', ''), ('eg', ''), ('te', ''), ('sxe', ''), ('le', ''),
    ('ke', ''), ('ko', ''), ('ka', ''), ('ti', ''), ('he', ''),
    ('cye', ''), ('cxe', ''), ('ad', ''), ('ecy', ''), ('ac', ''),
    ('na', ''), ('ma', ''), ('ul', ''), ('ku', ''), ('la', ''),
    ('nj', 'nj'), ('lj', 'lj'), ('ha', ''), ('a', ''), ('e', ''),
    ('u', ''), ('sx', ''), ('o', ''), ('i', ''), ('j', ''),
    ('i', ''),
)

#: Irregular forms, ``(form, lemma)``
IRREGULAR = (
    # biti
    ('bih', 'biti'), ('bi', 'biti'), ('bismo', 'biti'), ('biste', 'biti'), ('bisxe', 'biti'),
    ('budem', 'biti'), ('budesx', 'biti'), ('bude', 'biti'), ('budemo', 'biti'), ('budete', 'biti'),
    ('budu', 'biti'), ('bio', 'biti'), ('bila', 'biti'), ('bili', 'biti'), ('bile', 'biti'),
    ('biti', 'biti'), ('bijah', 'biti'), ('bijasxe', 'biti'), ('bijasmo', 'biti'), ('bijaste', 'biti'),
    ('bijahu', 'biti'), ('besxe', 'biti'),
    # jesam
    ('sam', 'jesam'), ('si', 'jesam'), ('je', 'jesam'), ('smo', 'jesam'), ('ste', 'jesam'),
    ('su', 'jesam'), ('jesam', 'jesam'), ('jesi', 'jesam'), ('jeste', 'jesam'), ('jesmo', 'jesam'),
    ('jeste', 'jesam'), ('jesu', 'jesam'),
    # hteti
    ('cyu', 'hteti'), ('cyesx', 'hteti'), ('cye', 'hteti'), ('cyemo', 'hteti'), ('cyete', 'hteti'),
    ('hocyu', 'hteti'), ('hocyesx', 'hteti'), ('hocye', 'hteti'), ('hocyemo', 'hteti'), ('hocyete', 'hteti'),
    ('hocye', 'hteti'), ('hteo', 'hteti'), ('htela', 'hteti'), ('hteli', 'hteti'), ('htelo', 'hteti'),
    ('htele', 'hteti'), ('htedoh', 'hteti'), ('htede', 'hteti'), ('htede', 'hteti'), ('htedosmo', 'hteti'),
    ('htedoste', 'hteti'), ('htedosxe', 'hteti'), ('hteh', 'hteti'), ('hteti', 'hteti'), ('htejucyi', 'hteti'),
    ('htevsxi', 'hteti'),
    # mocyi
    ('mogu', 'mocyi'), ('mozxesx', 'mocyi'), ('mozxe', 'mocyi'), ('mozxemo', 'mocyi'), ('mozxete', 'mocyi'),
    ('mogao', 'mocyi'), ('mogli', 'mocyi'), ('mocyi', 'mocyi'),
    # from the author's website, not mentioned in the paper
    ('htecxu', 'hteti'), ('htecxesx', 'hteti'), ('htecye', 'hteti'),
    ('necyu', 'NE_hteti'), ('necyesx', 'NE_hteti'), ('necye', 'NE_hteti'), ('necyemo', 'NE_hteti'),
    ('necyete', 'NE_hteti'), ('necyesx', 'NE_hteti'),
    ('nisam', 'NE_jesam'), ('nisi', 'NE_jesam'), ('nije', 'NE_jesam'), ('nismo', 'NE_jesam'),
    ('niste', 'NE_jesam'), ('nisu', 'NE_jesam'),
)


@functools.lru_cache(maxsize=None)
def policy() -> StemPolicy:
    """
    Stemming policy: stem should be at least 2 letters (3, if the word starts with a dual code, so
    "cxovek" can't be stemmed to "cx"), and irregular forms are looked up first.
    """
    return StemPolicy(
        rules=RuleTable.build(RULES),
        min_stem_length=2,
        digraph_stem_length=3,
        irregular=IrregularDictionary.build(IRREGULAR)
    )
