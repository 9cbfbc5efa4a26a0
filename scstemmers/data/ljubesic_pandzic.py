"""
Data of the Croatian stemmer by Nikola Ljubešić and Ivan Pandžić (*SCStem: a rule-based stemmer
for Croatian*, 2008): stop words, suffix transformations and stemming rules.

Everything is written in standard Latin spelling, no dual coding.

Order of :data:`TRANSFORMATIONS` and :data:`RULES` is meaningful: in both, the first applicable
entry wins. Roughly, rules go from specific endings of specific stems (``.+(s|š)k`` + adjective
endings) to generic ones (anything + ``om|og|im|ih|...``).

.. autodata:: STOP_WORDS
    :annotation:
.. autodata:: TRANSFORMATIONS
    :annotation:
.. autodata:: RULES
    :annotation:
.. autofunction:: pattern_set
"""

import functools

from scstemmers.data.tables import PatternSet

#: Forms of auxiliary and modal verbs (*biti*, *htjeti*, *željeti*, *morati*, *trebati*, *moći*),
#: which are never stemmed.
STOP_WORDS = (
    'biti', 'jesam', 'budem', 'sam', 'jesi', 'budeš', 'si', 'jesmo', 'budemo', 'smo',
    'jeste', 'budete', 'ste', 'jesu', 'budu', 'su', 'bih', 'bijah', 'bjeh', 'bijaše',
    'bi', 'bje', 'bješe', 'bijasmo', 'bismo', 'bjesmo', 'bijaste', 'biste', 'bjeste', 'bijahu',
    'biše', 'bjehu', 'bio', 'bili', 'budimo', 'budite', 'bila', 'bilo', 'bile',
    'ću', 'ćeš', 'će', 'ćemo', 'ćete',
    'želim', 'želiš', 'želi', 'želimo', 'želite', 'žele',
    'moram', 'moraš', 'mora', 'moramo', 'morate', 'moraju',
    'trebam', 'trebaš', 'treba', 'trebamo', 'trebate', 'trebaju',
    'mogu', 'možeš', 'može', 'možemo', 'možete',
)

#: ``(suffix, replacement)`` applied before the rules, to regularize sound alternations
#: (``jaci => jak``, ``pjesi => pjeh``) and fleeting "a" (``centara => centra``).
TRANSFORMATIONS = (
    ('lozi', 'loga'), ('lozima', 'loga'), ('pjesi', 'pjeh'), ('pjesima', 'pjeh'),
    ('vojci', 'vojka'), ('bojci', 'bojka'), ('jaci', 'jak'), ('jacima', 'jak'),
    ('čajan', 'čajni'), ('ijeran', 'ijerni'), ('laran', 'larni'), ('ijesan', 'ijesni'),
    ('anjac', 'anjca'), ('ajac', 'ajca'), ('ajaca', 'ajca'), ('ljaca', 'ljca'),
    ('ljac', 'ljca'), ('ejac', 'ejca'), ('ejaca', 'ejca'), ('ojac', 'ojca'),
    ('ojaca', 'ojca'), ('ajaka', 'ajka'), ('ojaka', 'ojka'), ('šaca', 'šca'),
    ('šac', 'šca'), ('inzima', 'ing'), ('inzi', 'ing'), ('tvenici', 'tvenik'),
    ('tetici', 'tetika'), ('teticima', 'tetika'), ('nstava', 'nstva'), ('nicima', 'nik'),
    ('ticima', 'tik'), ('zicima', 'zik'), ('snici', 'snik'), ('kuse', 'kusi'),
    ('kusan', 'kusni'), ('kustava', 'kustva'), ('dušan', 'dušni'), ('antan', 'antni'),
    ('bilan', 'bilni'), ('tilan', 'tilni'), ('avilan', 'avilni'), ('silan', 'silni'),
    ('gilan', 'gilni'), ('rilan', 'rilni'), ('nilan', 'nilni'), ('alan', 'alni'),
    ('ozan', 'ozni'), ('rave', 'ravi'), ('stavan', 'stavni'), ('pravan', 'pravni'),
    ('tivan', 'tivni'), ('sivan', 'sivni'), ('atan', 'atni'), ('cenata', 'centa'),
    ('denata', 'denta'), ('genata', 'genta'), ('lenata', 'lenta'), ('menata', 'menta'),
    ('jenata', 'jenta'), ('venata', 'venta'), ('tetan', 'tetni'), ('pletan', 'pletni'),
    ('šave', 'šavi'), ('manata', 'manta'), ('tanata', 'tanta'), ('lanata', 'lanta'),
    ('sanata', 'santa'), ('ačak', 'ačka'), ('ačaka', 'ačka'), ('ušak', 'uška'),
    ('atak', 'atka'), ('ataka', 'atka'), ('atci', 'atka'), ('atcima', 'atka'),
    ('etak', 'etka'), ('etaka', 'etka'), ('itak', 'itka'), ('itaka', 'itka'),
    ('itci', 'itka'), ('otak', 'otka'), ('otaka', 'otka'), ('utak', 'utka'),
    ('utaka', 'utka'), ('utci', 'utka'), ('utcima', 'utka'), ('eskan', 'eskna'),
    ('tičan', 'tični'), ('ojsci', 'ojska'), ('esama', 'esma'), ('metara', 'metra'),
    ('centar', 'centra'), ('centara', 'centra'), ('istara', 'istra'), ('istar', 'istra'),
    ('ošću', 'osti'), ('daba', 'dba'), ('čcima', 'čka'), ('čci', 'čka'),
    ('mac', 'mca'), ('maca', 'mca'), ('naca', 'nca'), ('nac', 'nca'),
    ('voljan', 'voljni'), ('anaka', 'anki'), ('vac', 'vca'), ('vaca', 'vca'),
    ('saca', 'sca'), ('sac', 'sca'), ('raca', 'rca'), ('rac', 'rca'),
    ('aoca', 'alca'), ('alaca', 'alca'), ('alac', 'alca'), ('elaca', 'elca'),
    ('elac', 'elca'), ('olaca', 'olca'), ('olac', 'olca'), ('olce', 'olca'),
    ('njac', 'njca'), ('njaca', 'njca'), ('ekata', 'ekta'), ('ekat', 'ekta'),
    ('izam', 'izma'), ('izama', 'izma'), ('jebe', 'jebi'), ('baci', 'baci'),
    ('ašan', 'ašni'),
)

#: ``(stem pattern, endings)``; endings are a regexp alternation, where an empty alternative means
#: the whole word might be a stem.
RULES = (
    (r'.+(s|š)k', 'ijima|ijega|ijemu|ijem|ijim|ijih|ijoj|ijeg|iji|ije|ija|oga|ome|omu|ima|og|om|im|ih|oj|i|e|o|a|u'),
    (r'.+(s|š)tv', 'ima|om|o|a|u'),
    (r'.+(t|m|p|r|g)anij', 'ama|ima|om|a|u|e|i|'),
    (r'.+an', 'inom|ina|inu|ine|ima|in|om|u|i|a|e|'),
    (r'.+in', 'ima|ama|om|a|e|i|u|o|'),
    (r'.+on', 'ovima|ova|ove|ovi|ima|om|a|e|i|u|'),
    (r'.+n', 'ijima|ijega|ijemu|ijeg|ijem|ijim|ijih|ijoj|iji|ije|ija|iju|ima|ome|omu|oga|oj|om|ih|im|og|o|e|a|u|i|'),
    (r'.+(a|e|u)ć', 'oga|ome|omu|ega|emu|ima|oj|ih|om|eg|em|og|uh|im|e|a'),
    (r'.+ugov', 'ima|i|e|a'),
    (r'.+ug', 'ama|om|a|e|i|u|o'),
    (r'.+log', 'ama|om|a|u|e|'),
    (r'.+[^eo]g', 'ovima|ama|ovi|ove|ova|om|a|e|i|u|o|'),
    (r'.+(rrar|ott|ss|ll)i', 'jem|ja|ju|o|'),
    (r'.+uj', 'ući|emo|ete|mo|em|eš|e|u|'),
    (r'.+(c|č|ć|đ|l|r)aj', 'evima|evi|eva|eve|ama|ima|em|a|e|i|u|'),
    (r'.+(b|c|d|l|n|m|ž|g|f|p|r|s|t|z)ij', 'ima|ama|om|a|e|i|u|o|'),
    (r'.+[^z]nal', 'ima|ama|om|a|e|i|u|o|'),
    (r'.+ijal', 'ima|ama|om|a|e|i|u|o|'),
    (r'.+ozil', 'ima|om|a|e|u|i|'),
    (r'.+olov', 'ima|i|a|e'),
    (r'.+ol', 'ima|om|a|u|e|i|'),
    (r'.+lem', 'ama|ima|om|a|e|i|u|o|'),
    (r'.+ram', 'ama|om|a|e|i|u|o'),
    (r'.+(a|d|e|o)r', 'ama|ima|om|u|a|e|i|'),
    (r'.+(e|i)s', 'ima|om|e|a|u'),
    (r'.+(t|n|j|k|j|t|b|g|v)aš', 'ama|ima|om|em|a|u|i|e|'),
    (r'.+(e|i)š', 'ima|ama|om|em|i|e|a|u|'),
    (r'.+ikat', 'ima|om|a|e|i|u|o|'),
    (r'.+lat', 'ima|om|a|e|i|u|o|'),
    (r'.+et', 'ama|ima|om|a|e|i|u|o|'),
    (r'.+(e|i|k|o)st', 'ima|ama|om|a|e|i|u|o|'),
    (r'.+išt', 'ima|em|a|e|u'),
    (r'.+ova', 'smo|ste|hu|ti|še|li|la|le|lo|t|h|o'),
    (r'.+(a|e|i)v', 'ijemu|ijima|ijega|ijeg|ijem|ijim|ijih|ijoj|oga|ome|omu|ima|ama|iji|ije|ija|iju|im|ih|oj|om|og|i|a|u|e|o|'),
    (r'.+[^dkml]ov', 'ijemu|ijima|ijega|ijeg|ijem|ijim|ijih|ijoj|oga|ome|omu|ima|iji|ije|ija|iju|im|ih|oj|om|og|i|a|u|e|o|'),
    (r'.+(m|l)ov', 'ima|om|a|u|e|i|'),
    (r'.+el', 'ijemu|ijima|ijega|ijeg|ijem|ijim|ijih|ijoj|oga|ome|omu|ima|iji|ije|ija|iju|im|ih|oj|om|og|i|a|u|e|o|'),
    (r'.+(a|e|š)nj', 'ijemu|ijima|ijega|ijeg|ijem|ijim|ijih|ijoj|oga|ome|omu|ima|iji|ije|ija|iju|ega|emu|eg|em|im|ih|oj|om|og|a|e|i|o|u'),
    (r'.+čin', 'ama|ome|omu|oga|ima|og|om|im|ih|oj|a|u|i|o|e|'),
    (r'.+roši', 'vši|smo|ste|še|mo|te|ti|li|la|lo|le|m|š|t|h|o'),
    (r'.+oš', 'ijemu|ijima|ijega|ijeg|ijem|ijim|ijih|ijoj|oga|ome|omu|ima|iji|ije|ija|iju|im|ih|oj|om|og|i|a|u|e|'),
    (r'.+(e|o)vit', 'ijima|ijega|ijemu|ijem|ijim|ijih|ijoj|ijeg|iji|ije|ija|oga|ome|omu|ima|og|om|im|ih|oj|i|e|o|a|u|'),
    (r'.+ast', 'ijima|ijega|ijemu|ijem|ijim|ijih|ijoj|ijeg|iji|ije|ija|oga|ome|omu|ima|og|om|im|ih|oj|i|e|o|a|u|'),
    (r'.+k', 'ijemu|ijima|ijega|ijeg|ijem|ijim|ijih|ijoj|oga|ome|omu|ima|iji|ije|ija|iju|im|ih|oj|om|og|i|a|u|e|o|'),
    (r'.+(e|a|i|u)va', 'jući|smo|ste|jmo|jte|ju|la|le|li|lo|mo|na|ne|ni|no|te|ti|še|hu|h|j|m|n|o|t|v|š|'),
    (r'.+ir', 'ujemo|ujete|ujući|ajući|ivat|ujem|uješ|ujmo|ujte|avši|asmo|aste|ati|amo|ate|aju|aše|ahu|ala|alo|ali|ale|uje|uju|uj|al|an|am|aš|at|ah|ao'),
    (r'.+ač', 'ismo|iste|iti|imo|ite|iše|eći|ila|ilo|ili|ile|ena|eno|eni|ene|io|im|iš|it|ih|en|i|e'),
    (r'.+ača', 'vši|smo|ste|smo|ste|hu|ti|mo|te|še|la|lo|li|le|ju|na|no|ni|ne|o|m|š|t|h|n'),
    (r'.+n', 'uvši|usmo|uste|ući|imo|ite|emo|ete|ula|ulo|ule|uli|uto|uti|uta|em|eš|uo|ut|e|u|i'),
    (r'.+ni', 'vši|smo|ste|ti|mo|te|mo|te|la|lo|le|li|m|š|o'),
    (r'.+((a|r|i|p|e|u)st|[^o]g|ik|uc|oj|aj|lj|ak|ck|čk|šk|uk|nj|im|ar|at|et|št|it|ot|ut|zn|zv)a', 'jući|vši|smo|ste|jmo|jte|jem|mo|te|je|ju|ti|še|hu|la|li|le|lo|na|no|ni|ne|t|h|o|j|n|m|š'),
    (r'.+ur', 'ajući|asmo|aste|ajmo|ajte|amo|ate|aju|ati|aše|ahu|ala|ali|ale|alo|ana|ano|ani|ane|al|at|ah|ao|aj|an|am|aš'),
    (r'.+(a|i|o)staj', 'asmo|aste|ahu|ati|emo|ete|aše|ali|ući|ala|alo|ale|mo|ao|em|eš|at|ah|te|e|u|'),
    (r'.+(b|c|č|ć|d|e|f|g|j|k|n|r|t|u|v)a', 'lama|lima|lom|lu|li|la|le|lo|l'),
    (r'.+(t|č|j|ž|š)aj', 'evima|evi|eva|eve|ama|ima|em|a|e|i|u|'),
    (r'.+([^o]m|ič|nč|uč|b|c|ć|d|đ|h|j|k|l|n|p|r|s|š|v|z|ž)a', 'jući|vši|smo|ste|jmo|jte|mo|te|ju|ti|še|hu|la|li|le|lo|na|no|ni|ne|t|h|o|j|n|m|š'),
    (r'.+(a|i|o)sta', 'dosmo|doste|doše|nemo|demo|nete|dete|nimo|nite|nila|vši|nem|dem|neš|deš|doh|de|ti|ne|nu|du|la|li|lo|le|t|o'),
    (r'.+ta', 'smo|ste|jmo|jte|vši|ti|mo|te|ju|še|la|lo|le|li|na|no|ni|ne|n|j|o|m|š|t|h'),
    (r'.+inj', 'asmo|aste|ati|emo|ete|ali|ala|alo|ale|aše|ahu|em|eš|at|ah|ao'),
    (r'.+as', 'temo|tete|timo|tite|tući|tem|teš|tao|te|li|ti|la|lo|le'),
    (r'.+(elj|ulj|tit|ac|ič|od|oj|et|av|ov)i', 'vši|eći|smo|ste|še|mo|te|ti|li|la|lo|le|m|š|t|h|o'),
    (r'.+(tit|jeb|ar|ed|uš|ič)i', 'jemo|jete|jem|ješ|smo|ste|jmo|jte|vši|mo|še|te|ti|ju|je|la|lo|li|le|t|m|š|h|j|o'),
    (r'.+(b|č|d|l|m|p|r|s|š|ž)i', 'jemo|jete|jem|ješ|smo|ste|jmo|jte|vši|mo|lu|še|te|ti|ju|je|la|lo|li|le|t|m|š|h|j|o'),
    (r'.+luč', 'ujete|ujući|ujemo|ujem|uješ|ismo|iste|ujmo|ujte|uje|uju|iše|iti|imo|ite|ila|ilo|ili|ile|ena|eno|eni|ene|uj|io|en|im|iš|it|ih|e|i'),
    (r'.+jeti', 'smo|ste|še|mo|te|ti|li|la|lo|le|m|š|t|h|o'),
    (r'.+e', 'lama|lima|lom|lu|li|la|le|lo|l'),
    (r'.+i', 'lama|lima|lom|lu|li|la|le|lo|l'),
    (r'.+at', 'ijega|ijemu|ijima|ijeg|ijem|ijih|ijim|ima|oga|ome|omu|iji|ije|ija|iju|oj|og|om|im|ih|a|u|i|e|o|'),
    (r'.+et', 'avši|ući|emo|imo|em|eš|e|u|i'),
    (r'.+', 'ajući|alima|alom|avši|asmo|aste|ajmo|ajte|ivši|amo|ate|aju|ati|aše|ahu|ali|ala|ale|alo|ana|ano|ani|ane|am|aš|at|ah|ao|aj|an'),
    (r'.+', 'anje|enje|anja|enja|enom|enoj|enog|enim|enih|anom|anoj|anog|anim|anih|eno|ovi|ova|oga|ima|ove|enu|anu|ena|ama'),
    (r'.+', 'nijega|nijemu|nijima|nijeg|nijem|nijim|nijih|nima|niji|nije|nija|niju|noj|nom|nog|nim|nih|an|na|nu|ni|ne|no'),
    (r'.+', 'om|og|im|ih|em|oj|an|u|o|i|e|a'),
)


@functools.lru_cache(maxsize=None)
def pattern_set() -> PatternSet:
    return PatternSet.build(STOP_WORDS, TRANSFORMATIONS, RULES)
