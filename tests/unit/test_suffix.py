import dataclasses

from scstemmers.algo.suffix import StemPolicy, SuffixStemmer
from scstemmers.data.tables import RuleTable, IrregularDictionary
from scstemmers.data import milosevic, keselj_sipka


def stemmer_for(pairs, **options):
    return SuffixStemmer(StemPolicy(rules=RuleTable.build(pairs), **options))


def test_longest_suffix_wins():
    stemmer = stemmer_for([('a', ''), ('ama', '')], min_stem_length=2)

    assert stemmer('zenama') == 'zen'
    assert stemmer('knyigama') == 'knyig'
    assert stemmer('zena') == 'zen'

    stemmer = stemmer_for([('a', ''), ('ima', '')], min_stem_length=2)
    assert stemmer('knyigama') == 'knyigam'


def test_no_suffix():
    stemmer = stemmer_for([('a', ''), ('ama', '')])

    assert stemmer('pev') == 'pev'
    assert stemmer('') == ''
    assert stemmer('123') == '123'


def test_replacement():
    stemmer = stemmer_for([('acxe', 'ak'), ('zi', 'g'), ('a', 'ica')], min_stem_length=2)

    assert stemmer('junacxe') == 'junak'
    assert stemmer('bubrezi') == 'bubreg'
    # the word can become longer
    assert stemmer('ruka') == 'rukica'


def test_case():
    stemmer = stemmer_for([('ama', '')], min_stem_length=2)

    assert stemmer('KNYIGAMA') == 'KNYIG'
    assert stemmer('Knyigama') == 'Knyig'


def test_min_stem_length():
    stemmer = stemmer_for([('ama', '')], min_stem_length=2)
    assert stemmer('sama') == 'sama'

    stemmer = stemmer_for([('ama', ''), ('a', '')], min_stem_length=2)
    assert stemmer('sama') == 'sam'

    stemmer = stemmer_for([('ama', '')], min_stem_length=0)
    assert stemmer('ama') == ''


def test_min_word_length():
    stemmer = stemmer_for([('a', '')], min_word_length=4, min_stem_length=1)

    assert stemmer('ruka') == 'ruk'
    assert stemmer('ona') == 'ona'


def test_digraph_stem_length():
    stemmer = stemmer_for([('ena', ''), ('na', '')], min_stem_length=2, digraph_stem_length=3)

    assert stemmer.stem_length_limit('zxena') == 3
    assert stemmer.stem_length_limit('Zxena') == 3
    assert stemmer.stem_length_limit('zena') == 2
    # only at the beginning of the word
    assert stemmer.stem_length_limit('pazxena') == 2

    assert stemmer('zxena') == 'zxe'
    assert stemmer('pazxena') == 'pazx'


def test_irregular():
    irregular = IrregularDictionary.build([('mogu', 'mocyi'), ('ama', 'ama')])
    stemmer = stemmer_for([('u', ''), ('ama', '')], min_word_length=4, irregular=irregular)

    assert stemmer('mogu') == 'mocyi'
    assert stemmer('Mogu') == 'Mocyi'
    assert stemmer('MOGU') == 'Mocyi'
    # irregular forms are looked up before the word length check
    assert stemmer('ama') == 'ama'
    assert stemmer('rogu') == 'rog'


def test_stem_line():
    stemmer = stemmer_for([('ama', '')], min_stem_length=2)

    assert stemmer.stem_line('  knyigama, zenama!  ') == 'knyig, zen!'
    assert stemmer.stem_line('') == ''


def test_stem_line_token_pattern():
    stemmer = SuffixStemmer(keselj_sipka.greedy_policy())

    assert stemmer.stem_line('Ove knyige su lepe.') == 'Ove knyig su lep.'

    too_long = 'b' * 28 + 'ama'
    assert stemmer.stem_line(too_long) == too_long
    assert stemmer(too_long) == 'b' * 28


def test_milosevic():
    stemmer = SuffixStemmer(milosevic.policy())

    assert stemmer('pevali') == 'pev'
    assert stemmer('Pevali') == 'Pev'
    assert stemmer('junacxe') == 'junak'
    assert stemmer('bubrezi') == 'bubreg'
    assert stemmer('zxena') == 'zxe'
    assert stemmer('Mogu') == 'Mocyi'
    assert stemmer('nisam') == 'NE_jesam'


def test_milosevic_digraph_start():
    policy = milosevic.policy()

    assert SuffixStemmer(policy)('zxena') == 'zxe'
    assert SuffixStemmer(dataclasses.replace(policy, digraph_stem_length=None))('zxena') == 'zx'


def test_milosevic_repeated_suffixes():
    suffixes = [suffix for suffix, _ in milosevic.RULES]
    assert suffixes.count('cyemo') == 2

    table = milosevic.policy().rules
    assert len(table) < len(milosevic.RULES)
    assert table['cyemo'] == ''


def test_milosevic_irregular_before_rules():
    # "cyesx" is a suffix rule, but also a form of "hteti"
    assert 'cyesx' in milosevic.policy().rules
    assert SuffixStemmer(milosevic.policy())('cyesx') == 'hteti'


def test_not_idempotent():
    stemmer = SuffixStemmer(milosevic.policy())

    assert stemmer('ucxiteljica') == 'ucxitelji'
    assert stemmer('ucxitelji') == 'ucxite'


def test_keselj_sipka():
    # outputs of the hand-compiled suffix sets, not of the published Kešelj–Šipka tables
    greedy = SuffixStemmer(keselj_sipka.greedy_policy())
    optimal = SuffixStemmer(keselj_sipka.optimal_policy())

    assert greedy('pesnik') == 'pes'
    assert greedy('pesnika') == 'pes'
    assert optimal('pesnik') == 'pesnik'
    assert optimal('pesnika') == 'pesnik'

    assert greedy('knyigama') == 'knyig'
    assert optimal('knyigama') == 'knyig'

    assert greedy('cxitanye') == 'cxit'
    assert optimal('cxitanye') == 'cxitany'

    for word in ['ima', 'rad', 'ona', 'je', '']:
        assert greedy(word) == word
        assert optimal(word) == word


def test_keselj_sipka_tables():
    assert 'not the published tables' in keselj_sipka.__doc__
    assert keselj_sipka.optimal_policy() is keselj_sipka.optimal_policy()

    greedy = keselj_sipka.greedy_policy().rules
    optimal = keselj_sipka.optimal_policy().rules

    assert len(optimal) < len(greedy)
    assert all(suffix in greedy for suffix in keselj_sipka.INFLECTIONAL)
    assert all(greedy[suffix] == '' for suffix in keselj_sipka.DERIVATIONAL)
