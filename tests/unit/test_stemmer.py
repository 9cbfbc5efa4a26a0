import pytest

from scstemmers import Stemmer, Algorithm
from scstemmers.algo.suffix import SuffixStemmer
from scstemmers.algo.pattern import PatternStemmer


def test_algorithm_parse():
    assert Algorithm.parse(1) == Algorithm.KESELJ_SIPKA_GREEDY
    assert Algorithm.parse('2') == Algorithm.KESELJ_SIPKA_OPTIMAL
    assert Algorithm.parse('milosevic') == Algorithm.MILOSEVIC
    assert Algorithm.parse('Ljubesic-Pandzic') == Algorithm.LJUBESIC_PANDZIC
    assert Algorithm.parse(' keselj_sipka_greedy ') == Algorithm.KESELJ_SIPKA_GREEDY
    assert Algorithm.parse(Algorithm.MILOSEVIC) == Algorithm.MILOSEVIC


@pytest.mark.parametrize('value', [0, 5, '5', 'porter', '', True, None, 3.0])
def test_algorithm_parse_unknown(value):
    with pytest.raises(ValueError, match='Unknown stemming algorithm'):
        Algorithm.parse(value)


def test_for_algorithm():
    assert Stemmer.algorithms() == [
        Algorithm.KESELJ_SIPKA_GREEDY, Algorithm.KESELJ_SIPKA_OPTIMAL, Algorithm.MILOSEVIC, Algorithm.LJUBESIC_PANDZIC
    ]

    for algorithm in [1, 2, 3]:
        stemmer = Stemmer.for_algorithm(algorithm)
        assert isinstance(stemmer.stemmer, SuffixStemmer)
        assert stemmer.transliterator is not None

    stemmer = Stemmer.for_algorithm('ljubesic-pandzic')
    assert isinstance(stemmer.stemmer, PatternStemmer)
    assert stemmer.transliterator is None
    assert repr(stemmer) == 'Stemmer(LJUBESIC_PANDZIC)'

    with pytest.raises(ValueError):
        Stemmer.for_algorithm('porter')


def test_milosevic():
    stemmer = Stemmer.for_algorithm('milosevic')

    assert stemmer.stem_word('pevali') == 'pev'
    assert stemmer.stem_word('Nisam') == 'NE_jesam'
    assert stemmer.stem_word('NISAM') == 'NE_jesam'
    assert stemmer.stem_word('Mogu') == 'Moći'
    assert stemmer.stem_word('mogu') == 'moći'
    assert stemmer.stem_word('može') == 'moći'
    assert stemmer.stem_word('neću') == 'NE_hteti'
    assert stemmer.stem_word('ćeš') == 'hteti'
    assert stemmer.stem_word('je') == 'jesam'
    assert stemmer.stem_word('žena') == 'že'
    assert stemmer.stem_word('junače') == 'junak'


def test_cross_script():
    stemmer = Stemmer.for_algorithm('milosevic')
    assert stemmer.stem_word('певали') == stemmer.stem_word('pevali') == 'pev'
    assert stemmer.stem_line('Они су певали.') == 'On jesam pev.'
    # љ and њ reach the "lj"/"nj" rules the same way as Latin spelling does
    assert stemmer.stem_word('пријатељу') == stemmer.stem_word('prijatelju') == 'prijate'
    assert stemmer.stem_word('земља') == stemmer.stem_word('zemlja') == 'zem'
    assert stemmer.stem_word('учитељи') == stemmer.stem_word('učitelji') == 'učite'
    assert stemmer.stem_word('Земља') == stemmer.stem_word('Zemlja') == 'Zem'

    stemmer = Stemmer.for_algorithm('keselj-sipka-greedy')
    assert stemmer.stem_word('књигама') == stemmer.stem_word('knjigama') == 'knjig'
    assert stemmer.stem_word('шума') == stemmer.stem_word('šuma') == 'šum'
    # uppercase Ш is encoded differently from Latin Š
    assert stemmer.stem_word('Шума') == 'Syum'
    assert stemmer.stem_word('Šuma') == 'Šum'


def test_keselj_sipka():
    greedy = Stemmer.for_algorithm(1)
    optimal = Stemmer.for_algorithm(2)

    assert greedy.stem_word('pesnika') == 'pes'
    assert optimal.stem_word('pesnika') == 'pesnik'
    assert greedy.stem_word('čitanje') == 'čit'
    assert optimal.stem_word('čitanje') == 'čitanj'

    assert greedy.stem_line('Ove knjige su lepe.') == 'Ove knjig su lep.'


def test_ljubesic_pandzic():
    stemmer = Stemmer.for_algorithm(4)

    assert stemmer.stem_word('djevojčica') == 'djevojčic'
    assert stemmer.stem_word('sam') == 'sam'
    assert stemmer.stem_line('Djevojčica je pjevala.') == 'Djevojčic je pjeva.'


def test_stem_text():
    stemmer = Stemmer.for_algorithm('milosevic')

    assert stemmer.stem_text('Певали су.\nКњиге.\n') == 'Pev jesam.\nKnjig.'
    assert stemmer.stem_line('  pevali  ') == 'pev'


@pytest.mark.parametrize('algorithm', list(Algorithm))
def test_any_input(algorithm):
    stemmer = Stemmer.for_algorithm(algorithm)

    assert stemmer.stem_word('') == ''
    assert stemmer.stem_line('') == ''
    assert stemmer.stem_text('') == ''
    assert stemmer.stem_line('   ') == ''

    assert isinstance(stemmer.stem_line('123 ??? λόγος 🙂 foo_bar'), str)
    assert stemmer.stem_line('2024. 42') == '2024. 42'


def test_dual_coding():
    stemmer = Stemmer.for_algorithm('milosevic')

    assert stemmer.encode('Žena') == 'Zxena'
    assert stemmer.decode('Zxena') == 'Žena'
    assert stemmer.stem_dual_coded_word('zxena') == 'zxe'
    assert stemmer.stem_dual_coded_line('Mogu, zxena.') == 'Mocyi, zxe.'


def test_dual_coding_not_supported():
    stemmer = Stemmer.for_algorithm('ljubesic-pandzic')

    assert stemmer.encode('Žena') == 'Žena'
    assert stemmer.decode('Zxena') == 'Zxena'

    with pytest.raises(ValueError, match='does not use dual coding'):
        stemmer.stem_dual_coded_word('zxena')
    with pytest.raises(ValueError, match='does not use dual coding'):
        stemmer.stem_dual_coded_line('zxena')
