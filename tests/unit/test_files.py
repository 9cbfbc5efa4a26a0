import os.path

import pytest

from scstemmers import Stemmer, files

FIXTURE = os.path.join(os.path.dirname(__file__), '..', 'fixtures', 'sr_cyrillic.txt')


def read(path):
    with open(path, encoding='utf-8') as f:
        return f.read()


def test_stem_file(tmp_path):
    target = str(tmp_path / 'out.txt')

    count = files.stem_file(Stemmer.for_algorithm('milosevic'), FIXTURE, target)

    assert count == 3
    assert read(target) == 'On jesam pev.\n\nMo ot jesam pev.\n'


def test_stem_file_bom(tmp_path):
    source = tmp_path / 'in.txt'
    source.write_bytes('\ufeffknjigama\r\nknjige\r\n'.encode('utf-8'))
    target = str(tmp_path / 'out.txt')

    files.stem_file(Stemmer.for_algorithm('keselj-sipka-optimal'), str(source), target)

    assert read(target) == 'knjig\nknjig\n'


def test_stem_empty_file(tmp_path):
    source = tmp_path / 'in.txt'
    source.write_text('', encoding='utf-8')
    target = str(tmp_path / 'out.txt')

    assert files.stem_file(Stemmer.for_algorithm(4), str(source), target) == 0
    assert read(target) == ''


def test_encode_decode_file(tmp_path):
    stemmer = Stemmer.for_algorithm('keselj-sipka-greedy')
    encoded = str(tmp_path / 'encoded.txt')
    stemmed = str(tmp_path / 'stemmed.txt')
    decoded = str(tmp_path / 'decoded.txt')

    files.encode_file(stemmer, FIXTURE, encoded)
    assert read(encoded) == 'Oni su pevali.\n\nMoj otac je pevao.\n'

    files.stem_dual_coded_file(Stemmer.for_algorithm('milosevic'), encoded, stemmed)
    assert read(stemmed) == 'On jesam pev.\n\nMo ot jesam pev.\n'

    source = tmp_path / 'dual.txt'
    source.write_text('Lyubicxasta dxungla\n', encoding='utf-8')
    files.decode_file(stemmer, str(source), decoded)
    assert read(decoded) == 'Ljubičasta džungla\n'


def test_stem_dual_coded_file_not_supported(tmp_path):
    with pytest.raises(ValueError):
        files.stem_dual_coded_file(Stemmer.for_algorithm(4), FIXTURE, str(tmp_path / 'out.txt'))


def test_tokens_per_line(tmp_path):
    target = str(tmp_path / 'out.txt')

    assert files.tokens_per_line(FIXTURE, target) == 7
    assert read(target) == 'Они\nсу\nпевали\nМој\nотац\nје\nпевао\n'


def test_errors(tmp_path):
    stemmer = Stemmer.for_algorithm('milosevic')

    with pytest.raises(OSError):
        files.stem_file(stemmer, str(tmp_path / 'missing.txt'), str(tmp_path / 'out.txt'))

    source = tmp_path / 'latin1.txt'
    source.write_bytes('pevali čačak'.encode('cp1250'))
    with pytest.raises(UnicodeDecodeError):
        files.stem_file(stemmer, str(source), str(tmp_path / 'out.txt'))


def test_failed_conversion_keeps_target(tmp_path):
    stemmer = Stemmer.for_algorithm('milosevic')
    source = tmp_path / 'broken.txt'
    source.write_bytes('pevali\n'.encode('utf-8') + 'čačak\n'.encode('cp1250'))

    target = tmp_path / 'out.txt'
    with pytest.raises(UnicodeDecodeError):
        files.stem_file(stemmer, str(source), str(target))
    assert not target.exists()
    assert not (tmp_path / 'out.txt.part').exists()

    target.write_text('previous result\n', encoding='utf-8')
    with pytest.raises(UnicodeDecodeError):
        files.tokens_per_line(str(source), str(target))
    assert read(str(target)) == 'previous result\n'
    assert not (tmp_path / 'out.txt.part').exists()
