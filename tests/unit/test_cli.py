import os.path

import pytest

from scstemmers.__main__ import main

FIXTURE = os.path.join(os.path.dirname(__file__), '..', 'fixtures', 'sr_cyrillic.txt')


def read(path):
    with open(path, encoding='utf-8') as f:
        return f.read()


def test_stem(tmp_path, capsys):
    target = str(tmp_path / 'out.txt')

    assert main(['3', FIXTURE, target]) == 0
    assert read(target) == 'On jesam pev.\n\nMo ot jesam pev.\n'
    assert 'Stemming successfully completed!' in capsys.readouterr().out


def test_algorithm_by_name(tmp_path):
    target = str(tmp_path / 'out.txt')

    assert main(['milosevic', FIXTURE, target, '-v']) == 0
    assert read(target).startswith('On jesam pev.')


def test_modes(tmp_path, capsys):
    encoded = str(tmp_path / 'encoded.txt')
    tokens = str(tmp_path / 'tokens.txt')

    assert main(['1', FIXTURE, encoded, '--mode', 'encode']) == 0
    assert read(encoded).startswith('Oni su pevali.')

    assert main(['4', FIXTURE, tokens, '--mode', 'tokens']) == 0
    assert read(tokens).startswith('Они\nсу\n')
    assert 'Done!' in capsys.readouterr().out


@pytest.mark.parametrize('argv', [
    ['porter', 'in.txt', 'out.txt'],
    ['5', 'in.txt', 'out.txt'],
    ['3', 'in.txt'],
    ['3', 'in.txt', 'out.txt', '--mode', 'lemmatize'],
    ['4', 'in.txt', 'out.txt', '--mode', 'encode'],
])
def test_usage_errors(argv):
    with pytest.raises(SystemExit) as e:
        main(argv)
    assert e.value.code == 2


def test_io_errors(tmp_path, capsys):
    assert main(['3', str(tmp_path / 'missing.txt'), str(tmp_path / 'out.txt')]) == 1
    assert 'Stemming successfully completed!' not in capsys.readouterr().out


def test_decoding_error(tmp_path):
    source = tmp_path / 'broken.txt'
    source.write_bytes('pevali\n'.encode('utf-8') + 'čačak\n'.encode('cp1250'))
    target = tmp_path / 'out.txt'

    assert main(['3', str(source), str(target)]) == 1
    assert not target.exists()
