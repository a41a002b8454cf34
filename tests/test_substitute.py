import pytest

from conftest import make_model
from substitute import filter_line, load_substitutions, substitute, \
    substitute_line, substitute_word


def test_explicit_substitution_ignores_model():
    model = make_model([('cat', [1.0, 0.0])])

    assert substitute_word(model, 'he', {'he': 'she'}) == 'she'


def test_analogy_substitution(toy_model):
    assert substitute_word(toy_model, 'king', {'man': 'woman'}) == 'queen'


def test_analogy_below_threshold_keeps_word(toy_model):
    assert substitute_word(toy_model, 'cat', {'man': 'woman'}) == 'cat'


def test_pairs_outside_model_are_skipped(toy_model):
    subs = {'he': 'she', 'man': 'woman'}

    assert substitute_word(toy_model, 'king', subs) == 'queen'
    assert substitute_word(toy_model, 'king', {'he': 'she'}) == 'king'


def test_unknown_word_is_unchanged(toy_model):
    assert substitute_word(toy_model, 'unicorn', {'man': 'woman'}) == 'unicorn'


def test_substitute_line_keeps_capitalization(toy_model):
    subs = {'man': 'woman', 'he': 'she'}

    assert substitute_line(toy_model, 'The King, he said.', subs) == \
        'The Queen, she said.'


def test_filter_line(toy_model):
    assert filter_line(toy_model, 'Cat and DOG') == 'Dog and CAT'


def test_substitute_loop(toy_model, capsys):
    substitute(toy_model, ['king\n', 'HE\n'], {'man': 'woman', 'he': 'she'})

    assert capsys.readouterr().out == 'queen\nSHE\n'


def test_load_substitutions(tmp_path):
    path = tmp_path / 'subs.txt'
    path.write_text('# pairs\nman woman\n\nHe She\n', encoding='utf8')

    subs = load_substitutions(path)

    assert subs == {'man': 'woman', 'he': 'she'}
    assert list(subs) == ['man', 'he']


def test_load_substitutions_rejects_bad_lines(tmp_path):
    path = tmp_path / 'subs.txt'
    path.write_text('man woman child\n', encoding='utf8')

    with pytest.raises(ValueError):
        load_substitutions(path)


def test_mapped_value_is_verbatim(toy_model):
    subs = {'london': 'Paris'}

    assert substitute_line(toy_model, 'london', subs) == 'Paris'
    assert substitute_line(toy_model, 'LONDON', subs) == 'PARIS'
