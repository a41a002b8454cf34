import sys

from distance import nearest, top_k
from lexer import lex, render


ANALOGY_CANDIDATES = 4
ANALOGY_THRESHOLD = 0.6


def load_substitutions(path):
    """Read ``source target`` pairs, one per line, keeping file order."""
    subs = {}
    with open(path, 'r', encoding='utf8') as f:
        for i, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            ls = line.split()
            if len(ls) != 2:
                raise ValueError('{}:{}: expected "source target", got {!r}'
                                 .format(path, i, line))
            subs[ls[0].lower()] = ls[1].lower()
    return subs


def substitute_word(model, word, subs):
    """Replace ``word`` from ``subs`` directly or through an analogy.

    For each pair ``(a, b)`` in ``subs`` order, the nearest neighbour of
    ``word - a + b`` other than the three inputs is taken when its score
    reaches ``ANALOGY_THRESHOLD``. Otherwise ``word`` is kept.
    """
    if word in subs:
        return subs[word]
    if word not in model:
        return word

    for a, b in subs.items():
        if a not in model or b not in model:
            continue

        vector = model[word] - model[a] + model[b]
        for score, candidate in top_k(model, vector, ANALOGY_CANDIDATES):
            if candidate in (word, a, b):
                continue
            if score >= ANALOGY_THRESHOLD:
                return candidate
            break

    return word


def substitute_line(model, line, subs):
    return render(lex(line), lambda w: substitute_word(model, w, subs))


def filter_line(model, line):
    return render(lex(line), lambda w: nearest(model, w))


def substitute(model, lines, subs):
    for line in lines:
        print(substitute_line(model, line, subs))
        sys.stdout.flush()


def filter_lines(model, lines):
    for line in lines:
        print(filter_line(model, line))
        sys.stdout.flush()
