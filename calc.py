import sys
from collections import namedtuple

from distance import cosine_similarity, euclidean_distance, top_k
from expression import (QuerySyntaxError, UnknownWordError, check_words,
                        evaluate, parse_query)


NUM_RESULT = 10

Neighbor = namedtuple('Neighbor', ['word', 'score', 'is_input'])
NeighborList = namedtuple('NeighborList', ['neighbors'])
Distance = namedtuple('Distance', ['cosine', 'euclidean'])


def evaluate_query(line, model, k=NUM_RESULT):
    """Run one query line against ``model``.

    Returns a ``NeighborList`` for a plain expression or a ``Distance``
    for ``a <> b``. Raises ``QuerySyntaxError`` or ``UnknownWordError``;
    every word is checked before anything is evaluated.
    """
    query = parse_query(line)
    check_words(query, model)

    if query.is_distance:
        x = evaluate(query.left, model)
        y = evaluate(query.right, model)
        return Distance(cosine_similarity(x, y), euclidean_distance(x, y))

    words = set(query.words())
    vector = evaluate(query.left, model)
    return NeighborList([Neighbor(word, score, word in words)
                         for score, word in top_k(model, vector, k)])


def format_outcome(outcome):
    if isinstance(outcome, Distance):
        return ['Cosine distance: {}'.format(outcome.cosine),
                'Euclidean distance: {}'.format(outcome.euclidean)]

    lines = []
    for n in outcome.neighbors:
        if n.is_input:
            lines.append('({} {:.4f})'.format(n.word, n.score))
        else:
            lines.append('{} {:.4f}'.format(n.word, n.score))
    return lines


def calc(model, lines):
    for line in lines:
        try:
            outcome = evaluate_query(line, model)
        except QuerySyntaxError as ex:
            print('syntax error: {}'.format(ex), file=sys.stderr)
            continue
        except UnknownWordError as ex:
            print(ex, file=sys.stderr)
            continue

        for out in format_outcome(outcome):
            print(out)
        sys.stdout.flush()
