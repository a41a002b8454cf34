from collections import namedtuple

from lexer import is_word_letter


SENTINEL = '.'

ADD = '+'
SUB = '-'
DISTANCE = '<>'


class QuerySyntaxError(ValueError):
    pass


class UnknownWordError(KeyError):
    def __init__(self, word):
        super(UnknownWordError, self).__init__(word)
        self.word = word

    def __str__(self):
        return "unknown word `{}'".format(self.word)


class VecExpression(namedtuple('VecExpression', ['first', 'terms'])):
    """``first`` followed by ``(operator, word)`` pairs, folded left to right."""

    __slots__ = ()

    def words(self):
        return [self.first] + [w for _, w in self.terms]


class Query(namedtuple('Query', ['left', 'right'])):
    """Nearest-neighbour query, or a distance query when ``right`` is set."""

    __slots__ = ()

    @property
    def is_distance(self):
        return self.right is not None

    def words(self):
        if self.right is None:
            return self.left.words()
        return self.left.words() + self.right.words()


class Parser(object):
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def error(self, expected):
        rest = self.text[self.pos:].rstrip(SENTINEL) or 'end of input'
        return QuerySyntaxError('expected {} at column {}, found {!r}'
                                .format(expected, self.pos + 1, rest))

    def skip_space(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def accept(self, token):
        self.skip_space()
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def word(self):
        self.skip_space()
        start = self.pos
        while self.pos < len(self.text) and is_word_letter(self.text[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self.error('a word')
        return self.text[start:self.pos]

    def vec_expr(self):
        first = self.word()
        terms = []
        while True:
            if self.accept(ADD):
                terms.append((ADD, self.word()))
            elif self.accept(SUB):
                terms.append((SUB, self.word()))
            else:
                return VecExpression(first, tuple(terms))

    def query(self):
        left = self.vec_expr()
        right = self.vec_expr() if self.accept(DISTANCE) else None
        self.skip_space()
        if self.text[self.pos:] != SENTINEL:
            raise self.error("'+', '-', '<>' or end of input")
        return Query(left, right)


def parse_query(line):
    """Parse one input line into a ``Query``.

    The line is trimmed, lowercased and terminated with the sentinel
    before parsing, so trailing garbage is reported as a syntax error.
    """
    return Parser(line.strip().lower() + SENTINEL).query()


def check_words(query, model):
    for word in query.words():
        if word not in model:
            raise UnknownWordError(word)


def evaluate(expr, model):
    if expr.first not in model:
        raise UnknownWordError(expr.first)
    vector = model[expr.first].clone()

    for op, word in expr.terms:
        if word not in model:
            raise UnknownWordError(word)
        if op == ADD:
            vector += model[word]
        else:
            vector -= model[word]

    return vector
