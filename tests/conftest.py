import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from model import EmbeddingModel  # noqa: E402


# axes: royalty, male, female, animal
TOY_VECTORS = [
    ('cat', [0.0, 0.0, 0.0, 1.0]),
    ('dog', [0.0, 0.2, 0.0, 1.0]),
    ('king', [1.0, 1.0, 0.0, 0.0]),
    ('man', [0.0, 1.0, 0.0, 0.0]),
    ('woman', [0.0, 0.0, 1.0, 0.0]),
    ('queen', [1.0, 0.0, 1.0, 0.0]),
]

EXTRA_VECTORS = [
    ('horse', [0.1, 0.3, 0.1, 0.9]),
    ('cow', [0.0, 0.0, 0.4, 0.8]),
    ('bird', [0.0, 0.1, 0.1, 0.7]),
    ('prince', [0.8, 0.9, 0.0, 0.1]),
    ('princess', [0.8, 0.0, 0.9, 0.1]),
    ('house', [0.3, 0.3, 0.3, 0.1]),
    ('car', [0.2, 0.5, 0.1, 0.2]),
]


def make_model(pairs):
    return EmbeddingModel([w for w, _ in pairs], [v for _, v in pairs])


@pytest.fixture
def toy_model():
    return make_model(TOY_VECTORS)


@pytest.fixture
def big_model():
    return make_model(TOY_VECTORS + EXTRA_VECTORS)


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / 'model.txt'
    lines = ['{} {}'.format(len(TOY_VECTORS), 4)]
    lines += ['{} {}'.format(w, ' '.join(str(x) for x in v))
              for w, v in TOY_VECTORS]
    path.write_text('\n'.join(lines) + '\n', encoding='utf8')
    return path
