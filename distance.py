import heapq
import math

import torch


def _rank_key(score):
    # NaN comes from zero-norm vectors and ranks below any real score
    return -math.inf if math.isnan(score) else score


def cosine_scores(model, vector):
    """Cosine similarity of ``vector`` against every row of ``model``."""
    vector = torch.as_tensor(vector).to(model.vectors)
    return model.vectors.mv(vector) / model.norms / vector.norm()


def cosine_similarity(x, y):
    return (x.dot(y) / x.norm() / y.norm()).item()


def euclidean_distance(x, y):
    return (x - y).norm().item()


def nearest(model, word):
    """Most similar other word in ``model``; unknown words pass through."""
    if word not in model:
        return word

    index = model.word_index[word]
    scores = cosine_scores(model, model[word]).tolist()
    candidates = [i for i in range(len(scores)) if i != index]
    if not candidates:
        return word

    best = max(candidates, key=lambda i: _rank_key(scores[i]))
    if math.isnan(scores[best]):
        return word
    return model.index_word[best]


def top_k(model, vector, k):
    """The ``k`` best ``(score, word)`` pairs, highest score first.

    Equal scores keep the model's row order.
    """
    if k <= 0 or len(model) == 0:
        return []

    scores = cosine_scores(model, vector).tolist()

    best = heapq.nlargest(k, range(len(scores)),
                          key=lambda i: _rank_key(scores[i]))
    return [(scores[i], model.index_word[i]) for i in best]
