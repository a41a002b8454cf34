import sys

import numpy as np
import torch

from lexer import preprocess_text


class ModelLoadError(Exception):
    pass


class EmbeddingModel(object):
    """Read-only table of word vectors sharing one dimensionality.

    Rows of ``vectors`` follow ``index_word``; that order is also the
    tie-break order used by the similarity search.
    """

    def __init__(self, words, vectors, device='cpu'):
        self.index_word = list(words)
        self.word_index = {w: i for i, w in enumerate(self.index_word)}
        if len(self.word_index) != len(self.index_word):
            raise ValueError('words must be unique')

        self.vectors = torch.as_tensor(np.asarray(vectors, dtype=np.float64),
                                       dtype=torch.float64).to(device)
        if self.vectors.dim() != 2 or \
                self.vectors.shape[0] != len(self.index_word):
            raise ValueError('expected one vector per word, got shape {}'
                             .format(tuple(self.vectors.shape)))

        self.embed_size = self.vectors.shape[1]
        self.norms = self.vectors.norm(dim=1)
        self.device = self.vectors.device

    def __len__(self):
        return len(self.index_word)

    def __contains__(self, word):
        return word in self.word_index

    def __iter__(self):
        return iter(self.index_word)

    def __getitem__(self, word):
        return self.vectors[self.word_index[word]]

    def exclude(self, words):
        excluded = set(words)
        keep = [i for i, w in enumerate(self.index_word) if w not in excluded]
        return EmbeddingModel([self.index_word[i] for i in keep],
                              self.vectors.cpu().numpy()[keep],
                              self.device)


def _is_header(fields):
    try:
        int(fields[0])
    except ValueError:
        return False
    return True


def load_model(path, device='cpu'):
    embed_size = None
    word_index = {}
    rows = []

    try:
        f = open(path, 'rb')
    except OSError as ex:
        raise ModelLoadError('model file could not be opened: {}'.format(ex))

    with f:
        for i, raw in enumerate(f):
            try:
                line = raw.decode('utf8')
            except UnicodeDecodeError:
                print('could not parse line {} with {} fields'
                      .format(i, len(raw.split())), file=sys.stderr)
                continue

            ls = line.split()
            if i == 0 and len(ls) == 2 and _is_header(ls):
                try:
                    embed_size = int(ls[1])
                except ValueError:
                    raise ModelLoadError('invalid vector size: {}'
                                         .format(ls[1]))
                if embed_size < 1:
                    raise ModelLoadError('invalid vector size: {}'
                                         .format(ls[1]))
                continue

            if not ls:
                continue

            try:
                if len(ls) < 2 or \
                        (embed_size is not None and len(ls) != embed_size + 1):
                    raise ValueError(len(ls))
                vector = np.array([float(s) for s in ls[1:]],
                                  dtype=np.float64)
            except ValueError:
                print('could not parse line {} with {} fields'
                      .format(i, len(ls)), file=sys.stderr)
                continue

            if embed_size is None:
                embed_size = len(vector)

            word = ls[0]
            if word in word_index:
                rows[word_index[word]] = vector
            else:
                word_index[word] = len(rows)
                rows.append(vector)

    if not rows:
        raise ModelLoadError('no word vectors found in {}'.format(path))

    words = sorted(word_index, key=word_index.get)
    return EmbeddingModel(words, np.stack(rows), device)


def load_excluded_words(path):
    with open(path, 'r', encoding='utf8') as f:
        return [preprocess_text(line).strip() for line in f]
