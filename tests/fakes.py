"""In-memory stand-ins for the tokenizer and similarity oracles."""


class WhitespaceTokenizer:
    """Splits on runs of whitespace and remembers what it was asked."""

    def __init__(self):
        self.calls = []

    def tokenize(self, text):
        self.calls.append(text)
        return text.split()


class FakeWordSimilarity:
    def __init__(self, similar=None, scores=None):
        self.similar = similar or {}
        self.scores = scores or {}
        self.similar_queries = []
        self.similarity_queries = []

    def similarity(self, a, b):
        self.similarity_queries.append((a, b))
        return self.scores.get((a, b), 0.0)

    def similar_words(self, token, threshold):
        self.similar_queries.append((token, threshold))
        return list(self.similar.get(token, []))


class FakeDocumentSimilarity:
    def __init__(self, nearest=None):
        self.nearest = nearest or {}
        self.queries = []

    def nearest_labels(self, label, n):
        self.queries.append((label, n))
        return list(self.nearest.get(label, []))[:n]
