import pytest

from embnorm import EmbeddingsNormalizer, LabelledDocument
from tests.fakes import FakeDocumentSimilarity, FakeWordSimilarity, WhitespaceTokenizer


@pytest.fixture
def tokenizer():
    return WhitespaceTokenizer()


@pytest.fixture
def documents():
    return [
        LabelledDocument(["doc_0"], "cat sat"),
        LabelledDocument(["doc_1"], "dog ran"),
    ]


@pytest.fixture
def word_similarity():
    return FakeWordSimilarity(
        similar={"cat": ["dog", "cat"]},
        scores={("dog", "cat"): 0.95},
    )


@pytest.fixture
def document_similarity():
    return FakeDocumentSimilarity(nearest={"doc_0": ["doc_1"], "doc_1": ["doc_0"]})


@pytest.fixture
def make_normalizer(tokenizer, word_similarity, document_similarity, documents):
    def _make(**kwargs):
        kwargs.setdefault("tokenizer", tokenizer)
        kwargs.setdefault("word_similarity", word_similarity)
        kwargs.setdefault("document_similarity", document_similarity)
        kwargs.setdefault("documents", documents)
        kwargs.setdefault("top_n_labels", 1)
        return EmbeddingsNormalizer(**kwargs)
    return _make
