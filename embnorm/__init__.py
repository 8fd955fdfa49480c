"""
Embeddings Normalizer

Token-level text normalization guided by word embeddings and paragraph
(document) embeddings, for cleaning noisy informal text.

Main components:
- EmbeddingsNormalizer: Rewrites tokens into more canonical alternatives
- LabelledContentIndex: Document label -> tokens lookup built from a corpus
- KeyedVectorsWordSimilarity: Word similarity over gensim word vectors
- Doc2VecDocumentSimilarity: Nearest documents over gensim paragraph vectors
- RegexTokenizer, SentencePieceTokenizer: Tokenizer bindings
"""

from .normalizer import EmbeddingsNormalizer
from .indexer import LabelledContentIndex, LabelledDocument
from .similarity import (
    DocumentSimilarity,
    Doc2VecDocumentSimilarity,
    KeyedVectorsWordSimilarity,
    WordSimilarity,
)
from .tokenizer import RegexTokenizer, SentencePieceTokenizer, Tokenizer
from .utils import configure_logging

__version__ = "1.0.0"

__all__ = [
    "EmbeddingsNormalizer",
    "LabelledContentIndex",
    "LabelledDocument",
    "WordSimilarity",
    "DocumentSimilarity",
    "KeyedVectorsWordSimilarity",
    "Doc2VecDocumentSimilarity",
    "Tokenizer",
    "RegexTokenizer",
    "SentencePieceTokenizer",
    "configure_logging",
]
