"""
Word and document similarity oracles.

This module binds pre-trained gensim models to the two lookups the
normalizer needs: pairwise / thresholded word similarity over a word
embedding space, and nearest documents over a paragraph vector space.
Models are trained elsewhere; nothing here fits or updates them.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

import numpy as np
from gensim.models import KeyedVectors
from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from .utils import load_config

logger = logging.getLogger(__name__)


class WordSimilarity(Protocol):
    """Pairwise and thresholded similarity over a word vocabulary."""

    def similarity(self, a: str, b: str) -> float:
        ...

    def similar_words(self, token: str, threshold: float) -> List[str]:
        ...


class DocumentSimilarity(Protocol):
    """Nearest documents of a labelled document."""

    def nearest_labels(self, label: str, n: int) -> List[str]:
        ...


def _keyed_vectors(model: Any, attr: str) -> KeyedVectors:
    """Return the KeyedVectors of a full gensim model, or the vectors themselves."""
    if isinstance(model, KeyedVectors):
        return model
    return getattr(model, attr)


class KeyedVectorsWordSimilarity:
    """Word similarity backed by a gensim Word2Vec model or KeyedVectors."""

    def __init__(self, model: Any, mode: Optional[str] = None,
                 config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize with configuration.

        Args:
            model: A trained ``Word2Vec`` model or its ``KeyedVectors``.
            mode: Candidate generation mode, "embedding" or "surface".
                If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = load_config(config_dict)
        if mode is None:
            mode = self.config.SIMILAR_WORDS_MODE
        if mode not in self.config.SIMILAR_WORDS_MODES:
            raise ValueError(
                f"Unknown similar words mode {mode!r}, expected one of {self.config.SIMILAR_WORDS_MODES}"
            )
        self.mode = mode
        self.wv = _keyed_vectors(model, "wv")

    def __contains__(self, word: str) -> bool:
        return word in self.wv.key_to_index

    def similarity(self, a: str, b: str) -> float:
        """
        Cosine similarity between two words.

        Out of vocabulary words score -1.0, the lowest possible cosine.
        """
        if a not in self or b not in self:
            return -1.0
        return float(self.wv.similarity(a, b))

    def similar_words(self, token: str, threshold: float) -> List[str]:
        """
        Get every vocabulary word at least ``threshold`` similar to a token.

        Args:
            token: Query token.
            threshold: Minimum similarity, in [0, 1].

        Returns:
            Vocabulary words sorted by similarity, most similar first. The
            token itself is included when it belongs to the vocabulary.
        """
        if self.mode == "surface":
            return self._similar_spellings(token, threshold)
        return self._similar_vectors(token, threshold)

    def _similar_vectors(self, token: str, threshold: float) -> List[str]:
        if token not in self:
            return []

        # topn=None yields the raw similarity against every key, in vocab order
        dists = np.asarray(self.wv.most_similar(token, topn=None))
        order = np.argsort(-dists, kind="stable")
        keys = self.wv.index_to_key
        return [keys[i] for i in order if dists[i] >= threshold]

    def _similar_spellings(self, token: str, threshold: float) -> List[str]:
        matches = process.extract(
            token,
            self.wv.index_to_key,
            scorer=Levenshtein.normalized_similarity,
            processor=None,
            score_cutoff=threshold,
            limit=None,
        )
        return [word for (word, _score, _idx) in matches]


class Doc2VecDocumentSimilarity:
    """Document similarity backed by a gensim Doc2Vec model or its document vectors."""

    def __init__(self, model: Any):
        """
        Initialize with a model.

        Args:
            model: A trained ``Doc2Vec`` model or its document ``KeyedVectors``.
        """
        self.dv = _keyed_vectors(model, "dv")

    def __contains__(self, label: str) -> bool:
        return label in self.dv.key_to_index

    def nearest_labels(self, label: str, n: int) -> List[str]:
        """
        Get the labels of the documents most similar to a labelled document.

        Args:
            label: Label of the anchor document.
            n: Number of labels to return.

        Returns:
            Up to ``n`` labels, most similar first, never ``label`` itself.
            Unknown labels have no neighbours.
        """
        if n < 1 or label not in self:
            logger.debug("No nearest labels for %r (n=%d)", label, n)
            return []
        return [key for (key, _sim) in self.dv.most_similar(label, topn=n)]
