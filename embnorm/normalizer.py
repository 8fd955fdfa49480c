"""
Embeddings based text normalizer.

This module contains the EmbeddingsNormalizer class, which rewrites each
token of a text into a more canonical alternative found in semantically
related documents.

For a token, every indexed document containing it acts as an anchor: the
anchor's nearest documents (paragraph vectors) are searched for the
token's most similar word (word vectors). Each anchor proposes at most one
replacement, and the proposal most similar to the token wins.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Union

from .indexer import DocumentSource, LabelledContentIndex
from .similarity import DocumentSimilarity, WordSimilarity
from .tokenizer import Tokenizer
from .utils import format_tokens, load_config, validate_config


class EmbeddingsNormalizer:
    """
    Normalizes text using word and document embeddings.

    The labelled content index is built once, at construction, and never
    mutated afterwards; ``normalize`` is therefore safe to call from several
    threads as long as the tokenizer and oracles are.
    """

    def __init__(self, tokenizer: Tokenizer, word_similarity: WordSimilarity,
                 document_similarity: DocumentSimilarity,
                 documents: Union[DocumentSource, LabelledContentIndex],
                 top_n_labels: Optional[int] = None, word_sim_accuracy: Optional[float] = None,
                 config_dict: Optional[Dict[str, Any]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the EmbeddingsNormalizer.

        Args:
            tokenizer: Splits input text and document content into tokens.
            word_similarity: Word similarity oracle.
            document_similarity: Document similarity oracle.
            documents: Label-aware document source, drained once here, or
                an already built ``LabelledContentIndex``.
            top_n_labels: Nearest documents consulted per anchor. If None, uses config default.
            word_sim_accuracy: Candidate word similarity threshold. If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
            logger: Where diagnostic records go. If None, uses the module logger.

        Raises:
            ValueError: If the configuration is out of range.
        """
        self.config = load_config(config_dict)
        if top_n_labels is None:
            top_n_labels = self.config.TOP_N_LABELS
        if word_sim_accuracy is None:
            word_sim_accuracy = self.config.WORD_SIM_ACCURACY
        validate_config(top_n_labels, word_sim_accuracy)

        self.top_n_labels = top_n_labels
        self.word_sim_accuracy = word_sim_accuracy
        self.tokenizer = tokenizer
        self.word_similarity = word_similarity
        self.document_similarity = document_similarity
        self.log = logger if logger is not None else logging.getLogger(__name__)

        if isinstance(documents, LabelledContentIndex):
            self.labelled_content = documents
        else:
            self.labelled_content = LabelledContentIndex.build(documents, tokenizer)

    def normalize(self, text: str) -> str:
        """
        Normalize every token of a text.

        Args:
            text: Text to normalize.

        Returns:
            The normalized tokens joined by single spaces.
        """
        new_text = " ".join(self.normalize_token(token) for token in self.tokenizer.tokenize(text))
        self.log.info("normalized '%s' into '%s'", text, new_text)
        return new_text

    def normalize_token(self, token: str) -> str:
        """
        Normalize a single token, without looking at its neighbours.

        Args:
            token: Token to normalize.

        Returns:
            The best replacement, or the token itself when there is none.
        """
        replacements = {}
        for label in self.labelled_content.labels_containing(token):
            replacement = self.find_token_replacement(token, label)
            if replacement is not None:
                replacements[replacement] = None

        if not replacements:
            return token

        self.log.info("possibly replace %s with %s", token, format_tokens(replacements))
        replacement = self.select_replacement(replacements, token)
        return replacement if replacement is not None else token

    def find_token_replacement(self, token: str, label: str) -> Optional[str]:
        """
        Look for a replacement of a token around one anchor document.

        Only the most similar word other than the token is tried; if none of
        the anchor's nearest documents contain it there is no replacement.

        Args:
            token: Token to replace.
            label: Label of a document containing the token.

        Returns:
            The replacement word, or None.
        """
        nearest_labels = self.document_similarity.nearest_labels(label, self.top_n_labels)
        similar = self.word_similarity.similar_words(token, self.word_sim_accuracy)
        if not similar:
            return None

        nearest = next((word for word in similar if word != token), None)
        if nearest is None:
            return None

        for near_label in nearest_labels:
            if self.labelled_content.contains(near_label, nearest):
                self.log.debug("%s -> %s found in %s (anchor %s)", token, nearest, near_label, label)
                return nearest
        return None

    def select_replacement(self, candidates: Iterable[str], token: str) -> Optional[str]:
        """
        Pick the candidate most similar to the token.

        NaN scores are skipped. When no candidate has a comparable score
        the first one is returned, so a lone candidate wins whatever its
        score. Ties keep the earlier candidate.

        Args:
            candidates: Candidate replacements.
            token: Token being replaced.

        Returns:
            The best candidate, or None if there are no candidates.
        """
        first, best, best_score = None, None, float("-inf")
        for candidate in candidates:
            if first is None:
                first = candidate
            score = self.word_similarity.similarity(candidate, token)
            # NaN never compares greater, so it cannot hold the maximum
            if score > best_score:
                best, best_score = candidate, score
        return best if best is not None else first

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the normalizer.

        Returns:
            Dictionary with the configuration and index statistics.
        """
        stats = {
            "top_n_labels": self.top_n_labels,
            "word_sim_accuracy": self.word_sim_accuracy,
        }
        stats.update(self.labelled_content.get_stats())
        return stats
