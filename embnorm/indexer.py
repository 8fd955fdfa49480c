"""
Labelled content index construction and lookup.

This module handles draining a label-aware document source into an
immutable mapping from document label to the tokens of that document.
"""

import logging
from typing import Dict, Iterable, Iterator, List, NamedTuple, Sequence, Tuple, Union

from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class LabelledDocument(NamedTuple):
    """A document together with the labels it was trained under."""

    labels: Sequence[str]
    content: str


DocumentSource = Iterable[Union[LabelledDocument, Tuple[Sequence[str], str]]]


class LabelledContentIndex:
    """Read-only mapping from document label to the document's tokens."""

    def __init__(self, labelled_content: Dict[str, Tuple[str, ...]]):
        """
        Initialize from an already tokenized mapping.

        Args:
            labelled_content: Dictionary mapping label to token tuple.
        """
        self._content = dict(labelled_content)

    @classmethod
    def build(cls, documents: DocumentSource, tokenizer: Tokenizer) -> "LabelledContentIndex":
        """
        Build the index by draining a document source.

        Only the first label of each document is used. When two documents
        share a first label the later one replaces the earlier one. The
        source is consumed; iterate a fresh one to build again.

        Args:
            documents: Iterable of ``LabelledDocument`` or ``(labels, content)`` pairs.
            tokenizer: Tokenizer applied to each document's content.

        Returns:
            The built index.

        Raises:
            ValueError: If a document carries no label.
        """
        content = {}
        num_docs = 0
        for labels, text in documents:
            if not labels:
                raise ValueError(f"Document #{num_docs} has no label")
            content[labels[0]] = tuple(tokenizer.tokenize(text))
            num_docs += 1

        logger.debug("Indexed %d documents under %d labels", num_docs, len(content))
        return cls(content)

    def __len__(self) -> int:
        return len(self._content)

    def __contains__(self, label: object) -> bool:
        return label in self._content

    def __iter__(self) -> Iterator[Tuple[str, Tuple[str, ...]]]:
        return iter(self._content.items())

    def labels(self) -> List[str]:
        """Labels in index order."""
        return list(self._content)

    def tokens(self, label: str) -> Tuple[str, ...]:
        """
        Get the tokens of a document.

        Args:
            label: Document label.

        Returns:
            Token tuple; empty if the label is not indexed.
        """
        return self._content.get(label, ())

    def contains(self, label: str, token: str) -> bool:
        """Check whether the document under ``label`` contains ``token`` exactly."""
        return token in self.tokens(label)

    def labels_containing(self, token: str) -> List[str]:
        """
        Get the labels of every document containing a token.

        Scans every document in index order.

        Args:
            token: Token to look up (case sensitive).

        Returns:
            Matching labels, in index order.
        """
        # TODO: answer this from a token -> labels inverted index instead of a scan
        return [label for label, tokens in self._content.items() if token in tokens]

    def get_stats(self) -> Dict[str, float]:
        """
        Get statistics about the index.

        Returns:
            Dictionary with document, token and vocabulary counts.
        """
        num_docs = len(self._content)
        total_tokens = sum(len(tokens) for tokens in self._content.values())
        vocab = set()
        for tokens in self._content.values():
            vocab.update(tokens)
        return {
            "num_documents": num_docs,
            "num_tokens": total_tokens,
            "num_unique_tokens": len(vocab),
            "avg_document_length": total_tokens / num_docs if num_docs else 0.0,
        }

    def summarize_index(self) -> None:
        """Print a summary of the labelled content index."""
        stats = self.get_stats()
        print("\n=== Labelled Content Index Summary ===")
        print(f"Documents indexed: {stats['num_documents']}")
        print(f"Total tokens: {stats['num_tokens']}  |  Unique tokens: {stats['num_unique_tokens']}")
        print(f"Average tokens per document: {stats['avg_document_length']:.2f}")
