"""
Tokenizer bindings.

This module provides the tokenizers the normalizer splits text with: a
regex word/punctuation tokenizer and a SentencePiece-backed tokenizer for
sub-word models trained elsewhere.
"""

import re
from typing import Any, Dict, List, Optional, Protocol

import sentencepiece as spm

from .utils import load_config


class Tokenizer(Protocol):
    """Anything that splits text into an ordered list of tokens."""

    def tokenize(self, text: str) -> List[str]:
        ...


class RegexTokenizer:
    """Splits text into the matches of a regular expression."""

    def __init__(self, pattern: Optional[str] = None, lowercase: Optional[bool] = None,
                 config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize with configuration.

        Args:
            pattern: Token regex. If None, uses config default.
            lowercase: Whether to lowercase text first. If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = load_config(config_dict)
        if pattern is None:
            pattern = self.config.TOKEN_PATTERN
        if lowercase is None:
            lowercase = self.config.LOWERCASE
        self.lowercase = lowercase
        self.token_regex = re.compile(pattern)

    def tokenize(self, text: str) -> List[str]:
        """
        Extract tokens from text.

        Args:
            text: Input text.

        Returns:
            List of tokens, in order of appearance.
        """
        txt = text.lower() if self.lowercase else text
        return self.token_regex.findall(txt)


class SentencePieceTokenizer:
    """Tokenizes text with a trained SentencePiece model."""

    def __init__(self, model_path: Optional[str] = None, processor: Any = None,
                 lowercase: Optional[bool] = None, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize with configuration.

        Args:
            model_path: Optional path of a model file to load right away.
            processor: Optional already loaded SentencePiece processor.
            lowercase: Whether to lowercase text first. If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = load_config(config_dict)
        if lowercase is None:
            lowercase = self.config.LOWERCASE
        self.lowercase = lowercase
        self.sp = processor
        if model_path is not None:
            self.load(model_path)

    def load(self, model_path: str) -> spm.SentencePieceProcessor:
        """
        Load a trained SentencePiece model from disk.

        Args:
            model_path: Path to the model file.

        Returns:
            Loaded SentencePiece processor.
        """
        sp = spm.SentencePieceProcessor()
        sp.load(model_path)
        self.sp = sp
        return sp

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize a string into pieces.

        Args:
            text: Text to tokenize.

        Returns:
            List of pieces.
        """
        if self.sp is None:
            raise RuntimeError("SentencePiece model not loaded. Call load() first.")

        txt = text.lower() if self.lowercase else text
        return self.sp.encode(txt, out_type=str)
