"""
Utility functions for configuration, logging and token formatting.

This module contains helpers shared by the tokenizers, the similarity
adapters and the normalizer.
"""

import logging
import numbers
from typing import Any, Dict, Iterable, Optional

from . import config


class Config:
    """Attribute view over the default settings with per-instance overrides."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        for key in dir(config):
            if key.isupper():
                setattr(self, key, getattr(config, key))
        for key, value in (config_dict or {}).items():
            setattr(self, key, value)

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in sorted(vars(self).items()))
        return f"Config({items})"


def load_config(config_dict: Optional[Dict[str, Any]] = None) -> Config:
    """
    Load configuration from the config module or a provided dictionary.

    Args:
        config_dict: Optional dictionary whose keys override the defaults.

    Returns:
        Configuration object exposing settings as attributes.
    """
    return Config(config_dict)


def validate_config(top_n_labels: Any, word_sim_accuracy: Any) -> None:
    """
    Check the two normalization parameters.

    Args:
        top_n_labels: Number of nearest documents to consult.
        word_sim_accuracy: Similarity threshold for candidate words.

    Raises:
        ValueError: If either value is out of range or of the wrong type.
    """
    if isinstance(top_n_labels, bool) or not isinstance(top_n_labels, numbers.Integral) or top_n_labels < 1:
        raise ValueError(f"top_n_labels must be an integer >= 1, got {top_n_labels!r}")
    if isinstance(word_sim_accuracy, bool) or not isinstance(word_sim_accuracy, numbers.Real):
        raise ValueError(f"word_sim_accuracy must be a number, got {word_sim_accuracy!r}")
    if not 0.0 <= word_sim_accuracy <= 1.0:
        raise ValueError(f"word_sim_accuracy must be in [0, 1], got {word_sim_accuracy!r}")


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling this more than once only updates the level and format.

    Args:
        level: Logging level name. If None, uses config default.
        fmt: Log record format. If None, uses config default.

    Returns:
        The package logger.
    """
    if level is None:
        level = config.LOG_LEVEL
    if fmt is None:
        fmt = config.LOG_FORMAT

    logger = logging.getLogger(__package__)
    logger.setLevel(level.upper())

    handler = next((h for h in logger.handlers if h.get_name() == __package__), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(__package__)
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(fmt))
    return logger


def format_tokens(tokens: Iterable[str], maxn: int = 12) -> str:
    """
    Return tokens as a compact string; truncate long lists with an ellipsis.

    Args:
        tokens: Tokens to format.
        maxn: Maximum number of tokens to show.

    Returns:
        Formatted token string.
    """
    tokens = list(tokens)
    if len(tokens) <= maxn:
        return "[" + ", ".join(tokens) + "]"
    head = ", ".join(tokens[:maxn // 2])
    tail = ", ".join(tokens[-maxn // 2:])
    return "[" + head + ", …, " + tail + "]"
