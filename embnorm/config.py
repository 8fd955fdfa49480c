"""
Configuration settings for the embeddings normalizer.

This module contains the default parameters of the normalizer. Components
accept a ``config_dict`` whose keys override these values.
"""

# Normalization settings
TOP_N_LABELS = 5  # Number of nearest documents consulted per anchor label
WORD_SIM_ACCURACY = 0.9  # Similarity threshold for candidate replacement words

# Candidate generation: "embedding" (vector cosine) or "surface" (spelling)
SIMILAR_WORDS_MODE = "embedding"
SIMILAR_WORDS_MODES = ("embedding", "surface")

# Tokenization settings
LOWERCASE = False  # Tokens are case sensitive unless this is enabled
TOKEN_PATTERN = r"\w+|[^\w\s]"  # Words, or single punctuation characters

# Logging settings
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
