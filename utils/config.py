"""
Default settings for code generation, text normalization and reporting
"""

# === Coding ===
DEFAULT_SEPARATOR = "10"
DEFAULT_MAX_CODE_LENGTH = 10    # longest codeword generated, 2046 codes at most
BASELINE_CODE_WIDTH = 8         # bits per symbol for the uncompressed reference

# === Text ===
DEFAULT_ALPHABET = "а-яё"       # regex character class, space is always kept

# === Reporting ===
DEFAULT_CHUNK_SIZE = 8
