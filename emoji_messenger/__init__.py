"""Emoji substitution cipher: encode a-z, 0-9, space, '?' and '!' as emojis and back."""

from .codec import CodecCondition, CodecResult, decode, encode, graphemes, looks_like_cipher
from .table import CIPHER_PAIRS, DEFAULT_TABLE, SymbolTable

__all__ = [
    "CIPHER_PAIRS",
    "DEFAULT_TABLE",
    "CodecCondition",
    "CodecResult",
    "SymbolTable",
    "decode",
    "encode",
    "graphemes",
    "looks_like_cipher",
]

__version__ = "0.1.0"
