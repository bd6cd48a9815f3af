"""
Core codec
--------------------------------------------------
encode(): text -> emoji tokens, decode(): emoji tokens -> text.

Both walk extended grapheme clusters, so multi code point glyphs are never
split. Units with no table entry are dropped; an empty result is reported as
a condition on the returned CodecResult, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import regex
from loguru import logger

from .table import DEFAULT_TABLE, SymbolTable

GRAPHEME_RE = regex.compile(r"\X")


class CodecCondition(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    NO_SUPPORTED_CHARACTERS = "NoSupportedCharacters"
    NO_DECODABLE_TOKENS = "NoDecodableTokens"


@dataclass(frozen=True)
class CodecResult:
    ok: bool
    data: str
    condition: Optional[CodecCondition] = None

    @classmethod
    def success(cls, data: str) -> "CodecResult":
        return cls(True, data)

    @classmethod
    def failure(cls, condition: CodecCondition) -> "CodecResult":
        return cls(False, "", condition)


def graphemes(text: str) -> List[str]:
    """Split text into extended grapheme clusters."""
    return GRAPHEME_RE.findall(text)


def encode(text: str, table: SymbolTable = DEFAULT_TABLE) -> CodecResult:
    if not text.strip():
        return CodecResult.failure(CodecCondition.EMPTY_INPUT)

    out = []
    dropped = 0
    for unit in graphemes(text.lower()):
        token = table.lookup_token(unit)
        if token is None:
            dropped += 1
            continue
        out.append(token)

    if dropped:
        logger.debug("encode: dropped {} unsupported character(s)", dropped)
    if not out:
        return CodecResult.failure(CodecCondition.NO_SUPPORTED_CHARACTERS)
    return CodecResult.success("".join(out))


def decode(text: str, table: SymbolTable = DEFAULT_TABLE) -> CodecResult:
    trimmed = text.strip()
    if not trimmed:
        return CodecResult.failure(CodecCondition.EMPTY_INPUT)

    out = []
    skipped = 0
    for unit in graphemes(trimmed):
        char = table.lookup_character(unit)
        if char is None:
            skipped += 1
            continue
        out.append(char)

    if skipped:
        logger.debug("decode: skipped {} unrecognized segment(s)", skipped)
    if not out:
        return CodecResult.failure(CodecCondition.NO_DECODABLE_TOKENS)
    return CodecResult.success("".join(out))


def looks_like_cipher(text: str, table: SymbolTable = DEFAULT_TABLE) -> bool:
    units = [u for u in graphemes(text) if not u.isspace()]
    return bool(units) and all(table.is_token(u) for u in units)
