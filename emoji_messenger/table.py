"""
Symbol table
--------------------------------------------------
Fixed character -> emoji mapping plus its inverse.

- Alphabet: a-z, 0-9, space, '?', '!'
- Every token is a single code point glyph; the inverse lookup also accepts
  a token followed by variation selectors (U+FE0E / U+FE0F), which keyboards
  and chat clients like to append to symbols such as ❗ or ⚫.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple

# -----------------------------
# Alphabet
# -----------------------------

LETTER_EMOJI = [
    "😀","😁","😂","🤣","😃","😄","😅","😆","😉","😊","😋","😎","😍",
    "🤩","😘","😗","😙","😚","🙂","🤗","🤔","🤭","🤫","🤥","😶","😐",
]
DIGIT_EMOJI = ["🔴","🟠","🟡","🟢","🔵","🟣","⚫","⚪","🟤","🔶"]
SPECIAL_EMOJI = {" ": "🌟", "?": "❓", "!": "❗"}

if len(LETTER_EMOJI) != 26 or len(DIGIT_EMOJI) != 10:
    raise RuntimeError("Cipher alphabet must cover a-z and 0-9 exactly.")

CIPHER_PAIRS: Tuple[Tuple[str, str], ...] = (
    tuple((chr(ord("a") + i), e) for i, e in enumerate(LETTER_EMOJI))
    + tuple((str(i), e) for i, e in enumerate(DIGIT_EMOJI))
    + tuple(SPECIAL_EMOJI.items())
)

VARIATION_SELECTORS = "\ufe0e\ufe0f"


class SymbolTable:
    """Immutable bidirectional mapping between characters and tokens.

    Use :meth:`build`; the instance never changes after construction, so it
    can be shared freely.
    """

    __slots__ = ("_char_to_token", "_token_to_char")

    def __init__(self, char_to_token: Dict[str, str], token_to_char: Dict[str, str]) -> None:
        self._char_to_token = char_to_token
        self._token_to_char = token_to_char

    @classmethod
    def build(cls, pairs: Iterable[Tuple[str, str]]) -> "SymbolTable":
        """Build from ordered ``(character, token)`` pairs.

        Raises ValueError when a character or a token appears twice, since
        either would make the table ambiguous.
        """
        forward: Dict[str, str] = {}
        reverse: Dict[str, str] = {}
        for char, token in pairs:
            if not char or not token:
                raise ValueError(f"Empty entry in cipher table: {(char, token)!r}")
            if char in forward:
                raise ValueError(f"Duplicate character in cipher table: {char!r}")
            if token in reverse:
                raise ValueError(
                    f"Duplicate token {token!r} for {reverse[token]!r} and {char!r}"
                )
            forward[char] = token
            reverse[token] = char
        return cls(forward, reverse)

    def lookup_token(self, char: str) -> Optional[str]:
        return self._char_to_token.get(char)

    def lookup_character(self, token: str) -> Optional[str]:
        char = self._token_to_char.get(token)
        if char is None and token.endswith(tuple(VARIATION_SELECTORS)):
            char = self._token_to_char.get(token.rstrip(VARIATION_SELECTORS))
        return char

    def is_token(self, s: str) -> bool:
        return self.lookup_character(s) is not None

    @property
    def characters(self) -> Tuple[str, ...]:
        return tuple(self._char_to_token)

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._token_to_char)

    def pairs(self) -> Iterator[Tuple[str, str]]:
        return iter(self._char_to_token.items())

    def __len__(self) -> int:
        return len(self._char_to_token)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self)} entries)"


DEFAULT_TABLE = SymbolTable.build(CIPHER_PAIRS)
