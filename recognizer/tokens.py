"""Token values and read cursors shared by every recognizer pass.

A ``TokenStream`` owns one immutable tuple of tokens.  Each pass asks the
stream for its own ``Cursor``; cursors are plain values, so advancing one
never moves another.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class TokenKind(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Union[int, str]

    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    def is_identifier(self) -> bool:
        return self.kind is TokenKind.IDENTIFIER

    def is_symbol(self, char: str) -> bool:
        return self.kind is TokenKind.SYMBOL and self.value == char

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Cursor:
    """A position in a token tuple.  Past the end means "exhausted"."""
    tokens: Tuple[Token, ...]
    position: int = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    @property
    def current(self) -> Optional[Token]:
        if self.at_end:
            return None
        return self.tokens[self.position]

    def advance(self) -> "Cursor":
        return Cursor(self.tokens, self.position + 1)

    def to_end(self) -> "Cursor":
        return Cursor(self.tokens, len(self.tokens))


class TokenStream:
    def __init__(self, tokens):
        self.tokens: Tuple[Token, ...] = tuple(tokens)

    def cursor(self) -> Cursor:
        return Cursor(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    def __repr__(self) -> str:
        return f"TokenStream({' '.join(str(t) for t in self.tokens)!r})"
