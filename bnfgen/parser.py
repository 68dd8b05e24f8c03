"""Parser turning grammar-rule tokens into expression trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from bnfgen.scanner import Token, TokenType, token_to_string

DEFAULT_MAX_REPETITIONS = 10

_START_TOKENS = frozenset(
    {
        TokenType.STRING,
        TokenType.OPEN_PAREN,
        TokenType.NON_TERMINAL,
        TokenType.OPEN_CURLY,
        TokenType.ASTERISK,
        TokenType.DIGIT,
        TokenType.OPEN_SQUARE,
    }
)


class ParseError(ValueError):
    """Raised when a rule body is malformed."""


@dataclass(frozen=True)
class SequenceExpr:
    items: tuple


@dataclass(frozen=True)
class ChoiceExpr:
    items: tuple


@dataclass(frozen=True)
class NonTerminalExpr:
    text: str
    loc: int = field(default=0, compare=False)


@dataclass(frozen=True)
class StringExpr:
    text: str
    loc: int = field(default=0, compare=False)


@dataclass(frozen=True)
class DigitExpr:
    text: str
    loc: int = field(default=0, compare=False)


@dataclass(frozen=True)
class RepetitionExpr:
    expr: "Expr"
    min_count: int = 0
    max_count: int = DEFAULT_MAX_REPETITIONS


@dataclass(frozen=True)
class OptionalExpr:
    expr: "Expr"


Expr = Optional[
    Union[
        SequenceExpr,
        ChoiceExpr,
        NonTerminalExpr,
        StringExpr,
        DigitExpr,
        RepetitionExpr,
        OptionalExpr,
    ]
]


class Parser:
    """Recursive-descent parser over the tokens of one rule body."""

    def __init__(self, tokens: Sequence[Token], line: str = "") -> None:
        self._tokens = list(tokens)
        self._line = line
        self._pos = 0

    def parse(self) -> Expr:
        """Parse a choice expression from the current position."""
        first = self._parse_sequence()
        alternatives = [first]
        while not self._at_end() and self._peek().of_type(TokenType.CHOICE):
            self._expect(TokenType.CHOICE)
            alternatives.append(self._parse_sequence())
        return ChoiceExpr(tuple(alternatives))

    def _parse_sequence(self) -> SequenceExpr:
        items = [self._parse_primary()]
        while not self._at_end() and self._peek().type in _START_TOKENS:
            items.append(self._parse_primary())
        return SequenceExpr(tuple(items))

    def _parse_primary(self) -> Expr:
        token = self._peek()
        kind = token.type

        if kind is TokenType.NON_TERMINAL:
            self._advance()
            return NonTerminalExpr(token.text, token.loc)
        if kind is TokenType.STRING:
            self._advance()
            return StringExpr(token.text, token.loc)
        if kind is TokenType.OPEN_PAREN:
            self._advance()
            try:
                expr = self.parse()
            except ParseError:
                # A broken group body is dropped; the missing ')' is reported instead.
                expr = None
            self._expect(TokenType.CLOSE_PAREN)
            return expr
        if kind is TokenType.DIGIT:
            return self._parse_counted_repetition(token)
        if kind is TokenType.ASTERISK:
            self._advance()
            if self._peek().of_type(TokenType.DIGIT):
                digit = self._advance()
                expr = self._parse_primary()
                return RepetitionExpr(expr=expr, max_count=int(digit.text))
            expr = self._parse_primary()
            return RepetitionExpr(expr=expr, max_count=DEFAULT_MAX_REPETITIONS)
        if kind is TokenType.OPEN_SQUARE:
            self._advance()
            expr = self.parse()
            self._expect(TokenType.CLOSE_SQUARE)
            return OptionalExpr(expr)
        if kind is TokenType.OPEN_CURLY:
            self._advance()
            expr = self.parse()
            self._expect(TokenType.CLOSE_CURLY)
            return RepetitionExpr(expr=expr, max_count=DEFAULT_MAX_REPETITIONS)
        raise ParseError("expect expression")

    def _parse_counted_repetition(self, token: Token) -> Expr:
        self._advance()
        low = int(token.text)
        if not self._advance().of_type(TokenType.ASTERISK):
            return None

        high = DEFAULT_MAX_REPETITIONS
        default_max = True
        if self._peek().of_type(TokenType.DIGIT):
            high = int(self._advance().text)
            default_max = False
        expr = self._parse_primary()
        if default_max:
            high = low + high
        if high < low:
            raise ParseError(
                f"repetition expression error: max repeat count ({high}) must be greater "
                f"than min repeat count ({low}):{self._point_to_loc(token)}"
            )
        return RepetitionExpr(expr=expr, min_count=low, max_count=high)

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token:
        return Token() if self._at_end() else self._tokens[self._pos]

    def _advance(self) -> Token:
        if self._at_end():
            return Token()
        self._pos += 1
        return self._tokens[self._pos - 1]

    def _expect(self, expected: TokenType) -> None:
        token = self._peek()
        if token.of_type(expected):
            self._advance()
            return
        raise ParseError(f"expected token: {token_to_string(expected)}, got: {token.text}")

    def _point_to_loc(self, token: Token) -> str:
        count = len(token.text) // 2 + token.loc
        return f"\n{self._line}\n{'-' * count}^\n"