"""Tokenizer for single lines of a BNF/EBNF grammar."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ScanError(ValueError):
    """Raised when a grammar line cannot be tokenized."""


class TokenType(IntEnum):
    NON_TERMINAL = 1
    STRING = 2
    DIGIT = 3
    EQUAL = 4
    CHOICE = 5
    OPEN_PAREN = 6
    CLOSE_PAREN = 7
    OPEN_CURLY = 8
    CLOSE_CURLY = 9
    OPEN_SQUARE = 10
    CLOSE_SQUARE = 11
    ASTERISK = 12


LITERAL_TOKENS: dict[str, TokenType] = {
    "|": TokenType.CHOICE,
    "/": TokenType.CHOICE,
    "::=": TokenType.EQUAL,
    ":=": TokenType.EQUAL,
    "=": TokenType.EQUAL,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_CURLY,
    "}": TokenType.CLOSE_CURLY,
    "[": TokenType.OPEN_SQUARE,
    "]": TokenType.CLOSE_SQUARE,
    "*": TokenType.ASTERISK,
}

_SYMBOLS = frozenset("|/:=(){}*[]")
_END = "\x00"


def token_to_string(token_type: TokenType) -> str:
    """Return a literal spelling of a literal token type."""
    for literal, kind in LITERAL_TOKENS.items():
        if kind == token_type:
            return literal
    raise ScanError(f"unknown tokenType: {token_type}")


@dataclass(frozen=True)
class Token:
    """A lexical token; the default instance stands for 'no token'."""

    text: str = ""
    type: TokenType | None = None
    loc: int = field(default=0)

    def of_type(self, token_type: TokenType) -> bool:
        return self.type == token_type


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Scanner:
    """Splits one grammar line into tokens. Scanning stops at a line break."""

    def __init__(self, line: str) -> None:
        self.line = line
        self._current = 0
        self._start = 0
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Tokenize the line; an empty or blank line gives an empty list."""
        self._current = 0
        self._start = 0
        self._tokens = []

        while not self._at_end():
            char = self._peek()
            if char == "<" or char.isalpha():
                self._scan_non_terminal()
            elif char == '"':
                self._scan_string()
            elif char == " ":
                self._current += 1
            elif _is_digit(char):
                self._scan_digits()
            elif char in _SYMBOLS:
                self._scan_literal()
            else:
                self._start = self._current
                raise ScanError(f"unknown symbol: {char} in line:{self._point_to_loc()}")
        return list(self._tokens)

    def _scan_non_terminal(self) -> None:
        if self._peek() == "<":
            self._current += 1
            self._start = self._current
            while not self._at_end() and self.line[self._current] != ">":
                self._current += 1
            if self._at_end():
                raise ScanError(f"expected '>' symbol at the end of the line: '{self.line}'")
            self._emit(TokenType.NON_TERMINAL, self.line[self._start:self._current])
            self._current += 1
            return

        self._start = self._current
        self._current += 1
        while self._peek().isalpha():
            self._current += 1
        self._emit(TokenType.NON_TERMINAL, self.line[self._start:self._current])
        # A bare name swallows the character that follows it.
        self._current += 1

    def _scan_string(self) -> None:
        self._current += 1
        self._start = self._current
        while not self._at_end() and self.line[self._current] != '"':
            self._current += 1
        if self._at_end():
            raise ScanError(f"expected '\"' symbol at the end of the line: '{self.line}'")
        self._emit(TokenType.STRING, self.line[self._start:self._current])
        self._current += 1

    def _scan_literal(self) -> None:
        self._start = self._current
        literal = ""
        token_type: TokenType | None = None
        while not self._at_end() and self._peek() in _SYMBOLS:
            literal += self._peek()
            self._current += 1
            token_type = LITERAL_TOKENS.get(literal)
            if token_type is not None:
                break
        if token_type is None:
            raise ScanError(f"unknown literal token '{literal}' in line:{self._point_to_loc()}")
        self._emit(token_type, literal)

    def _scan_digits(self) -> None:
        self._start = self._current
        while not self._at_end() and _is_digit(self._peek()):
            self._current += 1
        self._emit(TokenType.DIGIT, self.line[self._start:self._current])

    def _emit(self, token_type: TokenType, text: str) -> None:
        self._tokens.append(Token(text=text, type=token_type, loc=self._start))

    def _at_end(self) -> bool:
        return self._current >= len(self.line) or self.line[self._current] in "\r\n"

    def _peek(self) -> str:
        return _END if self._at_end() else self.line[self._current]

    def _point_to_loc(self) -> str:
        count = (self._current - self._start) // 2 + self._start
        return f"\n{self.line}\n{'-' * count}^\n"