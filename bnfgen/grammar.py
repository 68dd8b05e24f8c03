"""Grammar storage and random sentence generation."""

from __future__ import annotations

import random
from dataclasses import dataclass

from bnfgen.parser import (
    ChoiceExpr,
    DigitExpr,
    Expr,
    NonTerminalExpr,
    OptionalExpr,
    Parser,
    RepetitionExpr,
    SequenceExpr,
    StringExpr,
)
from bnfgen.scanner import Scanner

LINE_SEPARATOR = "\r\n"


class GrammarError(ValueError):
    """Raised when a grammar cannot produce a sentence."""


@dataclass(frozen=True)
class Rule:
    """A production: a head symbol and the expression it expands to."""

    head: str
    body: Expr


class Grammar:
    """A set of rules keyed by head symbol, able to generate random sentences."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rules: dict[str, Expr] = {}
        self.start: str | None = None
        self.rng = rng if rng is not None else random.Random()

    def add_rule(self, rule: Rule) -> None:
        """Add a rule, replacing any earlier rule with the same head."""
        self.rules[rule.head] = rule.body

    def lookup(self, head: str) -> Expr:
        """Return the body of the rule for ``head``."""
        try:
            return self.rules[head]
        except KeyError:
            raise GrammarError(f"unknown symbol: {head}") from None

    def generate(self, expr: Expr) -> str:
        """Produce a random string matching ``expr``."""
        if isinstance(expr, ChoiceExpr):
            return self.generate(self.rng.choice(expr.items))
        if isinstance(expr, OptionalExpr):
            return self.generate(expr.expr) if self.rng.randrange(2) == 1 else ""
        if isinstance(expr, SequenceExpr):
            return "".join(self.generate(item) for item in expr.items)
        if isinstance(expr, NonTerminalExpr):
            return self.generate(self.lookup(expr.text))
        if isinstance(expr, (StringExpr, DigitExpr)):
            return expr.text
        if isinstance(expr, RepetitionExpr):
            count = self.rng.randint(expr.min_count, expr.max_count)
            parts = []
            for _ in range(count):
                try:
                    parts.append(self.generate(expr.expr))
                except GrammarError:
                    raise GrammarError("unknown expression") from None
            return "".join(parts)
        raise GrammarError("unknown Expression")


def load_grammar(text: str) -> Grammar:
    """Build a grammar from CRLF-separated rule lines.

    The first rule with a non-empty head becomes the grammar's start symbol.
    Scanner and parser errors propagate unchanged.
    """
    grammar = Grammar()
    for line in text.split(LINE_SEPARATOR):
        tokens = Scanner(line).scan()
        if not tokens:
            continue
        head, body = tokens[0], tokens[2:]
        if grammar.start is None and head.text:
            grammar.start = head.text
        expr = Parser(body, line).parse()
        grammar.add_rule(Rule(head.text, expr))
    return grammar