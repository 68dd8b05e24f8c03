# bnfgen

`bnfgen` reads a grammar written in a BNF-like notation and prints one
randomly generated string that the grammar accepts. It is useful for
producing sample inputs and fuzzing data. It has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

## Command line

```
bnfgen -f grammar.bnf [-s START]
```

The same command is available as `python -m bnfgen.cli`.

- `-f FILE` names the grammar file. It is required.
- `-s START` names the rule to start from. Without it, the first rule in
  the file is used.

The generated string is printed to standard output and the exit status is
0. On a usage error, an unreadable file, a malformed rule or a reference
to an unknown rule, a message starting with `Error:` is printed to
standard error and the exit status is 1.

The file is read as UTF-8 (undecodable bytes are replaced). Rules are
separated by CRLF line breaks (`\r\n`), one rule per line. A line is only
read up to its first `\r` or `\n`, so in a file with bare LF line breaks
only the first rule is seen. Empty lines are skipped.

## Grammar notation

A rule is a name, an assignment (`::=`, `:=` or `=`) and a body:

```
<sentence> ::= <greeting> " " <name> ["!"]
<greeting> ::= "hello" | "hi"
<name> ::= "world" | "there"
```

Inside a body:

| Form              | Meaning                                        |
|-------------------|------------------------------------------------|
| `<name>`, `name`  | a reference to another rule                    |
| `"text"`          | literal text                                   |
| `a b`             | sequence                                       |
| `a \| b`, `a / b` | choice between alternatives, picked uniformly  |
| `( ... )`         | grouping                                       |
| `[ ... ]`         | optional part, included half of the time       |
| `{ ... }`         | zero to ten repetitions                        |
| `*x`              | zero to ten repetitions of `x`                 |
| `*n x`            | zero to `n` repetitions of `x`                 |
| `m*x`             | `m` to `m + 10` repetitions of `x`             |
| `m*n x`           | `m` to `n` repetitions of `x`                  |

Notes:

- A bare name (letters only, without angle brackets) also consumes the
  single character that follows it, so separate it from the next item
  with a space.
- `m*n` with `n` smaller than `m` is a `ParseError`.
- Spaces are the only whitespace allowed between tokens; any other
  character outside the notation is a `ScanError`.

## Library use

```python
import random

from bnfgen.grammar import load_grammar

grammar = load_grammar('<digit> ::= "0" | "1"\r\n<bits> ::= 1*8 <digit>')
grammar.rng = random.Random(42)          # optional: reproducible output
print(grammar.start)                     # "digit", the first rule's head
print(grammar.generate(grammar.lookup("bits")))
```

- `load_grammar(text)` returns a `Grammar`; its `start` attribute holds the
  head of the first rule (or `None` if there are no rules).
- `Grammar(rng=None)` holds `rules`, a dict from head to expression, and
  uses `rng` (a `random.Random`) for every random choice.
- `Grammar.add_rule(Rule(head, body))` adds or replaces a rule.
- `Grammar.lookup(head)` returns a rule body or raises `GrammarError`.
- `Grammar.generate(expr)` returns a random string for an expression.

Lower-level pieces are `bnfgen.scanner.Scanner(line).scan()`, which
returns a list of `Token` objects, and `bnfgen.parser.Parser(tokens,
line).parse()`, which returns an expression tree built from
`ChoiceExpr`, `SequenceExpr`, `NonTerminalExpr`, `StringExpr`,
`RepetitionExpr` and `OptionalExpr`.

Unknown rule names raise `GrammarError`; malformed rules raise
`ScanError` or `ParseError`. All three are subclasses of `ValueError`.

## What it does not do

`bnfgen` only generates strings. It does not check or parse input against
a grammar, does not guard against rules that recurse without end (Python's
recursion limit applies), and produces one string per run of the command.