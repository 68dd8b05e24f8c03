import pytest

from bnfgen.scanner import (
    LITERAL_TOKENS,
    ScanError,
    Scanner,
    Token,
    TokenType,
    token_to_string,
)


def kinds(tokens):
    return [token.type for token in tokens]


def texts(tokens):
    return [token.text for token in tokens]


def test_scan_typical_rule():
    tokens = Scanner('<expr> ::= <term> "+" <expr>').scan()
    assert kinds(tokens) == [
        TokenType.NON_TERMINAL,
        TokenType.EQUAL,
        TokenType.NON_TERMINAL,
        TokenType.STRING,
        TokenType.NON_TERMINAL,
    ]
    assert texts(tokens) == ["expr", "::=", "term", "+", "expr"]


def test_empty_and_blank_lines_give_no_tokens():
    assert Scanner("").scan() == []
    assert Scanner("     ").scan() == []


def test_all_literal_tokens():
    line = " ".join(LITERAL_TOKENS)
    tokens = Scanner(line).scan()
    assert texts(tokens) == list(LITERAL_TOKENS)
    assert kinds(tokens) == list(LITERAL_TOKENS.values())


def test_digits_and_asterisk():
    tokens = Scanner("12*3").scan()
    assert kinds(tokens) == [TokenType.DIGIT, TokenType.ASTERISK, TokenType.DIGIT]
    assert texts(tokens) == ["12", "*", "3"]


def test_bare_name_swallows_following_character():
    tokens = Scanner("a=b").scan()
    assert texts(tokens) == ["a", "b"]
    assert kinds(tokens) == [TokenType.NON_TERMINAL, TokenType.NON_TERMINAL]


def test_scanning_stops_at_line_break():
    tokens = Scanner("<a> = <b>\r\n<c>").scan()
    assert texts(tokens) == ["a", "=", "b"]


def test_locations_point_inside_delimiters():
    line = '<name> = "x"'
    tokens = Scanner(line).scan()
    for token in tokens:
        assert line[token.loc:token.loc + len(token.text)] == token.text
    assert tokens[0].loc == 1


def test_unknown_symbol_raises():
    with pytest.raises(ScanError, match="unknown symbol: #"):
        Scanner("<a> = #").scan()


def test_unterminated_non_terminal_raises():
    with pytest.raises(ScanError, match="'>'"):
        Scanner("<a = <b>".replace("<b>", "")).scan()


def test_unterminated_string_raises():
    with pytest.raises(ScanError, match="symbol at the end of the line"):
        Scanner('<a> = "abc').scan()


def test_unknown_literal_raises():
    with pytest.raises(ScanError, match="unknown literal token '::'"):
        Scanner("<a> :: <b>").scan()


def test_error_message_points_into_line():
    with pytest.raises(ScanError) as info:
        Scanner("<a> = #").scan()
    message = str(info.value)
    assert "<a> = #" in message
    assert message.endswith("^\n")


def test_scan_is_repeatable():
    scanner = Scanner("<a> = <b> | <c>")
    first = scanner.scan()
    assert texts(first) == ["a", "=", "b", "|", "c"]
    assert kinds(first) == [
        TokenType.NON_TERMINAL,
        TokenType.EQUAL,
        TokenType.NON_TERMINAL,
        TokenType.CHOICE,
        TokenType.NON_TERMINAL,
    ]
    second = scanner.scan()
    assert texts(second) == ["a", "=", "b", "|", "c"]
    assert second == first


@pytest.mark.parametrize("token_type", sorted(set(LITERAL_TOKENS.values())))
def test_token_to_string_round_trip(token_type):
    literal = token_to_string(token_type)
    assert LITERAL_TOKENS[literal] == token_type
    assert kinds(Scanner(literal).scan()) == [token_type]


def test_token_to_string_unknown_type():
    with pytest.raises(ScanError, match="unknown tokenType"):
        token_to_string(TokenType.STRING)


def test_of_type():
    token = Token(text="x", type=TokenType.STRING)
    assert token.of_type(TokenType.STRING)
    assert not token.of_type(TokenType.DIGIT)
    assert not Token().of_type(TokenType.STRING)