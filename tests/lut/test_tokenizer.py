"""Tests for the LUT tokenizer."""

import pytest

from lut import LutTokenError, LutToken, LutTokenType, LutTokenizer


class TestLutTokenizerBasics:
    """Test whitespace, numbers and words."""

    @pytest.mark.parametrize("source", ["", " ", "\t", "\n", "\r\n", "  \t\n\r  "])
    def test_whitespace_only_yields_eof(self, tokenizer, helpers, source):
        """Whitespace-only input produces exactly one EOF token."""
        tokens = tokenizer.tokenize(source)
        assert helpers.token_pairs(tokens) == [helpers.eof()]

    @pytest.mark.parametrize("number", ["0", "7", "42", "123456789", "3.14", "0.5", "10.", "007"])
    def test_number_keeps_raw_text(self, tokenizer, helpers, number):
        """A numeric literal is one NUMBER token holding the exact source text."""
        tokens = tokenizer.tokenize(number)
        assert helpers.token_pairs(tokens) == [(LutTokenType.NUMBER, number), helpers.eof()]

    def test_number_surrounded_by_whitespace(self, tokenizer, helpers):
        """Whitespace around a number is skipped."""
        tokens = tokenizer.tokenize("  42\n")
        assert helpers.token_pairs(tokens) == [(LutTokenType.NUMBER, "42"), helpers.eof()]

    def test_second_decimal_point_is_error(self, tokenizer):
        """A second '.' inside a number is a lexical error."""
        with pytest.raises(LutTokenError, match="Unexpected character"):
            tokenizer.tokenize("1.2.3")

    def test_number_followed_by_word(self, tokenizer, helpers):
        """A number ends where the digits end."""
        tokens = tokenizer.tokenize("12abc")
        assert helpers.token_pairs(tokens) == [
            (LutTokenType.NUMBER, "12"),
            (LutTokenType.IDENT, "abc"),
            helpers.eof(),
        ]

    @pytest.mark.parametrize("name", ["x", "foo", "_private", "snake_case_1", "CamelCase", "a1b2"])
    def test_identifiers(self, tokenizer, helpers, name):
        """Letter or underscore initiated words that are not keywords are identifiers."""
        tokens = tokenizer.tokenize(name)
        assert helpers.token_pairs(tokens) == [(LutTokenType.IDENT, name), helpers.eof()]

    def test_token_positions(self, tokenizer):
        """Tokens record where they start and how long they are."""
        tokens = tokenizer.tokenize("ab  12")
        assert (tokens[0].position, tokens[0].length) == (0, 2)
        assert (tokens[1].position, tokens[1].length) == (4, 2)
        assert tokens[2].position == 6

    def test_token_equality_ignores_position(self):
        """Tokens compare by type and value only."""
        assert LutToken(LutTokenType.NUMBER, "1", 0) == LutToken(LutTokenType.NUMBER, "1", 5)
        assert LutToken(LutTokenType.NUMBER, "1") != LutToken(LutTokenType.IDENT, "1")


class TestLutTokenizerKeywords:
    """Test keyword classification."""

    @pytest.mark.parametrize("keyword", ["fun", "func", "function", "fn"])
    def test_function_keywords(self, tokenizer, keyword):
        """All function spellings produce a function declaration marker."""
        tokens = tokenizer.tokenize(keyword)
        assert tokens[0].type == LutTokenType.FUNCTION_DECLARATION

    @pytest.mark.parametrize("word", ["f", "funky", "refund", "fnord", "functions", "Fn"])
    def test_words_containing_function_keywords_are_identifiers(self, tokenizer, word):
        """Only whole-word matches are function keywords."""
        tokens = tokenizer.tokenize(word)
        assert tokens[0].type == LutTokenType.IDENT
        assert tokens[0].value == word

    def test_let_is_mutable_declaration(self, tokenizer):
        """'let' declares a mutable variable."""
        token = tokenizer.tokenize("let")[0]
        assert token.type == LutTokenType.VAR_DECLARATION
        assert token.is_mutable

    def test_const_is_constant_declaration(self, tokenizer):
        """'const' declares a constant."""
        token = tokenizer.tokenize("const")[0]
        assert token.type == LutTokenType.VAR_DECLARATION
        assert not token.is_mutable


class TestLutTokenizerSymbols:
    """Test punctuation resolution."""

    def test_single_character_symbols(self, tokenizer, helpers):
        """Every single-character symbol maps to its token type."""
        tokens = tokenizer.tokenize("( ) { } . + - * / % ~ ^ & |")
        assert helpers.token_pairs(tokens) == [
            (LutTokenType.OPEN_PAREN, "("),
            (LutTokenType.CLOSE_PAREN, ")"),
            (LutTokenType.OPEN_BRACE, "{"),
            (LutTokenType.CLOSE_BRACE, "}"),
            (LutTokenType.DOT, "."),
            (LutTokenType.MATH_OPERATOR, "+"),
            (LutTokenType.MATH_OPERATOR, "-"),
            (LutTokenType.MATH_OPERATOR, "*"),
            (LutTokenType.MATH_OPERATOR, "/"),
            (LutTokenType.MATH_OPERATOR, "%"),
            (LutTokenType.BINARY_OPERATOR, "~"),
            (LutTokenType.BINARY_OPERATOR, "^"),
            (LutTokenType.BINARY_OPERATOR, "&"),
            (LutTokenType.BINARY_OPERATOR, "|"),
            helpers.eof(),
        ]

    @pytest.mark.parametrize("symbol", [">>", "<<"])
    def test_shift_operators_are_single_tokens(self, tokenizer, helpers, symbol):
        """'>>' and '<<' resolve to one binary operator, not two characters."""
        tokens = tokenizer.tokenize(symbol)
        assert helpers.token_pairs(tokens) == [(LutTokenType.BINARY_OPERATOR, symbol), helpers.eof()]
        assert tokens[0].length == 2

    def test_shift_between_operands(self, tokenizer, helpers):
        """Shift operators are found between operands without spaces."""
        tokens = tokenizer.tokenize("1>>2")
        assert helpers.token_pairs(tokens) == [
            (LutTokenType.NUMBER, "1"),
            (LutTokenType.BINARY_OPERATOR, ">>"),
            (LutTokenType.NUMBER, "2"),
            helpers.eof(),
        ]

    def test_three_angle_brackets(self, tokenizer):
        """'>>>' is a shift followed by an unresolvable '>'."""
        with pytest.raises(LutTokenError) as exc_info:
            tokenizer.tokenize(">>>")

        assert exc_info.value.position == 2

    @pytest.mark.parametrize("source", [">", "<", "> >", "1 > 2", "<-"])
    def test_lone_angle_bracket_is_error(self, tokenizer, source):
        """A lone '>' or '<' has no fallback symbol and is rejected."""
        with pytest.raises(LutTokenError, match="Unknown symbol"):
            tokenizer.tokenize(source)

    @pytest.mark.parametrize("char", ["@", "#", "$", ";", ",", "=", "!", "?", "[", "]", ":"])
    def test_unknown_ascii_punctuation_is_error(self, tokenizer, char):
        """ASCII punctuation outside the symbol table is rejected."""
        with pytest.raises(LutTokenError, match="Unknown symbol"):
            tokenizer.tokenize(f"1 {char} 2")

    @pytest.mark.parametrize("char", ["€", "→", "\x00", "\x07"])
    def test_non_ascii_symbols_are_errors(self, tokenizer, char):
        """Characters outside every known class are rejected, not skipped."""
        with pytest.raises(LutTokenError, match="Invalid character") as exc_info:
            tokenizer.tokenize(f"1 {char}")

        assert exc_info.value.position == 2


class TestLutTokenizerLiterals:
    """Test string and character literals."""

    def test_simple_string(self, tokenizer, helpers):
        """A string literal holds the text between its quotes."""
        tokens = tokenizer.tokenize('"hello world"')
        assert helpers.token_pairs(tokens) == [(LutTokenType.STRING, "hello world"), helpers.eof()]
        assert tokens[0].length == 13

    def test_empty_string(self, tokenizer, helpers):
        """An empty string literal is allowed."""
        tokens = tokenizer.tokenize('""')
        assert helpers.token_pairs(tokens) == [(LutTokenType.STRING, ""), helpers.eof()]

    def test_escaped_quote_does_not_end_string(self, tokenizer, helpers):
        """A backslash-quote stays inside the string, backslash included."""
        tokens = tokenizer.tokenize('"a\\"b"')
        assert helpers.token_pairs(tokens) == [(LutTokenType.STRING, 'a\\"b'), helpers.eof()]

    def test_escapes_are_not_decoded(self, tokenizer):
        """Escape sequences are kept exactly as written."""
        token = tokenizer.tokenize('"line\\nnext\\\\"')[0]
        assert token.value == "line\\nnext\\\\"

    def test_string_followed_by_tokens(self, tokenizer, helpers):
        """Scanning continues after the closing quote."""
        tokens = tokenizer.tokenize('"x" 1')
        assert helpers.token_pairs(tokens) == [
            (LutTokenType.STRING, "x"),
            (LutTokenType.NUMBER, "1"),
            helpers.eof(),
        ]

    @pytest.mark.parametrize("source", ['"abc', '"', '"abc\\"', '"abc\\'])
    def test_unterminated_string_is_error(self, tokenizer, source):
        """Reaching end of input inside a string is a lexical error."""
        with pytest.raises(LutTokenError, match="Unterminated string literal"):
            tokenizer.tokenize(source)

    def test_simple_char(self, tokenizer, helpers):
        """A character literal holds one character."""
        tokens = tokenizer.tokenize("'a'")
        assert helpers.token_pairs(tokens) == [(LutTokenType.CHAR, "a"), helpers.eof()]
        assert tokens[0].length == 3

    @pytest.mark.parametrize("source, expected", [("'\\n'", "\\n"), ("'\\''", "\\'"), ("'\\\\'", "\\\\")])
    def test_escaped_char(self, tokenizer, source, expected):
        """A backslash-escape pair is kept as two characters."""
        token = tokenizer.tokenize(source)[0]
        assert token.type == LutTokenType.CHAR
        assert token.value == expected

    def test_empty_char_is_error(self, tokenizer):
        """A quote directly after the opening quote is rejected."""
        with pytest.raises(LutTokenError, match="Unexpected token") as exc_info:
            tokenizer.tokenize("''")

        assert exc_info.value.example == "Correct: 'a' or '\\n'"

    @pytest.mark.parametrize("source", ["'ab'", "'a", "'", "'\\", "'\\n"])
    def test_unclosed_char_is_error(self, tokenizer, source):
        """A character literal must close right after one character or escape."""
        with pytest.raises(LutTokenError, match="Expected \"'\""):
            tokenizer.tokenize(source)


class TestLutTokenizerPrograms:
    """Test tokenizing whole programs."""

    def test_function_declaration(self, tokenizer, helpers):
        """A full function declaration tokenizes in order."""
        tokens = tokenizer.tokenize("func main() { 1+1 }")
        assert helpers.token_pairs(tokens) == [
            (LutTokenType.FUNCTION_DECLARATION, "func"),
            (LutTokenType.IDENT, "main"),
            (LutTokenType.OPEN_PAREN, "("),
            (LutTokenType.CLOSE_PAREN, ")"),
            (LutTokenType.OPEN_BRACE, "{"),
            (LutTokenType.NUMBER, "1"),
            (LutTokenType.MATH_OPERATOR, "+"),
            (LutTokenType.NUMBER, "1"),
            (LutTokenType.CLOSE_BRACE, "}"),
            helpers.eof(),
        ]

    def test_exactly_one_eof(self, tokenizer):
        """The token list ends with a single EOF token."""
        tokens = tokenizer.tokenize("a b c")
        assert [t.type for t in tokens].count(LutTokenType.EOF) == 1
        assert tokens[-1].type == LutTokenType.EOF

    def test_tokenizer_is_reusable(self):
        """One tokenizer can tokenize several sources independently."""
        tokenizer = LutTokenizer()
        first = tokenizer.tokenize("1")
        second = tokenizer.tokenize("2")
        assert first[0].value == "1"
        assert second[0].value == "2"
        assert len(first) == len(second) == 2
