"""Tokenizer for LUT source code with detailed error messages."""

import logging
import re
import string
from typing import Dict, List, Tuple

from lut.lut_error import LutTokenError
from lut.lut_symbol_trie import LutSymbolTrie, UNKNOWN_SYMBOL
from lut.lut_token import LutToken, LutTokenType


# Spellings accepted for a function declaration: fun, func, function, fn.
FUNCTION_KEYWORD_PATTERN = re.compile(r"f(?:un(?:c(?:tion)?)?|n)")

# Resolved punctuation symbols and the token types they produce.  String and
# character quotes are handled separately because they start a sub-scan.
SYMBOL_TOKEN_TYPES: Dict[str, LutTokenType] = {
    "(": LutTokenType.OPEN_PAREN,
    ")": LutTokenType.CLOSE_PAREN,
    "{": LutTokenType.OPEN_BRACE,
    "}": LutTokenType.CLOSE_BRACE,
    ".": LutTokenType.DOT,
    "+": LutTokenType.MATH_OPERATOR,
    "-": LutTokenType.MATH_OPERATOR,
    "/": LutTokenType.MATH_OPERATOR,
    "*": LutTokenType.MATH_OPERATOR,
    "%": LutTokenType.MATH_OPERATOR,
    "~": LutTokenType.BINARY_OPERATOR,
    "^": LutTokenType.BINARY_OPERATOR,
    "&": LutTokenType.BINARY_OPERATOR,
    "|": LutTokenType.BINARY_OPERATOR,
    ">>": LutTokenType.BINARY_OPERATOR,
    "<<": LutTokenType.BINARY_OPERATOR,
}


class LutTokenizer:
    """Tokenizes LUT source code into tokens with detailed error messages."""

    def __init__(self, symbols: LutSymbolTrie | None = None):
        """
        Initialize the tokenizer.

        Args:
            symbols: Symbol trie used to resolve punctuation (defaults to the standard LUT symbols)
        """
        self.symbols = symbols if symbols is not None else LutSymbolTrie.default()
        self._logger = logging.getLogger("LutTokenizer")

    def tokenize(self, source: str) -> List[LutToken]:
        """
        Tokenize LUT source code with detailed error reporting.

        Args:
            source: The source text to tokenize

        Returns:
            List of tokens, always terminated by a single EOF token

        Raises:
            LutTokenError: If tokenization fails with detailed context
        """
        tokens: List[LutToken] = []
        i = 0

        while i < len(source):
            char = source[i]

            if char.isspace():
                i += 1
                continue

            if char.isdigit():
                number, length = self._read_number(source, i)
                tokens.append(LutToken(LutTokenType.NUMBER, number, i, length))
                i += length
                continue

            if char.isalpha() or char == '_':
                word, length = self._read_word(source, i)
                tokens.append(self._keyword(word, i, length))
                i += length
                continue

            if char in string.punctuation:
                token = self._read_symbol(source, i)
                tokens.append(token)
                i += token.length
                continue

            raise LutTokenError(
                message=f"Invalid character: {char}",
                position=i,
                received=f"Character: {char!r} (code {ord(char)})",
                expected="Whitespace, digits, letters, underscores, or LUT punctuation",
                context="Only ASCII punctuation is allowed outside string and character literals"
            )

        tokens.append(LutToken(LutTokenType.EOF, "", len(source), 0))
        self._logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
        return tokens

    def _keyword(self, word: str, position: int, length: int) -> LutToken:
        """Classify a word as a keyword marker or an identifier."""
        if FUNCTION_KEYWORD_PATTERN.fullmatch(word):
            return LutToken(LutTokenType.FUNCTION_DECLARATION, word, position, length)

        if word == "let":
            return LutToken(LutTokenType.VAR_DECLARATION, True, position, length)

        if word == "const":
            return LutToken(LutTokenType.VAR_DECLARATION, False, position, length)

        return LutToken(LutTokenType.IDENT, word, position, length)

    def _read_number(self, source: str, start: int) -> Tuple[str, int]:
        """
        Read a numeric literal, keeping its raw text.

        Returns:
            Tuple of (number_text, length_consumed)

        Raises:
            LutTokenError: If the literal contains a second decimal point
        """
        i = start
        seen_point = False

        while i < len(source) and (source[i].isdigit() or source[i] == '.'):
            if source[i] == '.':
                if seen_point:
                    raise LutTokenError(
                        message="Unexpected character: .",
                        position=i,
                        received=f"Number starting with: {source[start:i + 1]}",
                        expected="At most one decimal point in a number",
                        suggestion="Remove the extra decimal point"
                    )

                seen_point = True

            i += 1

        return source[start:i], i - start

    def _read_word(self, source: str, start: int) -> Tuple[str, int]:
        """Read an identifier or keyword."""
        i = start
        while i < len(source) and (source[i].isalnum() or source[i] == '_'):
            i += 1

        return source[start:i], i - start

    def _read_symbol(self, source: str, start: int) -> LutToken:
        """
        Resolve punctuation at `start` into a token.

        Raises:
            LutTokenError: If the symbol is unknown or a literal is malformed
        """
        symbol, end = self.symbols.resolve(source, start)

        if symbol == '"':
            value, length = self._read_string(source, start)
            return LutToken(LutTokenType.STRING, value, start, length)

        if symbol == "'":
            value, length = self._read_char(source, start)
            return LutToken(LutTokenType.CHAR, value, start, length)

        token_type = SYMBOL_TOKEN_TYPES.get(symbol)
        if symbol == UNKNOWN_SYMBOL or token_type is None:
            raise LutTokenError(
                message=f"Unknown symbol: {source[start]}",
                position=start,
                received=f"Symbol starting with: {source[start:start + 2]}",
                expected="One of ( ) { } . + - * / % ~ ^ & | >> << \" '"
            )

        return LutToken(token_type, symbol, start, end - start)

    def _read_string(self, source: str, start: int) -> Tuple[str, int]:
        """
        Read a string literal.  Escape sequences are kept exactly as written.

        Returns:
            Tuple of (string_body, length_consumed)

        Raises:
            LutTokenError: If the string is not terminated
        """
        i = start + 1
        result: List[str] = []

        while i < len(source):
            char = source[i]

            if char == '"':
                return ''.join(result), i + 1 - start

            if char == '\\':
                if i + 1 >= len(source):
                    break

                result.append(source[i:i + 2])
                i += 2
                continue

            result.append(char)
            i += 1

        raise LutTokenError(
            message="Unterminated string literal",
            position=start,
            received=f"String starting with: {source[start:start + 10]}...",
            expected="Closing quote \" at end of string",
            suggestion="Add closing quote \" at the end of the string"
        )

    def _read_char(self, source: str, start: int) -> Tuple[str, int]:
        """
        Read a character literal: one character or one escape pair, then a closing quote.

        Returns:
            Tuple of (char_text, length_consumed)

        Raises:
            LutTokenError: If the literal is empty or not closed
        """
        i = start + 1

        if i < len(source) and source[i] == "'":
            raise LutTokenError(
                message="Unexpected token: '",
                position=i,
                expected="A character or escape sequence",
                context="Character literals cannot be empty",
                example="Correct: 'a' or '\\n'"
            )

        if i < len(source) and source[i] == '\\' and i + 1 < len(source):
            value = source[i:i + 2]

        else:
            value = source[i:i + 1]

        i += len(value)
        if not value or i >= len(source) or source[i] != "'":
            raise LutTokenError(
                message="Expected \"'\"",
                position=i,
                received=f"Character literal starting with: {source[start:i + 1]}",
                expected="Closing quote ' after a single character",
                suggestion="Character literals hold exactly one character or escape pair",
                example="Correct: 'a' or '\\n'"
            )

        return value, i + 1 - start
