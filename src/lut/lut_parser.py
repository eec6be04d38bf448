"""Recursive-descent parser for LUT with detailed error messages."""

import logging
from typing import List

from lut.lut_ast import (
    LutASTNode, LutBinaryOp, LutChar, LutFunctionDeclaration, LutIdent, LutNumber, LutProgram, LutUnaryOp
)
from lut.lut_error import LutParseError
from lut.lut_token import LutToken, LutTokenType


ADDITIVE_OPERATORS = ('+', '-')
MULTIPLICATIVE_OPERATORS = ('*', '/', '%')


class LutParser:
    """
    Parses a token list into a LutProgram tree.

    Grammar, loosest binding first:

        program        := statement* EOF
        statement      := function | expression
        function       := FUNC IDENT '(' ')' '{' statement* '}'
        expression     := additive
        additive       := multiplicative (('+' | '-') multiplicative)*
        multiplicative := unary (('*' | '/' | '%') unary)*
        unary          := ('~' | '-') primary | primary
        primary        := CHAR | NUMBER | IDENT | '(' expression ')'

    Chains of same-precedence operators fold to the left, so `a-b-c` parses
    as `(a-b)-c`.

    Parentheses and function bodies may nest at most `max_depth` levels deep.
    """

    def __init__(self, tokens: List[LutToken], max_depth: int = 100):
        """
        Initialize parser with tokens.

        Args:
            tokens: List of tokens to parse, normally terminated by EOF
            max_depth: Maximum nesting depth of parentheses and function bodies
        """
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self._depth = 0
        self._ast: LutProgram | None = None
        self._logger = logging.getLogger("LutParser")

    def get_ast(self) -> LutProgram:
        """
        Parse the tokens into a program tree.

        The tree is built on the first call; later calls return the same tree.

        Returns:
            The program root

        Raises:
            LutParseError: If the tokens do not form a valid program
        """
        if self._ast is not None:
            self._logger.debug("returning cached AST")
            return self._ast

        body: List[LutASTNode] = []
        while not self._at_eof():
            body.append(self._parse_statement())

        self._ast = LutProgram(tuple(body))
        self._logger.debug("parsed %d top-level statements", len(body))
        return self._ast

    def _current(self) -> LutToken:
        """Return the current token, treating the end of the list as EOF."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]

        position = self.tokens[-1].position + self.tokens[-1].length if self.tokens else 0
        return LutToken(LutTokenType.EOF, "", position, 0)

    def _advance(self) -> LutToken:
        """Consume and return the current token."""
        token = self._current()
        if self.pos < len(self.tokens):
            self.pos += 1

        return token

    def _at_eof(self) -> bool:
        return self._current().type == LutTokenType.EOF

    def _at_operator(self, operators: tuple[str, ...]) -> bool:
        token = self._current()
        return token.type == LutTokenType.MATH_OPERATOR and token.value in operators

    def _enter_nesting(self, token: LutToken, construct: str) -> None:
        """
        Record one more level of nesting.

        Raises:
            LutParseError: If the nesting depth passes max_depth
        """
        self._depth += 1
        if self._depth > self.max_depth:
            raise LutParseError(
                message=f"Expression too deeply nested (max depth: {self.max_depth})",
                position=token.position,
                received=f"{construct} at nesting depth {self._depth}",
                suggestion="Reduce nesting depth or increase max_depth limit",
                example="Instead of ((((1+2)))), write (1+2)"
            )

    def _expect(self, token_type: LutTokenType, description: str) -> LutToken:
        """
        Consume a token of the given type.

        Raises:
            LutParseError: If the current token has a different type
        """
        token = self._advance()
        if token.type != token_type:
            raise LutParseError(
                message=f"Expected {description}",
                position=token.position,
                received=f"Found: {token.describe()}",
                expected=description,
                context="Function declarations need a name, an empty parameter list and a braced body",
                example="fn main() { 1+1 }"
            )

        return token

    def _parse_statement(self) -> LutASTNode:
        if self._current().type == LutTokenType.FUNCTION_DECLARATION:
            return self._parse_function_declaration()

        return self._parse_expression()

    def _parse_function_declaration(self) -> LutFunctionDeclaration:
        """Parse `fn name() { statements }`."""
        start = self._advance()
        self._enter_nesting(start, "Function declaration")

        name = self._expect(LutTokenType.IDENT, "identifier").value
        self._expect(LutTokenType.OPEN_PAREN, "'('")
        self._expect(LutTokenType.CLOSE_PAREN, "')'")
        self._expect(LutTokenType.OPEN_BRACE, "'{'")

        body: List[LutASTNode] = []
        while True:
            if self._at_eof():
                raise LutParseError(
                    message="Expected '}'",
                    position=self._current().position,
                    received="End of input",
                    expected="'}' to close the function body",
                    context=f"Body of function '{name}' starting at position {start.position} is not closed"
                )

            if self._current().type == LutTokenType.CLOSE_BRACE:
                self._advance()
                break

            body.append(self._parse_statement())

        self._depth -= 1
        return LutFunctionDeclaration(name, tuple(body))

    def _parse_expression(self) -> LutASTNode:
        return self._parse_additive()

    def _parse_additive(self) -> LutASTNode:
        left = self._parse_multiplicative()
        while self._at_operator(ADDITIVE_OPERATORS):
            op = self._advance().value
            left = LutBinaryOp(left, op, self._parse_multiplicative())

        return left

    def _parse_multiplicative(self) -> LutASTNode:
        left = self._parse_unary()
        while self._at_operator(MULTIPLICATIVE_OPERATORS):
            op = self._advance().value
            left = LutBinaryOp(left, op, self._parse_unary())

        return left

    def _parse_unary(self) -> LutASTNode:
        token = self._current()

        if token.type == LutTokenType.BINARY_OPERATOR and token.value == '~':
            self._advance()
            return LutUnaryOp('~', self._parse_primary())

        if token.type == LutTokenType.MATH_OPERATOR and token.value == '-':
            self._advance()
            return LutUnaryOp('-', self._parse_primary())

        return self._parse_primary()

    def _parse_primary(self) -> LutASTNode:
        token = self._current()

        if token.type == LutTokenType.CHAR:
            self._advance()
            return LutChar(token.value)

        if token.type == LutTokenType.NUMBER:
            self._advance()
            return LutNumber(token.value)

        if token.type == LutTokenType.IDENT:
            self._advance()
            return LutIdent(token.value)

        if token.type == LutTokenType.OPEN_PAREN:
            self._advance()
            self._enter_nesting(token, "Parenthesis")
            value = self._parse_expression()
            closing = self._advance()
            if closing.type != LutTokenType.CLOSE_PAREN:
                raise LutParseError(
                    message="Expected ')'",
                    position=closing.position,
                    received=f"Found: {closing.describe()}",
                    expected="')' to close the parenthesis",
                    context=f"Parenthesis opened at position {token.position} is not closed"
                )

            self._depth -= 1
            return value

        raise LutParseError(
            message=f"Unknown token: {token.describe()}",
            position=token.position,
            received=f"Token: {token.describe()}",
            expected="A number, character, identifier, '(' or a unary operator",
            context=f"{token.describe()} cannot start an expression"
        )
