"""Shared fixtures and utilities for LUT tests."""

import pytest
from typing import List

from lut import LUT, LutParser, LutProgram, LutToken, LutTokenizer, LutTokenType


@pytest.fixture
def lut():
    """Create a fresh LUT compiler for each test."""
    return LUT()


@pytest.fixture
def tokenizer():
    """Create a fresh tokenizer for each test."""
    return LutTokenizer()


class LutTestHelpers:
    """Helper utilities for LUT testing."""

    @staticmethod
    def token_pairs(tokens: List[LutToken]) -> List[tuple]:
        """Reduce tokens to (type, value) pairs for compact comparisons."""
        return [(token.type, token.value) for token in tokens]

    @staticmethod
    def parse(source: str) -> LutProgram:
        """Tokenize and parse source without the syntax checker."""
        return LutParser(LutTokenizer().tokenize(source)).get_ast()

    @staticmethod
    def parse_expression(source: str):
        """Parse source holding a single expression and return that expression."""
        program = LutTestHelpers.parse(source)
        assert len(program.body) == 1, f"Expected one statement, got {len(program.body)}"
        return program.body[0]

    @staticmethod
    def eof() -> tuple:
        """The (type, value) pair for the end-of-input token."""
        return (LutTokenType.EOF, "")


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return LutTestHelpers
