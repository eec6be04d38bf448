"""Token types and token representation for LUT source code."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LutTokenType(Enum):
    """Token types for LUT source code."""
    MATH_OPERATOR = "Math"
    BINARY_OPERATOR = "Binary"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    IDENT = "Ident"
    VAR_DECLARATION = "Var"
    FUNCTION_DECLARATION = "Function"
    STRING = "String"
    CHAR = "Char"
    NUMBER = "Number"
    DOT = "."
    EOF = "EOF"


@dataclass(frozen=True)
class LutToken:
    """
    Represents a single token in LUT source code.

    Equality only considers the token type and value; the source location is
    carried along for error reporting.
    """
    type: LutTokenType
    value: Any
    position: int = field(default=0, compare=False)
    length: int = field(default=1, compare=False)

    @property
    def is_mutable(self) -> bool:
        """
        True for a `let` declaration marker, False for `const`.

        The parser does not read declarations; this is for consumers of the
        token stream.
        """
        return self.type == LutTokenType.VAR_DECLARATION and bool(self.value)

    def describe(self) -> str:
        """Describe the token for error messages."""
        if self.type == LutTokenType.EOF:
            return "end of input"

        if self.type in (LutTokenType.STRING, LutTokenType.CHAR, LutTokenType.NUMBER, LutTokenType.IDENT):
            return f"{self.type.value} {self.value!r}"

        if self.type == LutTokenType.VAR_DECLARATION:
            return "'let'" if self.value else "'const'"

        return f"'{self.value}'"

    def __repr__(self) -> str:
        return f"LutToken({self.type.name}, {self.value!r}, pos={self.position})"
