"""Renders a LUT AST as target-language source text."""

import logging
from dataclasses import dataclass
from typing import List

from lut.lut_ast import (
    LutASTNode, LutASTVisitor, LutBinaryOp, LutChar, LutFunctionDeclaration, LutIdent, LutNumber,
    LutProgram, LutUnaryOp
)
from lut.lut_error import LutTranspileError


@dataclass
class TranspileOptions:
    """Options for controlling emitted code."""
    function_keyword: str = "fn"
    indent: str = "    "


class LutTranspiler(LutASTVisitor):
    """
    Structural pretty-printer from LUT trees to target text.

    Every node type has exactly one rendering rule.  Literals and names pass
    through unchanged and operators are fully parenthesized, so no precedence
    information is lost in the output.
    """

    def __init__(self, options: TranspileOptions | None = None) -> None:
        """
        Initialize the transpiler.

        Args:
            options: Emission options (defaults to TranspileOptions())
        """
        self.options = options if options is not None else TranspileOptions()
        self._logger = logging.getLogger("LutTranspiler")

    def transpile(self, node: LutASTNode) -> str:
        """
        Render a tree, normally a LutProgram, as target text.

        Args:
            node: The root node

        Returns:
            The emitted source text

        Raises:
            LutTranspileError: If the tree contains something that is not a LUT node,
                or is too deep to walk
        """
        try:
            result: str = self.visit(node)

        except RecursionError as e:
            raise LutTranspileError(
                message="Expression too deeply nested to emit",
                context="Each operator in a chain adds one level to the tree",
                suggestion="Split the expression into smaller parts"
            ) from e

        self._logger.debug("emitted %d characters", len(result))
        return result

    def visit_LutProgram(self, node: LutProgram) -> str:  # pylint: disable=invalid-name
        return "".join(f"{self.visit(statement)}\n" for statement in node.body)

    def visit_LutNumber(self, node: LutNumber) -> str:  # pylint: disable=invalid-name
        return node.value

    def visit_LutChar(self, node: LutChar) -> str:  # pylint: disable=invalid-name
        return node.value

    def visit_LutIdent(self, node: LutIdent) -> str:  # pylint: disable=invalid-name
        return node.name

    def visit_LutUnaryOp(self, node: LutUnaryOp) -> str:  # pylint: disable=invalid-name
        return f"({node.op}{self.visit(node.value)})"

    def visit_LutBinaryOp(self, node: LutBinaryOp) -> str:  # pylint: disable=invalid-name
        return f"({self.visit(node.left)}{node.op}{self.visit(node.right)})"

    def visit_LutFunctionDeclaration(self, node: LutFunctionDeclaration) -> str:  # pylint: disable=invalid-name
        """Render `fn name() {`, one indented line per body line, then `}`."""
        lines: List[str] = [f"{self.options.function_keyword} {node.name}() {{"]
        for statement in node.body:
            for line in self.visit(statement).split("\n"):
                lines.append(f"{self.options.indent}{line}" if line else line)

        lines.append("}")
        return "\n".join(lines)
