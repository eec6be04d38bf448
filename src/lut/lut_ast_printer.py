"""
Visitor to print LUT AST structures for debugging
"""
from typing import List

from lut.lut_ast import (
    LutASTNode, LutASTVisitor, LutBinaryOp, LutChar, LutFunctionDeclaration, LutIdent, LutNumber,
    LutProgram, LutUnaryOp
)
from lut.lut_error import LutTranspileError


class LutASTPrinter(LutASTVisitor):
    """Visitor that renders the AST structure, one node per line."""
    def __init__(self) -> None:
        """Initialize the AST printer with zero indentation."""
        super().__init__()
        self.indent_level = 0
        self._lines: List[str] = []

    def format(self, node: LutASTNode) -> str:
        """
        Render a tree as indented text.

        Args:
            node: Root of the tree to render

        Returns:
            One line per node, children indented two spaces below their parent

        Raises:
            LutTranspileError: If the tree is too deep to walk
        """
        self.indent_level = 0
        self._lines = []
        try:
            self.visit(node)

        except RecursionError as e:
            raise LutTranspileError(message="Tree too deeply nested to print") from e

        return "\n".join(self._lines)

    def _emit(self, text: str) -> None:
        self._lines.append(f"{'  ' * self.indent_level}{text}")

    def _visit_children(self, children: tuple[LutASTNode, ...]) -> None:
        self.indent_level += 1
        for child in children:
            self.visit(child)

        self.indent_level -= 1

    def visit_LutProgram(self, node: LutProgram) -> None:  # pylint: disable=invalid-name
        self._emit("Program")
        self._visit_children(node.body)

    def visit_LutNumber(self, node: LutNumber) -> None:  # pylint: disable=invalid-name
        self._emit(f"Number {node.value}")

    def visit_LutChar(self, node: LutChar) -> None:  # pylint: disable=invalid-name
        self._emit(f"Char {node.value!r}")

    def visit_LutIdent(self, node: LutIdent) -> None:  # pylint: disable=invalid-name
        self._emit(f"Ident {node.name}")

    def visit_LutUnaryOp(self, node: LutUnaryOp) -> None:  # pylint: disable=invalid-name
        self._emit(f"UnaryOp {node.op}")
        self._visit_children((node.value,))

    def visit_LutBinaryOp(self, node: LutBinaryOp) -> None:  # pylint: disable=invalid-name
        self._emit(f"BinaryOp {node.op}")
        self._visit_children((node.left, node.right))

    def visit_LutFunctionDeclaration(self, node: LutFunctionDeclaration) -> None:  # pylint: disable=invalid-name
        self._emit(f"FunctionDeclaration {node.name}")
        self._visit_children(node.body)
