"""LUT abstract syntax tree nodes and the visitor base used to walk them.

All nodes are immutable.  Composite nodes hold their children in tuples, so a
tree built by the parser can be shared by later passes without being changed.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from lut.lut_error import LutTranspileError


@dataclass(frozen=True)
class LutASTNode:
    """Base class for all LUT AST nodes."""


@dataclass(frozen=True)
class LutProgram(LutASTNode):
    """Root of the tree: the top-level statements in source order."""
    body: Tuple[LutASTNode, ...] = ()


@dataclass(frozen=True)
class LutNumber(LutASTNode):
    """Numeric literal, kept as its raw source text."""
    value: str


@dataclass(frozen=True)
class LutChar(LutASTNode):
    """Character literal: one character or a backslash-escape pair."""
    value: str


@dataclass(frozen=True)
class LutIdent(LutASTNode):
    """Identifier reference."""
    name: str


@dataclass(frozen=True)
class LutUnaryOp(LutASTNode):
    """Prefix operator (`~` or `-`) applied to one operand."""
    op: str
    value: LutASTNode


@dataclass(frozen=True)
class LutBinaryOp(LutASTNode):
    """Infix arithmetic operator."""
    left: LutASTNode
    op: str
    right: LutASTNode


@dataclass(frozen=True)
class LutFunctionDeclaration(LutASTNode):
    """Function with no parameters and a statement body."""
    name: str
    body: Tuple[LutASTNode, ...] = ()


class LutASTVisitor:
    """
    Base visitor class for LUT AST traversal.

    Dispatches on the node's class name, so a subclass handles `LutBinaryOp`
    by defining `visit_LutBinaryOp`.
    """

    def visit(self, node: LutASTNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: Any) -> Any:
        """
        Called for nodes with no specific handler.

        Raises:
            LutTranspileError: Always, since every node type must be handled explicitly
        """
        raise LutTranspileError(
            message=f"Unsupported AST node: {node.__class__.__name__}",
            received=repr(node),
            expected="A LUT AST node"
        )
