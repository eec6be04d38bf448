"""LUT compiler front end: tokenizer, parser and transpiler."""

# Main API
from lut.lut import LUT

# Exceptions (for error handling)
from lut.lut_error import LutError, LutTokenError, LutParseError, LutSyntaxError, LutTranspileError

# AST nodes
from lut.lut_ast import (
    LutASTNode, LutASTVisitor, LutProgram, LutNumber, LutChar, LutIdent, LutUnaryOp, LutBinaryOp,
    LutFunctionDeclaration
)

# Lower-level components (for advanced usage)
from lut.lut_token import LutToken, LutTokenType
from lut.lut_symbol_trie import LutSymbolTrie, LutSymbolLeaf, LutSymbolBranch, UNKNOWN_SYMBOL
from lut.lut_tokenizer import LutTokenizer
from lut.lut_syntax_checker import LutSyntaxChecker
from lut.lut_parser import LutParser
from lut.lut_transpiler import LutTranspiler, TranspileOptions
from lut.lut_ast_printer import LutASTPrinter


__all__ = [
    # Main API
    "LUT",

    # Exceptions
    "LutError", "LutTokenError", "LutParseError", "LutSyntaxError", "LutTranspileError",

    # AST nodes
    "LutASTNode", "LutASTVisitor", "LutProgram", "LutNumber", "LutChar", "LutIdent", "LutUnaryOp",
    "LutBinaryOp", "LutFunctionDeclaration",

    # Lower-level components
    "LutToken", "LutTokenType", "LutSymbolTrie", "LutSymbolLeaf", "LutSymbolBranch", "UNKNOWN_SYMBOL",
    "LutTokenizer", "LutSyntaxChecker", "LutParser", "LutTranspiler", "TranspileOptions", "LutASTPrinter"
]
