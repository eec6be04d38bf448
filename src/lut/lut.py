"""Main LUT compiler class."""

import logging
from typing import List

from lut.lut_ast import LutASTNode, LutProgram
from lut.lut_parser import LutParser
from lut.lut_syntax_checker import LutSyntaxChecker
from lut.lut_token import LutToken
from lut.lut_tokenizer import LutTokenizer
from lut.lut_transpiler import LutTranspiler, TranspileOptions


class LUT:
    """
    LUT source-to-source compiler front end.

    Runs the pipeline text -> tokens -> tree -> text.  Every call builds its
    own tokenizer, parser and transpiler, so one instance can compile any
    number of independent sources.
    """

    def __init__(
        self,
        options: TranspileOptions | None = None,
        check_syntax: bool = True,
        max_depth: int = 100
    ):
        """
        Initialize the compiler.

        Args:
            options: Options for the emitted code
            check_syntax: Run the bracket balance checker before parsing
            max_depth: Maximum nesting depth of parentheses and function bodies
        """
        self.options = options if options is not None else TranspileOptions()
        self.check_syntax = check_syntax
        self.max_depth = max_depth
        self._logger = logging.getLogger("LUT")

    def tokenize(self, source: str) -> List[LutToken]:
        """
        Tokenize LUT source.

        Raises:
            LutTokenError: If tokenization fails
        """
        return LutTokenizer().tokenize(source)

    def parse(self, source: str) -> LutProgram:
        """
        Tokenize and parse LUT source into a program tree.

        Raises:
            LutTokenError: If tokenization fails
            LutSyntaxError: If syntax checking is enabled and brackets do not balance
            LutParseError: If parsing fails
        """
        tokens = self.tokenize(source)
        if self.check_syntax:
            LutSyntaxChecker().check(tokens)

        return LutParser(tokens, max_depth=self.max_depth).get_ast()

    def transpile(self, ast: LutASTNode) -> str:
        """
        Render a program tree as target text.

        Raises:
            LutTranspileError: If the tree contains non-LUT nodes
        """
        return LutTranspiler(self.options).transpile(ast)

    def compile(self, source: str) -> str:
        """
        Compile LUT source text to target text.

        Args:
            source: LUT source code

        Returns:
            The emitted target code

        Raises:
            LutError: If any stage fails; no partial output is produced
        """
        self._logger.debug("compiling %d characters", len(source))
        return self.transpile(self.parse(source))
