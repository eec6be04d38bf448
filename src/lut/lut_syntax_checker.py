"""Bracket balance checker run over the token stream before parsing."""

import logging
from dataclasses import dataclass
from typing import List

from lut.lut_error import LutSyntaxError
from lut.lut_token import LutToken, LutTokenType


OPENERS = {
    LutTokenType.OPEN_PAREN: LutTokenType.CLOSE_PAREN,
    LutTokenType.OPEN_BRACE: LutTokenType.CLOSE_BRACE,
}


@dataclass
class BracketStackFrame:
    """An opening bracket that has not been closed yet."""
    token: LutToken
    depth: int


class LutSyntaxChecker:
    """
    Rejects token streams with unbalanced brackets before the parser sees them.

    The parser reports a missing bracket at the first place it notices it; the
    checker reports every unclosed bracket at once, which is easier to act on.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger("LutSyntaxChecker")

    def check(self, tokens: List[LutToken]) -> List[LutToken]:
        """
        Validate the token stream.

        Args:
            tokens: Tokens produced by the tokenizer

        Returns:
            The same token list, unchanged

        Raises:
            LutSyntaxError: If the stream has no EOF marker or its brackets do not balance
        """
        if not tokens or tokens[-1].type != LutTokenType.EOF:
            raise LutSyntaxError(
                message="Token stream is not terminated",
                expected="EOF token at the end of the stream",
                context="Token streams must come from the tokenizer"
            )

        stack: List[BracketStackFrame] = []
        max_depth = 0

        for token in tokens:
            if token.type in OPENERS:
                stack.append(BracketStackFrame(token, len(stack) + 1))
                max_depth = max(max_depth, len(stack))
                continue

            if token.type not in (LutTokenType.CLOSE_PAREN, LutTokenType.CLOSE_BRACE):
                continue

            if not stack:
                raise LutSyntaxError(
                    message=f"Unmatched closing {token.describe()}",
                    position=token.position,
                    received=f"Found: {token.describe()}",
                    expected="A matching opening bracket earlier in the source",
                    suggestion=f"Remove the extra {token.describe()}"
                )

            frame = stack.pop()
            expected_close = OPENERS[frame.token.type]
            if token.type != expected_close:
                raise LutSyntaxError(
                    message=f"Mismatched closing {token.describe()}",
                    position=token.position,
                    received=f"Found: {token.describe()}",
                    expected=f"'{expected_close.value}' to close {frame.token.describe()} at position "
                        f"{frame.token.position}",
                    context="Brackets must close in the reverse order they were opened"
                )

        if stack:
            depth = len(stack)
            unclosed = "\n".join(
                f"  {frame.depth}. {frame.token.describe()} at position {frame.token.position}"
                for frame in stack
            )
            closing = " ".join(OPENERS[frame.token.type].value for frame in reversed(stack))
            bracket_word = "bracket" if depth == 1 else "brackets"
            raise LutSyntaxError(
                message=f"Unterminated input - missing {depth} closing {bracket_word}",
                position=stack[0].token.position,
                expected=f"Add \"{closing}\" to close all expressions",
                context=f"Reached end of input at depth {depth}.\n\nUnclosed brackets:\n{unclosed}",
                suggestion=f"Add {depth} closing {bracket_word}: {closing}"
            )

        self._logger.debug("checked %d tokens, maximum bracket depth %d", len(tokens), max_depth)
        return tokens
