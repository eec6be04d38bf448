"""Prefix tree used by the tokenizer to resolve punctuation symbols.

Each node is either a leaf holding the resolved symbol text, or a branch whose
children are keyed by the next character.  A branch may carry a default
symbol, used when none of its children match the following character.  This
lets single-character symbols like `>` extend into `>>` without any
per-operator lookahead code in the tokenizer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union


# Returned when a symbol cannot be resolved.
UNKNOWN_SYMBOL = "unknown"


@dataclass(frozen=True)
class LutSymbolLeaf:
    """A terminal trie node."""
    text: str


@dataclass(frozen=True)
class LutSymbolBranch:
    """An interior trie node, with an optional fallback symbol."""
    children: Dict[str, 'LutSymbolNode'] = field(default_factory=dict)
    default: Optional[str] = None


LutSymbolNode = Union[LutSymbolLeaf, LutSymbolBranch]


DEFAULT_SYMBOLS: Dict[str, Any] = {
    # Grouping and access
    "(": "(",
    ")": ")",
    "{": "{",
    "}": "}",
    ".": ".",

    # Math
    "+": "+",
    "-": "-",
    "/": "/",
    "*": "*",
    "%": "%",

    # Binary
    "~": "~",
    "^": "^",
    "&": "&",
    "|": "|",
    ">": {
        ">": ">>",
    },
    "<": {
        "<": "<<",
    },

    # Literals
    "\"": "\"",
    "'": "'",
}


class LutSymbolTrie:
    """Resolves the longest known symbol starting at a position in the source."""

    def __init__(self, root: LutSymbolBranch):
        """
        Initialize the trie.

        Args:
            root: Root branch of the trie
        """
        self.root = root

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'LutSymbolTrie':
        """
        Build a trie from a nested mapping.

        String values become leaves, nested mappings become branches, and a
        `"default"` key inside a nested mapping gives that branch its fallback
        symbol.  The root has no fallback, since matching nothing there means
        the character is not a symbol at all.

        Args:
            mapping: Nested mapping of characters to symbols

        Returns:
            The constructed trie

        Raises:
            ValueError: If the mapping contains keys or values that cannot form a trie,
                or gives the root a default symbol
        """
        if "default" in mapping:
            raise ValueError("The root of a symbol trie cannot have a default symbol")

        return cls(cls._build_branch(mapping))

    @classmethod
    def default(cls) -> 'LutSymbolTrie':
        """Build the trie for the standard LUT symbol set."""
        return cls.from_mapping(DEFAULT_SYMBOLS)

    @classmethod
    def _build_branch(cls, mapping: Mapping[str, Any]) -> LutSymbolBranch:
        children: Dict[str, LutSymbolNode] = {}
        default: Optional[str] = None

        for key, value in mapping.items():
            if key == "default":
                if not isinstance(value, str):
                    raise ValueError(f"Default symbol must be a string, got {type(value).__name__}")

                default = value
                continue

            if len(key) != 1:
                raise ValueError(f"Trie keys must be single characters, got {key!r}")

            if isinstance(value, str):
                children[key] = LutSymbolLeaf(value)

            elif isinstance(value, Mapping):
                children[key] = cls._build_branch(value)

            else:
                raise ValueError(f"Unsupported trie value for {key!r}: {type(value).__name__}")

        return LutSymbolBranch(children, default)

    def resolve(self, source: str, start: int) -> Tuple[str, int]:
        """
        Resolve the symbol starting at `start`.

        Args:
            source: The source text
            start: Index of the first character of the symbol

        Returns:
            Tuple of (symbol, end) where `end` is the index just past the
            symbol.  If nothing matches, the symbol is UNKNOWN_SYMBOL and
            `end` equals `start`.
        """
        result = self._walk(self.root, source, start)
        if result is None:
            return UNKNOWN_SYMBOL, start

        return result

    def _walk(self, branch: LutSymbolBranch, source: str, index: int) -> Tuple[str, int] | None:
        """Walk one level down the trie, rolling back to defaults when extension fails."""
        if index >= len(source):
            return None

        child = branch.children.get(source[index])
        if child is None:
            return None

        if isinstance(child, LutSymbolLeaf):
            return child.text, index + 1

        result = self._walk(child, source, index + 1)
        if result is not None:
            return result

        if child.default is not None:
            return child.default, index + 1

        return None
