"""
Syntax tree access for C# sources parsed with tree-sitter.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from tree_sitter import Language, Node, Parser, Tree
import tree_sitter_c_sharp    # <- comes from pip install tree-sitter-c-sharp

logger = logging.getLogger(__name__)

METHOD_DECLARATION = "method_declaration"
NAMESPACE_DECLARATION = "namespace_declaration"
FILE_SCOPED_NAMESPACE_DECLARATION = "file_scoped_namespace_declaration"
DECLARATION_LIST = "declaration_list"

TYPE_DECLARATIONS = frozenset({
    "class_declaration",
    "struct_declaration",
    "record_declaration",
    "record_struct_declaration",  # older grammar releases
})

IDENTIFIER_KINDS = ("identifier",)
NAMESPACE_NAME_KINDS = ("qualified_name", "identifier")


class ParserUnavailableError(RuntimeError):
    """Raised when no C# syntax tree can be produced for a file."""


@dataclass(frozen=True)
class CursorPosition:
    """
    A position in tree-sitter coordinates.

    Both ``row`` and ``column`` are 0-based and the column counts bytes,
    matching ``Node.start_point`` / ``Node.end_point``.
    """
    row: int
    column: int

    @classmethod
    def from_editor(cls, line: int, column: int, source: Optional[Union[str, bytes]] = None) -> "CursorPosition":
        """
        Convert an editor position (1-based line, 1-based character column).

        Args:
            line: 1-based line number
            column: 1-based character column
            source: File contents, used to turn the character column into a
                byte column on lines with multi-byte characters

        Returns:
            The equivalent tree-sitter position
        """
        if line < 1 or column < 1:
            raise ValueError(f"Editor positions are 1-based, got line={line} column={column}")
        row, char_col = line - 1, column - 1
        if source is None:
            return cls(row, char_col)

        text = source.decode("utf-8", errors="replace") if isinstance(source, bytes) else source
        lines = text.splitlines()
        if row >= len(lines):
            return cls(row, char_col)
        prefix = lines[row][:char_col]
        return cls(row, len(prefix.encode("utf-8")) + max(0, char_col - len(lines[row])))


def root_node_of(tree: Union[Tree, Node, None]) -> Node:
    """
    Return the root node of a parsed tree.

    Args:
        tree: A ``Tree``, an already extracted root ``Node`` or None

    Raises:
        ParserUnavailableError: If no tree was supplied
    """
    if tree is None:
        raise ParserUnavailableError("No tree-sitter parser for C# installed")
    return getattr(tree, "root_node", tree)


def node_contains(node: Node, cursor: CursorPosition) -> bool:
    """Check whether ``cursor`` lies inside the node's range (both ends inclusive)."""
    start_row, start_col = node.start_point[0], node.start_point[1]
    end_row, end_col = node.end_point[0], node.end_point[1]
    if cursor.row < start_row or cursor.row > end_row:
        return False
    if cursor.row == start_row and cursor.column < start_col:
        return False
    if cursor.row == end_row and cursor.column > end_col:
        return False
    return True


def find_name_child(node: Node, kinds: Iterable[str] = IDENTIFIER_KINDS) -> Optional[Node]:
    """
    Find the name-bearing direct child of a declaration.

    The grammar's ``name`` field is used when available, so a method whose
    return type is itself an identifier still resolves to its own name.
    Otherwise the first direct child of one of ``kinds`` is returned.
    """
    kinds = tuple(kinds)
    by_field = getattr(node, "child_by_field_name", None)
    if by_field is not None:
        named = by_field("name")
        if named is not None and named.type in kinds:
            return named
    for child in node.children:
        if child.type in kinds:
            return child
    return None


def node_text(node: Node, source: Optional[bytes] = None) -> str:
    """
    Return the literal source text spanned by a node.

    Args:
        node: Node to extract
        source: Bytes the tree was parsed from; ``node.text`` is used when omitted
    """
    if source is not None:
        raw = source[node.start_byte:node.end_byte]
    else:
        raw = node.text or b""
    return raw.decode("utf-8", errors="replace")


def declaration_name(node: Node, kinds: Iterable[str] = IDENTIFIER_KINDS, source: Optional[bytes] = None) -> Optional[str]:
    """Name of a declaration, or None when it is missing or empty (error recovery)."""
    name_node = find_name_child(node, kinds)
    if name_node is None:
        return None
    name = node_text(name_node, source).strip()
    return name or None


class CSharpParser:
    """Parses C# sources into tree-sitter syntax trees."""

    def __init__(self):
        """Initialize the parser with the tree-sitter C# grammar."""
        try:
            self.csharp_lang = Language(tree_sitter_c_sharp.language())
            self.parser = Parser(self.csharp_lang)
        except (TypeError, ValueError) as e:
            # Grammar built against an incompatible tree-sitter ABI
            raise ParserUnavailableError(f"No tree-sitter parser for C# installed: {e}") from e

    def parse_source(self, source: Union[str, bytes]) -> Tree:
        """Parse C# source text."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return self.parser.parse(source)

    def parse_file(self, file_path: Path) -> Tree:
        """
        Parse a C# file.

        Args:
            file_path: Path to the ``.cs`` file

        Returns:
            The parsed tree
        """
        logger.debug(f"Parsing {file_path}")
        return self.parse_source(Path(file_path).read_bytes())


def get_parser() -> CSharpParser:
    """Return a ready C# parser, raising ParserUnavailableError otherwise."""
    return CSharpParser()
