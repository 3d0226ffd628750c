"""
Resolve the test method under the editor cursor to its fully-qualified name.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from tree_sitter import Node, Tree

from .qualified_name import QualifiedName
from .syntax_tree import (
    CursorPosition,
    FILE_SCOPED_NAMESPACE_DECLARATION,
    METHOD_DECLARATION,
    NAMESPACE_DECLARATION,
    NAMESPACE_NAME_KINDS,
    TYPE_DECLARATIONS,
    declaration_name,
    node_contains,
    root_node_of,
)

logger = logging.getLogger(__name__)


class NotFoundReason(Enum):
    NOT_IN_METHOD = "Cursor is not inside a method."
    UNNAMED_METHOD = "Method found, but could not get name."


@dataclass(frozen=True)
class NotFound:
    """An expected lookup miss; reported to the user as a warning."""
    reason: NotFoundReason

    @property
    def message(self) -> str:
        return self.reason.value

    def __bool__(self) -> bool:
        return False


def find_innermost_method(root: Node, cursor: CursorPosition) -> Optional[Node]:
    """
    Find the most deeply nested method declaration containing the cursor.

    Every node is visited in depth-first pre-order; the deepest containing
    method wins and, at equal depth, the first one visited is kept.
    """
    best: Optional[Tuple[int, Node]] = None
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.type == METHOD_DECLARATION and node_contains(node, cursor):
            if best is None or depth > best[0]:
                best = (depth, node)
        # Reversed so that children pop in source order
        for child in reversed(node.children):
            stack.append((child, depth + 1))
    return best[1] if best else None


def file_scoped_namespace_name(root: Node, source: Optional[bytes] = None) -> Optional[str]:
    """Name of the first file-scoped namespace among the root's direct children."""
    for child in root.children:
        if child.type == FILE_SCOPED_NAMESPACE_DECLARATION:
            return declaration_name(child, NAMESPACE_NAME_KINDS, source)
    return None


def qualify_method(method: Node, root: Node, source: Optional[bytes] = None) -> Union[QualifiedName, NotFound]:
    """
    Build the qualified name of a method from its containing declarations.

    Args:
        method: A ``method_declaration`` node
        root: Root of the tree the method belongs to
        source: Bytes the tree was parsed from, if node text is unavailable

    Returns:
        ``Namespace.Outer.Inner.Method`` or NotFound when the method has no name
    """
    method_name = declaration_name(method, source=source)
    if method_name is None:
        return NotFound(NotFoundReason.UNNAMED_METHOD)

    name = QualifiedName((method_name,))
    namespace_found = False
    parent = method.parent
    while parent is not None:
        kind = parent.type
        if kind in TYPE_DECLARATIONS:
            type_name = declaration_name(parent, source=source)
            if type_name:
                name = name.prepend(type_name)
        elif kind in (NAMESPACE_DECLARATION, FILE_SCOPED_NAMESPACE_DECLARATION):
            namespace = declaration_name(parent, NAMESPACE_NAME_KINDS, source)
            if namespace:
                name = name.prepend(namespace)
                namespace_found = True
        parent = parent.parent

    if not namespace_found:
        namespace = file_scoped_namespace_name(root, source)
        if namespace:
            logger.debug(f"Using file-scoped namespace {namespace}")
            name = name.prepend(namespace)

    return name


def locate_enclosing_method(
    tree: Union[Tree, Node, None],
    cursor: CursorPosition,
    source: Optional[bytes] = None
) -> Union[str, NotFound]:
    """
    Resolve the method under the cursor to a fully-qualified name.

    Args:
        tree: Parsed C# syntax tree (or its root node)
        cursor: 0-based position in the tree's coordinates
        source: Bytes the tree was parsed from, if node text is unavailable

    Returns:
        The dotted name, or NotFound when the cursor is outside every method
        or the enclosing method has no name

    Raises:
        ParserUnavailableError: If ``tree`` is None
    """
    root = root_node_of(tree)
    method = find_innermost_method(root, cursor)
    if method is None:
        return NotFound(NotFoundReason.NOT_IN_METHOD)

    result = qualify_method(method, root, source)
    if isinstance(result, NotFound):
        return result
    return str(result)
