"""
List the top-level types of a C# file as fully-qualified names.
"""

import logging
from typing import Iterator, List, Optional, Union

from tree_sitter import Node, Tree

from .qualified_name import QualifiedName
from .syntax_tree import (
    DECLARATION_LIST,
    FILE_SCOPED_NAMESPACE_DECLARATION,
    NAMESPACE_DECLARATION,
    NAMESPACE_NAME_KINDS,
    TYPE_DECLARATIONS,
    declaration_name,
    root_node_of,
)

logger = logging.getLogger(__name__)


def _qualified_type_name(node: Node, namespace: Optional[str], source: Optional[bytes]) -> Optional[QualifiedName]:
    if node.type not in TYPE_DECLARATIONS:
        return None
    type_name = declaration_name(node, source=source)
    if type_name is None:
        return None
    name = QualifiedName((type_name,))
    return name.prepend(namespace) if namespace else name


def _namespace_members(namespace_node: Node) -> Iterator[Node]:
    """Direct declarations of a block-scoped namespace."""
    for child in namespace_node.children:
        if child.type == DECLARATION_LIST:
            yield from child.children


def enumerate_top_level_types(tree: Union[Tree, Node, None], source: Optional[bytes] = None) -> List[str]:
    """
    Collect the qualified names of every top-level class, struct and record.

    Only the root's direct children are inspected. A file-scoped namespace
    qualifies every type after it; a block-scoped namespace qualifies the
    types declared directly inside its body. Other declarations inside a
    namespace (interfaces, enums, nested namespaces) are skipped.

    Args:
        tree: Parsed C# syntax tree (or its root node)
        source: Bytes the tree was parsed from, if node text is unavailable

    Returns:
        Qualified type names in source order, possibly empty

    Raises:
        ParserUnavailableError: If ``tree`` is None
    """
    root = root_node_of(tree)
    file_scoped_namespace: Optional[str] = None
    types: List[str] = []

    for child in root.children:
        kind = child.type
        if kind == FILE_SCOPED_NAMESPACE_DECLARATION and file_scoped_namespace is None:
            file_scoped_namespace = declaration_name(child, NAMESPACE_NAME_KINDS, source)
            logger.debug(f"file-scoped namespace: {file_scoped_namespace}")
            # Newer grammars hang the following types off the namespace node itself
            for member in child.children:
                name = _qualified_type_name(member, file_scoped_namespace, source)
                if name is not None:
                    types.append(str(name))
        elif kind == NAMESPACE_DECLARATION and file_scoped_namespace is None:
            namespace = declaration_name(child, NAMESPACE_NAME_KINDS, source)
            logger.debug(f"block-scoped namespace: {namespace}")
            for member in _namespace_members(child):
                name = _qualified_type_name(member, namespace, source)
                if name is not None:
                    types.append(str(name))
        else:
            name = _qualified_type_name(child, file_scoped_namespace, source)
            if name is not None:
                types.append(str(name))

    return types
