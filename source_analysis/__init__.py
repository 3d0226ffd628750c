"""
Source analysis module for resolving C# declarations to test names.
"""

from .syntax_tree import (
    CSharpParser,
    CursorPosition,
    ParserUnavailableError,
    get_parser,
    node_contains,
    node_text,
)
from .qualified_name import QualifiedName, build_qualified_name
from .method_locator import NotFound, NotFoundReason, locate_enclosing_method
from .type_enumerator import enumerate_top_level_types

__all__ = [
    'CSharpParser',
    'CursorPosition',
    'ParserUnavailableError',
    'get_parser',
    'node_contains',
    'node_text',
    'QualifiedName',
    'build_qualified_name',
    'NotFound',
    'NotFoundReason',
    'locate_enclosing_method',
    'enumerate_top_level_types'
]
