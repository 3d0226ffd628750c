"""Global test fixtures and configuration."""

from typing import List, Optional, Tuple

import pytest

from config.runner_config import RunnerConfig
from source_analysis import CSharpParser

Point = Tuple[int, int]


class FakeNode:
    """Minimal stand-in for a tree-sitter node with hand-picked ranges."""

    def __init__(self, type: str, start: Point, end: Point, children=(), text: str = "", is_name: bool = False):
        self.type = type
        self.start_point = start
        self.end_point = end
        self.children: List["FakeNode"] = list(children)
        self.parent: Optional["FakeNode"] = None
        self.text = text.encode("utf-8")
        self.is_name = is_name
        for child in self.children:
            child.parent = self

    def child_by_field_name(self, field: str) -> Optional["FakeNode"]:
        if field != "name":
            return None
        for child in self.children:
            if child.is_name:
                return child
        return None

    def __repr__(self) -> str:
        return f"FakeNode({self.type}, {self.start_point}-{self.end_point})"


class FakeTree:
    def __init__(self, root: FakeNode):
        self.root_node = root


class SyntaxBuilder:
    """Builds C#-shaped syntax trees without a parser."""

    def name(self, text: str, row: int, column: int = 0, is_name: bool = True) -> FakeNode:
        kind = "qualified_name" if "." in text else "identifier"
        return FakeNode(kind, (row, column), (row, column + len(text)), text=text, is_name=is_name)

    def method(self, name: Optional[str], start: Point, end: Point, *body: FakeNode,
               returns: Optional[str] = None) -> FakeNode:
        children = []
        if returns is not None:
            children.append(self.name(returns, start[0], start[1], is_name=False))
        else:
            children.append(FakeNode("predefined_type", start, (start[0], start[1] + 4), text="void"))
        if name is not None:
            children.append(self.name(name, start[0], start[1] + 5))
        children.append(FakeNode("parameter_list", (start[0], start[1] + 20), (start[0], start[1] + 22)))
        children.append(FakeNode("block", (start[0] + 1, start[1]), end, body))
        return FakeNode("method_declaration", start, end, children)

    def type_decl(self, name: Optional[str], start: Point, end: Point, *members: FakeNode,
                  kind: str = "class_declaration") -> FakeNode:
        children = [FakeNode("modifier", start, (start[0], start[1] + 6), text="public")]
        if name is not None:
            children.append(self.name(name, start[0], start[1] + 13))
        children.append(FakeNode("declaration_list", (start[0] + 1, start[1]), end, members))
        return FakeNode(kind, start, end, children)

    def namespace(self, name: str, start: Point, end: Point, *members: FakeNode) -> FakeNode:
        return FakeNode("namespace_declaration", start, end, [
            self.name(name, start[0], start[1] + 10),
            FakeNode("declaration_list", (start[0] + 1, start[1]), end, members),
        ])

    def file_namespace(self, name: str, row: int, *members: FakeNode, end: Optional[Point] = None) -> FakeNode:
        end = end or (row, 10 + len(name) + 1)
        return FakeNode("file_scoped_namespace_declaration", (row, 0), end,
                        [self.name(name, row, 10)] + list(members))

    def other(self, kind: str, start: Point, end: Point, *children: FakeNode) -> FakeNode:
        return FakeNode(kind, start, end, children)

    def tree(self, *children: FakeNode, end: Point = (100, 0)) -> FakeTree:
        return FakeTree(FakeNode("compilation_unit", (0, 0), end, children))


@pytest.fixture
def syntax() -> SyntaxBuilder:
    """Provide a builder for synthetic syntax trees."""
    return SyntaxBuilder()


@pytest.fixture(scope="session")
def csharp_parser() -> CSharpParser:
    """Provide a tree-sitter parser for C#."""
    return CSharpParser()


@pytest.fixture
def config() -> RunnerConfig:
    """Default runner configuration."""
    return RunnerConfig()
