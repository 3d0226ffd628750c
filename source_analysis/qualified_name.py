from dataclasses import dataclass
from typing import Iterable, Tuple

SEPARATOR = "."


def build_qualified_name(segments: Iterable[str]) -> str:
    """Join name segments, outermost first."""
    return str(QualifiedName(tuple(segments)))


@dataclass(frozen=True)
class QualifiedName:
    """
    Dotted name of a declaration: namespace, containing types, then the leaf.
    """
    segments: Tuple[str, ...]

    def __post_init__(self):
        if not self.segments:
            raise ValueError("A qualified name needs at least one segment")
        for segment in self.segments:
            if not segment:
                raise ValueError(f"Empty segment in qualified name {self.segments!r}")

    def prepend(self, segment: str) -> "QualifiedName":
        """Return a new name with ``segment`` as its outermost part."""
        return QualifiedName((segment,) + self.segments)

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)
