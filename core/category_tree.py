from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Union
from exceptions.custom_errors import BookingValidationError
from utils.category_key import build_category_key
from utils.constants import MAX_CATEGORY_DEPTH

"""
Typed category catalog.

The admin settings store the taxonomy as a loose JSON object whose values are
either nested objects or arrays of leaf names. It is converted here into a tree
of `Leaf` and `Branch` nodes, validated once, so the rest of the scheduler only
ever sees well-formed paths.
"""


@dataclass(frozen=True)
class Leaf:
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise BookingValidationError("Category names must be non-empty strings.")


@dataclass(frozen=True)
class Branch:
    name: str
    children: Dict[str, "CategoryNode"] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise BookingValidationError("Category names must be non-empty strings.")
        for key, child in self.children.items():
            if not isinstance(child, (Leaf, Branch)):
                raise BookingValidationError(
                    f"Invalid child under '{self.name}': {type(child).__name__}"
                )
            if key != child.name:
                raise BookingValidationError(
                    f"Child key '{key}' does not match node name '{child.name}' under '{self.name}'."
                )


CategoryNode = Union[Leaf, Branch]


def _node_depth(node: CategoryNode) -> int:
    if isinstance(node, Leaf) or not node.children:
        return 1
    return 1 + max(_node_depth(c) for c in node.children.values())


def _parse_node(name: str, raw: Any, level: int) -> CategoryNode:
    if level > MAX_CATEGORY_DEPTH:
        raise BookingValidationError(
            f"Category '{name}' is nested deeper than {MAX_CATEGORY_DEPTH} levels."
        )
    if raw is None:
        return Leaf(name)
    if isinstance(raw, dict):
        children = {}
        for child_name, child_raw in raw.items():
            children[child_name] = _parse_node(child_name, child_raw, level + 1)
        return Branch(name, children)
    if isinstance(raw, (list, tuple)):
        children = {}
        for item in raw:
            if not isinstance(item, str):
                raise BookingValidationError(
                    f"Leaves under '{name}' must be strings, got {type(item).__name__}."
                )
            if item in children:
                raise BookingValidationError(f"Duplicate category '{item}' under '{name}'.")
            if level + 1 > MAX_CATEGORY_DEPTH:
                raise BookingValidationError(
                    f"Category '{item}' is nested deeper than {MAX_CATEGORY_DEPTH} levels."
                )
            children[item] = Leaf(item)
        return Branch(name, children)
    raise BookingValidationError(
        f"Unsupported value for category '{name}': {type(raw).__name__}"
    )


@dataclass(frozen=True)
class CategoryTree:
    roots: Dict[str, CategoryNode]

    def __post_init__(self):
        for key, node in self.roots.items():
            if key != node.name:
                raise BookingValidationError(
                    f"Root key '{key}' does not match node name '{node.name}'."
                )
            if _node_depth(node) > MAX_CATEGORY_DEPTH:
                raise BookingValidationError(
                    f"Category '{key}' is nested deeper than {MAX_CATEGORY_DEPTH} levels."
                )

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "CategoryTree":
        """Build the tree from the loose object-or-array JSON hierarchy."""
        if not isinstance(raw, dict):
            raise BookingValidationError("Category hierarchy must be an object.")
        return cls({name: _parse_node(name, value, 1) for name, value in raw.items()})

    def paths(self, include_branches: bool = False) -> List[Tuple[str, ...]]:
        """All leaf paths (and branch paths if requested), depth-first in catalog order."""
        return list(self._walk(include_branches))

    def _walk(self, include_branches: bool) -> Iterator[Tuple[str, ...]]:
        stack: List[Tuple[Tuple[str, ...], CategoryNode]] = [
            ((node.name,), node) for node in reversed(list(self.roots.values()))
        ]
        while stack:
            path, node = stack.pop()
            if isinstance(node, Leaf) or not node.children:
                yield path
                continue
            if include_branches:
                yield path
            for child in reversed(list(node.children.values())):
                stack.append((path + (child.name,), child))

    def contains(self, path: Sequence[str]) -> bool:
        nodes: Dict[str, CategoryNode] = self.roots
        node = None
        for segment in path:
            node = nodes.get(segment)
            if node is None:
                return False
            nodes = node.children if isinstance(node, Branch) else {}
        return node is not None

    def default_durations(
        self, long_roots: Sequence[str], long_days: int, default_days: int
    ) -> Dict[str, int]:
        """Category key → default duration for every node of the catalog."""
        long = set(long_roots)
        durations = {}
        for path in self.paths(include_branches=True):
            durations[build_category_key(path)] = long_days if path[0] in long else default_days
        return durations
