"""
Path-addressed JSON tree model with collapse state.

Every node of a parsed JSON value gets a textual path built from the root:
object members append ``.key`` and array members append ``[index]``; the
root path is the empty string. A set of collapsed paths drives the
expand/collapse rendering of the structural view.

Node Kinds:
    - null, boolean, number, string: leaves
    - array, object: containers (collapsible when non-empty)

Examples:
    >>> root = build_tree('{"a": [1, {"b": null}]}')
    >>> [node.path for node in root.iter_nodes()]
    ['', '.a', '.a[0]', '.a[1]', '.a[1].b']
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator

from tooly.errors import ParseError
from tooly.json_tools.serialization import CANONICAL_INDENT, NestingDepthError, loads_strict

ROOT_PATH = ""

NESTING_MESSAGE = "JSON is nested too deeply to display"


class JsonKind(Enum):
    """The closed set of JSON value kinds."""

    NULL = "null"
    BOOL = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> JsonKind:
    """Classify a parsed JSON value.

    Raises:
        TypeError: If the value is not something json.loads can produce.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def compute_path(parent_path: str, key: str | int) -> str:
    """Build a child's path from its parent's path.

    Args:
        parent_path: The parent node's path ("" for the root).
        key: Object key (str) or array index (int).

    Keys are not escaped, so a key containing ``.`` or ``[`` can give two
    nodes the same path (``{"a.b": ..., "a": {"b": ...}}``). Nodes sharing a
    path share one collapse flag.

    Returns:
        ``parent.key`` for object members, ``parent[index]`` for array members.

    Examples:
        >>> compute_path("", "users")
        '.users'
        >>> compute_path(".users", 0)
        '.users[0]'
    """
    if isinstance(key, int):
        return f"{parent_path}[{key}]"
    return f"{parent_path}.{key}"


@dataclass
class JsonNode:
    """One node of a parsed JSON value.

    Attributes:
        kind: The node's JSON kind.
        path: The node's path from the root.
        key: Object key or array index under the parent (None for the root).
        value: The primitive value (None for containers).
        children: Child nodes in document order (containers only).
    """

    kind: JsonKind
    path: str = ROOT_PATH
    key: str | int | None = None
    value: Any = None
    children: list[JsonNode] = field(default_factory=list)

    @classmethod
    def from_value(
        cls, value: Any, path: str = ROOT_PATH, key: str | int | None = None
    ) -> JsonNode:
        """Build a node tree from a parsed JSON value."""
        kind = kind_of(value)
        node = cls(kind=kind, path=path, key=key)

        if kind is JsonKind.OBJECT:
            node.children = [
                cls.from_value(child, compute_path(path, child_key), child_key)
                for child_key, child in value.items()
            ]
        elif kind is JsonKind.ARRAY:
            node.children = [
                cls.from_value(child, compute_path(path, idx), idx)
                for idx, child in enumerate(value)
            ]
        else:
            node.value = value

        return node

    @property
    def is_container(self) -> bool:
        return self.kind in (JsonKind.OBJECT, JsonKind.ARRAY)

    @property
    def size(self) -> int:
        """Number of members (keys or items); 0 for leaves."""
        return len(self.children)

    def to_value(self) -> Any:
        """Convert back to plain Python values."""
        if self.kind is JsonKind.OBJECT:
            return {child.key: child.to_value() for child in self.children}
        if self.kind is JsonKind.ARRAY:
            return [child.to_value() for child in self.children]
        return self.value

    def iter_nodes(self) -> Iterator[JsonNode]:
        """Yield this node and all descendants depth-first, in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, path: str) -> JsonNode | None:
        """Return the node at ``path``, or None if there is none."""
        for node in self.iter_nodes():
            if node.path == path:
                return node
        return None


def parse_json(text: str) -> Any:
    """Strictly parse JSON text.

    Raises:
        ParseError: If the text is not valid JSON.
    """
    try:
        return loads_strict(text)
    except NestingDepthError as e:
        raise ParseError(NESTING_MESSAGE) from e
    except ValueError as e:
        raise ParseError(f"Invalid JSON: {e}") from e


def build_tree(text: str) -> JsonNode:
    """Parse JSON text into a path-addressed node tree.

    Raises:
        ParseError: If the text is not valid JSON, or is nested too deeply
            to build a tree from.
    """
    value = parse_json(text)
    try:
        return JsonNode.from_value(value)
    except RecursionError as e:
        raise ParseError(NESTING_MESSAGE) from e


def collect_container_paths(node: JsonNode) -> frozenset[str]:
    """Collect the path of every non-empty object or array in the tree."""
    return frozenset(
        current.path for current in node.iter_nodes() if current.is_container and current.children
    )


def toggle_path(
    collapsed: Iterable[str], path: str, node: JsonNode | None = None
) -> frozenset[str]:
    """Toggle one path in a collapse set.

    Expanding removes ``path`` and the paths of its direct container
    children (one level only). Collapsing adds ``path`` and leaves the
    descendants' membership alone.

    Args:
        collapsed: The current collapse set.
        path: The path being toggled.
        node: The node at ``path``; its children are force-expanded when
            the node is expanded.

    Returns:
        The new collapse set.
    """
    result = set(collapsed)

    if path in result:
        result.discard(path)
        if node is not None:
            for child in node.children:
                if child.is_container:
                    result.discard(child.path)
    else:
        result.add(path)

    return frozenset(result)


def _count_label(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def collapsed_summary(node: JsonNode) -> str:
    """One-line elided form of a collapsed container, e.g. ``{ ... 2 keys }``."""
    if node.kind is JsonKind.OBJECT:
        return f"{{ ... {_count_label(node.size, 'key')} }}"
    return f"[ ... {_count_label(node.size, 'item')} ]"


def render_tree(
    node: JsonNode, collapsed: Iterable[str] = (), indent: int = CANONICAL_INDENT
) -> str:
    """Render a node tree as text, eliding collapsed containers.

    With nothing collapsed the output equals the canonical JSON
    serialization of the value.

    Args:
        node: The root node to render.
        collapsed: Paths to render collapsed.
        indent: Spaces per nesting level.

    Returns:
        The rendered text.
    """
    collapsed_set = frozenset(collapsed)

    def _render(current: JsonNode, level: int) -> str:
        if not current.is_container:
            return json.dumps(current.value, ensure_ascii=False)

        is_object = current.kind is JsonKind.OBJECT
        opener, closer = ("{", "}") if is_object else ("[", "]")

        if not current.children:
            return opener + closer
        if current.path in collapsed_set:
            return collapsed_summary(current)

        pad = " " * (indent * (level + 1))
        lines = []
        for child in current.children:
            rendered = _render(child, level + 1)
            if is_object:
                key = json.dumps(child.key, ensure_ascii=False)
                lines.append(f"{pad}{key}: {rendered}")
            else:
                lines.append(f"{pad}{rendered}")

        return opener + "\n" + ",\n".join(lines) + "\n" + " " * (indent * level) + closer

    return _render(node, 0)


class CollapseState:
    """Collapse set scoped to one rendered tree.

    Holds the current tree, a path index over it and the set of collapsed
    paths. Replacing the tree with ``reset`` clears the set, since paths do
    not survive structural edits.
    """

    def __init__(self, root: JsonNode | None = None) -> None:
        self._root: JsonNode | None = None
        self._index: dict[str, list[JsonNode]] = {}
        self._collapsed: frozenset[str] = frozenset()
        self.reset(root)

    @property
    def root(self) -> JsonNode | None:
        return self._root

    @property
    def collapsed(self) -> frozenset[str]:
        return self._collapsed

    def reset(self, root: JsonNode | None = None) -> None:
        """Start a fresh render: replace the tree and clear the collapse set."""
        self._root = root
        self._collapsed = frozenset()
        self._index = {}
        if root is not None:
            for node in root.iter_nodes():
                self._index.setdefault(node.path, []).append(node)

    def nodes_at(self, path: str) -> list[JsonNode]:
        """Return every node at ``path`` in document order (usually one)."""
        return list(self._index.get(path, ()))

    def node_at(self, path: str) -> JsonNode | None:
        nodes = self._index.get(path)
        return nodes[0] if nodes else None

    def is_collapsed(self, path: str) -> bool:
        return path in self._collapsed

    def toggle(self, path: str) -> bool:
        """Toggle ``path``; return True if it is now collapsed."""
        nodes = self._index.get(path, [])
        collapsed = toggle_path(self._collapsed, path, nodes[0] if nodes else None)
        if path not in collapsed:
            for other in nodes[1:]:
                collapsed = toggle_path(collapsed | {path}, path, other)
        self._collapsed = collapsed
        return path in self._collapsed

    def collapse_all(self) -> None:
        if self._root is None:
            self._collapsed = frozenset()
            return
        self._collapsed = collect_container_paths(self._root)

    def expand_all(self) -> None:
        self._collapsed = frozenset()

    def render(self) -> str:
        """Render the current tree, or "" when there is none.

        Raises:
            ParseError: If the tree is nested too deeply to render.
        """
        if self._root is None:
            return ""
        try:
            return render_tree(self._root, self._collapsed)
        except RecursionError as e:
            raise ParseError(NESTING_MESSAGE) from e
