"""
JSON Tree Panel widget for displaying the converter's plain buffer as a tree.

This module provides a custom Tree widget that renders a path-addressed
JsonNode tree and keeps its expand/collapse state in a CollapseState, so
the same rules apply in the terminal as everywhere else:

    - collapsing a node collapses only that node
    - expanding a node also expands its direct container children
    - collapse all / expand all rebuild the tree from the collapse set
"""

from __future__ import annotations

from typing import Any

from textual.message import Message
from textual.widgets import Tree
from textual.widgets.tree import TreeNode

from tooly.json_tools import CollapseState, JsonKind, JsonNode


# Maximum depth for recursive tree operations to prevent stack overflow
MAX_TREE_DEPTH = 100

# Maximum string length to process before truncation (prevents memory issues with huge strings)
MAX_STRING_PROCESS_LENGTH = 10000

# Strings longer than this are shortened in labels
MAX_LABEL_VALUE_LENGTH = 50


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def format_primitive(node: JsonNode) -> str:
    """Render a leaf value for a tree label."""
    if node.kind is JsonKind.NULL:
        return "null"
    if node.kind is JsonKind.BOOL:
        return "true" if node.value else "false"
    if node.kind is JsonKind.STRING:
        data = node.value
        # Limit string processing to prevent memory issues with huge strings
        process_str = data[:MAX_STRING_PROCESS_LENGTH]
        display_str = (
            process_str.replace("\\", "\\\\")
            .replace("\n", "\\n")
            .replace("\r", "\\r")
            .replace("\t", "\\t")
            .replace('"', '\\"')
        )
        if len(display_str) > MAX_LABEL_VALUE_LENGTH:
            display_str = display_str[: MAX_LABEL_VALUE_LENGTH - 3] + "..."
        return f'"{display_str}"'
    return str(node.value)


def node_label(node: JsonNode) -> str:
    """Build the tree label for a node.

    Formats:
        - Objects: ``{} key (N keys)``
        - Arrays: ``[] key (N items)``
        - Leaves: ``"key": value`` (``[i]: value`` inside arrays)
    """
    if isinstance(node.key, int):
        key_text = f"[{node.key}]"
    elif node.key is not None:
        key_text = node.key
    else:
        key_text = None

    if node.kind is JsonKind.OBJECT:
        count = _plural(node.size, "key")
        return f"{{}} {key_text} ({count})" if key_text is not None else f"{{}} ({count})"
    if node.kind is JsonKind.ARRAY:
        count = _plural(node.size, "item")
        return f"[] {key_text} ({count})" if key_text is not None else f"[] ({count})"

    value_str = format_primitive(node)
    if key_text is None:
        return value_str
    if isinstance(node.key, int):
        return f"{key_text}: {value_str}"
    return f'"{key_text}": {value_str}'


class JsonTreePanel(Tree[str]):
    """
    Collapsible JSON tree backed by a CollapseState.

    The widget never decides collapse rules itself: user expand/collapse
    events are forwarded to the CollapseState, and the tree is brought in
    line with the resulting collapse set.
    """

    class NodeToggled(Message):
        """Posted after the user expands or collapses a node.

        Attributes:
            node_path: The path of the toggled node (e.g. ".items[0]").
            collapsed: Whether the node is now collapsed.
            panel_id: The ID of the panel that emitted this message.
        """

        def __init__(self, node_path: str, collapsed: bool, panel_id: str | None) -> None:
            self.node_path = node_path
            self.collapsed = collapsed
            self.panel_id = panel_id
            super().__init__()

    def __init__(
        self,
        label: str = "root",
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """
        Initialize the JSON tree panel.

        Args:
            label: The label shown when no JSON is loaded.
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(label, id=id, classes=classes)
        self._empty_label = label
        self._state: CollapseState | None = None
        self._node_paths: dict[TreeNode[str], str] = {}
        self._nodes_by_path: dict[str, TreeNode[str]] = {}
        self._json_nodes: dict[TreeNode[str], JsonNode] = {}

    @property
    def collapse_state(self) -> CollapseState | None:
        return self._state

    def load_state(self, state: CollapseState) -> None:
        """Show the tree held by ``state`` and follow its collapse set."""
        self._state = state
        self.rebuild()

    def rebuild(self) -> None:
        """Clear the widget and rebuild it from the collapse state."""
        self.clear()
        self._node_paths.clear()
        self._nodes_by_path.clear()
        self._json_nodes.clear()

        if self._state is None or self._state.root is None:
            self.root.set_label(self._empty_label)
            return

        root_node = self._state.root
        self.root.set_label(node_label(root_node))
        self._register(self.root, root_node)
        for child in root_node.children:
            self._add_json_recursive(self.root, child, depth=1)

        if self._state.is_collapsed(root_node.path):
            self.root.collapse()
        else:
            self.root.expand()

    def _register(self, tree_node: TreeNode[str], node: JsonNode) -> None:
        self._node_paths[tree_node] = node.path
        self._nodes_by_path.setdefault(node.path, tree_node)
        self._json_nodes[tree_node] = node

    def _add_json_recursive(self, parent: TreeNode[str], node: JsonNode, depth: int = 0) -> None:
        """
        Recursively add a JsonNode and its children under ``parent``.

        Args:
            parent: The parent tree node to add to.
            node: The JSON node to add.
            depth: Current recursion depth (used to prevent stack overflow).
        """
        if depth >= MAX_TREE_DEPTH:
            # Add a placeholder node indicating truncation
            parent.add_leaf(f"... (depth limit {MAX_TREE_DEPTH} reached)")
            return

        label = node_label(node)
        if not node.is_container:
            leaf = parent.add_leaf(label, data=node.path)
            self._register(leaf, node)
            return

        expanded = not self._state.is_collapsed(node.path)
        child = parent.add(label, data=node.path, expand=expanded, allow_expand=bool(node.children))
        self._register(child, node)
        for grandchild in node.children:
            self._add_json_recursive(child, grandchild, depth + 1)

    def path_of(self, tree_node: TreeNode[str]) -> str | None:
        """Return the JSON path of a tree node, or None for foreign nodes."""
        return self._node_paths.get(tree_node)

    def node_at(self, path: str) -> TreeNode[str] | None:
        """Return the tree node for a JSON path, if it is shown."""
        return self._nodes_by_path.get(path)

    def expand_all_nodes(self) -> None:
        if self._state is None:
            return
        self._state.expand_all()
        self.rebuild()

    def collapse_all_nodes(self) -> None:
        if self._state is None:
            return
        self._state.collapse_all()
        self.rebuild()

    def on_tree_node_expanded(self, event: Tree.NodeExpanded[str]) -> None:
        """Forward a user expand to the collapse state and expand direct children."""
        path = self._node_paths.get(event.node)
        if path is None or self._state is None or not self._state.is_collapsed(path):
            return  # stale node, or the tree already agrees with the model

        self._state.toggle(path)
        for child in event.node.children:
            child_path = self._node_paths.get(child)
            if child_path is None or not child.allow_expand:
                continue
            if not self._state.is_collapsed(child_path) and not child.is_expanded:
                child.expand()

        self.post_message(self.NodeToggled(path, False, self.id))

    def on_tree_node_collapsed(self, event: Tree.NodeCollapsed[str]) -> None:
        """Forward a user collapse to the collapse state."""
        path = self._node_paths.get(event.node)
        if path is None or self._state is None or self._state.is_collapsed(path):
            return

        self._state.toggle(path)
        self.post_message(self.NodeToggled(path, True, self.id))

    def get_node_value(self, tree_node: TreeNode[str]) -> Any:
        """Return the full (untruncated) value behind a tree node."""
        node = self._json_nodes.get(tree_node)
        return node.to_value() if node is not None else None
