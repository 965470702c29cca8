"""
JSON tools for the Smart Converter plain-text buffer.

Usage:
    from tooly.json_tools import beautify, sort_keys, build_tree, CollapseState

    beautify("{a:1,}").text      # '{\\n  "a": 1\\n}'
    sort_keys('{"b":1,"a":2}')   # '{\\n  "a": 2,\\n  "b": 1\\n}'

    state = CollapseState(build_tree('{"a": {"b": 1}}'))
    state.collapse_all()
    state.render()               # '{ ... 1 key }'
"""

from tooly.json_tools.repair import (
    REPAIR_PIPELINE,
    BeautifyResult,
    balance_closers,
    beautify,
    beautify_lines,
    quote_bare_keys,
    remove_trailing_commas,
    repair_json_text,
    replace_single_quotes,
)
from tooly.json_tools.serialization import (
    NestingDepthError,
    dumps_canonical,
    dumps_compact,
    loads_strict,
)
from tooly.json_tools.sorter import deep_sort, sort_keys
from tooly.json_tools.tree_model import (
    ROOT_PATH,
    CollapseState,
    JsonKind,
    JsonNode,
    build_tree,
    collapsed_summary,
    collect_container_paths,
    compute_path,
    kind_of,
    parse_json,
    render_tree,
    toggle_path,
)

__all__ = [
    # Beautifier
    "beautify",
    "BeautifyResult",
    "beautify_lines",
    "repair_json_text",
    "REPAIR_PIPELINE",
    "quote_bare_keys",
    "replace_single_quotes",
    "remove_trailing_commas",
    "balance_closers",
    # Sorter
    "deep_sort",
    "sort_keys",
    # Serialization
    "loads_strict",
    "dumps_canonical",
    "dumps_compact",
    "NestingDepthError",
    # Tree model
    "ROOT_PATH",
    "JsonKind",
    "JsonNode",
    "kind_of",
    "compute_path",
    "parse_json",
    "build_tree",
    "collect_container_paths",
    "toggle_path",
    "collapsed_summary",
    "render_tree",
    "CollapseState",
]
