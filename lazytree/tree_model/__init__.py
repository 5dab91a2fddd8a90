"""Domain model for the unified archive/virtual tree.

This package contains non-UI tree primitives:
- node variants (archive, folder, file and the virtual groupings)
- diff-based reconciliation that keeps unchanged node instances on refresh
- recursive column/direction sort engine
- per-type fetch policies and the ``read_data`` refresh entry point
"""

from __future__ import annotations

from .nodes import (
    Archive,
    ContainerNode,
    File,
    Folder,
    NetworkFolder,
    Node,
    Root,
    TrashFolder,
    UserFolder,
    VirtualFolder,
    copy_node_data,
)
from .reconcile import diff_update
from .refresh import read_children, read_data, read_tree, walk
from .sorting import compare_names, default_compare, order_nodes, sort_compare, sort_tree
from .types import (
    SORT_ASC,
    SORT_COLUMNS,
    SORT_DESC,
    SORT_DIRECTIONS,
    SORT_MTIME,
    SORT_NAME,
    SORT_SIZE,
    SORT_TYPE,
    display_name,
)

__all__ = [
    "Archive",
    "Folder",
    "File",
    "Root",
    "UserFolder",
    "NetworkFolder",
    "TrashFolder",
    "Node",
    "ContainerNode",
    "VirtualFolder",
    "copy_node_data",
    "diff_update",
    "read_children",
    "read_data",
    "read_tree",
    "walk",
    "compare_names",
    "default_compare",
    "order_nodes",
    "sort_compare",
    "sort_tree",
    "SORT_ASC",
    "SORT_DESC",
    "SORT_DIRECTIONS",
    "SORT_COLUMNS",
    "SORT_NAME",
    "SORT_SIZE",
    "SORT_MTIME",
    "SORT_TYPE",
    "display_name",
]
