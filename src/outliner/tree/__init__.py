"""Pure tree engine: traversal, lookups and copy-on-write edits over a forest."""

from __future__ import annotations

from outliner.tree.errors import ItemNotFoundError
from outliner.tree.locator import find, find_parent, get_breadcrumb
from outliner.tree.mutator import (
    Applied,
    EditResult,
    Refused,
    add_after_item,
    add_as_last_child,
    add_item,
    apply_at,
    delete_item,
    indent_item,
    outdent_item,
    swap_with_previous,
    toggle_expanded,
    try_add_item,
    try_delete_item,
    try_indent_item,
    try_outdent_item,
    try_swap_with_previous,
    try_toggle_expanded,
    try_update_text,
    update_at,
    update_children,
    update_text,
)
from outliner.tree.traversal import (
    find_next_id,
    find_prev_id,
    find_prev_id_for_delete,
    iter_visible_ids,
)

__all__ = [
    "Applied",
    "EditResult",
    "ItemNotFoundError",
    "Refused",
    "add_after_item",
    "add_as_last_child",
    "add_item",
    "apply_at",
    "delete_item",
    "find",
    "find_next_id",
    "find_parent",
    "find_prev_id",
    "find_prev_id_for_delete",
    "get_breadcrumb",
    "indent_item",
    "iter_visible_ids",
    "outdent_item",
    "swap_with_previous",
    "toggle_expanded",
    "try_add_item",
    "try_delete_item",
    "try_indent_item",
    "try_outdent_item",
    "try_swap_with_previous",
    "try_toggle_expanded",
    "try_update_text",
    "update_at",
    "update_children",
    "update_text",
]
