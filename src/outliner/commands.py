"""Named edit commands.

Editor key bindings (Enter, Tab, Shift+Tab, Alt+Up, Backspace on an empty line, ...) map
onto these commands. Both the CLI and the HTTP API dispatch through `apply_command` so the
focus rules live in one place.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from outliner.logging import get_logger
from outliner.models.item import Forest, Item
from outliner.tree.mutator import (
    EditResult,
    Refused,
    try_add_item,
    try_delete_item,
    try_indent_item,
    try_outdent_item,
    try_swap_with_previous,
    try_toggle_expanded,
    try_update_text,
)
from outliner.tree.traversal import find_prev_id_for_delete
from outliner.utils.ids import new_item_id

logger = get_logger(__name__)

EditOp = Literal["update_text", "toggle_expanded", "delete", "add", "indent", "outdent", "swap_up"]


class EditCommand(BaseModel):
    """A single edit requested by an editor."""

    op: EditOp
    target_id: str
    text: str = ""
    force: bool = False
    # Id for the inserted or moved item; generated when omitted.
    new_id: str | None = None


@dataclass(frozen=True)
class CommandOutcome:
    """Result of applying a command."""

    forest: Forest
    changed: bool
    focus_id: str
    refused: str | None = None


def apply_command(
    forest: Sequence[Item],
    command: EditCommand,
    id_factory: Callable[[], str] = new_item_id,
) -> CommandOutcome:
    """Apply `command` and work out which item the editor should focus next.

    Args:
        forest: Current forest.
        command: Edit to apply.
        id_factory: Id source used when the command carries no `new_id`.

    Returns:
        The outcome. Inapplicable edits come back with `changed=False` and the input forest.
    """

    before = tuple(forest)
    target = command.target_id

    if command.op == "update_text":
        return _outcome(try_update_text(before, target, command.text), target, target)
    if command.op == "toggle_expanded":
        return _outcome(try_toggle_expanded(before, target), target, target)

    if command.op == "delete":
        result = try_delete_item(before, target, command.force)
        # focus has to be chosen against the forest that still holds the target
        return _outcome(result, target, find_prev_id_for_delete(before, target))

    new_id = command.new_id or id_factory()

    if command.op == "add":
        return _outcome(try_add_item(before, target, new_id), target, new_id)

    if command.op == "indent":
        return _outcome(try_indent_item(before, target, new_id), target, new_id)
    if command.op == "outdent":
        return _outcome(try_outdent_item(before, target, new_id), target, new_id)
    return _outcome(try_swap_with_previous(before, target, new_id), target, new_id)


def _outcome(result: EditResult, target_id: str, focus_if_applied: str) -> CommandOutcome:
    if isinstance(result, Refused):
        logger.info("Edit on %s refused: %s", target_id, result.reason)
        return CommandOutcome(forest=result.forest, changed=False, focus_id=target_id, refused=result.reason)
    return CommandOutcome(forest=result.forest, changed=True, focus_id=focus_if_applied)
