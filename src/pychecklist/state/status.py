"""Item status resolution."""

from __future__ import annotations

from pychecklist.models.checklist import ChecklistState, ItemStatus
from pychecklist.schema import Category


def item_status(category: Category | str, item_name: str, state: ChecklistState) -> ItemStatus:
    """Classify one expected item of *category*.

    The first record whose name equals *item_name* decides: none is
    ``PENDING``, one with a non-blank observation is ``ATTENTION``, any other
    is ``CHECKED``.
    """
    try:
        items = state[category]
    except (KeyError, ValueError):
        return ItemStatus.PENDING
    found = next((entry for entry in items if entry.item == item_name), None)
    if found is None:
        return ItemStatus.PENDING
    if found.observation and found.observation.strip():
        return ItemStatus.ATTENTION
    return ItemStatus.CHECKED
