"""Checklist completion statistics.

Totals are defined by the schema's expected items of the *started*
categories, not by the records actually stored.  Flagged items count toward
completion; only pending items detract from it.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from pychecklist.ingestion.presence import category_presence
from pychecklist.models.checklist import CategoryProgress, ChecklistState, ChecklistStats, ItemStatus
from pychecklist.schema import CAR_SCHEMA, Category, ChecklistSchema
from pychecklist.state.status import item_status


def completion_percentage(done: int, total: int) -> int:
    """Whole percentage of *done* over *total*, rounding halves up.

    Returns ``0`` when *total* is ``0``.
    """
    if total <= 0:
        return 0
    return (200 * done + total) // (2 * total)


def _count_statuses(category: Category, state: ChecklistState, schema: ChecklistSchema) -> Counter[ItemStatus]:
    return Counter(item_status(category, name, state) for name in schema.expected_items(category))


def checklist_stats(state: ChecklistState, raw: Any, schema: ChecklistSchema = CAR_SCHEMA) -> ChecklistStats:
    """Aggregate item statuses over the categories started in *raw*.

    *state* must be the normalization of the same *raw* value; categories
    absent from *raw* contribute nothing even if *state* holds items for them.
    """
    presence = category_presence(raw, schema)
    counts: Counter[ItemStatus] = Counter()
    total = 0
    for category in schema.categories:
        if not presence[category]:
            continue
        total += len(schema.expected_items(category))
        counts.update(_count_statuses(category, state, schema))

    checked = counts[ItemStatus.CHECKED]
    attention = counts[ItemStatus.ATTENTION]
    return ChecklistStats(
        total_items=total,
        checked_items=checked,
        attention_items=attention,
        pending_items=counts[ItemStatus.PENDING],
        completion_percentage=completion_percentage(checked + attention, total),
    )


def has_started(raw: Any, schema: ChecklistSchema = CAR_SCHEMA) -> bool:
    """Return True when at least one category is present in *raw*."""
    return any(category_presence(raw, schema).values())


def category_progress(
    category: Category | str,
    state: ChecklistState,
    schema: ChecklistSchema = CAR_SCHEMA,
) -> CategoryProgress:
    """Completion statistics for a single category's expected items."""
    category = Category(category)
    counts = _count_statuses(category, state, schema)
    total = len(schema.expected_items(category))
    checked = counts[ItemStatus.CHECKED]
    attention = counts[ItemStatus.ATTENTION]
    return CategoryProgress(
        category=category,
        label=schema.label(category),
        total_items=total,
        checked_items=checked,
        attention_items=attention,
        pending_items=counts[ItemStatus.PENDING],
        completion_percentage=completion_percentage(checked + attention, total),
    )
