"""Checklist normalization.

Turns whatever value is stored in a vehicle's checklist field into a fully
keyed :class:`ChecklistState`.  Stored checklists predate schema changes and
are not validated by the store, so nothing here raises: malformed elements
are dropped, non-list categories become empty, and non-object values become
the all-empty state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pychecklist.ingestion.values import is_defined, is_item_list, is_record
from pychecklist.models.checklist import ChecklistItem, ChecklistState
from pychecklist.schema import CAR_SCHEMA, Category, ChecklistSchema

_logger = logging.getLogger(__name__)


def normalize_item(value: Any) -> ChecklistItem | None:
    """Project one stored element to a :class:`ChecklistItem`.

    - ``None`` -> dropped
    - plain string -> item without observation (legacy format)
    - object with a truthy ``item`` -> item plus observation when truthy
    - anything else -> dropped
    """
    if value is None:
        return None
    if isinstance(value, ChecklistItem):
        return value
    if isinstance(value, str):
        return ChecklistItem(item=value)
    if isinstance(value, Mapping) and value.get("item"):
        return ChecklistItem(item=value["item"], observation=value.get("observation") or None)
    return None


def normalize_items(values: list[Any] | tuple[Any, ...]) -> list[ChecklistItem]:
    items: list[ChecklistItem] = []
    for value in values:
        item = normalize_item(value)
        if item is None:
            if value is not None:
                _logger.debug("Dropping malformed checklist element of type %s", type(value).__name__)
            continue
        items.append(item)
    return items


def normalize_checklist(raw: Any, schema: ChecklistSchema = CAR_SCHEMA) -> ChecklistState:
    """Return the canonical checklist state for a stored checklist value.

    Parameters
    ----------
    raw : Any
        Value held by the vehicle record's checklist field, of unknown shape.
    schema : ChecklistSchema
        Schema of the vehicle's type.  Only its category set is used, and
        every schema declares the same five categories, so the result does
        not depend on the vehicle type.  Accepted so every engine function
        takes the same schema argument.

    Returns
    -------
    ChecklistState
        Every category mapped to an ordered, possibly empty, tuple of items.
    """
    categories: dict[Category, list[ChecklistItem]] = {category: [] for category in schema.categories}
    if not is_record(raw):
        if raw is not None:
            _logger.debug("Ignoring checklist value of type %s", type(raw).__name__)
        return ChecklistState.from_categories(categories)

    for category in schema.categories:
        if not is_defined(raw, category.value):
            continue
        value = raw[category.value]
        if is_item_list(value):
            categories[category] = normalize_items(value)
        else:
            # Started but unusable: keep the category empty.
            _logger.debug("Checklist category %s holds %s, treating as empty", category, type(value).__name__)

    return ChecklistState.from_categories(categories)
