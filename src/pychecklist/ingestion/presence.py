"""Category presence detection.

Presence tells a category the user started (even with zero items) apart from
one never touched.  The canonical state cannot make that distinction, so it
is always computed from the raw stored value.
"""

from __future__ import annotations

from typing import Any

from pychecklist.ingestion.values import is_defined, is_record
from pychecklist.schema import CAR_SCHEMA, Category, ChecklistSchema


def category_presence(raw: Any, schema: ChecklistSchema = CAR_SCHEMA) -> dict[Category, bool]:
    """Map every category to whether *raw* explicitly defines it.

    A category is present when *raw* is an object owning the category key
    with a non-null value, whatever that value's shape.  Lists, scalars and
    ``None`` make every category absent.

    *schema* only supplies the category set, which is the same for every
    vehicle type; it is accepted so every engine function takes the same
    schema argument.
    """
    if not is_record(raw):
        return {category: False for category in schema.categories}
    return {category: is_defined(raw, category.value) for category in schema.categories}
