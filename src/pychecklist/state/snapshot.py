"""Checklist snapshot: every derived view computed from one raw value."""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pychecklist.ingestion.normalize import normalize_checklist
from pychecklist.ingestion.presence import category_presence
from pychecklist.models.checklist import CategoryProgress, ChecklistState, ChecklistStats, ItemStatus
from pychecklist.schema import CAR_SCHEMA, Category, ChecklistSchema
from pychecklist.state.stats import category_progress, checklist_stats
from pychecklist.state.status import item_status


@dataclasses.dataclass(frozen=True)
class ChecklistSnapshot:
    """Canonical state, presence and statistics of one stored checklist.

    Normalization and presence detection must see the same value.  Build
    snapshots with :meth:`from_raw`, which copies the stored value once so
    later mutation of the record cannot skew the derived views.
    """

    schema: ChecklistSchema
    raw: Any
    state: ChecklistState
    presence: Mapping[Category, bool]
    stats: ChecklistStats

    @classmethod
    def from_raw(cls, raw: Any, schema: ChecklistSchema = CAR_SCHEMA) -> ChecklistSnapshot:
        frozen_raw = copy.deepcopy(raw)
        state = normalize_checklist(frozen_raw, schema)
        return cls(
            schema=schema,
            raw=frozen_raw,
            state=state,
            presence=MappingProxyType(category_presence(frozen_raw, schema)),
            stats=checklist_stats(state, frozen_raw, schema),
        )

    @property
    def started(self) -> bool:
        return any(self.presence.values())

    def status(self, category: Category | str, item_name: str) -> ItemStatus:
        return item_status(category, item_name, self.state)

    def progress(self, category: Category | str) -> CategoryProgress:
        return category_progress(category, self.state, self.schema)

    def category_breakdown(self) -> list[CategoryProgress]:
        """Progress of every category in schema order, started or not."""
        return [self.progress(category) for category in self.schema.categories]
