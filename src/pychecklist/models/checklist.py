"""Checklist state, item status and statistics models."""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Any

from pydantic import field_validator

from pychecklist.models._base import ChecklistBaseModel
from pychecklist.schema import Category


class ItemStatus(StrEnum):
    """Tri-state status of one expected checklist item."""

    CHECKED = "checked"
    ATTENTION = "attention"
    PENDING = "pending"


class ChecklistItem(ChecklistBaseModel):
    """One inspected point, optionally flagged with an observation."""

    item: str
    """Item name; meaningful when it matches an expected schema item."""
    observation: str | None = None
    """Free-text note flagging a problem with the item."""

    @field_validator("item", mode="before")
    @classmethod
    def _coerce_item(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("observation", mode="before")
    @classmethod
    def _coerce_observation(cls, value: Any) -> str | None:
        if not value:
            return None
        return value if isinstance(value, str) else str(value)

    def to_raw(self) -> dict[str, str] | str:
        if not self.item and self.observation is None:
            # An unnamed record only survives normalization in the legacy string form.
            return self.item
        raw = {"item": self.item}
        if self.observation is not None:
            raw["observation"] = self.observation
        return raw


_FIELD_BY_CATEGORY: dict[Category, str] = {
    Category.PNEUS: "pneus",
    Category.INTERIOR: "interior",
    Category.SOM_ELETRICA: "som_eletrica",
    Category.LATARIA: "lataria",
    Category.DOCUMENTACAO: "documentacao",
}


class ChecklistState(ChecklistBaseModel):
    """Canonical checklist: every category present, each an ordered tuple.

    An empty tuple does not tell whether a category was started; that is
    only recoverable from the raw value via presence detection.
    """

    pneus: tuple[ChecklistItem, ...] = ()
    interior: tuple[ChecklistItem, ...] = ()
    som_eletrica: tuple[ChecklistItem, ...] = ()
    lataria: tuple[ChecklistItem, ...] = ()
    documentacao: tuple[ChecklistItem, ...] = ()

    @classmethod
    def from_categories(cls, categories: dict[Category, list[ChecklistItem]]) -> ChecklistState:
        return cls(**{_FIELD_BY_CATEGORY[category]: tuple(items) for category, items in categories.items()})

    def __getitem__(self, category: Category | str) -> tuple[ChecklistItem, ...]:
        return getattr(self, _FIELD_BY_CATEGORY[Category(category)])

    def categories(self) -> Iterator[tuple[Category, tuple[ChecklistItem, ...]]]:
        for category in Category:
            yield category, self[category]

    @property
    def recorded_items(self) -> int:
        return sum(len(items) for _, items in self.categories())

    def to_raw(self) -> dict[str, list[dict[str, str] | str]]:
        """Plain JSON-compatible dict keyed by persisted category keys."""
        return {category.value: [entry.to_raw() for entry in items] for category, items in self.categories()}


class ChecklistStats(ChecklistBaseModel):
    """Completion statistics over the started categories of a checklist."""

    total_items: int = 0
    checked_items: int = 0
    attention_items: int = 0
    pending_items: int = 0
    completion_percentage: int = 0

    @property
    def outstanding_items(self) -> int:
        """Items not plainly checked (pending or flagged)."""
        return self.total_items - self.checked_items


class CategoryProgress(ChecklistBaseModel):
    """Completion statistics for one category."""

    category: Category
    label: str
    total_items: int = 0
    checked_items: int = 0
    attention_items: int = 0
    pending_items: int = 0
    completion_percentage: int = 0
