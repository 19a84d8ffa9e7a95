"""Data models for the checklist engine."""

from pychecklist.models._base import ChecklistBaseModel
from pychecklist.models.checklist import (
    CategoryProgress,
    ChecklistItem,
    ChecklistState,
    ChecklistStats,
    ItemStatus,
)
from pychecklist.models.vehicle import VehicleRecord

__all__ = [
    "CategoryProgress",
    "ChecklistBaseModel",
    "ChecklistItem",
    "ChecklistState",
    "ChecklistStats",
    "ItemStatus",
    "VehicleRecord",
]
