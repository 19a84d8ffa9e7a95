"""pychecklist - Vehicle inspection checklist engine for dealership inventories."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pychecklist")
except PackageNotFoundError:
    __version__ = "0+local"
from pychecklist.config import ChecklistConfig
from pychecklist.exceptions import (
    ChecklistConfigError,
    ChecklistError,
    ChecklistSchemaError,
    UnknownVehicleTypeError,
)
from pychecklist.fleet import FleetChecklistSummary, PendingVehicle, UnstartedVehicle, summarize_fleet, vehicle_snapshot
from pychecklist.ingestion.normalize import normalize_checklist
from pychecklist.ingestion.presence import category_presence
from pychecklist.models import (
    CategoryProgress,
    ChecklistItem,
    ChecklistState,
    ChecklistStats,
    ItemStatus,
    VehicleRecord,
)
from pychecklist.schema import (
    CAR_SCHEMA,
    MOTORCYCLE_SCHEMA,
    Category,
    ChecklistSchema,
    VehicleType,
    schema_for,
    schema_for_record,
)
from pychecklist.state.snapshot import ChecklistSnapshot
from pychecklist.state.stats import category_progress, checklist_stats, completion_percentage, has_started
from pychecklist.state.status import item_status

__all__ = [
    "__version__",
    "CAR_SCHEMA",
    "Category",
    "CategoryProgress",
    "ChecklistConfig",
    "ChecklistConfigError",
    "ChecklistError",
    "ChecklistItem",
    "ChecklistSchema",
    "ChecklistSchemaError",
    "ChecklistSnapshot",
    "ChecklistState",
    "ChecklistStats",
    "FleetChecklistSummary",
    "ItemStatus",
    "MOTORCYCLE_SCHEMA",
    "PendingVehicle",
    "UnknownVehicleTypeError",
    "UnstartedVehicle",
    "VehicleRecord",
    "VehicleType",
    "category_presence",
    "category_progress",
    "checklist_stats",
    "completion_percentage",
    "has_started",
    "item_status",
    "normalize_checklist",
    "schema_for",
    "schema_for_record",
    "summarize_fleet",
    "vehicle_snapshot",
]
