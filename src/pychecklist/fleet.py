"""Fleet-wide checklist summary.

Tallies unstarted and incomplete checklists across many vehicle records for
notification and pending-task surfaces.  Counts come from the shared engine
functions so they follow the schemas rather than the stored item counts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError, computed_field

from pychecklist.config import ChecklistConfig
from pychecklist.models._base import ChecklistBaseModel
from pychecklist.models.vehicle import VehicleRecord
from pychecklist.schema import schema_for_record
from pychecklist.state.snapshot import ChecklistSnapshot

_logger = logging.getLogger(__name__)


class UnstartedVehicle(ChecklistBaseModel):
    vehicle_id: str = ""
    name: str = ""
    plate: str = ""


class PendingVehicle(ChecklistBaseModel):
    vehicle_id: str = ""
    name: str = ""
    plate: str = ""
    outstanding_items: int = 0
    completion_percentage: int = 0


class FleetChecklistSummary(ChecklistBaseModel):
    """Checklist work remaining across a set of vehicles."""

    vehicles_without_checklist: tuple[UnstartedVehicle, ...] = ()
    vehicles_with_pending_items: tuple[PendingVehicle, ...] = ()
    outstanding_items: int = 0
    skipped_records: int = 0

    @computed_field(alias="vehiclesNeedingAttention")  # type: ignore[prop-decorator]
    @property
    def vehicles_needing_attention(self) -> int:
        return len(self.vehicles_without_checklist) + len(self.vehicles_with_pending_items)


def _coerce_record(value: Any) -> VehicleRecord | None:
    if isinstance(value, VehicleRecord):
        return value
    if not isinstance(value, Mapping):
        _logger.warning("Skipping vehicle record of type %s", type(value).__name__)
        return None
    try:
        return VehicleRecord.model_validate(dict(value))
    except ValidationError:
        _logger.warning("Skipping invalid vehicle record id=%s", value.get("id"), exc_info=True)
        return None


def vehicle_snapshot(vehicle: VehicleRecord, config: ChecklistConfig | None = None) -> ChecklistSnapshot:
    """Snapshot of *vehicle*'s checklist using the schema of its vehicle type."""
    config = config or ChecklistConfig()
    schema = schema_for_record(vehicle.vehicle_type, default=config.schema)
    return ChecklistSnapshot.from_raw(vehicle.checklist, schema)


def summarize_fleet(
    vehicles: Iterable[VehicleRecord | Mapping[str, Any]],
    config: ChecklistConfig | None = None,
) -> FleetChecklistSummary:
    """Summarize checklist progress over *vehicles*.

    Vehicles whose status is not in ``config.notify_statuses`` (when set)
    are ignored.  Records that cannot be read are skipped and counted in
    ``skipped_records``.
    """
    config = config or ChecklistConfig()
    unstarted: list[UnstartedVehicle] = []
    pending: list[PendingVehicle] = []
    outstanding_total = 0
    skipped = 0

    for value in vehicles:
        vehicle = _coerce_record(value)
        if vehicle is None:
            skipped += 1
            continue
        if not config.includes_status(vehicle.status):
            continue

        snapshot = vehicle_snapshot(vehicle, config)
        if not snapshot.started:
            unstarted.append(UnstartedVehicle(vehicle_id=vehicle.id, name=vehicle.display_name, plate=vehicle.plate))
            continue

        stats = snapshot.stats
        outstanding = stats.outstanding_items if config.count_attention_as_outstanding else stats.pending_items
        if outstanding > 0:
            outstanding_total += outstanding
            pending.append(
                PendingVehicle(
                    vehicle_id=vehicle.id,
                    name=vehicle.display_name,
                    plate=vehicle.plate,
                    outstanding_items=outstanding,
                    completion_percentage=stats.completion_percentage,
                )
            )

    _logger.debug(
        "Fleet checklist summary: %d unstarted, %d pending, %d outstanding items, %d skipped",
        len(unstarted),
        len(pending),
        outstanding_total,
        skipped,
    )
    return FleetChecklistSummary(
        vehicles_without_checklist=tuple(unstarted),
        vehicles_with_pending_items=tuple(pending),
        outstanding_items=outstanding_total,
        skipped_records=skipped,
    )
