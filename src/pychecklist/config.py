"""Engine configuration for pychecklist."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pychecklist.exceptions import ChecklistConfigError
from pychecklist.schema import ChecklistSchema, VehicleType, parse_vehicle_type, schema_for


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_list(value: str | None) -> tuple[str, ...]:
    if value is None:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclasses.dataclass(frozen=True)
class ChecklistConfig:
    """Engine configuration.

    Parameters
    ----------
    default_vehicle_type : VehicleType
        Vehicle type assumed for records that carry none.  Selects the
        checklist schema returned by :attr:`schema`.
    notify_statuses : tuple[str, ...]
        Vehicle statuses (e.g. ``"Pronto para Venda"``) included in fleet
        summaries.  Empty includes every vehicle.
    count_attention_as_outstanding : bool
        Whether items flagged with an observation still count as outstanding
        work in fleet summaries.  Completion percentages are unaffected.
    """

    default_vehicle_type: VehicleType = VehicleType.CAR
    notify_statuses: tuple[str, ...] = ()
    count_attention_as_outstanding: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_vehicle_type", parse_vehicle_type(self.default_vehicle_type))
        if isinstance(self.notify_statuses, str):
            raise ChecklistConfigError("notify_statuses must be a sequence of status names, not a string")
        object.__setattr__(self, "notify_statuses", tuple(self.notify_statuses))

    @property
    def schema(self) -> ChecklistSchema:
        return schema_for(self.default_vehicle_type)

    def includes_status(self, status: str | None) -> bool:
        if not self.notify_statuses:
            return True
        return status in self.notify_statuses

    @classmethod
    def from_env(cls, **overrides: Any) -> ChecklistConfig:
        """Create configuration from environment variables.

        Reads ``CHECKLIST_VEHICLE_TYPE``, ``CHECKLIST_NOTIFY_STATUSES``
        (comma separated) and ``CHECKLIST_COUNT_ATTENTION_AS_OUTSTANDING``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        UnknownVehicleTypeError
            If the configured vehicle type has no schema.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        vehicle_type_env = env.get("CHECKLIST_VEHICLE_TYPE")
        if vehicle_type_env is not None and "default_vehicle_type" not in overrides:
            config_kwargs["default_vehicle_type"] = parse_vehicle_type(vehicle_type_env)

        statuses_env = env.get("CHECKLIST_NOTIFY_STATUSES")
        if statuses_env is not None and "notify_statuses" not in overrides:
            config_kwargs["notify_statuses"] = _env_list(statuses_env)

        if "count_attention_as_outstanding" not in overrides:
            config_kwargs["count_attention_as_outstanding"] = _env_bool(
                env.get("CHECKLIST_COUNT_ATTENTION_AS_OUTSTANDING"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
