"""Vehicle record model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from pychecklist.ingestion.values import safe_str


class VehicleRecord(BaseModel):
    """The subset of a stored vehicle record the checklist engine reads.

    ``checklist`` is kept exactly as stored; it is only interpreted by the
    normalizer and presence detector.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    id: str = Field(default="", validation_alias=AliasChoices("id", "vehicleId", "vehicle_id"))
    """Record identifier."""
    brand: str = Field(default="", validation_alias=AliasChoices("brand"))
    """Manufacturer (e.g. ``"Fiat"``)."""
    model: str = Field(default="", validation_alias=AliasChoices("model"))
    """Model name (e.g. ``"Argo"``)."""
    plate: str = Field(default="", validation_alias=AliasChoices("plate", "licensePlate", "license_plate"))
    """License plate."""
    vehicle_type: str | None = Field(default=None, validation_alias=AliasChoices("vehicleType", "vehicle_type"))
    """Stored vehicle type (``"Carro"`` or ``"Moto"``); unknown values are kept."""
    status: str | None = Field(default=None, validation_alias=AliasChoices("status"))
    """Pipeline status (e.g. ``"Pronto para Venda"``)."""
    checklist: Any = None
    """Raw checklist value as persisted, of unknown shape."""

    raw: dict[str, Any] = Field(default_factory=dict)
    """Full stored record for access to additional fields."""

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model}".strip()

    @model_validator(mode="before")
    @classmethod
    def _ensure_raw(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged = dict(values)
        merged.setdefault("raw", values)
        return merged

    @field_validator("id", "brand", "model", "plate", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return safe_str(value) or ""

    @field_validator("vehicle_type", "status", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> str | None:
        return safe_str(value)
