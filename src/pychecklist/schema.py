"""Inspection checklist schemas.

The category set is closed: every schema declares a display label and an
ordered list of expected item names for each of the five categories.  Schemas
are immutable values passed into the engine functions; nothing mutates them
at runtime.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pychecklist.exceptions import ChecklistSchemaError, UnknownVehicleTypeError


class Category(StrEnum):
    """Checklist category, valued with the key used in persisted records."""

    PNEUS = "pneus"
    INTERIOR = "interior"
    SOM_ELETRICA = "somEletrica"
    LATARIA = "lataria"
    DOCUMENTACAO = "documentacao"


class VehicleType(StrEnum):
    CAR = "Carro"
    MOTORCYCLE = "Moto"


@dataclasses.dataclass(frozen=True)
class ChecklistSchema:
    """Labels and expected items for every category of one vehicle type.

    Parameters
    ----------
    vehicle_type : VehicleType
        Vehicle type the schema applies to.
    labels : Mapping[Category, str]
        Display label per category.
    items : Mapping[Category, tuple[str, ...]]
        Ordered expected item names per category.  These define what
        "complete" means for the category.
    """

    vehicle_type: VehicleType
    labels: Mapping[Category, str]
    items: Mapping[Category, tuple[str, ...]]

    def __post_init__(self) -> None:
        expected = set(Category)
        for name in ("labels", "items"):
            try:
                keys = {Category(key) for key in getattr(self, name)}
            except ValueError as err:
                raise ChecklistSchemaError(f"{self.vehicle_type} schema {name} has an unknown category: {err}") from err
            if keys != expected:
                missing = sorted(expected - keys)
                raise ChecklistSchemaError(f"{self.vehicle_type} schema {name} must cover every category, missing {missing}")
        # Freeze the containers so a schema cannot be mutated through its mappings.
        labels = {Category(key): str(value) for key, value in self.labels.items()}
        items = {Category(key): tuple(value) for key, value in self.items.items()}
        object.__setattr__(self, "labels", MappingProxyType(labels))
        object.__setattr__(self, "items", MappingProxyType(items))

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(Category)

    @property
    def total_items(self) -> int:
        return sum(len(names) for names in self.items.values())

    def label(self, category: Category | str) -> str:
        return self.labels[Category(category)]

    def expected_items(self, category: Category | str) -> tuple[str, ...]:
        return self.items[Category(category)]


CAR_SCHEMA = ChecklistSchema(
    vehicle_type=VehicleType.CAR,
    labels={
        Category.PNEUS: "PNEUS",
        Category.INTERIOR: "INTERIOR / BANCOS",
        Category.SOM_ELETRICA: "SOM / ELÉTRICA",
        Category.LATARIA: "LATARIA / PINTURA",
        Category.DOCUMENTACAO: "DOCUMENTAÇÃO",
    },
    items={
        Category.PNEUS: ("Pneus Dianteiros", "Pneus Traseiros"),
        Category.INTERIOR: ("Limpeza", "Estado dos bancos", "Tapetes", "Porta-objetos"),
        Category.SOM_ELETRICA: ("Funcionamento do som", "Vidros elétricos", "Ar-condicionado", "Travas elétricas"),
        Category.LATARIA: ("Arranhões", "Amassados", "Pintura desbotada"),
        Category.DOCUMENTACAO: ("Documento do veículo", "IPVA", "Licenciamento"),
    },
)

MOTORCYCLE_SCHEMA = ChecklistSchema(
    vehicle_type=VehicleType.MOTORCYCLE,
    labels={
        Category.PNEUS: "PNEUS",
        Category.INTERIOR: "BANCO / ESTOFAMENTO",
        Category.SOM_ELETRICA: "SISTEMA ELÉTRICO",
        Category.LATARIA: "CARENAGENS / PINTURA",
        Category.DOCUMENTACAO: "DOCUMENTAÇÃO",
    },
    items={
        Category.PNEUS: ("Pneu Dianteiro", "Pneu Traseiro", "Calibragem"),
        Category.INTERIOR: ("Limpeza", "Estado do banco", "Apoio para passageiro"),
        Category.SOM_ELETRICA: ("Faróis", "Lanterna", "Setas", "Bateria", "Painel"),
        Category.LATARIA: ("Carenagens", "Tanque", "Arranhões", "Amassados", "Pintura"),
        Category.DOCUMENTACAO: ("Documento do veículo", "IPVA", "Licenciamento"),
    },
)

_SCHEMAS: Mapping[VehicleType, ChecklistSchema] = MappingProxyType(
    {
        VehicleType.CAR: CAR_SCHEMA,
        VehicleType.MOTORCYCLE: MOTORCYCLE_SCHEMA,
    }
)

_VEHICLE_TYPES_BY_NAME = {member.value.lower(): member for member in VehicleType}


def parse_vehicle_type(value: VehicleType | str | None) -> VehicleType:
    """Resolve *value* to a :class:`VehicleType`.

    ``None`` and blank strings resolve to :attr:`VehicleType.CAR`.  Matching
    is case-insensitive and ignores surrounding whitespace.

    Raises :class:`UnknownVehicleTypeError` for any other value.
    """
    if isinstance(value, VehicleType):
        return value
    text = "" if value is None else str(value).strip()
    if not text:
        return VehicleType.CAR
    vehicle_type = _VEHICLE_TYPES_BY_NAME.get(text.lower())
    if vehicle_type is None:
        raise UnknownVehicleTypeError(
            f"vehicle type must be one of {[member.value for member in VehicleType]}, got {text!r}",
            vehicle_type=text,
        )
    return vehicle_type


def schema_for(vehicle_type: VehicleType | str | None = None) -> ChecklistSchema:
    """Return the checklist schema for *vehicle_type* (strict lookup)."""
    return _SCHEMAS[parse_vehicle_type(vehicle_type)]


def schema_for_record(vehicle_type: object, default: ChecklistSchema = CAR_SCHEMA) -> ChecklistSchema:
    """Lenient lookup for vehicle type values read from stored records."""
    if vehicle_type is None or not isinstance(vehicle_type, str) or not vehicle_type.strip():
        return default
    try:
        return schema_for(vehicle_type)
    except UnknownVehicleTypeError:
        return default
