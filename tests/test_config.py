from __future__ import annotations

import pytest

from pychecklist.config import ChecklistConfig
from pychecklist.exceptions import ChecklistConfigError, UnknownVehicleTypeError
from pychecklist.schema import CAR_SCHEMA, MOTORCYCLE_SCHEMA, VehicleType


def test_defaults(monkeypatch) -> None:
    for name in (
        "CHECKLIST_VEHICLE_TYPE",
        "CHECKLIST_NOTIFY_STATUSES",
        "CHECKLIST_COUNT_ATTENTION_AS_OUTSTANDING",
    ):
        monkeypatch.delenv(name, raising=False)

    config = ChecklistConfig.from_env()

    assert config.default_vehicle_type is VehicleType.CAR
    assert config.schema is CAR_SCHEMA
    assert config.notify_statuses == ()
    assert config.count_attention_as_outstanding is True
    assert config.includes_status("Em Reparos") is True


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CHECKLIST_VEHICLE_TYPE", "moto")
    monkeypatch.setenv("CHECKLIST_NOTIFY_STATUSES", "Pronto para Venda, Em Reparos,")
    monkeypatch.setenv("CHECKLIST_COUNT_ATTENTION_AS_OUTSTANDING", "off")

    config = ChecklistConfig.from_env()

    assert config.schema is MOTORCYCLE_SCHEMA
    assert config.notify_statuses == ("Pronto para Venda", "Em Reparos")
    assert config.count_attention_as_outstanding is False
    assert config.includes_status("Vendido") is False


def test_overrides_win_over_env(monkeypatch) -> None:
    monkeypatch.setenv("CHECKLIST_VEHICLE_TYPE", "Moto")

    config = ChecklistConfig.from_env(default_vehicle_type="Carro")

    assert config.default_vehicle_type is VehicleType.CAR


def test_unknown_vehicle_type_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CHECKLIST_VEHICLE_TYPE", "Caminhão")

    with pytest.raises(UnknownVehicleTypeError):
        ChecklistConfig.from_env()


def test_notify_statuses_must_not_be_a_string() -> None:
    with pytest.raises(ChecklistConfigError):
        ChecklistConfig(notify_statuses="Pronto para Venda")  # type: ignore[arg-type]
