from __future__ import annotations

import pytest
from pydantic import ValidationError

from pychecklist.models.checklist import ChecklistItem, ChecklistState
from pychecklist.models.vehicle import VehicleRecord
from pychecklist.schema import Category


def test_checklist_item_blank_observation_is_absent() -> None:
    assert ChecklistItem(item="IPVA", observation="").observation is None


def test_checklist_item_is_frozen() -> None:
    item = ChecklistItem(item="IPVA")

    with pytest.raises(ValidationError):
        item.observation = "vencido"  # type: ignore[misc]


def test_state_lookup_by_category_value() -> None:
    state = ChecklistState(som_eletrica=(ChecklistItem(item="Setas"),))

    assert state["somEletrica"] == state[Category.SOM_ELETRICA]
    assert [category for category, _ in state.categories()] == list(Category)
    assert state.recorded_items == 1


def test_state_accepts_camel_case_keys() -> None:
    state = ChecklistState.model_validate({"somEletrica": [{"item": "Setas"}]})

    assert state[Category.SOM_ELETRICA] == (ChecklistItem(item="Setas"),)


def test_vehicle_record_aliases_and_raw() -> None:
    payload = {
        "id": 12,
        "brand": "Fiat",
        "model": "Argo",
        "licensePlate": "ABC1D23",
        "vehicleType": "Carro",
        "checklist": {"pneus": []},
        "kmOdometer": 45000,
    }

    vehicle = VehicleRecord.model_validate(payload)

    assert vehicle.id == "12"
    assert vehicle.plate == "ABC1D23"
    assert vehicle.vehicle_type == "Carro"
    assert vehicle.display_name == "Fiat Argo"
    assert vehicle.checklist == {"pneus": []}
    assert vehicle.raw["kmOdometer"] == 45000


def test_vehicle_record_keeps_checklist_shape() -> None:
    vehicle = VehicleRecord.model_validate({"checklist": ["legacy"]})

    assert vehicle.checklist == ["legacy"]
    assert vehicle.status is None
