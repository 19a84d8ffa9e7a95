from __future__ import annotations

import pytest

from pychecklist.ingestion.normalize import normalize_checklist
from pychecklist.models.checklist import ChecklistItem, ChecklistState, ChecklistStats
from pychecklist.schema import CAR_SCHEMA, MOTORCYCLE_SCHEMA, Category
from pychecklist.state.stats import category_progress, checklist_stats, completion_percentage, has_started


def _stats(raw) -> ChecklistStats:
    return checklist_stats(normalize_checklist(raw), raw)


def test_started_tires_with_one_flagged_item() -> None:
    stats = _stats({"pneus": [{"item": "Pneus Dianteiros"}, {"item": "Pneus Traseiros", "observation": "worn"}]})

    assert stats == ChecklistStats(
        total_items=2,
        checked_items=1,
        attention_items=1,
        pending_items=0,
        completion_percentage=100,
    )


def test_nothing_started() -> None:
    assert _stats({}) == ChecklistStats()
    assert _stats(None).completion_percentage == 0


def test_started_empty_category_counts_schema_items_as_pending() -> None:
    stats = _stats({"documentacao": []})

    assert stats.total_items == 3
    assert stats.pending_items == 3
    assert stats.completion_percentage == 0


def test_malformed_category_counts_as_started() -> None:
    stats = _stats({"interior": "ok"})

    assert stats.total_items == 4
    assert stats.pending_items == 4


def test_items_outside_schema_do_not_count() -> None:
    stats = _stats({"pneus": ["Estepe", "Pneus Dianteiros"]})

    assert stats.total_items == 2
    assert stats.checked_items == 1
    assert stats.pending_items == 1
    assert stats.completion_percentage == 50


def test_unstarted_categories_are_ignored_even_with_state_items() -> None:
    state = ChecklistState(lataria=(ChecklistItem(item="Arranhões"),))

    assert checklist_stats(state, {}) == ChecklistStats()


def test_full_checklist_is_complete() -> None:
    raw = {category.value: list(CAR_SCHEMA.expected_items(category)) for category in Category}

    stats = _stats(raw)

    assert stats.total_items == 16
    assert stats.checked_items == 16
    assert stats.completion_percentage == 100
    assert stats.outstanding_items == 0


def test_motorcycle_schema_totals() -> None:
    raw = {"pneus": ["Pneu Dianteiro"], "somEletrica": []}

    stats = checklist_stats(normalize_checklist(raw, MOTORCYCLE_SCHEMA), raw, MOTORCYCLE_SCHEMA)

    assert stats.total_items == 8
    assert stats.checked_items == 1
    assert stats.pending_items == 7
    assert stats.completion_percentage == 13


def test_stats_dump_with_camel_case_keys() -> None:
    dumped = _stats({"documentacao": []}).model_dump(by_alias=True)

    assert dumped == {
        "totalItems": 3,
        "checkedItems": 0,
        "attentionItems": 0,
        "pendingItems": 3,
        "completionPercentage": 0,
    }


@pytest.mark.parametrize(
    ("done", "total", "expected"),
    [
        (0, 0, 0),
        (0, 3, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (3, 8, 38),
        (16, 16, 100),
    ],
)
def test_completion_percentage_rounds_half_up(done, total, expected) -> None:
    assert completion_percentage(done, total) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, False),
        ([], False),
        ({}, False),
        ({"pneus": None}, False),
        ({"pneus": []}, True),
        ({"documentacao": "x"}, True),
    ],
)
def test_has_started(raw, expected) -> None:
    assert has_started(raw) is expected


def test_category_progress_uses_expected_items() -> None:
    state = normalize_checklist(
        {"interior": ["Limpeza", "Limpeza", "Cinzeiro", {"item": "Tapetes", "observation": "sujo"}]}
    )

    progress = category_progress(Category.INTERIOR, state)

    assert progress.label == "INTERIOR / BANCOS"
    assert progress.total_items == 4
    assert progress.checked_items == 1
    assert progress.attention_items == 1
    assert progress.pending_items == 2
    assert progress.completion_percentage == 50
