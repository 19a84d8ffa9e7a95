"""Read-side checklist state: item status, statistics and snapshots."""

__all__: list[str] = []
