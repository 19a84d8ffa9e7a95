"""Ingestion layer.

This package turns the untyped checklist value stored on a vehicle record
into canonical checklist state and presence information.
"""

__all__: list[str] = []
