"""Custom exception hierarchy for pychecklist.

Checklist data read from a vehicle record never raises: malformed values are
absorbed by the normalizer.  These exceptions only cover programmer-declared
schemas and configuration.
"""

from __future__ import annotations


class ChecklistError(Exception):
    """Base exception for all pychecklist errors."""


class ChecklistConfigError(ChecklistError):
    """Invalid or missing configuration."""


class UnknownVehicleTypeError(ChecklistConfigError):
    """No checklist schema is registered for the requested vehicle type."""

    def __init__(self, message: str, *, vehicle_type: str = "") -> None:
        self.vehicle_type = vehicle_type
        super().__init__(message)


class ChecklistSchemaError(ChecklistError):
    """A checklist schema does not cover exactly the fixed category set."""
