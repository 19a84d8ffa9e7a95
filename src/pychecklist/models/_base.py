"""Base model for checklist engine values.

Every model inherits from :class:`ChecklistBaseModel` which provides:

* ``frozen=True`` so derived views cannot be mutated in place.
* ``alias_generator=to_camel`` so ``model_dump(by_alias=True)`` produces
  the camelCase keys used by persisted records and UI payloads
  (``somEletrica``, ``completionPercentage``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ChecklistBaseModel(BaseModel):
    """Base for checklist engine models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
