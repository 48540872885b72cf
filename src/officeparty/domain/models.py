"""
Domain models (Pydantic).

`Customer` is the in-memory record: coordinates are numbers here, even though the
wire format carries them as text (see `officeparty.customers.codec`).

Coordinates are deliberately not range-validated; out-of-range values still
produce a well-defined distance.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    """One customer from the input list."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    name: str
    latitude: float
    longitude: float
