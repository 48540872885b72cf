"""
Customer wire codec.

The customer list is newline-delimited JSON whose coordinates are strings:

    {"user_id": 12, "name": "Christina McArdle", "latitude": "52.986375", "longitude": "-6.043701"}

`CustomerCodec` converts between that line format and `Customer`. Encoding emits the
fields in the order `user_id, name, longitude, latitude` and renders floats with
Python's shortest round-trip repr, so `decode(encode(decode(line)))` is stable even
when the original text is not reproduced byte for byte (e.g. `"1.10"` -> `"1.1"`).
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, ValidationError

from officeparty.core.errors import ParseFailure
from officeparty.domain.models import Customer


class WireCustomer(BaseModel):
    """The on-the-wire shape. Field order here is the output order."""

    # Strict: a numeric latitude literal or a quoted user_id is a malformed record.
    model_config = ConfigDict(strict=True)

    user_id: int
    name: str
    longitude: str
    latitude: str


# Plain decimal or exponent notation, or inf/infinity/nan. No whitespace or underscores.
_DECIMAL_RE = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)", re.IGNORECASE)


def _parse_coordinate(field: str, text: str) -> float:
    try:
        if not _DECIMAL_RE.fullmatch(text):
            raise ValueError("not a decimal number")
        return float(text)
    except ValueError as exc:
        raise ParseFailure(f"unable to convert {field} {text!r}: {exc}") from exc


class CustomerCodec:
    """Symmetric decode/encode for the string-encoded-number wire format."""

    def decode(self, line: str | bytes) -> Customer:
        try:
            wire = WireCustomer.model_validate_json(line)
        except ValidationError as exc:
            raise ParseFailure(f"unable to parse customer: {exc}") from exc

        return Customer(
            user_id=wire.user_id,
            name=wire.name,
            latitude=_parse_coordinate("latitude", wire.latitude),
            longitude=_parse_coordinate("longitude", wire.longitude),
        )

    def encode(self, customer: Customer) -> str:
        wire = WireCustomer(
            user_id=customer.user_id,
            name=customer.name,
            longitude=repr(float(customer.longitude)),
            latitude=repr(float(customer.latitude)),
        )
        return wire.model_dump_json()


default_codec = CustomerCodec()


def decode_customer(line: str | bytes) -> Customer:
    return default_codec.decode(line)


def encode_customer(customer: Customer) -> str:
    return default_codec.encode(customer)
